"""Tests for evaluator configuration."""

import pytest

from numeval.config import DEFAULT_MAX_DEPTH, EvaluatorConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("NUMEVAL_MAX_DEPTH", raising=False)
    monkeypatch.delenv("NUMEVAL_ERROR_DIAGNOSTICS", raising=False)


class TestEvaluatorConfig:
    def test_defaults(self):
        config = EvaluatorConfig()
        assert config.max_depth == DEFAULT_MAX_DEPTH
        assert config.diagnostics is True

    def test_from_env_defaults(self):
        assert EvaluatorConfig.from_env() == EvaluatorConfig()

    def test_from_env_max_depth(self, monkeypatch):
        monkeypatch.setenv("NUMEVAL_MAX_DEPTH", "50")
        assert EvaluatorConfig.from_env().max_depth == 50

    @pytest.mark.parametrize("value", ["0", "false", "No", "OFF"])
    def test_from_env_diagnostics_off(self, monkeypatch, value):
        monkeypatch.setenv("NUMEVAL_ERROR_DIAGNOSTICS", value)
        assert EvaluatorConfig.from_env().diagnostics is False

    def test_from_env_diagnostics_on(self, monkeypatch):
        monkeypatch.setenv("NUMEVAL_ERROR_DIAGNOSTICS", "yes")
        assert EvaluatorConfig.from_env().diagnostics is True

    def test_invalid_max_depth(self, monkeypatch):
        monkeypatch.setenv("NUMEVAL_MAX_DEPTH", "deep")
        with pytest.raises(ValueError, match="NUMEVAL_MAX_DEPTH"):
            EvaluatorConfig.from_env()

    def test_invalid_diagnostics(self, monkeypatch):
        monkeypatch.setenv("NUMEVAL_ERROR_DIAGNOSTICS", "maybe")
        with pytest.raises(ValueError, match="NUMEVAL_ERROR_DIAGNOSTICS"):
            EvaluatorConfig.from_env()

    def test_non_positive_max_depth(self):
        with pytest.raises(ValueError):
            EvaluatorConfig(max_depth=0)
