"""Evaluator configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 10_000

_FALSE_VALUES = {"0", "false", "no", "off"}
_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class EvaluatorConfig:
    """Evaluation limits and error-reporting options.

    Attributes:
        max_depth: Deepest node nesting the evaluator will descend into
        diagnostics: Whether error messages list the available variable and
            function names (never their values)
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    diagnostics: bool = True

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

    @classmethod
    def from_env(cls) -> EvaluatorConfig:
        """Create config from environment variables.

        Resolution order for each setting:
        1. NUMEVAL_MAX_DEPTH / NUMEVAL_ERROR_DIAGNOSTICS env vars
        2. Defaults
        """
        max_depth = DEFAULT_MAX_DEPTH
        raw_depth = os.environ.get("NUMEVAL_MAX_DEPTH")
        if raw_depth:
            try:
                max_depth = int(raw_depth)
            except ValueError:
                raise ValueError(
                    f"NUMEVAL_MAX_DEPTH must be an integer, got {raw_depth!r}"
                ) from None

        diagnostics = True
        raw_diagnostics = os.environ.get("NUMEVAL_ERROR_DIAGNOSTICS")
        if raw_diagnostics:
            value = raw_diagnostics.strip().lower()
            if value in _FALSE_VALUES:
                diagnostics = False
            elif value not in _TRUE_VALUES:
                raise ValueError(
                    f"NUMEVAL_ERROR_DIAGNOSTICS must be a boolean, got {raw_diagnostics!r}"
                )

        return cls(max_depth=max_depth, diagnostics=diagnostics)
