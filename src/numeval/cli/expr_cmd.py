"""Expression CLI commands: eval, functions, tree."""

import json
import logging
from pathlib import Path

import click
import yaml

from numeval.config import EvaluatorConfig
from numeval.expressions import (
    EvaluationError,
    FunctionTable,
    ParseError,
    default_functions,
    evaluate,
    parse,
)

logger = logging.getLogger(__name__)


def _load_scope_file(path: Path) -> dict[str, float]:
    """Read variable bindings from a YAML mapping of name to number."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise click.ClickException(f"Invalid YAML in {path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise click.ClickException(f"Scope file {path} must contain a mapping")

    scope: dict[str, float] = {}
    for name, value in data.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise click.ClickException(
                f"Scope file {path}: value for '{name}' must be a number, got {value!r}"
            )
        scope[str(name)] = float(value)
    return scope


def _parse_bindings(ctx, param, values: tuple[str, ...]) -> dict[str, float]:
    """Click callback turning ``name=value`` options into a scope."""
    scope: dict[str, float] = {}
    for binding in values:
        name, sep, raw = binding.partition("=")
        name = name.strip()
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got {binding!r}")
        try:
            scope[name] = float(raw)
        except ValueError:
            raise click.BadParameter(f"value for '{name}' is not a number: {raw!r}")
    return scope


@click.command("eval")
@click.argument("expression")
@click.option(
    "-v",
    "--var",
    "bindings",
    multiple=True,
    callback=_parse_bindings,
    help="Bind a variable, e.g. -v x=1.5 (repeatable).",
)
@click.option(
    "--scope-file",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file mapping variable names to numbers.",
)
@click.option(
    "--builtins/--no-builtins",
    default=True,
    help="Make the built-in functions available (default: on).",
)
def eval_cmd(
    expression: str,
    bindings: dict[str, float],
    scope_file: Path | None,
    builtins: bool,
):
    """Evaluate EXPRESSION and print the result."""
    scope = _load_scope_file(scope_file) if scope_file is not None else {}
    scope.update(bindings)

    functions = default_functions() if builtins else FunctionTable()

    try:
        config = EvaluatorConfig.from_env()
    except ValueError as e:
        raise click.ClickException(str(e))

    try:
        result = evaluate(parse(expression), scope, functions, config)
    except (ParseError, EvaluationError) as e:
        logger.debug("Evaluation failed", exc_info=True)
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1)

    click.echo(repr(result))


@click.command()
@click.option("--json", "as_json", is_flag=True, default=False, help="Output JSON.")
def functions(as_json: bool):
    """List the built-in functions."""
    table = default_functions()

    if as_json:
        click.echo(json.dumps(table.export_documentation(), indent=2))
        return

    for func_def in sorted(table.list_all(), key=lambda f: (f.category.value, f.name)):
        click.echo(
            f"{func_def.signature():<28} {func_def.category.value:<14} {func_def.description}"
        )


@click.command()
@click.argument("expression")
def tree(expression: str):
    """Show the tree built for EXPRESSION."""
    try:
        parsed = parse(expression)
    except ParseError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1)

    click.echo(repr(parsed.root))
