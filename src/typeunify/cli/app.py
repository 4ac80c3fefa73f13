"""Typer CLI entrypoints."""

from __future__ import annotations

from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from typeunify.codec import CodecError, loads_rules, loads_type
from typeunify.config.settings import Settings, load_settings
from typeunify.core.errors import StepLimitExceeded, TypeMismatch
from typeunify.core.rules import RuleExpr, RuleSet
from typeunify.core.types import TypeExpr
from typeunify.core.unify import compare_types
from typeunify.logging_utils import configure_logging
from typeunify.solver import Step, Stepper

app = typer.Typer(name="typeunify", help="Unify type expressions and eliminate variables step by step", add_completion=False)

EXIT_MISMATCH = 1
EXIT_BAD_INPUT = 2

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def _render(value: TypeExpr | RuleExpr, mathjax: bool) -> str:
    return value.to_mathjax() if mathjax else str(value)


def _load_type(text: str) -> TypeExpr:
    try:
        return loads_type(text)
    except CodecError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", markup=True)
        raise typer.Exit(EXIT_BAD_INPUT) from e


def _load_rules(text: str) -> RuleSet:
    try:
        return loads_rules(text)
    except CodecError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", markup=True)
        raise typer.Exit(EXIT_BAD_INPUT) from e


def _setup(mathjax: bool = False, max_steps: int | None = None) -> Settings:
    settings = load_settings(mathjax=mathjax or None, max_steps=max_steps)
    try:
        configure_logging(profile=settings.log_profile)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", markup=True)
        raise typer.Exit(EXIT_BAD_INPUT) from e
    return settings


@app.command()
def unify(
    left: Annotated[str, typer.Argument(help="Left type as JSON, e.g. '{\"Var\": 0}'")],
    right: Annotated[str, typer.Argument(help="Right type as JSON")],
    mathjax: Annotated[bool, typer.Option("--mathjax", help="Typeset output")] = False,
) -> None:
    """Print the rules that make LEFT and RIGHT equal."""

    settings = _setup(mathjax)
    left_type = _load_type(left)
    right_type = _load_type(right)
    logger.info("unify.start left={} right={}", left_type, right_type)
    try:
        rules = compare_types(left_type, right_type)
    except TypeMismatch as e:
        err_console.print(f"[red]Mismatch:[/red] {escape(str(e))}", markup=True)
        raise typer.Exit(EXIT_MISMATCH) from e

    for r in rules:
        console.print(_render(r, settings.mathjax), markup=False)


@app.command()
def solve(
    target: Annotated[str, typer.Argument(help="Type to normalize, as JSON")],
    rules: Annotated[str, typer.Argument(help="Rules as a JSON list of {\"var\": n, \"rhs\": type}")],
    max_steps: Annotated[int | None, typer.Option("--max-steps", min=1)] = None,
    mathjax: Annotated[bool, typer.Option("--mathjax", help="Typeset output")] = False,
) -> None:
    """Substitute RULES into TARGET one variable at a time, printing every step."""

    settings = _setup(mathjax, max_steps)
    expr = _load_type(target)
    rule_set = _load_rules(rules)

    def _print_step(step: Step) -> None:
        console.print(
            f"{_render(step.rule, settings.mathjax)}: {_render(step.after, settings.mathjax)}",
            markup=False,
        )

    stepper = Stepper(rule_set, max_steps=settings.max_steps, on_step=_print_step)
    console.print(_render(expr, settings.mathjax), markup=False)
    try:
        result = stepper.normalize(expr)
    except StepLimitExceeded as e:
        err_console.print(f"[yellow]Stopped:[/yellow] {escape(str(e))}", markup=True)
        raise typer.Exit(EXIT_MISMATCH) from e
    logger.info("solve.done steps={} result={}", len(stepper.history), result)
    console.print(f"result: {_render(result, settings.mathjax)}", markup=False)


@app.command("vars")
def vars_(
    rules: Annotated[str, typer.Argument(help="Rules as a JSON list")],
) -> None:
    """Print the variables used on each side of RULES."""

    _setup()
    rule_set = _load_rules(rules)

    lhs = ", ".join(f"t{v}" for v in sorted(rule_set.all_vars_lhs()))
    rhs = ", ".join(f"t{v}" for v in sorted(rule_set.all_vars_rhs()))
    console.print(f"lhs: {lhs}", markup=False)
    console.print(f"rhs: {rhs}", markup=False)


def main() -> None:
    app()
