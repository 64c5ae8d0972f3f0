"""Evaluation CLI commands: eval and functions."""

import json

import click

from mathpad.evaluator import (
    CONSTANTS,
    FUNCTIONS,
    Failure,
    FunctionCategory,
    evaluate_math_expression,
)


@click.command("eval")
@click.argument("expressions", nargs=-1, required=True)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print results as a JSON array.",
)
def eval_cmd(expressions: tuple[str, ...], as_json: bool):
    """Evaluate one or more expressions."""
    results = [evaluate_math_expression(expression) for expression in expressions]
    failed = any(isinstance(result, Failure) for result in results)

    if as_json:
        click.echo(json.dumps([result.to_dict() for result in results], indent=2))
    else:
        for expression, result in zip(expressions, results):
            if isinstance(result, Failure):
                click.echo(click.style(f"{expression}: {result.error}", fg="red"), err=True)
            elif len(expressions) == 1:
                click.echo(click.style(result.display_value, fg="green"))
            else:
                click.echo(f"{expression} = " + click.style(result.display_value, fg="green"))

    if failed:
        raise SystemExit(1)


@click.command()
@click.option(
    "--category",
    default=None,
    type=click.Choice([c.value for c in FunctionCategory]),
    help="Only list functions in this category.",
)
def functions(category: str | None):
    """List available functions and constants."""
    if category is not None:
        definitions = FUNCTIONS.list_by_category(FunctionCategory(category))
    else:
        definitions = FUNCTIONS.list_all()

    for func_def in definitions:
        line = f"  {func_def.name:<8} {func_def.description}"
        if func_def.aliases:
            line += click.style(f"  (aliases: {', '.join(func_def.aliases)})", dim=True)
        click.echo(line)

    if category is None:
        click.echo(f"\nConstants: {', '.join(sorted(CONSTANTS))}")
