"""CLI entry point using Typer."""

from typing import List, Optional

import typer
from pydantic import ValidationError

from tdd_kata.calculator import CoercionError, add as add_values
from tdd_kata.config import load_config, setup_langsmith
from tdd_kata.graph.workflow import run_lesson
from tdd_kata.nodes.lesson import list_lessons, load_lesson
from tdd_kata.nodes.schemas import Lesson

app = typer.Typer(
    name="tdd-kata",
    help="Learn test-driven development by growing an add function",
)


def _load(lesson: Optional[str]) -> Lesson:
    """Load the named lesson, or the configured default."""
    name = lesson or load_config().lesson.name
    try:
        return load_lesson(name)
    except FileNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except ValidationError as e:
        typer.echo(f"Error: invalid lesson '{name}':\n{e}", err=True)
        raise typer.Exit(1)


@app.command(context_settings={"ignore_unknown_options": True})
def add(
    values: Optional[List[str]] = typer.Argument(None, help="Numbers to add"),
    strict: bool = typer.Option(
        False, "--strict", "-s", help="Reject values that are not numbers"
    ),
) -> None:
    """Add numbers (or numeric strings) together."""
    strict = strict or load_config().coercion.strict
    try:
        result = add_values(*(values or []), strict=strict)
    except CoercionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Result: {result}")


@app.command()
def lessons() -> None:
    """List the lessons bundled with tdd-kata."""
    for name in list_lessons():
        typer.echo(name)


@app.command()
def show(
    lesson: Optional[str] = typer.Argument(None, help="Lesson name or YAML path"),
) -> None:
    """Print a lesson's narration stage by stage."""
    loaded = _load(lesson)

    typer.echo(loaded.title)
    typer.echo("=" * len(loaded.title))
    if loaded.description:
        typer.echo(loaded.description.strip())

    for number, stage in enumerate(loaded.stages, start=1):
        typer.echo(f"\n--- Stage {number}: {stage.title} ---")
        if stage.narration:
            typer.echo(stage.narration.strip())
        typer.echo("\nTests:")
        for example in stage.examples:
            typer.echo(f"  assert {example.describe()}")
        typer.echo(f"Implementation: {stage.implementation}")
        if stage.refactor:
            typer.echo(f"Refactored to: {stage.refactor}")


@app.command()
def walk(
    lesson: Optional[str] = typer.Argument(None, help="Lesson name or YAML path"),
) -> None:
    """Replay the red-green-refactor cycle for every stage."""
    setup_langsmith()
    loaded = _load(lesson)

    typer.echo(f"Walking through: {loaded.title}")

    result = run_lesson(loaded)

    for report in result.get("reports", []):
        typer.echo(f"\n--- {report['stage']} ---")
        for phase in ("red", "green", "refactor"):
            outcomes = report.get(phase, [])
            if not outcomes:
                continue
            passing = sum(1 for outcome in outcomes if outcome["passed"])
            typer.echo(f"{phase.capitalize()}: {passing}/{len(outcomes)} passing")

    if result.get("passed"):
        typer.echo("\nAll stages completed.")
        return

    typer.echo(
        f"\nStopped at stage '{result.get('failed_stage')}' "
        f"during {result.get('failed_phase')}."
    )
    raise typer.Exit(1)


if __name__ == "__main__":
    app()
