from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from mealtime.catalog import FoodCatalog, load_food_catalog
from mealtime.core.errors import MealtimeValueError
from mealtime.core.timeofday import parse_time_of_day
from mealtime.scheduling.timeline import (
    Failure,
    Replace,
    Split,
    TimeBlock,
    attempt_prepend,
    validate_block_bounds,
)
from mealtime.telemetry import append_attempt

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


def _load_catalog(catalog: Path) -> FoodCatalog:
    try:
        return load_food_catalog(catalog)
    except (FileNotFoundError, MealtimeValueError) as exc:
        console.print(f"[red]Could not load catalog:[/red] {exc}")
        raise typer.Exit(2)


def _lookup(catalog: FoodCatalog, short_code: str):
    try:
        return catalog.get(short_code)
    except KeyError as exc:
        console.print(f"[red]{exc.args[0]}[/red]")
        console.print(f"Known foods: {', '.join(catalog.short_codes()) or '(none)'}")
        raise typer.Exit(2)


def _blocks_table(title: str, blocks: tuple[TimeBlock, ...]) -> Table:
    table = Table(title=title)
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Occupant")
    for block in blocks:
        occupant = block.occupant
        label = occupant.name.display() if occupant is not None else "[dim]free[/dim]"
        table.add_row(block.start.isoformat(), block.end.isoformat(), label)
    return table


@app.command()
def foods(catalog: Path, lang: str | None = typer.Option(None, help="Preferred language code")):
    """List the foods in a catalog with their preparation durations."""
    cat = _load_catalog(catalog)
    table = Table(title=f"Catalog: {cat.name}")
    table.add_column("Code")
    table.add_column("Kind")
    table.add_column("Name")
    table.add_column("Duration", justify="right")
    for food in cat.foods:
        table.add_row(food.name.short_code, food.kind, food.name.display(lang), str(food.duration()))
    console.print(table)


@app.command()
def prepend(
    catalog: Path,
    start: str = typer.Option(..., "--start", help="Block start (HH:MM[:SS])"),
    end: str = typer.Option(..., "--end", help="Block end (HH:MM[:SS])"),
    food: str = typer.Option(..., "--food", "-f", help="Short code of the food to place first"),
    occupant: str | None = typer.Option(
        None, "--occupant", "-o", help="Short code of the food already in the block"
    ),
    telemetry_log: Path | None = typer.Option(
        None, "--telemetry-log", help="Append a JSONL record of the attempt to this path"
    ),
):
    """Try to place a food at the start of a block and show the resulting blocks."""
    cat = _load_catalog(catalog)
    try:
        block_start = parse_time_of_day(start)
        block_end = parse_time_of_day(end)
        validate_block_bounds(block_start, block_end)
    except MealtimeValueError as exc:
        console.print(f"[red]Invalid block:[/red] {exc}")
        raise typer.Exit(2)

    activity = _lookup(cat, food)
    existing = _lookup(cat, occupant) if occupant else None
    block = TimeBlock(block_start, block_end, existing)

    try:
        outcome = attempt_prepend(block, activity)
    except MealtimeValueError as exc:
        console.print(f"[red]Insertion failed:[/red] {exc}")
        raise typer.Exit(1)

    if telemetry_log is not None:
        append_attempt(telemetry_log, block, activity, outcome)

    match outcome:
        case Failure(required_end=required_end, next_day=next_day):
            suffix = " the next day" if next_day else ""
            console.print(
                f"[yellow]Does not fit:[/yellow] block would need to end at "
                f"{required_end.isoformat()}{suffix} (ends at {block_end.isoformat()})"
            )
            raise typer.Exit(1)
        case Replace():
            console.print(_blocks_table("Replaced block", outcome.blocks()))
            if existing is not None:
                console.print(
                    f"[yellow]Note:[/yellow] {existing.name.display()} no longer appears in the block"
                )
        case Split():
            console.print(_blocks_table("Split blocks", outcome.blocks()))


if __name__ == "__main__":
    app()
