"""CLI interface for fieldcheck using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from fieldcheck import __description__, __version__
from fieldcheck.config import FieldcheckConfig, OutputFormat, build_validator, load_config
from fieldcheck.errors import RuleConfigError
from fieldcheck.primitives import PRIMITIVES
from fieldcheck.validation import DEFAULT_MESSAGES, FALLBACK_MESSAGE, Phase

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="fieldcheck",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

LOG_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def _configure_logging(level: str) -> None:
    """Configure the root logger once; later calls are ignored."""
    logging.basicConfig(
        level=LOG_LEVELS.get(level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s"
    )


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"fieldcheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=version_callback, help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every rule failure")
    ] = False,
) -> None:
    """fieldcheck - Declarative field validation for records."""
    if verbose:
        _configure_logging("debug")


def _load(config: Optional[Path]) -> FieldcheckConfig:
    rules_config = load_config(config)
    _configure_logging(rules_config.logging.level)
    return rules_config


def _read_records(data: Path) -> list[dict[str, Any]]:
    with open(data, encoding="utf-8") as f:
        payload = jsonlib.load(f)

    records = payload if isinstance(payload, list) else [payload]
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValueError(f"Record {index} in {data} is not a JSON object")
    return records


@app.command()
def validate(
    data: Annotated[
        Path,
        typer.Argument(help="JSON file holding a record or a list of records")
    ],
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Rule file path (default: search for .fieldcheck.json)")
    ] = None,
    phase: Annotated[
        Optional[Phase],
        typer.Option("--phase", "-p", help="Validation phase: create or update (default: from rule file)")
    ] = None,
    format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = OutputFormat.TABLE,
) -> None:
    """Validate records against the configured rules."""
    try:
        rules_config = _load(config)
        validator = build_validator(rules_config)
        records = _read_records(data)
        run_phase = phase or rules_config.phase

        results = [validator.validate(record, run_phase) for record in records]
    except (RuleConfigError, ValueError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    failed = sum(1 for errors in results if errors)
    logger.info(f"Validated {len(records)} record(s), {failed} failed")

    if format == OutputFormat.JSON:
        report = [
            {"record": index, "valid": not errors, "errors": errors}
            for index, errors in enumerate(results)
        ]
        console.print(jsonlib.dumps(report, indent=2), markup=False, highlight=False, soft_wrap=True)
    elif failed:
        table = Table(title=f"{failed} of {len(records)} record(s) failed")
        table.add_column("Record", style="cyan", justify="right")
        table.add_column("Field", style="cyan")
        table.add_column("Message", style="white")

        for index, errors in enumerate(results):
            for field, messages in errors.items():
                for message in messages:
                    table.add_row(str(index), field, message)

        console.print(table)
    else:
        console.print(f"[green]All {len(records)} record(s) are valid[/green]")

    raise typer.Exit(1 if failed else 0)


@app.command()
def rules(
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Rule file path (default: search for .fieldcheck.json)")
    ] = None,
) -> None:
    """List the rules registered by a rule file."""
    try:
        validator = build_validator(_load(config))
    except (RuleConfigError, ValueError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    registered = validator.rules()
    if not registered:
        console.print("[yellow]No rules configured[/yellow]")
        return

    table = Table()
    table.add_column("Field", style="cyan")
    table.add_column("Name", style="cyan")
    table.add_column("Rule", style="white")
    table.add_column("Message", style="white")
    table.add_column("Options", style="dim")

    for field, specs in registered.items():
        for spec in specs.values():
            info = spec.to_dict()
            options = [key for key in ("present", "allow_empty", "stop_on_fail") if info[key]]
            if info["on"]:
                options.append(f"on={info['on']}")
            table.add_row(field, info["name"], info["rule"], info["message"], ", ".join(options))

    console.print(table)


@app.command()
def primitives() -> None:
    """List the available rules and their default messages."""
    table = Table()
    table.add_column("Rule", style="cyan")
    table.add_column("Default message", style="white")

    for name in sorted({*PRIMITIVES, "required", "optional"}):
        table.add_row(name, DEFAULT_MESSAGES.get(name, FALLBACK_MESSAGE))

    console.print(table)


if __name__ == "__main__":
    app()
