"""CLI interface for css-seasoning."""

import logging
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from seasoning.config import EngineSettings, NamingSettings, SeasoningSettings, set_settings
from seasoning.formatters import format_tables_as_json
from seasoning.models.naming import NamingMode
from seasoning.models.tables import ConversionTables, TransformResult
from seasoning.pipeline.naming import get_available_strategies
from seasoning.pipeline.tables import ConversionTableError, load_conversion_tables, save_conversion_tables
from seasoning.pipeline.transformer import transform

# Stylesheet output goes to stdout, everything else to stderr
console = Console(stderr=True)


def setup_logging(log_level: str) -> None:
    """Configure logging with rich handler."""
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _print_modes() -> None:
    """Print the available naming modes."""
    table = Table(title="\n[bold cyan]Naming modes[/bold cyan]", show_header=True, header_style="bold")
    table.add_column("Mode", style="cyan")
    table.add_column("Description")

    for spec in get_available_strategies():
        table.add_row(spec.mode.value, spec.description)

    console.print(table)


def _drop_unset(**options: Any) -> dict[str, Any]:
    """Keep only the options given on the command line."""
    return {key: value for key, value in options.items() if value is not None}


def _configure_settings(
    input_file: Path,
    mode: str | None,
    debug_symbol: str | None,
    prefix: str | None,
    suffix: str | None,
    seed: int | None,
    minify: bool | None,
) -> None:
    """Configure global settings; unset options keep their environment/default values."""
    naming = NamingSettings(
        **_drop_unset(mode=mode, debug_symbol=debug_symbol, prefix=prefix, suffix=suffix, seed=seed)
    )
    engine = EngineSettings(**_drop_unset(minify=minify, filename=str(input_file)))
    set_settings(SeasoningSettings(naming=naming, engine=engine))


def _write_output(text: str, output_path: Path | None) -> None:
    """Write output text to file or stdout."""
    if output_path:
        output_path.write_text(text, encoding="utf-8")
    else:
        click.echo(text)


def _load_tables(path: Path | None) -> ConversionTables | None:
    if path is None:
        return None
    return load_conversion_tables(path)


def _handle_tables(result: TransformResult, save_tables: Path | None) -> None:
    """Persist the tables or print them to stderr."""
    if save_tables:
        save_conversion_tables(result.conversion_tables, save_tables)
        console.print(
            f"[green]Saved {result.conversion_tables.size} table entries to {save_tables}[/green]"
        )
    else:
        console.print("[bold cyan]Conversion tables:[/bold cyan]")
        console.print_json(format_tables_as_json(result.conversion_tables))


def _display_warnings(result: TransformResult) -> None:
    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")


def _fail(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {message}")
    sys.exit(1)


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path), required=False)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file path (default: stdout)",
)
@click.option(
    "--mode",
    "-m",
    type=click.Choice([mode.value for mode in NamingMode], case_sensitive=False),
    default=None,
    help="Naming mode (default: hash)",
)
@click.option(
    "--debug-symbol",
    "-d",
    type=str,
    default=None,
    help="Symbol placed in front of names in debug mode (default: _)",
)
@click.option("--prefix", "-p", type=str, default=None, help="Prefix for every generated name")
@click.option("--suffix", "-s", type=str, default=None, help="Suffix for every generated name")
@click.option("--seed", type=int, default=None, help="Seed (hash key) for hash mode")
@click.option(
    "--minify/--no-minify",
    default=None,
    help="Drop comments and redundant whitespace (default: minify)",
)
@click.option(
    "--conversion-tables",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON file with conversion tables from an earlier run",
)
@click.option(
    "--save-tables",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the resulting conversion tables to this JSON file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Set the logging level",
)
@click.option(
    "--list-modes",
    is_flag=True,
    default=False,
    help="List the available naming modes and exit",
)
def main(
    input_file: Path | None,
    output: Path | None,
    mode: str | None,
    debug_symbol: str | None,
    prefix: str | None,
    suffix: str | None,
    seed: int | None,
    minify: bool | None,
    conversion_tables: Path | None,
    save_tables: Path | None,
    log_level: str,
    list_modes: bool,
) -> None:
    """Rename CSS classes, ids and custom properties in INPUT_FILE."""
    setup_logging(log_level.upper())

    if list_modes:
        _print_modes()
        sys.exit(0)

    if input_file is None:
        raise click.UsageError("Missing argument 'INPUT_FILE'.")

    _configure_settings(input_file, mode and mode.lower(), debug_symbol, prefix, suffix, seed, minify)

    try:
        tables = _load_tables(conversion_tables)
        css = input_file.read_text(encoding="utf-8")
        result = transform(css, conversion_tables=tables)
    except (ConversionTableError, OSError, RuntimeError, ValueError) as e:
        _fail(str(e))
        return

    _display_warnings(result)
    _write_output(result.css, output)
    _handle_tables(result, save_tables)


if __name__ == "__main__":
    main()
