"""Command-line interface for simple-localization.

Commands:
    simple-localization lookup TEXT      Translate a phrase
    simple-localization locales          List available locales
    simple-localization inspect FILE     Show the entries of a translation file
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from simple_localization.config import load_config
from simple_localization.diagnostics import CollectingReporter
from simple_localization.errors import LocalizationError
from simple_localization.localizer import Localizer
from simple_localization.parser import EntryKind, iter_entries
from simple_localization.resources import provider_from_config

app = typer.Typer(
    name="simple-localization",
    help="Static-text localization from plain-text translation files",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


# =============================================================================
# Type Aliases
# =============================================================================

DirOpt = Annotated[
    Optional[Path],
    typer.Option("--dir", "-d", help="Directory of translation files (overrides LOCALIZATION_DIR)"),
]

ConfigOpt = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Configuration file (YAML, JSON or TOML)"),
]


def _load_localizer(
    directory: Path | None,
    config_file: Path | None,
    reporter: CollectingReporter,
) -> Localizer:
    try:
        config = load_config(config_file, localization_dir=directory)
        return Localizer.from_provider(
            provider_from_config(config),
            reporter=reporter,
            locale_variable=config.locale_variable,
        )
    except LocalizationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Static-text localization from plain-text translation files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(name="lookup")
def lookup_cmd(
    text: Annotated[str, typer.Argument(help="Source phrase to translate")],
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Locale key (default: from $LANG)"),
    ] = None,
    directory: DirOpt = None,
    config_file: ConfigOpt = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with code 1 if no translation was found"),
    ] = False,
) -> None:
    """Translate a phrase."""
    reporter = CollectingReporter()
    localizer = _load_localizer(directory, config_file, reporter)

    if locale is None:
        result = localizer.translate_using_system_locale(text)
    else:
        result = localizer.translate(text, locale)

    typer.echo(result)

    for condition in reporter.conditions:
        typer.echo(condition.message, err=True)

    if strict and len(reporter):
        raise typer.Exit(1)


@app.command(name="locales")
def locales_cmd(
    directory: DirOpt = None,
    config_file: ConfigOpt = None,
) -> None:
    """List available locales and their phrase counts."""
    localizer = _load_localizer(directory, config_file, CollectingReporter())
    stats = localizer.catalog.stats()

    if not stats:
        typer.echo("No locales found.")
        return

    table = Table(title="Locales", show_header=True, header_style="bold")
    table.add_column("Locale", style="cyan", no_wrap=True)
    table.add_column("Phrases", justify="right", style="green")
    for locale_key, count in stats.items():
        table.add_row(locale_key, str(count))

    console.print(table)


@app.command(name="inspect")
def inspect_cmd(
    file: Annotated[Path, typer.Argument(help="Translation file to inspect")],
) -> None:
    """Show the entries parsed from a translation file."""
    if not file.is_file():
        typer.echo(f"Error: File not found: {file}", err=True)
        raise typer.Exit(1)

    try:
        text = file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        typer.echo(f"Error: {file} is not valid UTF-8: {e}", err=True)
        raise typer.Exit(1)

    entries = list(iter_entries(text))
    if not entries:
        typer.echo(f"No entries found in {file}")
        return

    table = Table(title=file.name, show_header=True, header_style="bold", show_lines=True)
    table.add_column("Kind", style="yellow", no_wrap=True)
    table.add_column("Source", style="cyan")
    table.add_column("Translation", style="green")
    for entry in entries:
        kind = "multi" if entry.kind is EntryKind.MULTI_LINE else "single"
        table.add_row(kind, escape(entry.source), escape(entry.translation))

    console.print(table)

    unique = len({entry.source for entry in entries})
    typer.echo(f"{len(entries)} entries, {unique} phrases")
    if unique < len(entries):
        typer.echo("Duplicate phrases keep their last definition.")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
