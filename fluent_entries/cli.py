"""fluent-entries CLI — convert FTL resources to the entries JSON format."""

import logging
import sys
from functools import wraps
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from fluent_entries import __version__
from fluent_entries.config import CodecConfig, load_config
from fluent_entries.errors import FluentEntriesError, ParseError

console = Console()
err_console = Console(stderr=True)


def _handle_errors(fn):
    """Report package errors on stderr and exit with status 1."""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except FluentEntriesError as e:
            err_console.print(f"[red]Error:[/] {escape(str(e))}")
            sys.exit(1)

    return wrapper


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--config", "config_path", default=None, help="Path to a YAML config file")
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: str | None):
    """fluent-entries — bridge FTL resources and the entries JSON format.

    Converts Fluent source files into the flat, order-preserving JSON
    object consumed by legacy runtimes, and verifies fixture corpora.
    """
    logger = logging.getLogger("fluent_entries")
    if not logger.handlers:
        logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config(config_path) if config_path else CodecConfig()
    except FluentEntriesError as e:
        raise click.BadParameter(str(e), param_hint="--config") from e


# ── Convert ──────────────────────────────────────────────────────────


@main.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", default=None, help="Write JSON here instead of stdout")
@click.pass_context
@_handle_errors
def convert(ctx: click.Context, source: str, output: str | None):
    """Convert an FTL file to entries JSON."""
    from fluent_entries.pipeline import parse, serialize_json

    config: CodecConfig = ctx.obj["config"]
    text = Path(source).read_text(encoding="utf-8")

    try:
        resource = parse(text)
    except ParseError as e:
        err_console.print(f"[red]Parse error in {escape(source)}[/] at {e.line}:{e.column}")
        raise

    result = serialize_json(resource, config)

    if output:
        Path(output).write_text(result if result.endswith("\n") else result + "\n", encoding="utf-8")
        console.print(f"[green]Wrote {len(resource)} entries to:[/] {output}")
    else:
        click.echo(result)


# ── Show ─────────────────────────────────────────────────────────────


@main.command()
@click.argument("entries_path", type=click.Path(exists=True, dir_okay=False))
@_handle_errors
def show(entries_path: str):
    """Decode an entries JSON file and list its messages in order."""
    from fluent_entries.pipeline import load_json

    resource = load_json(Path(entries_path).read_text(encoding="utf-8"))

    if not len(resource):
        console.print("[yellow]No entries found.[/]")
        return

    table = Table(title=f"Entries ({len(resource)} messages)")
    table.add_column("#", style="dim", width=4)
    table.add_column("Id", style="cyan")
    table.add_column("Value")

    for i, message in enumerate(resource.messages):
        table.add_row(str(i + 1), escape(message.id), escape(message.value.text))

    console.print(table)


# ── Verify ───────────────────────────────────────────────────────────


@main.command()
@click.argument("directory", type=click.Path(exists=True, file_okay=False))
@click.pass_context
def verify(ctx: click.Context, directory: str):
    """Check every FTL fixture in DIRECTORY against its golden entries file."""
    from fluent_entries.fixtures import verify_directory

    report = verify_directory(directory, ctx.obj["config"])

    if not report.results:
        console.print("[yellow]No fixtures found.[/]")
        return

    for result in report.results:
        if result.passed:
            console.print(f"  [green]v[/] {escape(result.pair.name)}")
        else:
            console.print(f"  [red]x[/] {escape(result.pair.name)}: {escape(result.error)}")
            for message_id in result.mismatched_ids:
                console.print(f"      - {escape(message_id)}")

    console.print(f"\n{report.summary()}", markup=False)
    if not report.passed:
        sys.exit(1)


if __name__ == "__main__":
    main()
