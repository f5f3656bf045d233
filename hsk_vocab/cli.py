"""CLI entrypoint for hsk-vocab command."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from .config import Config, load_config
from .exporters.json_exporter import JsonExporter
from .level_filter import FILTER_MODES, filter_entries, level_tag, wordlist_path
from .minify import min_output_path, minify_entries
from .models import Dataset, Entry
from .transformer import apply_to_dataset

app = typer.Typer(help="Build HSK vocabulary word lists")
console = Console()

SAMPLE_WORD = "可以"

RootOption = Annotated[Optional[Path], typer.Option("--root", help="Dataset root directory")]
DryRunOption = Annotated[bool, typer.Option("--dry-run", help="Report instead of writing files")]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Configure logging for all commands."""
    level = logging.DEBUG if verbose else load_config().log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load(path: Path) -> Dataset:
    try:
        return Dataset.from_json_file(path)
    except FileNotFoundError:
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)
    except (json.JSONDecodeError, ValidationError) as e:
        console.print(f"[red]Invalid dataset {path}: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _report(output_path: Path, text: str, count: int) -> None:
    console.print(f"DRY RUN: Would write to {output_path}")
    console.print(f"Entries: {count}")
    console.print(f"Output size: {len(text.encode('utf-8'))} bytes")


def _write_minified(exporter: JsonExporter, entries: list[Entry], source: Path, dry_run: bool) -> None:
    data = minify_entries(entries)
    output_path = min_output_path(source)
    if dry_run:
        _report(output_path, exporter.render_minified(data), len(data))
    else:
        exporter.export_minified(data, output_path)


def _write_wordlist(
    config: Config,
    exporter: JsonExporter,
    entries: list[Entry],
    mode: str,
    levels: list[str],
    dry_run: bool,
) -> tuple[list[Entry], Path]:
    selected = filter_entries(entries, mode, levels)
    output_path = wordlist_path(config.wordlist_path, mode, levels)
    if dry_run:
        _report(output_path, exporter.render(selected), len(selected))
    else:
        exporter.export(selected, output_path)
    return selected, output_path


@app.command()
def sandhi(root: RootOption = None, dry_run: DryRunOption = False) -> None:
    """Add tone sandhi transcriptions to the complete dataset."""
    config = load_config(root_dir=root)
    input_path = config.complete_path
    dataset = _load(input_path)

    entries = apply_to_dataset(dataset)
    exporter = JsonExporter(indent=config.json_indent)

    if dry_run:
        _report(input_path, exporter.render(entries), len(entries))
        sample = next((e for e in entries if e.simplified == SAMPLE_WORD), entries[0] if entries else None)
        if sample and sample.forms and sample.forms[0].sandhi is not None:
            form = sample.forms[0]
            console.print("\nSample sandhi field added:")
            console.print(f"  transcriptions.numeric: {form.transcriptions.numeric}")
            console.print(f"  sandhi.numeric: {form.sandhi.numeric}")
        return

    exporter.export(entries, input_path)
    console.print(f"[green]Applied sandhi to {len(entries)} entries in {input_path}[/green]")


@app.command("filter")
def filter_command(
    mode: Annotated[str, typer.Argument(help="exclusive or inclusive")],
    levels: Annotated[list[str], typer.Argument(help="Level tags, e.g. new-1 new-2")],
    root: RootOption = None,
    dry_run: DryRunOption = False,
) -> None:
    """Write a level-based word list."""
    if mode not in FILTER_MODES:
        raise typer.BadParameter(f"mode must be one of {', '.join(FILTER_MODES)}", param_hint="MODE")

    config = load_config(root_dir=root)
    dataset = _load(config.complete_path)
    exporter = JsonExporter(indent=config.json_indent)

    _, output_path = _write_wordlist(config, exporter, list(dataset), mode, levels, dry_run)
    if not dry_run:
        console.print(f"[green]Wrote {output_path}[/green]")


@app.command()
def minify(
    input_file: Annotated[Path, typer.Argument(help="Dataset or word list JSON")],
    dry_run: DryRunOption = False,
) -> None:
    """Write the compact (.min.json) version of a dataset."""
    dataset = _load(input_file)
    exporter = JsonExporter()
    _write_minified(exporter, list(dataset), input_file, dry_run)
    if not dry_run:
        console.print(f"[green]Wrote {min_output_path(input_file)}[/green]")


@app.command()
def process(
    root: RootOption = None,
    with_sandhi: Annotated[
        bool, typer.Option("--sandhi/--no-sandhi", help="Recompute sandhi before exporting")
    ] = True,
) -> None:
    """Full pipeline: minify the dataset and build every level word list."""
    config = load_config(root_dir=root)
    exporter = JsonExporter(indent=config.json_indent)

    entries = list(_load(config.complete_path))
    if with_sandhi:
        entries = apply_to_dataset(entries)

    console.print("[bold cyan]Processing main dataset[/bold cyan]")
    _write_minified(exporter, entries, config.complete_path, dry_run=False)
    console.print("  - Compressing list... [green]OK[/green]")

    for scheme, max_level in config.schemes.items():
        console.print(f"\n[bold cyan]Processing {scheme} levels[/bold cyan]")
        cumulative: list[str] = []
        for level in range(1, max_level + 1):
            tag = level_tag(scheme, level)
            cumulative.append(tag)
            console.print(f"  [yellow]Level: {level}[/yellow]")

            exclusive = _write_wordlist(config, exporter, entries, "exclusive", [tag], False)
            console.print("    - Filtering exclusive list [green]OK[/green]")
            inclusive = _write_wordlist(config, exporter, entries, "inclusive", list(cumulative), False)
            console.print("    - Filtering inclusive list [green]OK[/green]")

            for selected, path in (exclusive, inclusive):
                _write_minified(exporter, selected, path, dry_run=False)
            console.print("    - Compressing lists... [green]OK[/green]")

    console.print(f"\n[green]Processed {len(entries)} entries[/green]")


@app.command()
def validate(
    input_file: Annotated[Path, typer.Argument(help="Dataset JSON to validate")],
) -> None:
    """Validate a dataset against the schema."""
    dataset = _load(input_file)
    console.print(f"[green]Valid dataset with {len(dataset)} entries[/green]")


if __name__ == "__main__":
    app()
