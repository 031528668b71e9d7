"""Command-line interface for bibfolio.

Provides CLI commands for building, previewing and exporting a
publication list.
"""

import importlib.metadata
import sys
from pathlib import Path

import click

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("bibfolio")
except importlib.metadata.PackageNotFoundError:
    from bibfolio import __version__  # Fallback for development


@click.group()
@click.version_option(version=__version__, prog_name="bibfolio")
def cli() -> None:
    """Normalize a BibTeX database and render a publication list.

    Use 'bibfolio COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("source", type=click.Path(dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output JSON file path (default: print to stdout)",
)
@click.option(
    "--events",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append JSONL audit events to this file",
)
@click.option(
    "--indent",
    type=int,
    default=2,
    help="JSON indentation (default: 2)",
)
@click.option(
    "--expanded-bibtex",
    is_flag=True,
    help="Serialize each record's BibTeX with one field per line",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def build(
    source: str,
    output: str | None,
    events: str | None,
    indent: int,
    expanded_bibtex: bool,
    verbose: bool,
) -> None:
    """Build the year-grouped publications JSON from SOURCE.

    SOURCE is a BibTeX file. The result holds 'years' (records grouped by
    year, newest first) and 'all' (every record in the same order).

    Examples
    --------
        bibfolio build publications.bib -o _data/publications.json
        bibfolio build publications.bib --events build.jsonl -v
    """
    from bibfolio.engine import BuildConfig, dumps_publications, run_build

    try:
        config = BuildConfig(
            source_path=Path(source),
            output_path=Path(output) if output else None,
            events_path=Path(events) if events else None,
            compact_bibtex=not expanded_bibtex,
            indent=indent,
        )
    except ValueError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Building from: {config.source_path}", err=True)

    data = run_build(config)

    if not data.ok:
        click.secho(f"✗ Build failed: {data.error}", fg="red", err=True)
        sys.exit(1)

    if verbose:
        for group in data.years:
            label = group.year or "unknown"
            click.echo(f"  {label}: {len(group.items)} records", err=True)

    if config.output_path is None:
        click.echo(dumps_publications(data, indent=config.indent))
    else:
        click.secho(
            f"✓ Wrote {len(data.all)} records in {len(data.years)} year groups "
            f"to {config.output_path}",
            fg="green",
        )


@cli.command()
@click.argument("source", type=click.Path(dir_okay=False))
@click.option(
    "--year",
    "-y",
    type=int,
    default=None,
    help="Only show this year (0 for year unknown)",
)
def show(source: str, year: int | None) -> None:
    """Print the rendered citations of SOURCE grouped by year.

    Examples
    --------
        bibfolio show publications.bib
        bibfolio show publications.bib --year 2023
    """
    from bibfolio.engine import load_publications

    data = load_publications(source)

    if not data.ok:
        click.secho(f"✗ {data.error}", fg="red", err=True)
        sys.exit(1)

    groups = [g for g in data.years if year is None or g.year == year]
    if not groups:
        click.echo("No publications found.", err=True)
        return

    for group in groups:
        click.secho(str(group.year) if group.year else "Year unknown", bold=True)
        for record in group.items:
            click.echo(f"  [{record.category}] {record.citation}")
        click.echo("")


@cli.command()
@click.argument("source", type=click.Path(dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    required=True,
    help="Output BibTeX file path",
)
@click.option(
    "--compact",
    is_flag=True,
    help="Write each entry on a single line",
)
def export(source: str, output: str, compact: bool) -> None:
    """Re-serialize the entries of SOURCE that have a title.

    Entries are written in publication-list order; field values are kept
    exactly as in the source.

    Examples
    --------
        bibfolio export publications.bib -o cleaned.bib
    """
    from bibfolio import ParseError, parse_file
    from bibfolio.engine import aggregate
    from bibfolio.normalize import build_record
    from bibfolio.render import write_bibtex_file

    try:
        entries = parse_file(source)
    except (OSError, ParseError) as e:
        click.secho(f"✗ {e}", fg="red", err=True)
        sys.exit(1)

    pairs = []
    for entry in entries:
        record = build_record(entry)
        if record is not None:
            pairs.append((record, entry))

    _, ordered = aggregate(record for record, _ in pairs)
    position = {id(record): i for i, record in enumerate(ordered)}
    kept = [entry for record, entry in sorted(pairs, key=lambda p: position[id(p[0])])]

    write_bibtex_file(kept, Path(output), compact=compact)
    click.secho(f"✓ Wrote {len(kept)} entries to {output}", fg="green")


if __name__ == "__main__":
    cli()
