"""BibTeX writer for raw entries."""

from collections.abc import Iterable
from pathlib import Path

from bibfolio.models import RawEntry


def format_bibtex_entry(entry: RawEntry, compact: bool = True) -> str:
    """Format a raw entry back to BibTeX.

    Field values are written exactly as parsed, wrapped in braces.

    Parameters
    ----------
    entry : RawEntry
        Entry to format.
    compact : bool, optional
        Single-line ``@kind{key,name={value}}`` form when True; one
        indented field per line otherwise, by default True.

    Returns
    -------
    str
        BibTeX-formatted entry without trailing newline.
    """
    if compact:
        sep, indent, assign = ",", "", "={"
    else:
        sep, indent, assign = ",\n", "    ", " = {"

    parts = [f"{indent}{name}{assign}{value}}}" for name, value in entry.fields.items()]

    head = f"@{entry.kind}{{{entry.key}"
    if not parts:
        return f"{head}}}"
    body = sep.join(parts)
    if compact:
        return f"{head}{sep}{body}}}"
    return f"{head}{sep}{body}\n}}"


def write_bibtex_file(
    entries: Iterable[RawEntry], output_path: Path, compact: bool = False
) -> None:
    """Write entries to a BibTeX file, separated by blank lines.

    Parameters
    ----------
    entries : Iterable[RawEntry]
        Entries to write.
    output_path : Path
        Output file path.
    compact : bool, optional
        Use the single-line form, by default False.
    """
    with output_path.open("w", encoding="utf-8", newline="\n") as f:
        for entry in entries:
            f.write(format_bibtex_entry(entry, compact=compact))
            f.write("\n\n")
