"""Classification and citation rendering.

Main entry points:
- classify_entry: Map a raw entry to a publication category
- render_citation: Render citation text for a record
- format_bibtex_entry: Re-serialize a raw entry as BibTeX
"""

from bibfolio.render.bibtex_writer import format_bibtex_entry, write_bibtex_file
from bibfolio.render.citations import RENDERERS, cleanup_citation, render_citation
from bibfolio.render.classifier import Category, classify_entry

__all__ = [
    "Category",
    "RENDERERS",
    "classify_entry",
    "cleanup_citation",
    "format_bibtex_entry",
    "render_citation",
    "write_bibtex_file",
]
