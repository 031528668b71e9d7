"""Build configuration dataclass."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

DEFAULT_SOURCE_PATH = Path("src/_data/publications.bib")


@dataclass
class BuildConfig:
    """Configuration for one publications build.

    Attributes
    ----------
    source_path : Path
        BibTeX database to read.
    output_path : Path | None
        Where to write the JSON result. If None, nothing is written.
    events_path : Path | None
        JSONL audit log path. If None, no events are logged.
    compact_bibtex : bool
        Serialize each record's ``bibtex`` field on a single line.
    indent : int | None
        JSON indentation for the output file; None for a single line.
    """

    source_path: Path = DEFAULT_SOURCE_PATH
    output_path: Path | None = None
    events_path: Path | None = None
    compact_bibtex: bool = True
    indent: int | None = 2

    def __post_init__(self) -> None:
        """Coerce paths and validate."""
        self.source_path = Path(self.source_path)
        if self.output_path is not None:
            self.output_path = Path(self.output_path)
        if self.events_path is not None:
            self.events_path = Path(self.events_path)

        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")

        if self.output_path is not None and self.output_path == self.source_path:
            raise ValueError(f"output_path must differ from source_path ({self.source_path})")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["source_path"] = str(self.source_path)
        data["output_path"] = str(self.output_path) if self.output_path is not None else None
        data["events_path"] = str(self.events_path) if self.events_path is not None else None
        return data
