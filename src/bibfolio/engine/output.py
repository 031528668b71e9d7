"""JSON output for build results."""

import json
from pathlib import Path

from bibfolio.models import PublicationsData


def dumps_publications(data: PublicationsData, indent: int | None = 2) -> str:
    """Serialize a build result to JSON.

    Output is deterministic: record fields keep their declaration order
    and non-ASCII characters are written as-is.
    """
    return json.dumps(data.to_dict(), ensure_ascii=False, indent=indent)


def write_json(data: PublicationsData, path: str | Path, *, indent: int | None = 2) -> None:
    """Write a build result to a UTF-8 JSON file.

    Parameters
    ----------
    data : PublicationsData
        Build result.
    path : str | Path
        Output file path; parent directories are created.
    indent : int | None, optional
        JSON indentation, by default 2.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(dumps_publications(data, indent=indent))
        f.write("\n")
