"""Build orchestration.

Main entry points:
- run_build: Build from a BuildConfig (file in, optional JSON out)
- build_publications: Build from BibTeX text
- load_publications: Build from a BibTeX file
"""

from bibfolio.engine.aggregate import aggregate, group_by_year, sort_group_items
from bibfolio.engine.config import BuildConfig
from bibfolio.engine.output import dumps_publications, write_json
from bibfolio.engine.runner import build_publications, load_publications, run_build

__all__ = [
    "BuildConfig",
    "aggregate",
    "build_publications",
    "dumps_publications",
    "group_by_year",
    "load_publications",
    "run_build",
    "sort_group_items",
    "write_json",
]
