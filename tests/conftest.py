"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from bibfolio.models import PublicationRecord, RawEntry  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SCHEMAS_DIR = Path(__file__).parent.parent / "schemas"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample bibliography files."""
    return FIXTURES_DIR


@pytest.fixture
def schemas_dir() -> Path:
    """Directory holding the JSON schemas."""
    return SCHEMAS_DIR


@pytest.fixture
def make_entry() -> Callable[..., RawEntry]:
    """Factory for raw entries: ``make_entry("article", title="T")``."""

    def _factory(kind: str = "article", key: str = "key2020", **fields: str) -> RawEntry:
        return RawEntry(key=key, kind=kind, fields=dict(fields))

    return _factory


@pytest.fixture
def make_record() -> Callable[..., PublicationRecord]:
    """Factory for publication records with minimal boilerplate.

    Only the title and category are defaulted; every other field keeps
    the dataclass default unless passed explicitly.
    """

    def _factory(
        title: str = "A Title",
        *,
        category: str = "journal",
        key: str = "key",
        **overrides: object,
    ) -> PublicationRecord:
        return PublicationRecord(
            key=key,
            entry_type=str(overrides.pop("entry_type", "article")),
            category=category,
            title=title,
            **overrides,  # type: ignore[arg-type]
        )

    return _factory
