"""End-to-end tests for the publications build.

Runs the sample bibliography through parsing, normalization, rendering
and aggregation, then checks the published JSON and the audit trail.
"""

import json
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from bibfolio.audit import AuditLogger
from bibfolio.engine import BuildConfig, load_publications, run_build
from bibfolio.models import PublicationsData

EXPECTED_ORDER = [
    (2021, ["garcia2021conf", "lee2021preprint"]),
    (2020, ["smith2020journal"]),
    (2019, ["chapter2019", "edited2019"]),
    (2018, ["thesis2018"]),
    (0, ["talk_undated"]),
]

EXPECTED_CITATIONS = {
    "smith2020journal": (
        "Jane Smith, John Doe. “Learning to Rank Things.” Some Journal, vol. 5, pp. 1-10, "
        "March 2020."
    ),
    "garcia2021conf": (
        "Luis García, Anna Müller. “Fast BibTeX Rendering.” In Proceedings of the Conference "
        "on Things, Zürich, July 14, 2021."
    ),
    "lee2021preprint": "Kim Lee. “A Preprint About Things.” arXiv:2101.00001, January 2021.",
    "edited2019": "Alice Brown (ed.). “Collected Essays.” Academic Press, New York, 2019.",
    "chapter2019": (
        "Jean-Paul Sartre. “A Chapter.” In Collected Essays, edited by Alice Brown, Bob White, "
        "Academic Press, pp. 20--35, December 2019."
    ),
    "thesis2018": (
        "María Peña. “On Theses.” PhD thesis, Universidad de Buenos Aires, Buenos Aires, 2018."
    ),
    "talk_undated": "John Doe. “An Undated Talk.” Invited talk,",
}

EXPECTED_CATEGORIES = {
    "smith2020journal": "journal",
    "garcia2021conf": "conference",
    "lee2021preprint": "preprint",
    "edited2019": "book",
    "chapter2019": "chapter",
    "thesis2018": "thesis",
    "talk_undated": "misc",
}


@pytest.fixture
def sample_bib(fixtures_dir: Path) -> Path:
    """Path to the sample bibliography."""
    return fixtures_dir / "publications.bib"


@pytest.fixture
def publications_schema(schemas_dir: Path) -> dict[str, Any]:
    """Load the publications output schema."""
    with (schemas_dir / "publications.schema.json").open() as f:
        return json.load(f)


@pytest.fixture
def event_schema(schemas_dir: Path) -> dict[str, Any]:
    """Load the log event schema."""
    with (schemas_dir / "log_event.schema.json").open() as f:
        return json.load(f)


@pytest.fixture
def built(sample_bib: Path) -> PublicationsData:
    """Build result for the sample bibliography."""
    return load_publications(sample_bib)


def _read_events(path: Path) -> list[dict]:
    with path.open(encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


# ---------------------------------------------------------------------------
# Output content
# ---------------------------------------------------------------------------


@pytest.mark.integration
def test_year_groups_and_order(built: PublicationsData) -> None:
    """Groups are newest first, unknown year last, items by date then title."""
    assert built.ok
    assert [(g.year, [r.key for r in g.items]) for g in built.years] == EXPECTED_ORDER


@pytest.mark.integration
def test_flat_list_follows_groups(built: PublicationsData) -> None:
    """The flat list has every record once, in group order."""
    assert [r.key for r in built.all] == [key for _, keys in EXPECTED_ORDER for key in keys]


@pytest.mark.integration
def test_untitled_entry_dropped(built: PublicationsData) -> None:
    """Entries with an empty title are not published."""
    assert "untitled2020" not in {r.key for r in built.all}


@pytest.mark.integration
def test_citations(built: PublicationsData) -> None:
    """Every category renders in its own format."""
    assert {r.key: r.citation for r in built.all} == EXPECTED_CITATIONS


@pytest.mark.integration
def test_categories(built: PublicationsData) -> None:
    """Entry kinds map to their categories."""
    assert {r.key: str(r.category) for r in built.all} == EXPECTED_CATEGORIES


@pytest.mark.integration
def test_normalized_fields(built: PublicationsData) -> None:
    """Spot-check extracted fields on the sample records."""
    records = {r.key: r for r in built.all}

    garcia = records["garcia2021conf"]
    assert garcia.authors == ("García, Luis", "Müller, Anna")
    assert garcia.address == "Zürich"
    assert (garcia.year, garcia.month, garcia.day) == (2021, 7, 14)

    lee = records["lee2021preprint"]
    assert lee.arxiv == "2101.00001"
    assert lee.month_name == "January"

    smith = records["smith2020journal"]
    assert smith.doi == "10.1000/xyz123"
    assert smith.bibtex.startswith("@article{smith2020journal,author={Smith, Jane and Doe, John},")

    assert records["talk_undated"].year == 0
    assert records["edited2019"].editors_fmt == "Alice Brown"


# ---------------------------------------------------------------------------
# Published JSON
# ---------------------------------------------------------------------------


@pytest.mark.integration
def test_json_output_matches_schema(
    sample_bib: Path, tmp_path: Path, publications_schema: dict[str, Any]
) -> None:
    """The written file validates and round-trips the build result."""
    output = tmp_path / "_data" / "publications.json"
    data = run_build(BuildConfig(source_path=sample_bib, output_path=output))

    written = json.loads(output.read_text(encoding="utf-8"))
    jsonschema.validate(written, publications_schema)
    assert written == data.to_dict()
    assert written["error"] is None


@pytest.mark.integration
def test_json_output_deterministic(sample_bib: Path, tmp_path: Path) -> None:
    """Two builds of the same source write identical bytes."""
    first, second = tmp_path / "a.json", tmp_path / "b.json"
    run_build(BuildConfig(source_path=sample_bib, output_path=first))
    run_build(BuildConfig(source_path=sample_bib, output_path=second))

    assert first.read_bytes() == second.read_bytes()


@pytest.mark.integration
@pytest.mark.parametrize(
    ("content", "message"),
    [
        (None, "Missing bibliography at"),
        ("", "Bibliography is empty"),
        ("@article{broken,\n  title = {Never closed\n", "BibTeX parse failed"),
    ],
)
def test_error_results_match_schema(
    tmp_path: Path,
    publications_schema: dict[str, Any],
    content: str | None,
    message: str,
) -> None:
    """Failed builds still write a valid file carrying the error."""
    source = tmp_path / "publications.bib"
    if content is not None:
        source.write_text(content, encoding="utf-8")
    output = tmp_path / "publications.json"

    data = run_build(BuildConfig(source_path=source, output_path=output))

    written = json.loads(output.read_text(encoding="utf-8"))
    jsonschema.validate(written, publications_schema)
    assert message in written["error"]
    assert written["years"] == []
    assert written["all"] == []
    assert data.error == written["error"]


# ---------------------------------------------------------------------------
# Audit trail
# ---------------------------------------------------------------------------


@pytest.mark.integration
def test_audit_trail(sample_bib: Path, tmp_path: Path, event_schema: dict[str, Any]) -> None:
    """A build logs schema-valid events with its counters."""
    events_path = tmp_path / "events.jsonl"
    run_build(BuildConfig(source_path=sample_bib, events_path=events_path))

    events = _read_events(events_path)
    for event in events:
        jsonschema.validate(event, event_schema)

    assert len({e["run_id"] for e in events}) == 1
    assert events[0]["event"] == "build_started"

    warnings = [e for e in events if e["event"] == "parse_warning"]
    assert len(warnings) == 1
    assert "@STRING" in warnings[0]["data"]["message"]

    skipped = [e for e in events if e["event"] == "entry_skipped"]
    assert [e["key"] for e in skipped] == ["untitled2020"]

    finished = events[-1]
    assert finished["event"] == "build_finished"
    assert finished["data"] == {
        "status": "success",
        "counters": {
            "entries_parsed": 8,
            "entries_skipped": 1,
            "records": 7,
            "year_groups": 5,
            "parse_warnings": 1,
        },
    }


@pytest.mark.integration
def test_audit_trail_on_failure(tmp_path: Path, event_schema: dict[str, Any]) -> None:
    """A failed build logs an error followed by a failed status."""
    events_path = tmp_path / "events.jsonl"
    with AuditLogger(events_path, run_id="failing") as logger:
        run_build(BuildConfig(source_path=tmp_path / "missing.bib"), logger=logger)

    events = _read_events(events_path)
    for event in events:
        jsonschema.validate(event, event_schema)

    assert [e["event"] for e in events] == ["build_started", "error", "build_finished"]
    assert events[1]["data"]["exception_class"] == "MissingSource"
    assert events[2]["data"] == {"status": "failed"}
    assert events[2]["level"] == "ERROR"
