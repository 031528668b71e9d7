"""Tests for the public API module."""

import json
from pathlib import Path

import pytest

from bibfolio import (
    ParseError,
    PublicationsData,
    build_publications,
    load_publications,
    parse_file,
    write_json,
)
from bibfolio.engine import BuildConfig, run_build


@pytest.fixture
def sample_bib_file(fixtures_dir: Path) -> Path:
    """Path to sample BibTeX file."""
    return fixtures_dir / "publications.bib"


@pytest.fixture
def broken_bib_file(tmp_path: Path) -> Path:
    """A file with an unclosed entry."""
    path = tmp_path / "broken.bib"
    path.write_text("@misc{ok, title = {T}}\n@article{broken,\n title = {x\n", encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# parse_file
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_parse_file_returns_entries(sample_bib_file: Path) -> None:
    """Test parse_file returns raw entries in source order."""
    entries = parse_file(sample_bib_file)

    assert entries[0].key == "smith2020journal"
    assert entries[-1].key == "untitled2020"
    assert len(entries) == 8


@pytest.mark.unit
def test_parse_file_accepts_str(sample_bib_file: Path) -> None:
    """Test parse_file accepts string paths."""
    assert len(parse_file(str(sample_bib_file))) == 8


@pytest.mark.unit
def test_parse_file_not_found(tmp_path: Path) -> None:
    """Test parse_file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        parse_file(tmp_path / "missing.bib")


@pytest.mark.unit
def test_parse_file_strict_raises(broken_bib_file: Path) -> None:
    """Test strict mode raises ParseError with the file attached."""
    with pytest.raises(ParseError, match="Unclosed entry") as exc_info:
        parse_file(broken_bib_file)

    assert exc_info.value.file == str(broken_bib_file)


@pytest.mark.unit
def test_parse_file_lenient(broken_bib_file: Path) -> None:
    """Test non-strict mode returns the entries that parsed."""
    entries = parse_file(broken_bib_file, strict=False)

    assert [e.key for e in entries] == ["ok"]


# ---------------------------------------------------------------------------
# build_publications
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "   \n\t"])
def test_build_publications_empty_text(text: str) -> None:
    """Test empty text yields an error-flagged result."""
    data = build_publications(text)

    assert not data.ok
    assert data.error == "Bibliography source is empty"
    assert data.years == ()
    assert data.all == ()


@pytest.mark.unit
def test_build_publications_parse_error() -> None:
    """Test parser errors fail the whole build."""
    data = build_publications("@misc{ok, title = {T}}\n@misc{bad,\n")

    assert not data.ok
    assert data.error.startswith("BibTeX parse failed: Line 2: Unclosed entry @misc")
    assert data.all == ()


@pytest.mark.unit
def test_build_publications_no_entries() -> None:
    """Test text without entries builds an empty, successful result."""
    data = build_publications("% only a comment\n")

    assert data.ok
    assert data.years == ()
    assert data.all == ()


@pytest.mark.unit
def test_build_publications_idempotent() -> None:
    """Test identical input gives identical output."""
    text = "@article{a, title = {A}, year = {2020}}\n@misc{b, title = {B}}\n"

    assert build_publications(text) == build_publications(text)


# ---------------------------------------------------------------------------
# load_publications
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_load_publications_missing_file(tmp_path: Path) -> None:
    """Test a missing file is reported, not raised."""
    path = tmp_path / "missing.bib"
    data = load_publications(path)

    assert data.error == f"Missing bibliography at: {path}"


@pytest.mark.unit
def test_load_publications_empty_file(tmp_path: Path) -> None:
    """Test an empty file is reported, not raised."""
    path = tmp_path / "empty.bib"
    path.write_text("\n\n", encoding="utf-8")
    data = load_publications(path)

    assert data.error == f"Bibliography is empty: {path}"


@pytest.mark.unit
def test_load_publications_unreadable_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test an OS error while reading is reported, not raised."""
    path = tmp_path / "locked.bib"
    path.write_text("@misc{k, title = {T}}", encoding="utf-8")

    def _deny(self: Path) -> bytes:
        raise PermissionError("Permission denied")

    monkeypatch.setattr(Path, "read_bytes", _deny)
    data = load_publications(path)

    assert not data.ok
    assert data.error == f"Cannot read bibliography at: {path} (Permission denied)"
    assert data.all == ()


@pytest.mark.unit
def test_bad_month_degrades_single_record() -> None:
    """Test a malformed month affects only its own record."""
    data = build_publications(
        "@article{a,title={Good},year={2020}}\n@article{b,title={Other},year={2021},month={²}}"
    )

    assert data.ok
    assert [r.key for r in data.all] == ["b", "a"]
    assert (data.all[0].month, data.all[0].month_name) == (0, "²")


@pytest.mark.unit
def test_load_publications_ok(sample_bib_file: Path) -> None:
    """Test the sample file builds successfully."""
    data = load_publications(sample_bib_file)

    assert data.ok
    assert len(data.all) == 7


# ---------------------------------------------------------------------------
# write_json / run_build
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_write_json_creates_dirs(tmp_path: Path) -> None:
    """Test write_json creates parent directories and writes UTF-8."""
    path = tmp_path / "a" / "b" / "out.json"
    write_json(build_publications("@misc{k, title = {Z{\\\"u}rich}}"), path)

    text = path.read_text(encoding="utf-8")
    assert "Zürich" in text
    assert json.loads(text)["all"][0]["title"] == "Zürich"


@pytest.mark.unit
def test_write_json_error_result(tmp_path: Path) -> None:
    """Test an error result serializes with empty collections."""
    path = tmp_path / "out.json"
    write_json(PublicationsData.failed("boom"), path)

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "error": "boom",
        "years": [],
        "all": [],
    }


@pytest.mark.unit
def test_run_build_writes_output_even_on_error(tmp_path: Path) -> None:
    """Test the error marker reaches the output file."""
    output = tmp_path / "publications.json"
    config = BuildConfig(source_path=tmp_path / "missing.bib", output_path=output)

    data = run_build(config)

    assert not data.ok
    assert json.loads(output.read_text(encoding="utf-8"))["error"] == data.error


@pytest.mark.unit
def test_run_build_without_output(sample_bib_file: Path) -> None:
    """Test run_build returns data without writing anything."""
    data = run_build(BuildConfig(source_path=sample_bib_file))

    assert data.ok
    assert [g.year for g in data.years] == [2021, 2020, 2019, 2018, 0]
