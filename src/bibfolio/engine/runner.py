"""End-to-end publications build runner.

Chains parsing, record construction and aggregation into a single
deterministic pass:

    Stage 1: Parse BibTeX text into raw entries
    Stage 2: Build one normalized record per entry (empty titles dropped)
    Stage 3: Group by year and sort

Input failures (missing, empty or unparseable source) never raise; they
are reported through ``PublicationsData.error``.
"""

import traceback
from pathlib import Path

from bibfolio.audit.logger import AuditLogger
from bibfolio.engine.aggregate import aggregate
from bibfolio.engine.config import BuildConfig
from bibfolio.engine.output import write_json
from bibfolio.models import PublicationsData
from bibfolio.normalize import build_records
from bibfolio.parse import decode_source, parse_bibtex


def _fail(message: str, logger: AuditLogger | None, code: str) -> PublicationsData:
    if logger:
        logger.error(code, message)
        logger.build_finished("failed")
    return PublicationsData.failed(message)


def build_publications(
    text: str,
    *,
    compact_bibtex: bool = True,
    logger: AuditLogger | None = None,
) -> PublicationsData:
    """Build the publications data structure from BibTeX text.

    Parameters
    ----------
    text : str
        Complete bibliography database.
    compact_bibtex : bool, optional
        Serialize each record's ``bibtex`` field on a single line,
        by default True.
    logger : AuditLogger | None, optional
        Audit logger for tracking. If None, no logging.

    Returns
    -------
    PublicationsData
        Year groups and flat record list, or an error-flagged result
        with both empty.

    Examples
    --------
        >>> from bibfolio import build_publications
        >>> data = build_publications(open("publications.bib").read())
        >>> if data.ok:
        ...     for group in data.years:
        ...         print(group.year, len(group.items))
    """
    if logger:
        logger.set_stage("parse")

    if not text or not text.strip():
        return _fail("Bibliography source is empty", logger, "EmptySource")

    try:
        entries, warnings, errors = parse_bibtex(text)
        if logger:
            for warning in warnings:
                logger.parse_warning(warning)
        if errors:
            return _fail(f"BibTeX parse failed: {'; '.join(errors)}", logger, "ParseError")

        if logger:
            logger.set_stage("normalize")
        records, skipped = build_records(entries, compact_bibtex=compact_bibtex)
        if logger:
            for entry in skipped:
                logger.entry_skipped(entry.key, "empty_title")

        if logger:
            logger.set_stage("aggregate")
        years, flat = aggregate(records)

    except Exception as e:
        error_msg = f"{type(e).__name__}: {e}"
        if logger:
            logger.error(type(e).__name__, str(e), traceback=traceback.format_exc())
            logger.build_finished("failed")
        return PublicationsData.failed(error_msg)

    if logger:
        logger.build_finished(
            "success",
            counters={
                "entries_parsed": len(entries),
                "entries_skipped": len(skipped),
                "records": len(flat),
                "year_groups": len(years),
                "parse_warnings": len(warnings),
            },
        )

    return PublicationsData(years=years, all=flat)


def load_publications(
    path: Path | str,
    *,
    compact_bibtex: bool = True,
    logger: AuditLogger | None = None,
) -> PublicationsData:
    """Read a BibTeX file and build the publications data structure.

    Parameters
    ----------
    path : Path | str
        BibTeX file.
    compact_bibtex : bool, optional
        Passed through to ``build_publications``.
    logger : AuditLogger | None, optional
        Audit logger for tracking. If None, no logging.

    Returns
    -------
    PublicationsData
        Build result; error-flagged if the file is missing, unreadable
        or empty.
    """
    file_path = Path(path)

    if not file_path.is_file():
        return _fail(f"Missing bibliography at: {file_path}", logger, "MissingSource")

    try:
        raw = file_path.read_bytes()
    except OSError as e:
        return _fail(f"Cannot read bibliography at: {file_path} ({e})", logger, type(e).__name__)

    text = decode_source(raw)
    if not text.strip():
        return _fail(f"Bibliography is empty: {file_path}", logger, "EmptySource")

    return build_publications(text, compact_bibtex=compact_bibtex, logger=logger)


def _run(config: BuildConfig, logger: AuditLogger | None) -> PublicationsData:
    if logger:
        logger.build_started(str(config.source_path), parameters=config.to_dict())

    data = load_publications(
        config.source_path, compact_bibtex=config.compact_bibtex, logger=logger
    )

    if config.output_path is not None:
        write_json(data, config.output_path, indent=config.indent)

    return data


def run_build(
    config: BuildConfig | None = None,
    logger: AuditLogger | None = None,
) -> PublicationsData:
    """Run one publications build from configuration.

    Parameters
    ----------
    config : BuildConfig | None, optional
        Build configuration. If None, uses defaults.
    logger : AuditLogger | None, optional
        Audit logger. If None and ``config.events_path`` is set, a logger
        writing to that path is opened for the duration of the build.

    Returns
    -------
    PublicationsData
        Build result. The JSON file is written even for error-flagged
        results so consumers always find the ``error`` marker.

    Examples
    --------
        >>> from bibfolio.engine import BuildConfig, run_build
        >>> config = BuildConfig(source_path="refs.bib", output_path="out/publications.json")
        >>> data = run_build(config)
    """
    if config is None:
        config = BuildConfig()

    if logger is None and config.events_path is not None:
        with AuditLogger(config.events_path) as owned_logger:
            return _run(config, owned_logger)

    return _run(config, logger)
