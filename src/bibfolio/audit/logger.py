"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from bibfolio.audit.helpers import generate_run_id
from bibfolio.audit.models import LogEvent
from bibfolio.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    current_stage : str | None
        Current stage name for context.
    """

    def __init__(self, log_path: Path, run_id: str | None = None) -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        log_path : Path
            Path to JSONL log file.
        run_id : str | None, optional
            Run identifier; generated when omitted.
        """
        self.run_id = run_id or generate_run_id()
        self.log_path = Path(log_path)
        self.current_stage: str | None = None

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def set_stage(self, stage: str | None) -> None:
        """Set current stage context."""
        self.current_stage = stage

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        stage: str | None = None,
        key: str | None = None,
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "build_started").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        stage : str | None, optional
            Stage identifier, uses current_stage if not provided.
        key : str | None, optional
            Citation key if event is entry-specific.
        """
        if data is None:
            data = {}

        if stage is None:
            stage = self.current_stage

        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data,
            stage=stage,
            key=key,
        )

        self._write_event(log_event)

    def _write_event(self, event: LogEvent) -> None:
        json.dump(asdict(event), self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def build_started(self, source: str, parameters: dict[str, Any] | None = None) -> None:
        """Log build_started event.

        Parameters
        ----------
        source : str
            Description of the bibliography source (path or "<text>").
        parameters : dict[str, Any] | None, optional
            Configuration snapshot.
        """
        self.event("build_started", data={"source": source, "parameters": parameters or {}})

    def build_finished(self, status: str, counters: dict[str, int] | None = None) -> None:
        """Log build_finished event.

        Parameters
        ----------
        status : str
            "success" or "failed".
        counters : dict[str, int] | None, optional
            Build counters (entries parsed, records kept, ...).
        """
        data: dict[str, Any] = {"status": status}
        if counters:
            data["counters"] = counters
        self.event("build_finished", data=data, level="INFO" if status == "success" else "ERROR")

    def parse_warning(self, message: str) -> None:
        """Log a parser warning."""
        self.event("parse_warning", data={"message": message}, level="WARN", stage="parse")

    def entry_skipped(self, key: str, reason: str) -> None:
        """Log an entry dropped from the output.

        Parameters
        ----------
        key : str
            Citation key of the entry.
        reason : str
            Reason code (e.g., "empty_title").
        """
        self.event("entry_skipped", data={"reason": reason}, level="WARN", key=key)

    def error(
        self,
        exception_class: str,
        message: str,
        stage: str | None = None,
        traceback: str | None = None,
    ) -> None:
        """Log error event.

        Parameters
        ----------
        exception_class : str
            Exception class name, or a short failure code.
        message : str
            Error message.
        stage : str | None, optional
            Stage where error occurred.
        traceback : str | None, optional
            Stack trace.
        """
        data: dict[str, Any] = {
            "exception_class": exception_class,
            "message": message,
        }
        if traceback is not None:
            data["traceback"] = traceback

        self.event("error", data=data, stage=stage, level="ERROR")
