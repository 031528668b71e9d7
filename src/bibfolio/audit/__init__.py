"""Audit logging subsystem for bibfolio.

Main Components
---------------
- AuditLogger: JSONL event logger
- generate_run_id: Run identifier factory
"""

from bibfolio.audit.helpers import generate_run_id
from bibfolio.audit.logger import AuditLogger
from bibfolio.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
]
