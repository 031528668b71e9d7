"""Shared data types for bibfolio.

This package contains the core dataclasses passed between the parser,
the normalizer, the renderers and the aggregator.
"""

from bibfolio.models.records import (
    PublicationRecord,
    PublicationsData,
    RawEntry,
    YearGroup,
)

__all__ = [
    "RawEntry",
    "PublicationRecord",
    "YearGroup",
    "PublicationsData",
]
