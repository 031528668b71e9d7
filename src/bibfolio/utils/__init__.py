"""Common utility functions for bibfolio."""

from bibfolio.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
