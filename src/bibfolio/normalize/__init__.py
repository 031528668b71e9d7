"""Normalization of raw entries into publication records.

Main entry points:
- build_record: Compose one record from a raw entry
- tex_to_unicode: Convert TeX accent escapes to plain text
"""

from bibfolio.normalize.normalizer import build_record, build_records
from bibfolio.normalize.text import strip_braces, tex_to_unicode

__all__ = [
    "build_record",
    "build_records",
    "strip_braces",
    "tex_to_unicode",
]
