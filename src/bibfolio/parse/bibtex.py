"""BibTeX format parser.

Entries: @<entrytype>{citekey, field = {value}, ...}
Entries may start anywhere in the text, several to a line.
Special entries (@STRING, @PREAMBLE, @COMMENT) are skipped.
Reference: http://www.bibtex.org/Format/

Field values are returned raw: outer delimiters are removed but inner
braces and backslash escapes are kept for the normalizer.
"""

import re

from bibfolio.models import RawEntry
from bibfolio.parse.base import ParseResult, normalize_line_endings

SPECIAL_ENTRY_TYPES = frozenset({"string", "preamble", "comment"})

AT_LINE_PATTERN = re.compile(r"^[ \t]*@", re.MULTILINE)
ENTRY_START_PATTERN = re.compile(r"[ \t]*@(\w+)\s*\{")
FIELD_NAME_PATTERN = re.compile(r"([\w\-:.]+)\s*=\s*")


def parse_bibtex(text: str) -> ParseResult:
    """Parse BibTeX text into raw entries.

    Parameters
    ----------
    text : str
        Complete bibliography database as text.

    Returns
    -------
    ParseResult
        Entries, warnings, and errors.
    """
    warnings: list[str] = []
    errors: list[str] = []
    entries: list[RawEntry] = []

    content = normalize_line_endings(text)

    pos = 0
    while True:
        start = content.find("@", pos)
        if start == -1:
            break

        line_no = _line_number(content, start)

        match = ENTRY_START_PATTERN.match(content, start)
        if not match:
            # Stray "@" in free text is ignored; only a line-leading one warns.
            line_start = content.rfind("\n", 0, start) + 1
            at_line = AT_LINE_PATTERN.match(content, line_start)
            if at_line and at_line.end() - 1 == start:
                line = content[start:].split("\n", 1)[0]
                warnings.append(f"Line {line_no}: Malformed entry start: {line.strip()[:50]}")
            pos = start + 1
            continue

        entry_type = match.group(1)
        open_brace = match.end() - 1
        closing = _find_closing_brace(content, open_brace)

        if entry_type.lower() in SPECIAL_ENTRY_TYPES:
            end_line = _line_number(content, closing) if closing != -1 else line_no
            warnings.append(
                f"Line {line_no}: Skipping @{entry_type.upper()} entry (lines {line_no}-{end_line})"
            )
            pos = closing + 1 if closing != -1 else match.end()
            continue

        if closing == -1:
            errors.append(f"Line {line_no}: Unclosed entry @{entry_type}")
            pos = match.end()
            continue

        body = content[open_brace + 1 : closing]
        entries.append(_build_entry(entry_type, body))
        pos = closing + 1

    return ParseResult(entries, warnings, errors)


def _line_number(content: str, index: int) -> int:
    return content.count("\n", 0, index) + 1


def _find_closing_brace(content: str, open_index: int) -> int:
    # Braces must balance inside quoted values too, so quotes are ignored.
    brace_depth = 0
    escape_next = False

    for i in range(open_index, len(content)):
        char = content[i]
        if escape_next:
            escape_next = False
            continue

        if char == "\\":
            escape_next = True
            continue

        if char == "{":
            brace_depth += 1
        elif char == "}":
            brace_depth -= 1
            if brace_depth == 0:
                return i

    return -1


def _build_entry(entry_type: str, body: str) -> RawEntry:
    key, sep, rest = body.partition(",")
    if not sep:
        return RawEntry(key=key.strip(), kind=entry_type, fields={})

    fields: dict[str, str] = {}
    for field_name, value in _parse_fields(rest):
        # First occurrence wins.
        fields.setdefault(field_name, value)

    return RawEntry(key=key.strip(), kind=entry_type, fields=fields)


def _parse_fields(content: str) -> list[tuple[str, str]]:
    fields: list[tuple[str, str]] = []

    i = 0
    while i < len(content):
        # Skip whitespace and separators
        while i < len(content) and (content[i].isspace() or content[i] == ","):
            i += 1
        if i >= len(content):
            break

        field_match = FIELD_NAME_PATTERN.match(content, i)
        if not field_match:
            i += 1
            continue

        field_name = field_match.group(1).lower()
        i = field_match.end()
        if i >= len(content):
            break

        if content[i] == "{":
            value, i = _parse_braced_value(content, i)
        elif content[i] == '"':
            value, i = _parse_quoted_value(content, i)
        else:
            value, i = _parse_bare_value(content, i)

        fields.append((field_name, value.strip()))

    return fields


def _parse_braced_value(content: str, start: int) -> tuple[str, int]:
    brace_depth = 0
    value_chars: list[str] = []
    i = start

    while i < len(content):
        char = content[i]
        if char == "\\" and i + 1 < len(content):
            if brace_depth >= 1:
                value_chars.append(char)
                value_chars.append(content[i + 1])
            i += 2
            continue
        if char == "{":
            brace_depth += 1
            if brace_depth > 1:
                value_chars.append(char)
        elif char == "}":
            brace_depth -= 1
            if brace_depth == 0:
                return "".join(value_chars), i + 1
            value_chars.append(char)
        else:
            value_chars.append(char)
        i += 1

    return "".join(value_chars), i


def _parse_quoted_value(content: str, start: int) -> tuple[str, int]:
    i = start + 1  # skip opening quote
    value_chars: list[str] = []
    brace_depth = 0

    while i < len(content):
        char = content[i]
        if char == "\\" and i + 1 < len(content):
            value_chars.append(char)
            value_chars.append(content[i + 1])
            i += 2
            continue
        if char == "{":
            brace_depth += 1
        elif char == "}":
            brace_depth -= 1
        elif char == '"' and brace_depth <= 0:
            return "".join(value_chars), i + 1
        value_chars.append(char)
        i += 1

    return "".join(value_chars), i


def _parse_bare_value(content: str, start: int) -> tuple[str, int]:
    value_chars: list[str] = []
    i = start

    while i < len(content) and content[i] not in ",\n}":
        if content[i] == "#":
            break
        value_chars.append(content[i])
        i += 1

    return "".join(value_chars).strip(), i
