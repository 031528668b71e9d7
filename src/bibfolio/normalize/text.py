"""TeX markup to plain text conversion.

Only a bounded table of accent escapes is recognized; anything else is
left untouched apart from brace removal.
"""

import re

# Ordered (escape, replacement) table. Grouping braces are dropped before
# lookup, so the brace-wrapped spelling ``{\'a}`` resolves to the same row
# as the bare ``\'a``.
TEX_ESCAPES: tuple[tuple[str, str], ...] = (
    # acute
    ("\\'a", "á"),
    ("\\'e", "é"),
    ("\\'i", "í"),
    ("\\'o", "ó"),
    ("\\'u", "ú"),
    ("\\'A", "Á"),
    ("\\'E", "É"),
    ("\\'I", "Í"),
    ("\\'O", "Ó"),
    ("\\'U", "Ú"),
    # umlaut
    ('\\"a', "ä"),
    ('\\"e', "ë"),
    ('\\"i', "ï"),
    ('\\"o', "ö"),
    ('\\"u', "ü"),
    ('\\"A', "Ä"),
    ('\\"E', "Ë"),
    ('\\"I', "Ï"),
    ('\\"O', "Ö"),
    ('\\"U', "Ü"),
    # tilde
    ("\\~n", "ñ"),
    ("\\~N", "Ñ"),
    # misc
    ("\\&", "&"),
)

_REPLACEMENTS: dict[str, str] = dict(TEX_ESCAPES)

# A doubled backslash is matched first and kept as-is so it never pairs
# with the character after it.
TEX_ESCAPE_RE = re.compile(r"\\\\|" + "|".join(re.escape(k) for k, _ in TEX_ESCAPES))
BRACES_RE = re.compile(r"[{}]")


def tex_to_unicode(text: str | None) -> str:
    """Convert TeX accent escapes to precomposed characters.

    Parameters
    ----------
    text : str | None
        Raw field text.

    Returns
    -------
    str
        Text with known escapes replaced, braces removed and
        surrounding whitespace trimmed.

    Notes
    -----
    Idempotent: normalized text contains no braces and no recognized
    escapes, so a second pass changes nothing.
    """
    if not text:
        return ""
    text = BRACES_RE.sub("", text)
    text = TEX_ESCAPE_RE.sub(lambda m: _REPLACEMENTS.get(m.group(0), m.group(0)), text)
    return text.strip()


def strip_braces(text: str | None) -> str:
    """Remove grouping braces and trim, without escape conversion."""
    if not text:
        return ""
    return BRACES_RE.sub("", text).strip()
