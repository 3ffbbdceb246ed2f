"""Text predicates used by the snapshot validator.

- *empty*    : nothing but whitespace and invisible format characters.
- *single line*: no ``"\\n"``, ``"\\r"``, line or paragraph separator.
- *safe*     : no control characters except tab, no bidi controls, no line
  breaks, no surrogates, no private-use or unassigned code points.
- *valid URL*: a single-line absolute URL with a scheme, as parsed by
  pydantic's :class:`~pydantic.AnyUrl`.
"""

from __future__ import annotations

import unicodedata

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

_LINE_BREAKS = frozenset("\n\r")
_LINE_BREAK_CATEGORIES = frozenset({"Zl", "Zp"})
_ALLOWED_CONTROLS = frozenset("\t")
_UNSAFE_CATEGORIES = frozenset({"Cc", "Cs", "Co", "Cn"})
# Bidirectional embeddings, overrides and isolates can reorder what is displayed.
_BIDI_CONTROLS = frozenset(
    "\u061c\u200e\u200f\u202a\u202b\u202c\u202d\u202e\u2066\u2067\u2068\u2069"
)

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def _is_line_break(ch: str) -> bool:
    return ch in _LINE_BREAKS or unicodedata.category(ch) in _LINE_BREAK_CATEGORIES


def is_empty(value: str) -> bool:
    """Return True if `value` holds no visible content.

    Whitespace and invisible format characters (e.g. zero-width space) do
    not count as content.
    """
    return all(ch.isspace() or unicodedata.category(ch) == "Cf" for ch in value)


def is_single_line(value: str) -> bool:
    return not any(_is_line_break(ch) for ch in value)


def is_safe(value: str) -> bool:
    """Return True if every character of `value` is printable or a tab.

    Line breaks are never safe; callers that want a dedicated message check
    :func:`is_single_line` first.
    """
    for ch in value:
        if ch in _ALLOWED_CONTROLS:
            continue
        if ch in _BIDI_CONTROLS or _is_line_break(ch):
            return False
        if unicodedata.category(ch) in _UNSAFE_CATEGORIES:
            return False
    return True


def is_valid_url(value: str) -> bool:
    """Return True if `value` parses as an absolute URL."""
    if not is_single_line(value) or value != value.strip():
        return False
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        return False
    return True


__all__ = ["is_empty", "is_single_line", "is_safe", "is_valid_url"]
