"""String coercion driven by a field's primitive kind.

``coerce`` never raises.  A string that cannot be read as the declared
kind is returned unchanged so the validator reports the mismatch.
"""

from __future__ import annotations

import math
from typing import Any

from envshape.domain.introspect import classify
from envshape.domain.nodes import PrimitiveKind

TRUE_LITERALS = frozenset({"true", "1", "yes"})
FALSE_LITERALS = frozenset({"false", "0", "no", ""})
_PREFIXED = ("0x", "0o", "0b")


def parse_number(raw: str) -> int | float | None:
    """Parse a numeric literal; ``None`` on failure.

    Blank text reads as ``0``.  Integer literals, including ``0x``/``0o``/
    ``0b`` prefixed ones, stay ``int``.  NaN and non-ASCII digits are
    failures.
    """
    text = raw.strip()
    if not text:
        return 0
    if not text.isascii():
        return None
    try:
        return int(text)
    except ValueError:
        pass
    if text[:2].lower() in _PREFIXED:
        try:
            return int(text, 0)
        except ValueError:
            return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def parse_bool(raw: str) -> bool | None:
    """Map the recognized boolean literals; ``None`` for anything else."""
    lowered = raw.strip().lower()
    if lowered in TRUE_LITERALS:
        return True
    if lowered in FALSE_LITERALS:
        return False
    return None


def coerce(node: Any, raw: Any) -> Any:
    """Coerce *raw* for the field described by *node*.

    Returns ``None`` when *raw* is absent, meaning the field is omitted
    from the candidate object.  Values that are already not strings are
    returned unchanged.
    """
    if raw is None:
        return None
    if not isinstance(raw, str):
        return raw

    kind = classify(node)

    if kind is PrimitiveKind.NUMBER:
        number = parse_number(raw)
        return raw if number is None else number

    if kind is PrimitiveKind.BOOLEAN:
        flag = parse_bool(raw)
        return raw if flag is None else flag

    return raw
