"""Derived identifiers for generated components."""

from __future__ import annotations

import re

_SEGMENT_RE = re.compile(r"(^|-)(\w)")


def to_pascal_case(name: str) -> str:
    """``arrow-left`` → ``ArrowLeft``."""
    return _SEGMENT_RE.sub(lambda m: m.group(2).upper(), name)


def export_name(name: str, style: str) -> str:
    """Root-barrel export: component name suffixed with its style (``HomeOutline``)."""
    return to_pascal_case(name) + to_pascal_case(style)


def js_number(value: float) -> str:
    """Render a number the way JavaScript source would spell it."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
