"""Attribute-name translation tables for embedding SVG markup in components.

Each table is an ordered list of (pattern, replacement) rules applied in
sequence. Patterns require a preceding whitespace so attribute values are
never touched.
"""

from __future__ import annotations

import re

Rule = tuple[re.Pattern[str], str]

_STROKE_WIDTH_RE = re.compile(r'(?<=\s)stroke-width\s*=\s*"([^"]*)"')


def _rename(attr: str, target: str) -> Rule:
    return (re.compile(rf"(?<=\s){re.escape(attr)}(?=\s*=)"), target)


# Hyphenated / namespaced SVG attributes → JSX property names
JSX_RENAMES: list[Rule] = [
    _rename("stroke-linecap", "strokeLinecap"),
    _rename("stroke-linejoin", "strokeLinejoin"),
    _rename("stroke-miterlimit", "strokeMiterlimit"),
    _rename("stroke-dasharray", "strokeDasharray"),
    _rename("stroke-dashoffset", "strokeDashoffset"),
    _rename("stroke-opacity", "strokeOpacity"),
    _rename("fill-rule", "fillRule"),
    _rename("fill-opacity", "fillOpacity"),
    _rename("clip-rule", "clipRule"),
    _rename("clip-path", "clipPath"),
    _rename("stop-color", "stopColor"),
    _rename("stop-opacity", "stopOpacity"),
    _rename("font-family", "fontFamily"),
    _rename("font-size", "fontSize"),
    _rename("font-weight", "fontWeight"),
    _rename("text-anchor", "textAnchor"),
    _rename("dominant-baseline", "dominantBaseline"),
    _rename("vector-effect", "vectorEffect"),
    _rename("xlink:href", "xlinkHref"),
    _rename("xml:space", "xmlSpace"),
    _rename("class", "className"),
]

# Svelte templates take native SVG attribute names
SVELTE_RENAMES: list[Rule] = []


def apply_rules(markup: str, rules: list[Rule]) -> str:
    for pattern, replacement in rules:
        markup = pattern.sub(replacement, markup)
    return markup


def to_jsx(inner: str, stroked: bool) -> str:
    """JSX-ready inner markup; stroke widths become ``{sw}`` for stroked styles."""
    if stroked:
        jsx = _STROKE_WIDTH_RE.sub("strokeWidth={sw}", inner)
    else:
        jsx = _STROKE_WIDTH_RE.sub(r'strokeWidth="\1"', inner)
    return apply_rules(jsx, JSX_RENAMES)


def to_svelte(inner: str, stroked: bool) -> str:
    """Svelte-ready inner markup; stroke widths become ``{sw}`` for stroked styles."""
    markup = inner
    if stroked:
        markup = _STROKE_WIDTH_RE.sub("stroke-width={sw}", markup)
    return apply_rules(markup, SVELTE_RENAMES)
