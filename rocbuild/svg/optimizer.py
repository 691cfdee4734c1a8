"""SVG optimizer — facade over scour plus root-wrapper handling.

``optimize_svg`` is the opaque capability the optimize stage calls:
raw SVG in, minified SVG out, ``OptimizeError`` on failure.
``extract_inner`` slices the drawable content out of the optimized document.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from typing import Callable

from scour import scour

from rocbuild.exceptions import OptimizeError

logger = logging.getLogger(__name__)

Optimizer = Callable[[str], str]

_ROOT_OPEN_RE = re.compile(r"<svg\b[^>]*>", re.IGNORECASE)
# Leading whitespace keeps stroke-width and friends out of the match
_DIMENSION_ATTR_RE = re.compile(r'\s(?:width|height)\s*=\s*"[^"]*"')
_ROOT_CLOSE = "</svg>"


def _scour_options():
    options = scour.sanitizeOptions()
    options.strip_xml_prolog = True
    options.strip_comments = True
    options.remove_descriptive_elements = True
    options.remove_metadata = True
    options.enable_viewboxing = False
    options.strip_xml_space_attribute = True
    options.indent_type = "none"
    options.newlines = False
    options.quiet = True
    return options


def strip_root_dimensions(svg_text: str) -> str:
    """Remove width/height from the root <svg> tag only; viewBox stays."""
    match = _ROOT_OPEN_RE.search(svg_text)
    if not match:
        return svg_text
    tag = _DIMENSION_ATTR_RE.sub("", match.group(0))
    return svg_text[: match.start()] + tag + svg_text[match.end():]


def validate_single_root(svg_text: str) -> None:
    """Raise OptimizeError unless the document has exactly one <svg> root element."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise OptimizeError(f"optimized output is not a single XML element: {e}") from e
    tag = root.tag.split("}")[-1] if "}" in root.tag else root.tag
    if tag != "svg":
        raise OptimizeError(f"optimized output root is <{tag}>, expected <svg>")


def optimize_svg(raw: str) -> str:
    """Minify one SVG document, keeping viewBox and dropping width/height."""
    if not raw.strip():
        raise OptimizeError("empty document")
    try:
        optimized = scour.scourString(raw, _scour_options())
    except Exception as e:
        raise OptimizeError(str(e) or e.__class__.__name__) from e

    optimized = strip_root_dimensions(optimized.strip())
    validate_single_root(optimized)
    return optimized


def extract_inner(svg_text: str) -> str:
    """Content between the root open tag and the last </svg>, trimmed.

    Degenerate documents (no root tag, self-closing root, missing or
    misplaced close tag) give an empty string instead of raising.
    """
    match = _ROOT_OPEN_RE.search(svg_text)
    if not match or match.group(0).endswith("/>"):
        return ""
    close = svg_text.rfind(_ROOT_CLOSE)
    if close < match.end():
        return ""
    return svg_text[match.end():close].strip()
