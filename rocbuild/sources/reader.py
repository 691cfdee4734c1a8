"""Source reader — one raw record per SVG file under each style directory."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from rocbuild.models.icon import IconSource

logger = logging.getLogger(__name__)

SVG_SUFFIX = ".svg"


def read_sources(src_dir: Path, styles: Iterable[str]) -> list[IconSource]:
    """Read every ``{src_dir}/{style}/*.svg`` in style order, then file-name order.

    Style directories that do not exist are skipped. File content is not
    validated here; undecodable bytes become U+FFFD and are left for the
    optimizer to reject.
    """
    sources: list[IconSource] = []
    for style in styles:
        style_dir = Path(src_dir) / style
        if not style_dir.is_dir():
            logger.debug("No source directory for style %s (%s)", style, style_dir)
            continue

        files = sorted(
            p for p in style_dir.iterdir() if p.is_file() and p.suffix == SVG_SUFFIX
        )
        for path in files:
            sources.append(
                IconSource(
                    style=style,
                    name=path.stem,
                    raw=path.read_text(encoding="utf-8", errors="replace"),
                    path=path,
                )
            )

    logger.debug("Read %d source SVGs from %s", len(sources), src_dir)
    return sources
