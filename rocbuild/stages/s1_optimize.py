"""S1 — Optimize every source SVG and build the manifest.

A failure on one icon is logged and the icon left out; it never stops the
build. Writes dist/svg/{style}/{name}.svg.
"""

from __future__ import annotations

import logging

from rocbuild.engine.context import BuildContext
from rocbuild.engine.registry import stage
from rocbuild.exceptions import OptimizeError
from rocbuild.models.icon import IconVariant, Manifest
from rocbuild.sources.reader import read_sources
from rocbuild.svg.optimizer import extract_inner
from rocbuild.utils.files import write_text

logger = logging.getLogger(__name__)


@stage(id="svg", order=10, description="Optimize SVGs with scour")
def optimize(ctx: BuildContext) -> None:
    logger.info("Stage 1: optimizing SVGs...")
    manifest = Manifest()
    out_root = ctx.dist_dir / "svg"

    for source in read_sources(ctx.src_dir, ctx.config.styles):
        key = f"{source.style}/{source.name}"
        try:
            optimized = ctx.optimizer(source.raw)
        except OptimizeError as e:
            logger.warning("⚠ skipping %s.svg: %s", key, e.reason)
            ctx.errors[key] = e.reason
            continue

        inner = extract_inner(optimized)
        if not inner:
            logger.warning("⚠ %s.svg has no drawable content", key)

        write_text(out_root / source.style / f"{source.name}.svg", optimized)
        manifest.add(
            IconVariant(
                style=source.style,
                name=source.name,
                raw=source.raw,
                optimized=optimized,
                inner=inner,
            )
        )

    ctx.manifest = manifest
    logger.info("✓ %d SVGs optimized → %s", len(manifest), out_root)
