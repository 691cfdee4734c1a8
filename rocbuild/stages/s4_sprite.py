"""S4 — SVG sprite sheet → dist/sprite.svg."""

from __future__ import annotations

import logging

from rocbuild.engine.context import BuildContext
from rocbuild.engine.registry import stage
from rocbuild.svg.serializer import serialize_sprite
from rocbuild.utils.files import write_text

logger = logging.getLogger(__name__)


@stage(id="sprite", order=40, dependencies=["svg"], description="Generate SVG sprite")
def sprite(ctx: BuildContext) -> None:
    logger.info("Stage 4: generating SVG sprite...")
    manifest = ctx.require_manifest()
    write_text(ctx.dist_dir / "sprite.svg", serialize_sprite(manifest, ctx.config.view_box))
    logger.info("✓ sprite.svg (%d symbols)", len(manifest))
