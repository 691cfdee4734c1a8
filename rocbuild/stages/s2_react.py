"""S2 — React component codegen → dist/react/."""

from __future__ import annotations

import logging

from rocbuild.codegen import react
from rocbuild.codegen.emit import emit_component_set
from rocbuild.engine.context import BuildContext
from rocbuild.engine.registry import stage

logger = logging.getLogger(__name__)


@stage(id="react", order=20, dependencies=["svg"], description="Generate React components")
def react_components(ctx: BuildContext) -> None:
    logger.info("Stage 2: generating React components...")
    manifest = ctx.require_manifest()
    out_dir = ctx.dist_dir / "react"
    emit_component_set(
        manifest,
        out_dir,
        react.render_react_component,
        react.EXTENSION,
        react.DECLARATION_HEADER,
        ctx.config,
    )
    logger.info("✓ %d React components → %s", len(manifest), out_dir)
