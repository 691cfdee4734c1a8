"""S3 — Svelte component codegen → dist/svelte/."""

from __future__ import annotations

import logging

from rocbuild.codegen import svelte
from rocbuild.codegen.emit import emit_component_set
from rocbuild.engine.context import BuildContext
from rocbuild.engine.registry import stage

logger = logging.getLogger(__name__)


@stage(id="svelte", order=30, dependencies=["svg"], description="Generate Svelte components")
def svelte_components(ctx: BuildContext) -> None:
    logger.info("Stage 3: generating Svelte components...")
    manifest = ctx.require_manifest()
    out_dir = ctx.dist_dir / "svelte"
    emit_component_set(
        manifest,
        out_dir,
        svelte.render_svelte_component,
        svelte.EXTENSION,
        svelte.DECLARATION_HEADER,
        ctx.config,
    )
    logger.info("✓ %d Svelte components → %s", len(manifest), out_dir)
