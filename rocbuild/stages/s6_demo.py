"""S6 — Demo page → dist/demo/index.html."""

from __future__ import annotations

import logging

from rocbuild.demo.page import SiteInfo, load_payloads, render_page
from rocbuild.engine.context import BuildContext
from rocbuild.engine.registry import stage
from rocbuild.utils.files import write_text

logger = logging.getLogger(__name__)


@stage(id="demo", order=60, dependencies=["ontology", "svg"], description="Generate demo page")
def demo(ctx: BuildContext) -> None:
    logger.info("Stage 6: generating demo page...")
    manifest = ctx.require_manifest()
    page = render_page(
        manifest,
        ctx.require_ontology(),
        load_payloads(ctx.demo_src_dir),
        ctx.config,
        SiteInfo(title=ctx.site_title, url=ctx.site_url, repo_url=ctx.repo_url),
    )
    out = write_text(ctx.dist_dir / "demo" / "index.html", page)
    logger.info(
        "✓ %s (%d icons × %d styles)", out, len(manifest.names()), len(ctx.config.styles)
    )
