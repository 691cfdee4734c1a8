"""S5 — metadata.json: one entry per icon name merged with the ontology."""

from __future__ import annotations

import json
import logging

from rocbuild.engine.config import PipelineConfig
from rocbuild.engine.context import BuildContext
from rocbuild.engine.registry import COMPANION, stage
from rocbuild.models.icon import Manifest
from rocbuild.models.metadata import IconMetadata, MetadataDocument
from rocbuild.models.ontology import Ontology
from rocbuild.utils.files import write_text

logger = logging.getLogger(__name__)


def build_metadata(manifest: Manifest, ontology: Ontology, config: PipelineConfig) -> MetadataDocument:
    icons = [
        IconMetadata(name=name, styles=styles, **ontology.describe(name).model_dump())
        for name, styles in manifest.styles_by_name().items()
    ]
    return MetadataDocument(
        icons=sorted(icons, key=lambda i: i.name),
        categories=list(ontology.categories),
        total_count=len(manifest),
        styles=list(config.styles),
    )


def render_metadata(document: MetadataDocument) -> str:
    return json.dumps(document.model_dump(by_alias=True), indent=2, ensure_ascii=False) + "\n"


@stage(
    id="metadata",
    order=50,
    dependencies=["ontology", "svg"],
    tags={COMPANION},
    description="Generate metadata.json",
)
def metadata(ctx: BuildContext) -> None:
    logger.info("Stage 5: generating metadata...")
    document = build_metadata(ctx.require_manifest(), ctx.require_ontology(), ctx.config)
    write_text(ctx.dist_dir / "metadata.json", render_metadata(document))
    logger.info("✓ metadata.json (%d icons, %d variants)", len(document.icons), document.total_count)
