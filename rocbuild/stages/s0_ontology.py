"""S0 — Load the icon ontology (labels, descriptions, categories, tags)."""

from __future__ import annotations

from rocbuild.engine.context import BuildContext
from rocbuild.engine.registry import stage
from rocbuild.sources.ontology import load_ontology


@stage(id="ontology", order=0, description="Load src/icons.json")
def ontology(ctx: BuildContext) -> None:
    ctx.ontology = load_ontology(ctx.ontology_path)
