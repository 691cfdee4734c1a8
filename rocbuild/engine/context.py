"""BuildContext — the single mutable state object flowing through all stages.

Inputs (paths, constants, the optimize capability) are set up front; the
ontology and manifest are filled in by the stages that produce them and read
by every stage after.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rocbuild.engine.config import PipelineConfig
from rocbuild.models.icon import Manifest
from rocbuild.models.ontology import Ontology
from rocbuild.svg.optimizer import Optimizer, optimize_svg


@dataclass
class BuildContext:
    """Shared state for one pipeline run."""

    src_dir: Path = Path("src/svg")
    ontology_path: Path = Path("src/icons.json")
    dist_dir: Path = Path("dist")
    demo_src_dir: Path = Path("demo/src")

    config: PipelineConfig = field(default_factory=PipelineConfig)
    optimizer: Optimizer = optimize_svg

    # Demo page chrome
    site_title: str = "Roc"
    site_url: str = ""
    repo_url: str = ""

    # Produced by stages
    ontology: Ontology | None = None
    manifest: Manifest | None = None

    # Per-icon failures keyed by "{style}/{name}"
    errors: dict[str, str] = field(default_factory=dict)
    completed_stages: list[str] = field(default_factory=list)

    @classmethod
    def from_settings(cls, settings, config: PipelineConfig | None = None) -> BuildContext:
        return cls(
            src_dir=settings.src_dir,
            ontology_path=settings.ontology_path,
            dist_dir=settings.dist_dir,
            demo_src_dir=settings.demo_src_dir,
            config=config or PipelineConfig(),
            site_title=settings.site_title,
            site_url=settings.site_url,
            repo_url=settings.repo_url,
        )

    def require_manifest(self) -> Manifest:
        if self.manifest is None:
            raise RuntimeError("manifest not built; the svg stage must run first")
        return self.manifest

    def require_ontology(self) -> Ontology:
        if self.ontology is None:
            raise RuntimeError("ontology not loaded; the ontology stage must run first")
        return self.ontology
