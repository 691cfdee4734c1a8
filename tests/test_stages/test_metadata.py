"""Tests for metadata.json generation."""

import json

from tests.conftest import ONTOLOGY

from rocbuild.engine.config import PipelineConfig
from rocbuild.models.ontology import Ontology
from rocbuild.stages.s5_metadata import build_metadata, render_metadata


def test_counts_variants_and_unique_names(sample_manifest):
    doc = build_metadata(sample_manifest, Ontology.model_validate(ONTOLOGY), PipelineConfig())
    assert doc.total_count == 3
    assert [i.name for i in doc.icons] == ["bell", "home"]
    assert doc.styles == ["outline", "solid", "duotone", "sharp"]


def test_entries_merge_ontology_and_styles(sample_manifest):
    doc = build_metadata(sample_manifest, Ontology.model_validate(ONTOLOGY), PipelineConfig())
    bell, home = doc.icons
    assert home.styles == ["outline", "solid"]
    assert home.label == "Home"
    assert home.tags == ["house", "start"]
    assert bell.label == "Bell"
    assert bell.category == "Alerts"
    assert bell.description == ""


def test_rendered_json_shape(sample_manifest):
    text = render_metadata(build_metadata(sample_manifest, Ontology(), PipelineConfig()))
    assert text.endswith("}\n")
    data = json.loads(text)
    assert list(data) == ["icons", "categories", "totalCount", "styles"]
    assert list(data["icons"][0]) == ["name", "label", "description", "category", "tags", "styles"]
    assert data["icons"][1] == {
        "name": "home",
        "label": "Home",
        "description": "",
        "category": "Uncategorized",
        "tags": [],
        "styles": ["outline", "solid"],
    }


def test_non_ascii_kept_verbatim(sample_manifest):
    ontology = Ontology.model_validate({"icons": {"home": {"label": "Maison – accueil"}}})
    assert "Maison – accueil" in render_metadata(build_metadata(sample_manifest, ontology, PipelineConfig()))
