"""Tests for ontology loading and per-name resolution."""

import json
import logging

import pytest

from tests.conftest import ONTOLOGY

from rocbuild.exceptions import OntologyError
from rocbuild.models.ontology import UNCATEGORIZED, Ontology, OntologyEntry
from rocbuild.sources.ontology import load_ontology


def test_loads_categories_and_entries(tmp_path):
    path = tmp_path / "icons.json"
    path.write_text(json.dumps(ONTOLOGY))
    ontology = load_ontology(path)
    assert ontology.categories == ["Navigation", "Alerts"]
    assert ontology.icons["home"].label == "Home"
    assert ontology.icons["bell"].tags == ["notification"]


def test_absent_file_gives_empty_ontology(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        ontology = load_ontology(tmp_path / "icons.json")
    assert ontology.categories == []
    assert ontology.icons == {}
    assert "using empty ontology" in caplog.text


def test_invalid_json_is_fatal(tmp_path):
    path = tmp_path / "icons.json"
    path.write_text("{ not json")
    with pytest.raises(OntologyError):
        load_ontology(path)


def test_undecodable_file_is_fatal(tmp_path):
    path = tmp_path / "icons.json"
    path.write_bytes(b'{"categories": ["\xff\xfe"]}')
    with pytest.raises(OntologyError):
        load_ontology(path)


def test_wrong_shape_is_fatal(tmp_path):
    path = tmp_path / "icons.json"
    path.write_text(json.dumps({"icons": {"home": {"tags": "house"}}}))
    with pytest.raises(OntologyError):
        load_ontology(path)


def test_unknown_category_warns(tmp_path, caplog):
    path = tmp_path / "icons.json"
    path.write_text(json.dumps({"categories": ["A"], "icons": {"x": {"category": "B"}}}))
    with caplog.at_level(logging.WARNING):
        ontology = load_ontology(path)
    assert 'icon "x" has unknown category "B"' in caplog.text
    assert ontology.describe("x").category == "B"


class TestDescribe:
    def test_full_entry(self):
        desc = Ontology.model_validate(ONTOLOGY).describe("home")
        assert desc.label == "Home"
        assert desc.description == "Go to the start page"
        assert desc.category == "Navigation"
        assert desc.tags == ["house", "start"]

    def test_missing_name_gets_defaults(self):
        desc = Ontology().describe("arrow-left")
        assert desc.label == "Arrow-left"
        assert desc.description == ""
        assert desc.category == UNCATEGORIZED
        assert desc.tags == []

    def test_partial_entry_falls_back_per_field(self):
        ontology = Ontology(icons={"bell": OntologyEntry(category="Alerts")})
        desc = ontology.describe("bell")
        assert desc.label == "Bell"
        assert desc.category == "Alerts"
        assert desc.tags == []
