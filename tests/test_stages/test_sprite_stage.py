"""Tests for the sprite stage against a built manifest."""

import xml.etree.ElementTree as ET

from rocbuild.engine.pipeline import create_pipeline

NS = "{http://www.w3.org/2000/svg}"


def test_sprite_ids_unique_and_sorted(project):
    create_pipeline().run(project, {"sprite"})
    root = ET.parse(project.dist_dir / "sprite.svg").getroot()
    ids = [s.get("id") for s in root.iter(f"{NS}symbol")]
    assert ids == ["bell-outline", "home-outline", "home-solid", "search-outline"]
    assert len(set(ids)) == len(ids)
