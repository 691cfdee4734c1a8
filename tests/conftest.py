"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from rocbuild.engine.context import BuildContext
from rocbuild.exceptions import OptimizeError
from rocbuild.main import register_stages
from rocbuild.models.icon import IconVariant, Manifest


# Sample icons as authored (stroke attributes on the shapes themselves)

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none">
  <path d="M3 10l9-7 9 7v10a1 1 0 0 1-1 1H4a1 1 0 0 1-1-1z" stroke="currentColor" stroke-width="1.5" stroke-linecap="round" stroke-linejoin="round"/>
</svg>'''

BELL_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none">
  <!-- bell body -->
  <path d="M6 16V11a6 6 0 0 1 12 0v5l2 2H4z" stroke="currentColor" stroke-width="1.5" stroke-linejoin="round"/>
</svg>'''

HOME_SOLID_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none">
  <path d="M3 10l9-7 9 7v10a1 1 0 0 1-1 1H4a1 1 0 0 1-1-1z" fill="currentColor" fill-rule="evenodd" clip-rule="evenodd"/>
</svg>'''

SEARCH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none">
  <circle cx="11" cy="11" r="7" stroke="currentColor" stroke-width="1.5"/>
</svg>'''

BROKEN_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M3 10l9-7'''

ONTOLOGY = {
    "categories": ["Navigation", "Alerts"],
    "icons": {
        "home": {
            "label": "Home",
            "description": "Go to the start page",
            "category": "Navigation",
            "tags": ["house", "start"],
        },
        "bell": {"category": "Alerts", "tags": ["notification"]},
    },
}

# Inner markup as the optimizer would emit it
HOME_INNER = (
    '<path d="M3 10l9-7 9 7v10a1 1 0 0 1-1 1H4a1 1 0 0 1-1-1z" stroke="currentColor"'
    ' stroke-linecap="round" stroke-linejoin="round" stroke-width="1.5"/>'
)
SOLID_INNER = (
    '<path d="M3 10l9-7 9 7v10a1 1 0 0 1-1 1H4a1 1 0 0 1-1-1z" fill="currentColor"'
    ' fill-rule="evenodd" clip-rule="evenodd"/>'
)


def make_variant(style: str, name: str, inner: str = HOME_INNER) -> IconVariant:
    optimized = f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="none">{inner}</svg>'
    return IconVariant(style=style, name=name, optimized=optimized, inner=inner)


def passthrough_optimizer(raw: str) -> str:
    """Stand-in for scour: rejects the broken sample, otherwise returns the input."""
    if raw == BROKEN_SVG:
        raise OptimizeError("unclosed token")
    return raw.strip()


def write_icon_tree(root: Path, icons: dict[str, dict[str, str]]) -> Path:
    """Create ``root/src/svg/{style}/{name}.svg`` for every entry; returns the svg dir."""
    src_dir = root / "src" / "svg"
    for style, by_name in icons.items():
        style_dir = src_dir / style
        style_dir.mkdir(parents=True, exist_ok=True)
        for name, content in by_name.items():
            (style_dir / f"{name}.svg").write_text(content, encoding="utf-8")
    return src_dir


def write_demo_payloads(root: Path, disco: bool = True) -> Path:
    demo_src = root / "demo" / "src"
    demo_src.mkdir(parents=True, exist_ok=True)
    (demo_src / "styles.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    (demo_src / "app.js").write_text("function render() {}\n", encoding="utf-8")
    if disco:
        (demo_src / "disco.js").write_text("(function () { 'use strict'; })();\n", encoding="utf-8")
    return demo_src


@pytest.fixture(scope="session", autouse=True)
def stages_registered() -> None:
    register_stages()


@pytest.fixture
def sample_manifest() -> Manifest:
    return Manifest(
        [
            make_variant("outline", "home"),
            make_variant("outline", "bell"),
            make_variant("solid", "home", SOLID_INNER),
        ]
    )


@pytest.fixture
def project(tmp_path: Path) -> BuildContext:
    """A complete source tree (icons, ontology, demo payloads) and its build context."""
    src_dir = write_icon_tree(
        tmp_path,
        {
            "outline": {"home": HOME_SVG, "bell": BELL_SVG, "search": SEARCH_SVG},
            "solid": {"home": HOME_SOLID_SVG},
        },
    )
    ontology_path = tmp_path / "src" / "icons.json"
    ontology_path.write_text(json.dumps(ONTOLOGY), encoding="utf-8")
    demo_src = write_demo_payloads(tmp_path)
    return BuildContext(
        src_dir=src_dir,
        ontology_path=ontology_path,
        dist_dir=tmp_path / "dist",
        demo_src_dir=demo_src,
        optimizer=passthrough_optimizer,
        site_title="Roc",
        site_url="https://example.test/roc/",
        repo_url="https://example.test/roc.git",
    )
