"""Demo page assembly — skeleton + static payloads + build-time icon data."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2

from rocbuild.engine.config import PipelineConfig
from rocbuild.models.icon import Manifest
from rocbuild.models.ontology import Ontology
from rocbuild.demo.template import PAGE_TEMPLATE

logger = logging.getLogger(__name__)

_page_template = jinja2.Environment(autoescape=True, keep_trailing_newline=True).from_string(PAGE_TEMPLATE)

# Chrome glyphs: first (style, name) present wins, else empty
LOGO_GLYPH = [("duotone", "roc"), ("outline", "roc")]
SEARCH_GLYPH = [("outline", "search")]
MOON_GLYPH = [("outline", "moon")]
SUN_GLYPH = [("outline", "sun")]


@dataclass(frozen=True)
class DemoPayloads:
    """Hand-authored presentational files embedded into the page."""

    css: str
    app_js: str
    disco_js: str = ""


@dataclass(frozen=True)
class SiteInfo:
    title: str = "Roc"
    url: str = ""
    repo_url: str = ""


def load_payloads(demo_src_dir: Path) -> DemoPayloads:
    """Read styles.css and app.js (required) and disco.js (optional)."""
    demo_src_dir = Path(demo_src_dir)
    css = (demo_src_dir / "styles.css").read_text(encoding="utf-8")
    app_js = (demo_src_dir / "app.js").read_text(encoding="utf-8")
    disco_path = demo_src_dir / "disco.js"
    if disco_path.exists():
        disco_js = disco_path.read_text(encoding="utf-8")
    else:
        logger.debug("No easter-egg script at %s", disco_path)
        disco_js = ""
    return DemoPayloads(css=css, app_js=app_js, disco_js=disco_js)


def group_icons(manifest: Manifest, styles: tuple[str, ...]) -> dict[str, dict[str, str]]:
    """style → name → inner markup; styles in configured order, names sorted."""
    by_style: dict[str, dict[str, str]] = {}
    for variant in manifest:
        by_style.setdefault(variant.style, {})[variant.name] = variant.inner

    icons: dict[str, dict[str, str]] = {}
    for style in styles:
        if style not in by_style:
            continue
        icons[style] = {name: by_style[style][name] for name in sorted(by_style[style])}
    return icons


def chrome_glyph(icons: dict[str, dict[str, str]], candidates: list[tuple[str, str]]) -> str:
    for style, name in candidates:
        inner = icons.get(style, {}).get(name)
        if inner:
            return inner
    return ""


def _js_json(value: Any) -> str:
    # "</" would end the surrounding <script> element early
    return json.dumps(value, indent=2, ensure_ascii=False).replace("</", "<\\/")


def build_data_block(
    icons: dict[str, dict[str, str]],
    ontology: Ontology,
    icon_names: list[str],
    config: PipelineConfig,
) -> str:
    """JavaScript constants consumed by the behavior script."""
    icon_meta = {name: ontology.describe(name).model_dump() for name in icon_names}
    stroked = [s for s in config.styles if config.is_stroked(s)]
    style_meta = {s: config.style_meta[s] for s in config.styles if s in config.style_meta}

    return "\n".join(
        [
            "// ─── Icon data (optimized SVG inner content) ─────────────────────────",
            f"const ICONS = {_js_json(icons)};",
            "",
            f"const STROKED_STYLES = new Set({json.dumps(stroked)});",
            "",
            f"const STYLE_META = {_js_json(style_meta)};",
            "",
            f"const ICON_META = {_js_json(icon_meta)};",
            f"const CATEGORIES = {json.dumps(ontology.categories, ensure_ascii=False)};",
            "",
            f"const STYLE_ORDER = {json.dumps(list(config.styles))};",
            f"const ICON_NAMES = {json.dumps(icon_names, ensure_ascii=False)};",
            f"const SIZES = {json.dumps(list(config.demo_sizes))};",
        ]
    )


def _style_list(styles: tuple[str, ...]) -> str:
    if len(styles) <= 1:
        return "".join(styles)
    return ", ".join(styles[:-1]) + ", and " + styles[-1]


def render_page(
    manifest: Manifest,
    ontology: Ontology,
    payloads: DemoPayloads,
    config: PipelineConfig | None = None,
    site: SiteInfo | None = None,
) -> str:
    """The complete demo document."""
    config = config or PipelineConfig()
    site = site or SiteInfo()

    icons = group_icons(manifest, config.styles)
    icon_names = manifest.names()

    return _page_template.render(
        title=site.title,
        site_url=site.url,
        repo_url=site.repo_url,
        name_count=len(icon_names),
        style_count=len(config.styles),
        size_count=len(config.demo_sizes),
        style_list=_style_list(config.styles),
        css=payloads.css,
        logo_svg=chrome_glyph(icons, LOGO_GLYPH),
        search_svg=chrome_glyph(icons, SEARCH_GLYPH),
        moon_svg=chrome_glyph(icons, MOON_GLYPH),
        sun_svg=chrome_glyph(icons, SUN_GLYPH),
        sizes=config.demo_sizes,
        default_size=config.default_size,
        categories=ontology.categories,
        data_block=build_data_block(icons, ontology, icon_names, config),
        app_js=payloads.app_js,
        disco_js=payloads.disco_js,
    )
