"""Pipeline configuration — fixed build constants shared by every stage."""

from __future__ import annotations

from dataclasses import dataclass, field

STYLE_META: dict[str, dict[str, str]] = {
    "outline": {
        "label": "Outline",
        "tag": "Stroke",
        "desc": "Clean single-weight strokes — default for navigation and toolbars",
    },
    "solid": {
        "label": "Solid",
        "tag": "Filled",
        "desc": "Filled shapes with negative-space details — best for active/selected states",
    },
    "duotone": {
        "label": "Duotone",
        "tag": "2-Tone",
        "desc": "Accent fill layer + foreground stroke — ideal for feature highlights and onboarding",
    },
    "sharp": {
        "label": "Sharp",
        "tag": "Geometric",
        "desc": "Angular cuts, squared joins, no curves — engineered density for compact UI",
    },
}


@dataclass
class PipelineConfig:
    """Style set and component defaults."""

    styles: tuple[str, ...] = ("outline", "solid", "duotone", "sharp")
    # Styles whose components expose a dynamic stroke width
    stroked_styles: frozenset[str] = frozenset({"outline", "duotone", "sharp"})

    view_box: str = "0 0 24 24"
    default_size: int = 24

    # Small renderings need heavier strokes to stay legible
    small_size_threshold: int = 16
    small_stroke_width: float = 1.75
    default_stroke_width: float = 1.5

    # Sizes offered by the demo page
    demo_sizes: tuple[int, ...] = (16, 20, 24, 32, 48)

    style_meta: dict[str, dict[str, str]] = field(default_factory=lambda: dict(STYLE_META))

    def is_stroked(self, style: str) -> bool:
        return style in self.stroked_styles
