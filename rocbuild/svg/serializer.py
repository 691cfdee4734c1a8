"""Write the sprite sheet — one <symbol> per icon variant."""

from __future__ import annotations

from collections.abc import Iterable

from rocbuild.models.icon import IconVariant

SVG_NS = "http://www.w3.org/2000/svg"


def symbol_id(variant: IconVariant) -> str:
    return f"{variant.name}-{variant.style}"


def serialize_sprite(variants: Iterable[IconVariant], view_box: str = "0 0 24 24") -> str:
    """Sprite document with symbols sorted by id, independent of input order."""
    symbols = sorted(((symbol_id(v), v.inner) for v in variants), key=lambda s: s[0])

    lines = [f'<svg xmlns="{SVG_NS}">']
    for sid, inner in symbols:
        lines.append(f'  <symbol id="{sid}" viewBox="{view_box}" fill="none">')
        lines.append(f"    {inner}")
        lines.append("  </symbol>")
    lines.append("</svg>")
    return "\n".join(lines) + "\n"
