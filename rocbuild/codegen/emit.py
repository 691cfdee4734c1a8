"""Write a framework's component files, barrels and declarations to disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from rocbuild.codegen.barrels import ComponentSet
from rocbuild.codegen.naming import to_pascal_case
from rocbuild.engine.config import PipelineConfig
from rocbuild.models.icon import IconVariant, Manifest
from rocbuild.utils.files import write_text

logger = logging.getLogger(__name__)

Renderer = Callable[[IconVariant, PipelineConfig], str]


def emit_component_set(
    manifest: Manifest,
    out_dir: Path,
    render: Renderer,
    extension: str,
    declaration_header: str,
    config: PipelineConfig,
) -> ComponentSet:
    """One component per variant, then per-style and root barrel/declaration pairs."""
    components = ComponentSet(extension=extension, declaration_header=declaration_header)

    for variant in manifest:
        entry = components.add(variant.style, variant.name)
        path = out_dir / variant.style / f"{to_pascal_case(variant.name)}.{extension}"
        write_text(path, render(variant, config))
        logger.debug("  %s/%s → %s", variant.style, variant.name, entry.component)

    for style in components.by_style:
        write_text(out_dir / style / "index.js", components.style_barrel(style))
        write_text(out_dir / style / "index.d.ts", components.style_declarations(style))

    write_text(out_dir / "index.js", components.root_barrel())
    write_text(out_dir / "index.d.ts", components.root_declarations())
    return components
