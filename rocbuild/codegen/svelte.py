"""Svelte 5 component codegen."""

from __future__ import annotations

from string import Template

from rocbuild.codegen.naming import js_number
from rocbuild.engine.config import PipelineConfig
from rocbuild.models.icon import IconVariant
from rocbuild.svg.attributes import to_svelte

EXTENSION = "svelte"

_STROKED_TEMPLATE = Template("""\
<script>
  let { size = $size, strokeWidth, ...rest } = $$props();
  let sw = $$derived(strokeWidth ?? (size <= $threshold ? $small_sw : $default_sw));
</script>

<svg xmlns="http://www.w3.org/2000/svg" width={size} height={size} viewBox="$view_box" fill="none" {...rest}>
  $inner
</svg>
""")

_SOLID_TEMPLATE = Template("""\
<script>
  let { size = $size, ...rest } = $$props();
</script>

<svg xmlns="http://www.w3.org/2000/svg" width={size} height={size} viewBox="$view_box" fill="none" {...rest}>
  $inner
</svg>
""")

DECLARATION_HEADER = """\
import type { Component } from 'svelte';
import type { SVGAttributes } from 'svelte/elements';

interface IconProps extends SVGAttributes<SVGSVGElement> {
  size?: number;
  strokeWidth?: number;
}

type Icon = Component<IconProps>;

"""


def render_svelte_component(variant: IconVariant, config: PipelineConfig | None = None) -> str:
    config = config or PipelineConfig()
    stroked = config.is_stroked(variant.style)
    template = _STROKED_TEMPLATE if stroked else _SOLID_TEMPLATE
    return template.substitute(
        size=config.default_size,
        threshold=config.small_size_threshold,
        small_sw=js_number(config.small_stroke_width),
        default_sw=js_number(config.default_stroke_width),
        view_box=config.view_box,
        inner=to_svelte(variant.inner, stroked),
    )
