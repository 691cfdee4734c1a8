"""React component codegen — one forwardRef component per icon variant."""

from __future__ import annotations

from string import Template

from rocbuild.codegen.naming import js_number, to_pascal_case
from rocbuild.engine.config import PipelineConfig
from rocbuild.models.icon import IconVariant
from rocbuild.svg.attributes import to_jsx

EXTENSION = "jsx"

_STROKED_TEMPLATE = Template("""\
import { forwardRef } from 'react';

const $component = forwardRef(({ size = $size, strokeWidth, ...props }, ref) => {
  const sw = strokeWidth ?? (size <= $threshold ? $small_sw : $default_sw);
  return (
    <svg ref={ref} xmlns="http://www.w3.org/2000/svg" width={size} height={size} viewBox="$view_box" fill="none" {...props}>
      $inner
    </svg>
  );
});

$component.displayName = '$component';
export default $component;
""")

_SOLID_TEMPLATE = Template("""\
import { forwardRef } from 'react';

const $component = forwardRef(({ size = $size, ...props }, ref) => (
  <svg ref={ref} xmlns="http://www.w3.org/2000/svg" width={size} height={size} viewBox="$view_box" fill="none" {...props}>
    $inner
  </svg>
));

$component.displayName = '$component';
export default $component;
""")

DECLARATION_HEADER = """\
import { ForwardRefExoticComponent, SVGProps } from 'react';

interface IconProps extends SVGProps<SVGSVGElement> {
  size?: number;
  strokeWidth?: number;
}

type Icon = ForwardRefExoticComponent<IconProps>;

"""


def render_react_component(variant: IconVariant, config: PipelineConfig | None = None) -> str:
    """JSX source for one icon variant."""
    config = config or PipelineConfig()
    stroked = config.is_stroked(variant.style)
    template = _STROKED_TEMPLATE if stroked else _SOLID_TEMPLATE
    return template.substitute(
        component=to_pascal_case(variant.name),
        size=config.default_size,
        threshold=config.small_size_threshold,
        small_sw=js_number(config.small_stroke_width),
        default_sw=js_number(config.default_stroke_width),
        view_box=config.view_box,
        inner=to_jsx(variant.inner, stroked),
    )
