from __future__ import annotations

from engine.core.operator import Operator, compact
from engine.core.operators import (
    pop_graphics_state,
    push_graphics_state,
    scale,
    set_line_width,
    translate,
)
from engine.core.svg_path import DEFAULT_PATHS, PathTranslator
from util.color import DEFAULT_COLORS, ColorExpander

from .base import dash_op, fill_color_ops, flatten, graphics_state_op, stroke_color_ops
from .options import DrawSvgPathOptions
from .paint import paint_for
from .registry import drawing


@drawing
def draw_svg_path(
    path: str,
    options: DrawSvgPathOptions,
    *,
    colors: ColorExpander = DEFAULT_COLORS,
    paths: PathTranslator = DEFAULT_PATHS,
) -> list[Operator]:
    """SVG パス記述をアンカー位置に描く。

    SVG は Y 軸が下向きのため、平行移動の直後に必ず `scale(s, -s)`（未指定なら `(1, -1)`）を入れる。
    線幅は値が真のときだけ設定する。パス記述の妥当性は検査しない（変換結果が空でも q/Q と終端命令は出る）。
    """
    s = options.scale
    return compact(
        flatten(
            push_graphics_state(),
            graphics_state_op(options.graphics_state),
            translate(options.x, options.y),
            scale(s, -s) if s else scale(1, -1),
            fill_color_ops(colors, options.color),
            stroke_color_ops(colors, options.border_color),
            set_line_width(options.border_width) if options.border_width else None,
            dash_op(options.border_dash_array, options.border_dash_phase),
            paths.translate(path),
            paint_for(options.color, options.border_color, options.border_width),
            pop_graphics_state(),
        )
    )
