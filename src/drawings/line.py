from __future__ import annotations

from engine.core.operator import Operator, compact
from engine.core.operators import (
    line_to,
    move_to,
    pop_graphics_state,
    push_graphics_state,
    set_line_cap,
    set_line_width,
    stroke,
)
from util.color import DEFAULT_COLORS, ColorExpander

from .base import dash_op, flatten, graphics_state_op, stroke_color_ops
from .options import DrawLineOptions
from .registry import drawing


@drawing
def draw_line(options: DrawLineOptions, *, colors: ColorExpander = DEFAULT_COLORS) -> list[Operator]:
    """始点から終点へ線分を引く。

    色が無くても `S` は出す（周囲で有効な線色で描かれる）。
    線端形状は真のときだけ `m` と `l` の間に入る（BUTT = 0 は周囲の設定を引き継ぐ）。
    """
    return compact(
        flatten(
            push_graphics_state(),
            graphics_state_op(options.graphics_state),
            stroke_color_ops(colors, options.color),
            set_line_width(options.thickness),
            dash_op(options.dash_array, options.dash_phase),
            move_to(options.start[0], options.start[1]),
            set_line_cap(options.line_cap) if options.line_cap else None,
            line_to(options.end[0], options.end[1]),
            stroke(),
            pop_graphics_state(),
        )
    )
