from __future__ import annotations

from engine.core.operator import Operator, compact
from engine.core.operators import (
    close_path,
    line_to,
    move_to,
    pop_graphics_state,
    push_graphics_state,
    rotate_radians,
    set_line_width,
    skew_radians,
    translate,
)
from engine.core.rotation import to_radians
from util.color import DEFAULT_COLORS, ColorExpander

from .base import dash_op, fill_color_ops, flatten, graphics_state_op, stroke_color_ops
from .options import DrawRectangleOptions
from .paint import paint_for
from .registry import drawing


@drawing
def draw_rectangle(
    options: DrawRectangleOptions, *, colors: ColorExpander = DEFAULT_COLORS
) -> list[Operator]:
    """矩形を描く。

    位置/回転/スキューは `cm` で与え、幅と高さはローカル座標のパスに直接書く
    （scale 段は持たない）。パスは (0,0)→(0,h)→(w,h)→(w,0)→閉じる。
    """
    w = options.width
    h = options.height
    return compact(
        flatten(
            push_graphics_state(),
            graphics_state_op(options.graphics_state),
            fill_color_ops(colors, options.color),
            stroke_color_ops(colors, options.border_color),
            set_line_width(options.border_width if options.border_width is not None else 0),
            dash_op(options.border_dash_array, options.border_dash_phase),
            translate(options.x, options.y),
            rotate_radians(to_radians(options.rotate)),
            skew_radians(to_radians(options.x_skew), to_radians(options.y_skew)),
            move_to(0, 0),
            line_to(0, h),
            line_to(w, h),
            line_to(w, 0),
            close_path(),
            paint_for(options.color, options.border_color, options.border_width),
            pop_graphics_state(),
        )
    )
