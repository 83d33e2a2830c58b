"""
どこで: `drawings.ellipse`。
何を: 楕円を 4 本の 3 次ベジェで近似するパス（`draw_ellipse_path`）と、それを塗る/描く `draw_ellipse`。
なぜ: 象限ごとの制御点を同じ式・同じ順序で生成し、実装間で描画結果を一致させるため。

近似:
- 円弧 90 度の制御点オフセット係数 `KAPPA = 4 * (sqrt(2) - 1) / 3`（≈ 0.5523）。
- 軸ごとに独立にスケール: `ox = x_scale * KAPPA`, `oy = y_scale * KAPPA`。
- 左端 (cx - rx, cy) から出発し、下→右→上→左の順（Y 上向きで反時計回り）で 1 周する。
"""

from __future__ import annotations

import math

import numpy as np

from engine.core.operator import Operator, compact
from engine.core.operators import (
    append_bezier_curve,
    move_to,
    pop_graphics_state,
    push_graphics_state,
    set_line_width,
)
from util.color import DEFAULT_COLORS, ColorExpander

from .base import dash_op, fill_color_ops, flatten, graphics_state_op, stroke_color_ops
from .options import DrawEllipseOptions, DrawEllipsePathOptions
from .paint import paint_for
from .registry import drawing

KAPPA = 4.0 * ((math.sqrt(2) - 1.0) / 3.0)


def ellipse_control_points(x: float, y: float, x_scale: float, y_scale: float) -> np.ndarray:
    """始点 + 4 区間 x (制御点 2 + 終点 1) の 13 点を (13, 2) 配列で返す。"""
    x0 = float(x) - float(x_scale)
    y0 = float(y) - float(y_scale)

    ox = float(x_scale) * KAPPA
    oy = float(y_scale) * KAPPA
    xe = x0 + float(x_scale) * 2
    ye = y0 + float(y_scale) * 2
    xm = x0 + float(x_scale)
    ym = y0 + float(y_scale)

    return np.array(
        [
            [x0, ym],
            [x0, ym - oy], [xm - ox, y0], [xm, y0],
            [xm + ox, y0], [xe, ym - oy], [xe, ym],
            [xe, ym + oy], [xm + ox, ye], [xm, ye],
            [xm - ox, ye], [x0, ym + oy], [x0, ym],
        ],
        dtype=np.float64,
    )


def _ellipse_segments(x: float, y: float, x_scale: float, y_scale: float) -> list[Operator]:
    pts = ellipse_control_points(x, y, x_scale, y_scale)
    ops = [move_to(float(pts[0, 0]), float(pts[0, 1]))]
    for i in range(1, 13, 3):
        c1, c2, end = pts[i], pts[i + 1], pts[i + 2]
        ops.append(
            append_bezier_curve(
                float(c1[0]), float(c1[1]), float(c2[0]), float(c2[1]), float(end[0]), float(end[1])
            )
        )
    return ops


@drawing
def draw_ellipse_path(options: DrawEllipsePathOptions) -> list[Operator]:
    """楕円パスのみ（q/Q で包む。塗り/線の命令は含まない）。"""
    return [
        push_graphics_state(),
        *_ellipse_segments(options.x, options.y, options.x_scale, options.y_scale),
        pop_graphics_state(),
    ]


@drawing
def draw_ellipse(
    options: DrawEllipseOptions, *, colors: ColorExpander = DEFAULT_COLORS
) -> list[Operator]:
    """楕円を描く。パスは `draw_ellipse_path` と同じ 5 命令を、内側の q/Q 無しで挿入する。"""
    return compact(
        flatten(
            push_graphics_state(),
            graphics_state_op(options.graphics_state),
            fill_color_ops(colors, options.color),
            stroke_color_ops(colors, options.border_color),
            set_line_width(options.border_width if options.border_width is not None else 0),
            dash_op(options.border_dash_array, options.border_dash_phase),
            _ellipse_segments(options.x, options.y, options.x_scale, options.y_scale),
            paint_for(options.color, options.border_color, options.border_width),
            pop_graphics_state(),
        )
    )
