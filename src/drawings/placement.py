"""
どこで: `drawings.placement`。
何を: 画像 XObject と埋め込みページ（Form XObject）の配置（`draw_image` / `draw_page`）。
なぜ: 「置く→向ける→大きさ→せん断」の順（translate→rotate→scale→skew）を契約として固定するため。
"""

from __future__ import annotations

from engine.core.operator import Operator, compact
from engine.core.operators import (
    draw_object,
    pop_graphics_state,
    push_graphics_state,
    rotate_radians,
    scale,
    skew_radians,
    translate,
)
from engine.core.rotation import Rotation, to_radians

from .base import graphics_state_op
from .options import DrawImageOptions, DrawPageOptions
from .registry import drawing


def _place_object(
    name: str,
    *,
    x: float,
    y: float,
    sx: float,
    sy: float,
    rotate: Rotation,
    x_skew: Rotation,
    y_skew: Rotation,
    graphics_state: str | None,
) -> list[Operator]:
    return compact(
        [
            push_graphics_state(),
            graphics_state_op(graphics_state),
            translate(x, y),
            rotate_radians(to_radians(rotate)),
            scale(sx, sy),
            skew_radians(to_radians(x_skew), to_radians(y_skew)),
            draw_object(name),
            pop_graphics_state(),
        ]
    )


@drawing
def draw_image(name: str, options: DrawImageOptions) -> list[Operator]:
    """画像 XObject `name` を幅/高さへ拡大して配置する。"""
    return _place_object(
        name,
        x=options.x,
        y=options.y,
        sx=options.width,
        sy=options.height,
        rotate=options.rotate,
        x_skew=options.x_skew,
        y_skew=options.y_skew,
        graphics_state=options.graphics_state,
    )


@drawing
def draw_page(name: str, options: DrawPageOptions) -> list[Operator]:
    """埋め込みページ `name` を x/y 倍率で配置する。"""
    return _place_object(
        name,
        x=options.x,
        y=options.y,
        sx=options.x_scale,
        sy=options.y_scale,
        rotate=options.rotate,
        x_skew=options.x_skew,
        y_skew=options.y_skew,
        graphics_state=options.graphics_state,
    )
