"""
どこで: `drawings.paint`。
何を: 塗り色/線色/線幅の有無から、終端のペイント命令をちょうど 1 つ選ぶ。
なぜ: rectangle/ellipse/svg_path で同じ優先順位を共有し、分岐の食い違いを防ぐため。

優先順位（上から評価）:
1. 塗り色あり かつ 線幅あり → `B`（塗り + 線）
2. 塗り色あり               → `f`
3. 線色あり                 → `S`
4. どれも無し               → `h`（パスを閉じるだけ）

線幅は値の真偽で判定する（未指定と 0 はどちらも「線幅なし」）。
"""

from __future__ import annotations

from engine.core.operator import Operator
from engine.core.operators import close_path, fill, fill_and_stroke, stroke


def select_paint_operator(
    has_fill: bool, has_border_color: bool, has_border_width: bool
) -> Operator:
    if has_fill and has_border_width:
        return fill_and_stroke()
    if has_fill:
        return fill()
    if has_border_color:
        return stroke()
    return close_path()


def paint_for(color: object, border_color: object, border_width: float | None) -> Operator:
    """オプション値から終端命令を選ぶ（色は `is not None`、線幅は真偽で判定）。"""
    return select_paint_operator(color is not None, border_color is not None, bool(border_width))


__all__ = ["select_paint_operator", "paint_for"]
