"""
どこで: `drawings.base`。
何を: 各描画関数が共有する任意ステップ（ExtGState/色/破線）の小さな組み立てヘルパ。
なぜ: 「指定があれば命令、無ければ None」の規約を一箇所に揃え、`compact()` で順序を保って除去するため。
"""

from __future__ import annotations

from typing import Iterable, Sequence

from engine.core.operator import Operator
from engine.core.operators import set_dash_pattern, set_graphics_state
from util.color import ColorExpander, ColorLike, normalize_color


def graphics_state_op(name: str | None) -> Operator | None:
    return set_graphics_state(name) if name else None


def dash_op(dash_array: Sequence[float] | None, dash_phase: float | None) -> Operator:
    """破線設定（未指定は実線 `[] 0`）。常に 1 命令を返す。"""
    return set_dash_pattern(
        list(dash_array) if dash_array is not None else [],
        dash_phase if dash_phase is not None else 0,
    )


def fill_color_ops(colors: ColorExpander, color: ColorLike | None) -> list[Operator]:
    """塗り色の設定命令（色指定はここで `Color` へ正規化する）。"""
    return list(colors.fill(normalize_color(color))) if color is not None else []


def stroke_color_ops(colors: ColorExpander, color: ColorLike | None) -> list[Operator]:
    return list(colors.stroke(normalize_color(color))) if color is not None else []


def flatten(*parts: Operator | None | Iterable[Operator]) -> list[Operator | None]:
    """単一命令/None/命令列を 1 本の列へ展開する（None はそのまま残す）。"""
    out: list[Operator | None] = []
    for part in parts:
        if part is None or isinstance(part, Operator):
            out.append(part)
        else:
            out.extend(part)
    return out


__all__ = ["graphics_state_op", "dash_op", "fill_color_ops", "stroke_color_ops", "flatten"]
