"""
どこで: `drawings.options`。
何を: 描画プリミティブごとの入力レコード（frozen dataclass、キーワード専用）。
なぜ: 1 回の呼び出しの間は不変な入力として扱い、呼び出し間で状態を共有しないため。

共通事項:
- 角度は `engine.core.rotation.Rotation`（既定は 0 rad）。関数の入口で 1 度だけラジアンへ正規化する。
- 色は `util.color.ColorLike`（Color / Hex 文字列 / 3 要素）。描画時に `Color` へ正規化し、終端命令の選択では有無（`None` かどうか）だけを見る。
- 破線は `dash_array`/`dash_phase`（未指定は実線 `[] 0`）。
- `graphics_state` は ExtGState の名前（任意）。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from engine.core.operators import LineCapStyle
from engine.core.rotation import ZERO, Rotation
from util.color import ColorLike


@dataclass(frozen=True, kw_only=True)
class DrawTextOptions:
    color: ColorLike
    font: str
    size: float
    x: float
    y: float
    rotate: Rotation = ZERO
    x_skew: Rotation = ZERO
    y_skew: Rotation = ZERO
    graphics_state: str | None = None


@dataclass(frozen=True, kw_only=True)
class DrawLinesOfTextOptions(DrawTextOptions):
    line_height: float


@dataclass(frozen=True, kw_only=True)
class DrawImageOptions:
    x: float
    y: float
    width: float
    height: float
    rotate: Rotation = ZERO
    x_skew: Rotation = ZERO
    y_skew: Rotation = ZERO
    graphics_state: str | None = None


@dataclass(frozen=True, kw_only=True)
class DrawPageOptions:
    x: float
    y: float
    x_scale: float = 1.0
    y_scale: float = 1.0
    rotate: Rotation = ZERO
    x_skew: Rotation = ZERO
    y_skew: Rotation = ZERO
    graphics_state: str | None = None


@dataclass(frozen=True, kw_only=True)
class DrawLineOptions:
    start: tuple[float, float]
    end: tuple[float, float]
    thickness: float
    color: ColorLike | None = None
    line_cap: LineCapStyle | None = None
    dash_array: Sequence[float] | None = None
    dash_phase: float | None = None
    graphics_state: str | None = None


@dataclass(frozen=True, kw_only=True)
class DrawRectangleOptions:
    x: float
    y: float
    width: float
    height: float
    border_width: float | None = None
    color: ColorLike | None = None
    border_color: ColorLike | None = None
    rotate: Rotation = ZERO
    x_skew: Rotation = ZERO
    y_skew: Rotation = ZERO
    border_dash_array: Sequence[float] | None = None
    border_dash_phase: float | None = None
    graphics_state: str | None = None


@dataclass(frozen=True, kw_only=True)
class DrawEllipsePathOptions:
    x: float
    y: float
    x_scale: float
    y_scale: float


@dataclass(frozen=True, kw_only=True)
class DrawEllipseOptions(DrawEllipsePathOptions):
    color: ColorLike | None = None
    border_color: ColorLike | None = None
    border_width: float | None = None
    border_dash_array: Sequence[float] | None = None
    border_dash_phase: float | None = None
    graphics_state: str | None = None


@dataclass(frozen=True, kw_only=True)
class DrawSvgPathOptions:
    x: float
    y: float
    scale: float | None = None
    color: ColorLike | None = None
    border_color: ColorLike | None = None
    border_width: float | None = None
    border_dash_array: Sequence[float] | None = None
    border_dash_phase: float | None = None
    graphics_state: str | None = None


__all__ = [
    "DrawTextOptions",
    "DrawLinesOfTextOptions",
    "DrawImageOptions",
    "DrawPageOptions",
    "DrawLineOptions",
    "DrawRectangleOptions",
    "DrawEllipsePathOptions",
    "DrawEllipseOptions",
    "DrawSvgPathOptions",
]
