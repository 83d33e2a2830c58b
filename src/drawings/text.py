"""
どこで: `drawings.text`。
何を: 1 行/複数行のテキスト描画を命令列へ展開する（`draw_text` / `draw_lines_of_text`）。
なぜ: BT〜ET の順序（色→フォント→行送り→行列→表示）を固定し、回転とスキューを 1 つの `Tm` にまとめるため。
"""

from __future__ import annotations

from typing import Sequence

from engine.core.operator import Operator, compact
from engine.core.operators import (
    begin_text,
    end_text,
    next_line,
    pop_graphics_state,
    push_graphics_state,
    rotate_and_skew_text_radians_and_translate,
    set_font_and_size,
    set_line_height,
    show_text,
)
from engine.core.rotation import to_radians
from util.color import DEFAULT_COLORS, ColorExpander

from .base import fill_color_ops, flatten, graphics_state_op
from .options import DrawLinesOfTextOptions, DrawTextOptions
from .registry import drawing


def _text_matrix(options: DrawTextOptions) -> Operator:
    return rotate_and_skew_text_radians_and_translate(
        to_radians(options.rotate),
        to_radians(options.x_skew),
        to_radians(options.y_skew),
        options.x,
        options.y,
    )


@drawing
def draw_text(
    line: bytes,
    options: DrawTextOptions,
    *,
    colors: ColorExpander = DEFAULT_COLORS,
) -> list[Operator]:
    """1 行のエンコード済みテキストを描く。

    引数:
        line: エンコード済みテキスト（bytes、`Tj` で 16 進文字列として表示）。
        options: 色/フォント/サイズ/角度/アンカー。
        colors: 色展開の実装（既定はデバイス色）。
    """
    return compact(
        flatten(
            push_graphics_state(),
            graphics_state_op(options.graphics_state),
            begin_text(),
            fill_color_ops(colors, options.color),
            set_font_and_size(options.font, options.size),
            _text_matrix(options),
            show_text(line),
            end_text(),
            pop_graphics_state(),
        )
    )


@drawing
def draw_lines_of_text(
    lines: Sequence[bytes],
    options: DrawLinesOfTextOptions,
    *,
    colors: ColorExpander = DEFAULT_COLORS,
) -> list[Operator]:
    """複数行のテキストを描く。各行の後に `T*`（行送り量は `TL` で指定）。

    `lines` が空でも BT/ET と q/Q の対は出力する（表示命令だけが無い）。
    """
    ops = compact(
        flatten(
            push_graphics_state(),
            graphics_state_op(options.graphics_state),
            begin_text(),
            fill_color_ops(colors, options.color),
            set_font_and_size(options.font, options.size),
            set_line_height(options.line_height),
            _text_matrix(options),
        )
    )
    for line in lines:
        ops.append(show_text(line))
        ops.append(next_line())
    ops.append(end_text())
    ops.append(pop_graphics_state())
    return ops
