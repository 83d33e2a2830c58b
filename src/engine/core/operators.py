"""
どこで: `engine.core.operators`。
何を: コンテンツストリーム演算子ごとの純関数コンストラクタ（1 関数 = 1 命令）。
なぜ: 描画コンパイラが演算子名やオペランド順を直接書かずに済むよう、命令の生成を一箇所に閉じ込めるため。

Notes
-----
- すべて副作用なしで `Operator` を 1 つ返す。
- 角度を受け取る関数は `*_radians` / `*_degrees` の 2 系統。変換行列の 6 要素は
  `engine.core.affine` で計算する。
- 名前引数（フォント/XObject/ExtGState）は `str` でも `PdfName` でもよい。
"""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence

from . import affine
from .operator import Operator, PdfArray, PdfHexString, PdfName
from .rotation import degrees_to_radians


class LineCapStyle(IntEnum):
    BUTT = 0
    ROUND = 1
    PROJECTING = 2


class LineJoinStyle(IntEnum):
    MITER = 0
    ROUND = 1
    BEVEL = 2


class TextRenderingMode(IntEnum):
    FILL = 0
    OUTLINE = 1
    FILL_AND_OUTLINE = 2
    INVISIBLE = 3
    FILL_AND_CLIP = 4
    OUTLINE_AND_CLIP = 5
    FILL_AND_OUTLINE_AND_CLIP = 6
    CLIP = 7


def _name(value: str) -> PdfName:
    return value if isinstance(value, PdfName) else PdfName(value)


# === 図形状態 / 変換 ===


def push_graphics_state() -> Operator:
    return Operator("q")


def pop_graphics_state() -> Operator:
    return Operator("Q")


def set_graphics_state(state: str) -> Operator:
    return Operator.of("gs", _name(state))


def concat_transformation_matrix(
    a: float, b: float, c: float, d: float, e: float, f: float
) -> Operator:
    return Operator.of("cm", a, b, c, d, e, f)


def translate(x: float, y: float) -> Operator:
    return concat_transformation_matrix(1, 0, 0, 1, x, y)


def scale(x: float, y: float) -> Operator:
    return concat_transformation_matrix(x, 0, 0, y, 0, 0)


def rotate_radians(angle: float) -> Operator:
    return concat_transformation_matrix(*affine.to_pdf_matrix(affine.rotate(angle)))


def rotate_degrees(angle: float) -> Operator:
    return rotate_radians(degrees_to_radians(angle))


def skew_radians(x_skew_angle: float, y_skew_angle: float) -> Operator:
    return concat_transformation_matrix(
        *affine.to_pdf_matrix(affine.skew(x_skew_angle, y_skew_angle))
    )


def skew_degrees(x_skew_angle: float, y_skew_angle: float) -> Operator:
    return skew_radians(degrees_to_radians(x_skew_angle), degrees_to_radians(y_skew_angle))


# === 線スタイル ===


def set_dash_pattern(dash_array: Sequence[float], dash_phase: float) -> Operator:
    return Operator.of("d", PdfArray(dash_array), dash_phase)


def restore_dash_pattern() -> Operator:
    return set_dash_pattern([], 0)


def set_line_cap(style: LineCapStyle | int) -> Operator:
    return Operator.of("J", int(style))


def set_line_join(style: LineJoinStyle | int) -> Operator:
    return Operator.of("j", int(style))


def set_line_width(width: float) -> Operator:
    return Operator.of("w", width)


# === パス構築 / 描画 ===


def append_bezier_curve(
    x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
) -> Operator:
    return Operator.of("c", x1, y1, x2, y2, x3, y3)


def append_quadratic_curve(x1: float, y1: float, x2: float, y2: float) -> Operator:
    """`v` 演算子（第 1 制御点 = 現在点）。真の 2 次曲線は呼び出し側で 3 次へ昇格させること。"""
    return Operator.of("v", x1, y1, x2, y2)


def close_path() -> Operator:
    return Operator("h")


def move_to(x: float, y: float) -> Operator:
    return Operator.of("m", x, y)


def line_to(x: float, y: float) -> Operator:
    return Operator.of("l", x, y)


def rectangle(x: float, y: float, width: float, height: float) -> Operator:
    return Operator.of("re", x, y, width, height)


def square(x: float, y: float, size: float) -> Operator:
    return rectangle(x, y, size, size)


def stroke() -> Operator:
    return Operator("S")


def fill() -> Operator:
    return Operator("f")


def fill_and_stroke() -> Operator:
    return Operator("B")


def end_path() -> Operator:
    return Operator("n")


def clip() -> Operator:
    return Operator("W")


def clip_even_odd() -> Operator:
    return Operator("W*")


# === テキスト ===


def begin_text() -> Operator:
    return Operator("BT")


def end_text() -> Operator:
    return Operator("ET")


def next_line() -> Operator:
    return Operator("T*")


def move_text(x: float, y: float) -> Operator:
    return Operator.of("Td", x, y)


def show_text(text: bytes) -> Operator:
    hex_text = text if isinstance(text, PdfHexString) else PdfHexString(bytes(text))
    return Operator.of("Tj", hex_text)


def set_font_and_size(name: str, size: float) -> Operator:
    return Operator.of("Tf", _name(name), size)


def set_character_spacing(spacing: float) -> Operator:
    return Operator.of("Tc", spacing)


def set_word_spacing(spacing: float) -> Operator:
    return Operator.of("Tw", spacing)


def set_character_squeeze(squeeze: float) -> Operator:
    """水平スケール（%）。"""
    return Operator.of("Tz", squeeze)


def set_line_height(line_height: float) -> Operator:
    return Operator.of("TL", line_height)


def set_text_rise(rise: float) -> Operator:
    return Operator.of("Ts", rise)


def set_text_rendering_mode(mode: TextRenderingMode | int) -> Operator:
    return Operator.of("Tr", int(mode))


def set_text_matrix(a: float, b: float, c: float, d: float, e: float, f: float) -> Operator:
    return Operator.of("Tm", a, b, c, d, e, f)


def rotate_and_skew_text_radians_and_translate(
    rotation_angle: float,
    x_skew_angle: float,
    y_skew_angle: float,
    x: float,
    y: float,
) -> Operator:
    m = affine.text_matrix(rotation_angle, x_skew_angle, y_skew_angle, x, y)
    return set_text_matrix(*affine.to_pdf_matrix(m))


def rotate_and_skew_text_degrees_and_translate(
    rotation_angle: float,
    x_skew_angle: float,
    y_skew_angle: float,
    x: float,
    y: float,
) -> Operator:
    return rotate_and_skew_text_radians_and_translate(
        degrees_to_radians(rotation_angle),
        degrees_to_radians(x_skew_angle),
        degrees_to_radians(y_skew_angle),
        x,
        y,
    )


# === XObject ===


def draw_object(name: str) -> Operator:
    return Operator.of("Do", _name(name))


# === 色 ===


def set_filling_gray_color(gray: float) -> Operator:
    return Operator.of("g", gray)


def set_stroking_gray_color(gray: float) -> Operator:
    return Operator.of("G", gray)


def set_filling_rgb_color(red: float, green: float, blue: float) -> Operator:
    return Operator.of("rg", red, green, blue)


def set_stroking_rgb_color(red: float, green: float, blue: float) -> Operator:
    return Operator.of("RG", red, green, blue)


def set_filling_cmyk_color(cyan: float, magenta: float, yellow: float, key: float) -> Operator:
    return Operator.of("k", cyan, magenta, yellow, key)


def set_stroking_cmyk_color(cyan: float, magenta: float, yellow: float, key: float) -> Operator:
    return Operator.of("K", cyan, magenta, yellow, key)


# === マークコンテンツ ===


def begin_marked_content(tag: str) -> Operator:
    return Operator.of("BMC", _name(tag))


def end_marked_content() -> Operator:
    return Operator("EMC")


__all__ = [
    "LineCapStyle",
    "LineJoinStyle",
    "TextRenderingMode",
    "push_graphics_state",
    "pop_graphics_state",
    "set_graphics_state",
    "concat_transformation_matrix",
    "translate",
    "scale",
    "rotate_radians",
    "rotate_degrees",
    "skew_radians",
    "skew_degrees",
    "set_dash_pattern",
    "restore_dash_pattern",
    "set_line_cap",
    "set_line_join",
    "set_line_width",
    "append_bezier_curve",
    "append_quadratic_curve",
    "close_path",
    "move_to",
    "line_to",
    "rectangle",
    "square",
    "stroke",
    "fill",
    "fill_and_stroke",
    "end_path",
    "clip",
    "clip_even_odd",
    "begin_text",
    "end_text",
    "next_line",
    "move_text",
    "show_text",
    "set_font_and_size",
    "set_character_spacing",
    "set_word_spacing",
    "set_character_squeeze",
    "set_line_height",
    "set_text_rise",
    "set_text_rendering_mode",
    "set_text_matrix",
    "rotate_and_skew_text_radians_and_translate",
    "rotate_and_skew_text_degrees_and_translate",
    "draw_object",
    "set_filling_gray_color",
    "set_stroking_gray_color",
    "set_filling_rgb_color",
    "set_stroking_rgb_color",
    "set_filling_cmyk_color",
    "set_stroking_cmyk_color",
    "begin_marked_content",
    "end_marked_content",
]
