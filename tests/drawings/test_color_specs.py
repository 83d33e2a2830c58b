"""
どこで: tests（drawings 全般の色指定）。
何を: Hex 文字列や 3 要素の色指定が描画時に `Color` へ正規化されることを確認。
"""

from __future__ import annotations

import pytest

from drawings import (
    DrawLineOptions,
    DrawRectangleOptions,
    DrawSvgPathOptions,
    DrawTextOptions,
    draw_line,
    draw_rectangle,
    draw_svg_path,
    draw_text,
)
from engine.core.operator import Operator
from util.color import RGB


def test_hex_fill_on_rectangle() -> None:
    ops = draw_rectangle(DrawRectangleOptions(x=0, y=0, width=1, height=1, color="#ff0000"))
    assert Operator.of("rg", 1.0, 0.0, 0.0) in ops
    assert ops[-2].name == "f"


def test_byte_triple_stroke_on_line() -> None:
    ops = draw_line(DrawLineOptions(start=(0, 0), end=(1, 0), thickness=1, color=(0, 0, 255)))
    assert Operator.of("RG", 0.0, 0.0, 1.0) in ops


def test_unit_triple_on_svg_border(recording_colors) -> None:
    opts = DrawSvgPathOptions(x=0, y=0, border_color=[0.0, 0.5, 1.0], border_width=1)
    draw_svg_path("M 0 0 L 1 1", opts, colors=recording_colors)
    assert recording_colors.calls == [("stroke", RGB(0.0, 0.5, 1.0))]


def test_short_hex_text_color() -> None:
    ops = draw_text(b"x", DrawTextOptions(color="#00f", font="F1", size=9, x=0, y=0))
    assert Operator.of("rg", 0.0, 0.0, 1.0) in ops


def test_invalid_color_spec_raises() -> None:
    with pytest.raises(ValueError):
        draw_rectangle(DrawRectangleOptions(x=0, y=0, width=1, height=1, color="#zzzzzz"))
