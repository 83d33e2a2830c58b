"""
どこで: tests（drawings/text）。
何を: draw_text / draw_lines_of_text の命令順、単一 Tm、空行列の扱いを確認。
"""

from __future__ import annotations

import math

import pytest

from drawings import DrawLinesOfTextOptions, DrawTextOptions, draw_lines_of_text, draw_text
from engine.core.operator import Operator, PdfHexString, PdfName
from engine.core.rotation import degrees, radians
from tests._utils.recorders import names


def _text_opts(**overrides) -> DrawTextOptions:
    base = dict(color=overrides.pop("color"), font="F1", size=12, x=10, y=20)
    base.update(overrides)
    return DrawTextOptions(**base)


def test_draw_text_order(red) -> None:
    ops = draw_text(b"Hi", _text_opts(color=red))
    assert names(ops) == ["q", "BT", "rg", "Tf", "Tm", "Tj", "ET", "Q"]
    assert ops[2] == Operator.of("rg", 1.0, 0.0, 0.0)
    assert ops[3] == Operator.of("Tf", PdfName("F1"), 12)
    assert ops[5].args == (PdfHexString(b"Hi"),)


def test_draw_text_graphics_state_follows_save(red) -> None:
    ops = draw_text(b"x", _text_opts(color=red, graphics_state="GS0"))
    assert names(ops)[:3] == ["q", "gs", "BT"]
    assert ops[1].args == (PdfName("GS0"),)


def test_draw_text_matrix_identity_without_angles(red) -> None:
    ops = draw_text(b"x", _text_opts(color=red))
    tm = ops[4]
    assert tm.name == "Tm"
    assert tm.args == pytest.approx((1.0, 0.0, 0.0, 1.0, 10.0, 20.0))


def test_draw_text_matrix_combines_rotation_and_skews(red) -> None:
    opts = _text_opts(color=red, rotate=degrees(30), x_skew=radians(0.1), y_skew=degrees(-10))
    tm = draw_text(b"x", opts)[4]
    r = math.radians(30)
    xs = 0.1
    ys = math.radians(-10)
    expected = (
        math.cos(r),
        math.sin(r) + math.tan(xs),
        -math.sin(r) + math.tan(ys),
        math.cos(r),
        10.0,
        20.0,
    )
    assert tm.args == pytest.approx(expected)
    # 回転/スキューは Tm 1 つに集約され、cm は出ない
    assert "cm" not in names(draw_text(b"x", opts))


def test_draw_text_uses_injected_color_expander(red, recording_colors) -> None:
    ops = draw_text(b"x", _text_opts(color=red), colors=recording_colors)
    assert recording_colors.calls == [("fill", red)]
    assert names(ops)[2] == "x-fill"


def test_draw_lines_of_text_shows_each_line_then_next_line(red) -> None:
    opts = DrawLinesOfTextOptions(color=red, font="F1", size=10, x=0, y=0, line_height=14)
    ops = draw_lines_of_text([b"a", b"b", b"c"], opts)
    assert names(ops) == [
        "q", "BT", "rg", "Tf", "TL", "Tm",
        "Tj", "T*", "Tj", "T*", "Tj", "T*",
        "ET", "Q",
    ]
    shown = [bytes(op.args[0]) for op in ops if op.name == "Tj"]
    assert shown == [b"a", b"b", b"c"]
    assert ops[4] == Operator.of("TL", 14)


def test_draw_lines_of_text_empty_is_paint_free(red) -> None:
    opts = DrawLinesOfTextOptions(
        color=red, font="F1", size=10, x=0, y=0, line_height=14, graphics_state="GS1"
    )
    ops = draw_lines_of_text([], opts)
    assert names(ops) == ["q", "gs", "BT", "rg", "Tf", "TL", "Tm", "ET", "Q"]
