import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from drawings import (
    DrawEllipseOptions,
    DrawLineOptions,
    DrawRectangleOptions,
    DrawSvgPathOptions,
    DrawTextOptions,
    draw_ellipse,
    draw_line,
    draw_rectangle,
    draw_svg_path,
    draw_text,
    select_paint_operator,
)
from engine.core.rotation import degrees
from engine.export.content_stream import check_balanced, serialize
from util.color import rgb

coords = st.floats(-1e4, 1e4, allow_nan=False, allow_infinity=False)
sizes = st.floats(0, 1e3, allow_nan=False, allow_infinity=False)
angles = st.floats(-360, 360, allow_nan=False, allow_infinity=False).map(degrees)
colors = st.none() | st.builds(rgb, st.floats(0, 1), st.floats(0, 1), st.floats(0, 1))
widths = st.none() | sizes


def _assert_wrapped(ops):
    assert ops[0].name == "q"
    assert ops[-1].name == "Q"
    check_balanced(ops)


@given(
    x=coords, y=coords, w=sizes, h=sizes, bw=widths, color=colors, border=colors, rot=angles
)
def test_rectangle_is_wrapped_and_deterministic(x, y, w, h, bw, color, border, rot):
    opts = DrawRectangleOptions(
        x=x, y=y, width=w, height=h, border_width=bw, color=color, border_color=border, rotate=rot
    )
    ops = draw_rectangle(opts)
    _assert_wrapped(ops)
    assert draw_rectangle(opts) == ops
    assert serialize(draw_rectangle(opts)) == serialize(ops)


@given(x=coords, y=coords, sx=sizes, sy=sizes, bw=widths, color=colors, border=colors)
def test_ellipse_is_wrapped_with_single_state_level(x, y, sx, sy, bw, color, border):
    ops = draw_ellipse(
        DrawEllipseOptions(
            x=x, y=y, x_scale=sx, y_scale=sy, border_width=bw, color=color, border_color=border
        )
    )
    _assert_wrapped(ops)
    assert sum(op.name == "q" for op in ops) == 1
    assert sum(op.name == "c" for op in ops) == 4


@given(x=coords, y=coords, ex=coords, ey=coords, t=sizes, color=colors)
def test_line_is_wrapped(x, y, ex, ey, t, color):
    _assert_wrapped(draw_line(DrawLineOptions(start=(x, y), end=(ex, ey), thickness=t, color=color)))


@given(text=st.binary(max_size=16), x=coords, y=coords, rot=angles, xs=angles)
def test_text_is_wrapped(text, x, y, rot, xs):
    ops = draw_text(
        text,
        DrawTextOptions(color=rgb(0, 0, 0), font="F1", size=12, x=x, y=y, rotate=rot, x_skew=xs),
    )
    _assert_wrapped(ops)
    assert [op.name for op in ops].count("Tj") == 1


@given(s=st.floats(-100, 100, allow_nan=False), x=coords, y=coords)
def test_svg_path_always_flips_y(s, x, y):
    ops = draw_svg_path("M 0 0 L 1 1", DrawSvgPathOptions(x=x, y=y, scale=s))
    _assert_wrapped(ops)
    cm = [op for op in ops if op.name == "cm"][1]
    sx, sy = cm.args[0], cm.args[3]
    if s:
        assert (sx, sy) == (s, -s)
    else:
        assert (sx, sy) == (1, -1)


@given(has_fill=st.booleans(), has_border_color=st.booleans(), has_border_width=st.booleans())
def test_paint_operator_truth_table(has_fill, has_border_color, has_border_width):
    op = select_paint_operator(has_fill, has_border_color, has_border_width)
    if has_fill:
        assert op.name == ("B" if has_border_width else "f")
    elif has_border_color:
        assert op.name == "S"
    else:
        assert op.name == "h"
