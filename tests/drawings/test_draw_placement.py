"""
どこで: tests（drawings/placement）。
何を: draw_image / draw_page の変換順（translate→rotate→scale→skew）と合成 CTM を確認。
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from drawings import DrawImageOptions, DrawPageOptions, draw_image, draw_page
from engine.core import affine
from engine.core.operator import Operator, PdfName
from engine.core.rotation import degrees
from engine.export.content_stream import current_transform
from tests._utils.recorders import names


def test_draw_image_order_and_operands() -> None:
    opts = DrawImageOptions(x=5, y=6, width=100, height=50)
    ops = draw_image("Im1", opts)
    assert names(ops) == ["q", "cm", "cm", "cm", "cm", "Do", "Q"]
    assert ops[1] == Operator.of("cm", 1, 0, 0, 1, 5, 6)
    assert ops[3] == Operator.of("cm", 100, 0, 0, 50, 0, 0)
    assert ops[5].args == (PdfName("Im1"),)


def test_draw_page_uses_scale_factors_and_graphics_state() -> None:
    opts = DrawPageOptions(x=0, y=0, x_scale=0.5, y_scale=2, graphics_state="GS2")
    ops = draw_page("Page1", opts)
    assert names(ops) == ["q", "gs", "cm", "cm", "cm", "cm", "Do", "Q"]
    assert ops[4] == Operator.of("cm", 0.5, 0, 0, 2, 0, 0)


def test_draw_image_rotation_and_skew_operands() -> None:
    opts = DrawImageOptions(
        x=0, y=0, width=1, height=1, rotate=degrees(90), x_skew=degrees(45), y_skew=degrees(0)
    )
    ops = draw_image("Im1", opts)
    rot = ops[2]
    skew = ops[4]
    assert rot.args == pytest.approx((0.0, 1.0, -1.0, 0.0, 0.0, 0.0), abs=1e-12)
    assert skew.args == pytest.approx((1.0, 1.0, 0.0, 1.0, 0.0, 0.0), abs=1e-12)


def test_draw_image_ctm_matches_composed_transforms() -> None:
    r = math.radians(30)
    xs = math.radians(10)
    ys = math.radians(-5)
    opts = DrawImageOptions(
        x=12, y=34, width=200, height=80,
        rotate=degrees(30), x_skew=degrees(10), y_skew=degrees(-5),
    )
    ctm = current_transform(draw_image("Im1", opts))
    expected = affine.compose(
        affine.translate(12, 34),
        affine.rotate(r),
        affine.scale(200, 80),
        affine.skew(xs, ys),
    )
    np.testing.assert_allclose(ctm, expected, rtol=1e-12, atol=1e-12)
    # 画像の原点はアンカーへ写る
    assert affine.transform_point(ctm, (0.0, 0.0)) == pytest.approx((12.0, 34.0))
