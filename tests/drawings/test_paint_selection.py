"""
どこで: tests（drawings/paint）。
何を: 終端ペイント選択の真理値表と、規則 1 の優先を確認。
"""

from __future__ import annotations

import itertools

import pytest

from drawings.paint import paint_for, select_paint_operator


@pytest.mark.parametrize(
    "has_fill, has_border_color, has_border_width, expected",
    [
        (True, True, True, "B"),
        (True, False, True, "B"),
        (True, True, False, "f"),
        (True, False, False, "f"),
        (False, True, True, "S"),
        (False, True, False, "S"),
        (False, False, True, "h"),
        (False, False, False, "h"),
    ],
)
def test_truth_table(has_fill, has_border_color, has_border_width, expected) -> None:
    assert select_paint_operator(has_fill, has_border_color, has_border_width).name == expected


def test_exactly_one_operator_for_every_combination() -> None:
    for combo in itertools.product([False, True], repeat=3):
        op = select_paint_operator(*combo)
        assert op.name in {"B", "f", "S", "h"}
        assert op.args == ()


def test_paint_for_treats_zero_border_width_as_absent(red) -> None:
    # 0 幅で B を選ぶと、周囲の線色で細線が描かれてしまう
    assert paint_for(red, None, 0).name == "f"
    assert paint_for(red, None, None).name == "f"
    assert paint_for(red, None, 0.5).name == "B"
    assert paint_for(None, red, 0).name == "S"
    assert paint_for(None, None, 0).name == "h"
