"""
どこで: `engine.export.content_stream`。
何を: 命令列をコンテンツストリームのバイト列へ書き出し、q/Q の整合と合成 CTM を検査する。
なぜ: 描画コンパイラの出力（`list[Operator]`）をページへ埋め込める形に落とし、
      テストや上位層から構造を検証できるようにするため。

出力形式:
- 1 行 1 命令、`operand ... name` の順。行末は LF、文字コードは ASCII。
- 数値は `common.settings.NUMBER_DECIMALS` 桁で丸め、指数表記を使わない。
"""

from __future__ import annotations

import logging
from typing import IO, Iterable, Sequence

import numpy as np

from engine.core import affine
from engine.core.operator import Operator, format_operator

logger = logging.getLogger(__name__)


class UnbalancedStateError(ValueError):
    """q/Q の対応が取れていない命令列。"""


def serialize_operator(op: Operator, *, decimals: int | None = None) -> str:
    return format_operator(op, decimals)


def serialize(ops: Iterable[Operator], *, decimals: int | None = None) -> bytes:
    """命令列をコンテンツストリームのバイト列へ変換する。

    引数:
        ops: 命令列。
        decimals: 数値の小数桁（未指定なら設定値）。

    返り値:
        ASCII バイト列（空の命令列は `b""`）。
    """
    lines = [format_operator(op, decimals) for op in ops]
    if not lines:
        return b""
    data = ("\n".join(lines) + "\n").encode("ascii")
    logger.debug("serialized %d operators (%d bytes)", len(lines), len(data))
    return data


def write(ops: Iterable[Operator], fp: IO[bytes], *, decimals: int | None = None) -> int:
    """命令列を `fp` へ書き出し、書き込んだバイト数を返す。"""
    data = serialize(ops, decimals=decimals)
    fp.write(data)
    return len(data)


def check_balanced(ops: Sequence[Operator]) -> None:
    """q/Q の入れ子が閉じていることを検査する。

    例外:
        UnbalancedStateError: 対応する q の無い Q、または閉じられていない q。
    """
    depth = 0
    for i, op in enumerate(ops):
        if op.name == "q":
            depth += 1
        elif op.name == "Q":
            depth -= 1
            if depth < 0:
                raise UnbalancedStateError(f"'Q' without matching 'q' at index {i}")
    if depth != 0:
        raise UnbalancedStateError(f"{depth} unclosed 'q' at end of stream")


def max_state_depth(ops: Sequence[Operator]) -> int:
    """q の最大入れ子深さ。"""
    depth = 0
    peak = 0
    for op in ops:
        if op.name == "q":
            depth += 1
            peak = max(peak, depth)
        elif op.name == "Q":
            depth -= 1
    return peak


def current_transform(ops: Sequence[Operator]) -> np.ndarray:
    """最外 q の内側（深さ 1）で積まれた `cm` を合成した CTM を返す。

    より深い q/Q 内の `cm` は Q で破棄されるため無視する。
    """
    depth = 0
    matrices: list[np.ndarray] = []
    for op in ops:
        if op.name == "q":
            depth += 1
        elif op.name == "Q":
            depth -= 1
        elif op.name == "cm" and depth <= 1:
            matrices.append(affine.from_pdf_matrix(*(float(a) for a in op.args)))
    return affine.compose(*matrices)


__all__ = [
    "UnbalancedStateError",
    "serialize_operator",
    "serialize",
    "write",
    "check_balanced",
    "max_state_depth",
    "current_transform",
]
