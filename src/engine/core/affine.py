"""
どこで: `engine.core` の軽量アフィン行列ユーティリティ。
何を: translate/rotate/scale/skew とテキスト行列を 3x3 の numpy 配列として小さな純関数で提供。
なぜ: `cm`/`Tm` 命令に載せる 6 要素をここで一元的に計算し、合成順の検証にも再利用するため。

行列の規約（PDF と同じ行ベクトル形式）::

    [ a  b  0 ]
    [ c  d  0 ]
    [ e  f  1 ]

`p' = p @ M` で点を写す。`cm` を順に積むとき、後に来た命令ほど内側（先に点へ作用）になる。
`compose(m1, m2, ...)` は命令列の並び順のまま受け取り、`m_n @ ... @ m1` を返す。
"""

from __future__ import annotations

import math

import numpy as np

from common.types import Matrix6, Vec2


def from_pdf_matrix(a: float, b: float, c: float, d: float, e: float, f: float) -> np.ndarray:
    return np.array([[a, b, 0.0], [c, d, 0.0], [e, f, 1.0]], dtype=np.float64)


def identity() -> np.ndarray:
    return np.eye(3, dtype=np.float64)


def translate(tx: float, ty: float) -> np.ndarray:
    return from_pdf_matrix(1.0, 0.0, 0.0, 1.0, float(tx), float(ty))


def scale(sx: float, sy: float) -> np.ndarray:
    return from_pdf_matrix(float(sx), 0.0, 0.0, float(sy), 0.0, 0.0)


def rotate(angle_rad: float) -> np.ndarray:
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    return from_pdf_matrix(c, s, -s, c, 0.0, 0.0)


def skew(x_skew_rad: float, y_skew_rad: float) -> np.ndarray:
    return from_pdf_matrix(1.0, math.tan(x_skew_rad), math.tan(y_skew_rad), 1.0, 0.0, 0.0)


def text_matrix(
    rotation_rad: float, x_skew_rad: float, y_skew_rad: float, x: float, y: float
) -> np.ndarray:
    """回転と 2 方向スキューを 1 つにまとめ、アンカーへ平行移動するテキスト行列。

    `rotate @ skew` の積ではなく、各成分に sin/tan を加算する形で組み立てる
    （回転 0 で純粋なスキュー、スキュー 0 で純粋な回転に一致する）。
    """
    c = math.cos(rotation_rad)
    s = math.sin(rotation_rad)
    return from_pdf_matrix(
        c,
        s + math.tan(x_skew_rad),
        -s + math.tan(y_skew_rad),
        c,
        float(x),
        float(y),
    )


def compose(*matrices: np.ndarray) -> np.ndarray:
    """命令列の並び順で与えた行列を合成する（最初の行列が最も外側）。"""
    out = identity()
    for m in matrices:
        out = np.asarray(m, dtype=np.float64) @ out
    return out


def to_pdf_matrix(m: np.ndarray) -> Matrix6:
    """3x3 行列から `a b c d e f` の 6 要素を取り出す。"""
    arr = np.asarray(m, dtype=np.float64)
    return (
        float(arr[0, 0]),
        float(arr[0, 1]),
        float(arr[1, 0]),
        float(arr[1, 1]),
        float(arr[2, 0]),
        float(arr[2, 1]),
    )


def transform_point(m: np.ndarray, p: Vec2) -> Vec2:
    v = np.array([float(p[0]), float(p[1]), 1.0], dtype=np.float64) @ np.asarray(m)
    return (float(v[0]), float(v[1]))


__all__ = [
    "from_pdf_matrix",
    "identity",
    "translate",
    "scale",
    "rotate",
    "skew",
    "text_matrix",
    "compose",
    "to_pdf_matrix",
    "transform_point",
]
