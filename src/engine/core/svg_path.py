"""
どこで: `engine.core.svg_path`。
何を: SVG の path 記述（`d` 属性）をコンテンツストリームのパス構築命令列へ変換する。
なぜ: 描画コンパイラから構文解析を切り離し、`PathTranslator` として差し替え可能にするため。

変換規則:
- サブパスの区切りは記述中の `M`/`m` と `Z`/`z` で決める（座標の一致では判定しない）。
- 各サブパスの先頭に `m`、`Z` で閉じたサブパスの末尾に `h`。
- `Z` の後に `M` 無しで命令が続く場合は、直前のサブパスの始点から新しいサブパスを始める。
- サブパス内の構文解析は `svgpathtools.parse_path` に委譲（相対/省略形/H/V/S/T は正規化済み）。
- Line → `l`、CubicBezier → `c`、QuadraticBezier → 3 次へ昇格して `c`。
- Arc → 最大 `ARC_MAX_SEGMENT_DEG` 度ごとに分割し、各区間を 3 次ベジェで近似。
- 座標は SVG 系のまま（Y 反転は呼び出し側の `cm` で行う）。
"""

from __future__ import annotations

import logging
import math
import re
from typing import Protocol

from svgpathtools import Arc, CubicBezier, Line, QuadraticBezier, parse_path
from svgpathtools import Path as SvgPath

from common import settings

from .operator import Operator
from .operators import append_bezier_curve, close_path, line_to, move_to

logger = logging.getLogger(__name__)

_SUBPATH_SPLIT_RE = re.compile(r"([MmZz])")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


class PathTranslator(Protocol):
    """パス記述テキストを命令列へ変換する能力。"""

    def translate(self, path: str) -> list[Operator]: ...


def _xy(z: complex) -> tuple[float, float]:
    return (float(z.real), float(z.imag))


def _quadratic_to_cubic(seg: QuadraticBezier) -> Operator:
    # 2 次 → 3 次の次数昇格: c1 = p0 + 2/3 (q - p0), c2 = p1 + 2/3 (q - p1)
    p0, q, p1 = seg.start, seg.control, seg.end
    c1 = p0 + (q - p0) * (2.0 / 3.0)
    c2 = p1 + (q - p1) * (2.0 / 3.0)
    return append_bezier_curve(*_xy(c1), *_xy(c2), *_xy(p1))


def _arc_to_cubics(seg: Arc, max_segment_deg: float) -> list[Operator]:
    """楕円弧を 3 次ベジェ列で近似する。半径 0 の弧は直線として扱う。"""
    rx = abs(float(seg.radius.real))
    ry = abs(float(seg.radius.imag))
    if rx == 0.0 or ry == 0.0 or seg.start == seg.end:
        return [line_to(*_xy(seg.end))]

    phi = math.radians(float(seg.rotation))
    rot = complex(math.cos(phi), math.sin(phi))
    center = seg.center
    theta = math.radians(float(seg.theta))
    delta = math.radians(float(seg.delta))

    n = max(1, int(math.ceil(abs(delta) / math.radians(max_segment_deg) - 1e-9)))
    step = delta / n
    alpha = (4.0 / 3.0) * math.tan(step / 4.0)

    def point(t: float) -> complex:
        return center + rot * complex(rx * math.cos(t), ry * math.sin(t))

    def tangent(t: float) -> complex:
        return rot * complex(-rx * math.sin(t), ry * math.cos(t))

    ops: list[Operator] = []
    for i in range(n):
        t0 = theta + step * i
        t1 = t0 + step
        c1 = point(t0) + alpha * tangent(t0)
        c2 = point(t1) - alpha * tangent(t1)
        # 最終区間の終点は弧の終点に厳密一致させる（丸め誤差で隙間を作らない）
        end = seg.end if i == n - 1 else point(t1)
        ops.append(append_bezier_curve(*_xy(c1), *_xy(c2), *_xy(end)))
    return ops


def _segment_to_operators(seg: object, max_segment_deg: float) -> list[Operator]:
    if isinstance(seg, Line):
        return [line_to(*_xy(seg.end))]
    if isinstance(seg, CubicBezier):
        return [append_bezier_curve(*_xy(seg.control1), *_xy(seg.control2), *_xy(seg.end))]
    if isinstance(seg, QuadraticBezier):
        return [_quadratic_to_cubic(seg)]
    if isinstance(seg, Arc):
        return _arc_to_cubics(seg, max_segment_deg)
    logger.warning("unsupported SVG segment type dropped: %s", type(seg).__name__)
    return []


def split_subpaths(path: str) -> list[tuple[str, bool]]:
    """記述を `M`/`m` と `Z`/`z` で区切り、(命令テキスト, 閉じているか) の列にする。

    `Z` の後に続く `M` 無しの命令は、先頭が描画命令のままのテキストになる。

    例外:
        ValueError: 記述が moveto で始まらない場合。
    """
    tokens = _SUBPATH_SPLIT_RE.split(path)
    if tokens[0].strip():
        raise ValueError(f"path data must begin with a moveto: {path[:20]!r}")
    pieces: list[list] = []
    for cmd, body in zip(tokens[1::2], tokens[2::2]):
        if cmd in "Mm":
            pieces.append([cmd + body, False])
            continue
        if not pieces:
            raise ValueError("closepath before any moveto")
        pieces[-1][1] = True
        if body.strip():
            pieces.append([body, False])
    return [(text, closed) for text, closed in pieces]


def _moveto_point(text: str, current: complex) -> complex:
    """moveto テキストの先頭 2 数値から始点を求める（`m` は現在点からの相対）。"""
    nums = _NUMBER_RE.findall(text[1:])
    if len(nums) < 2:
        raise ValueError(f"moveto needs two coordinates: {text.strip()[:20]!r}")
    point = complex(float(nums[0]), float(nums[1]))
    return current + point if text[0] == "m" else point


def svg_path_to_operators(path: str) -> list[Operator]:
    """SVG path 記述をパス構築命令列へ変換する。

    引数:
        path: SVG の `d` 属性テキスト（例: "M 0 0 L 10 0 L 10 10 Z"）。

    返り値:
        命令列。空文字列/解析不能なテキストは空リスト（警告ログのみ）。
    """
    if not path or not path.strip():
        return []

    max_deg = settings.get().ARC_MAX_SEGMENT_DEG
    ops: list[Operator] = []
    current = 0j
    start = 0j
    try:
        for text, closed in split_subpaths(path):
            body = text.lstrip()
            if body[0] in "Mm":
                start = _moveto_point(body, current)
            parsed: SvgPath = parse_path(body, current_pos=current if body[0] in "Mm" else start)
            ops.append(move_to(*_xy(start)))
            for seg in parsed:
                ops.extend(_segment_to_operators(seg, max_deg))
            current = parsed.end if len(parsed) else start
            if closed:
                ops.append(close_path())
                current = start
    except (ValueError, IndexError) as exc:
        logger.warning("failed to parse SVG path %r: %s", path[:80], exc)
        return []

    logger.debug("translated SVG path into %d operators", len(ops))
    return ops


class SvgPathTranslator:
    """`svgpathtools` による既定の `PathTranslator` 実装。"""

    def translate(self, path: str) -> list[Operator]:
        return svg_path_to_operators(path)


DEFAULT_PATHS: PathTranslator = SvgPathTranslator()


__all__ = [
    "PathTranslator",
    "SvgPathTranslator",
    "DEFAULT_PATHS",
    "split_subpaths",
    "svg_path_to_operators",
]
