#!/usr/bin/env python3
"""
チュートリアル: 基本的な描画要求からコンテンツストリームを作る

矩形・楕円・線・SVG パス・テキストを 1 ページ分の命令列にまとめ、バイト列として書き出します。

    python tutorials/basic_drawings.py            # 標準出力へ
    python tutorials/basic_drawings.py page.txt   # ファイルへ
"""

from __future__ import annotations

import logging
import sys

from api import D, serialize
from common.logging import setup_default_logging
from drawings import (
    DrawEllipseOptions,
    DrawLineOptions,
    DrawRectangleOptions,
    DrawSvgPathOptions,
    DrawTextOptions,
)
from engine.core.operator import Operator
from engine.core.operators import LineCapStyle
from engine.core.rotation import degrees


def build_page() -> list[Operator]:
    """1 ページ分の命令列（各描画は q/Q で閉じているので単純に連結できる）。"""
    ops: list[Operator] = []
    # 1. 塗り + 枠線の矩形（15 度回転）
    ops += D.draw_rectangle(
        DrawRectangleOptions(
            x=50, y=50, width=120, height=80,
            color="#3366cc", border_color=(0, 0, 0), border_width=2, rotate=degrees(15),
        )
    )
    # 2. 枠線だけの楕円（破線）
    ops += D.draw_ellipse(
        DrawEllipseOptions(
            x=300, y=100, x_scale=60, y_scale=30,
            border_color="#cc3333", border_width=1.5, border_dash_array=[4, 2],
        )
    )
    # 3. 丸い線端の線
    ops += D.draw_line(
        DrawLineOptions(start=(50, 200), end=(350, 200), thickness=4, line_cap=LineCapStyle.ROUND)
    )
    # 4. SVG パス（Y 下向きの座標系で書いたもの）
    ops += D.draw_svg_path(
        "M 0 0 L 40 0 L 20 30 Z",
        DrawSvgPathOptions(x=200, y=300, scale=2, color=(1.0, 0.8, 0.0)),
    )
    # 5. テキスト（フォントリソース名 F1 はページ側で用意する前提）
    ops += D.draw_text(
        b"pagedraw", DrawTextOptions(color="#000000", font="F1", size=18, x=50, y=400)
    )
    return ops


def main(argv: list[str] | None = None) -> int:
    setup_default_logging()
    logger = logging.getLogger(__name__)
    args = sys.argv[1:] if argv is None else argv

    data = serialize(build_page())
    if args:
        with open(args[0], "wb") as fp:
            fp.write(data)
        logger.info("wrote %d bytes to %s", len(data), args[0])
    else:
        sys.stdout.buffer.write(data)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
