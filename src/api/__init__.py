"""
どこで: `api` 入口（高レベル公開 API）。
何を: 描画ファサード `D`・装飾子 `drawing`・`Operator`・`serialize` を再輸出。
なぜ: 利用者が単一名前空間から描画要求→命令列→バイト列まで完結できるようにするため。

Usage:
    from api import D, serialize
    from drawings import DrawLineOptions

    ops = D.draw_line(DrawLineOptions(start=(0, 0), end=(100, 0), thickness=2))
    data = serialize(ops)
"""

from drawings.registry import drawing as drawing  # 公開唯一経路（api.drawing）
from engine.core.operator import Operator
from engine.export.content_stream import serialize

from .drawings import D, DrawingsAPI

__all__ = [
    "D",
    "drawing",
    "DrawingsAPI",
    "Operator",
    "serialize",
]

__version__ = "2026.10"
