"""テスト用ダミー: 呼び出しを記録する色展開 / パス変換と、命令名の取り出し。"""

from __future__ import annotations

from engine.core.operator import Operator
from util.color import Color


def names(ops: list[Operator]) -> list[str]:
    return [op.name for op in ops]


class RecordingColors:
    """色展開の呼び出しを記録し、目印の命令を返すダミー。"""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Color]] = []

    def fill(self, color: Color) -> list[Operator]:
        self.calls.append(("fill", color))
        return [Operator.of("x-fill")]

    def stroke(self, color: Color) -> list[Operator]:
        self.calls.append(("stroke", color))
        return [Operator.of("x-stroke")]


class RecordingPaths:
    """パス変換の呼び出しを記録し、固定の命令列を返すダミー。"""

    def __init__(self, result: list[Operator] | None = None) -> None:
        self.calls: list[str] = []
        self.result = result if result is not None else [Operator.of("m", 0, 0)]

    def translate(self, path: str) -> list[Operator]:
        self.calls.append(path)
        return list(self.result)
