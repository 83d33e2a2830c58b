"""
どこで: `engine.core.operator`。
何を: コンテンツストリーム命令 `Operator` と、その引数タグ型（名前/16進文字列/配列）を定義。
なぜ: 命令列を「構築済みの不変トークン」として扱い、比較・ハッシュ・文字列化を一箇所に集約するため。

Notes
-----
- `Operator` は値オブジェクト（frozen dataclass）。同じ引数で作れば等価になる。
- 数値は Python の `int`/`float` をそのまま保持する（文字列化の時点で整形）。
- 引数の型タグ:
  - `PdfName`      → `/Name`
  - `PdfHexString` → `<48656C6C6F>`
  - `PdfArray`     → `[a b c]`
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Iterable

from common import settings


class PdfName(str):
    """PDF 名前オブジェクト（`/` 接頭辞付きで直列化される str）。"""

    __slots__ = ()

    def __new__(cls, value: str) -> "PdfName":
        text = str(value)
        if text.startswith("/"):
            text = text[1:]
        return super().__new__(cls, text)

    def __repr__(self) -> str:
        return f"PdfName({str(self)!r})"


class PdfHexString(bytes):
    """エンコード済みテキスト（`<hex>` として直列化される bytes）。"""

    __slots__ = ()

    @classmethod
    def from_text(cls, text: str, encoding: str = "latin-1") -> "PdfHexString":
        return cls(text.encode(encoding))

    def __repr__(self) -> str:
        return f"PdfHexString({bytes(self).hex().upper()!r})"


class PdfArray(tuple):
    """PDF 配列（`[a b c]` として直列化される tuple）。"""

    __slots__ = ()

    def __new__(cls, items: Iterable[Any] = ()) -> "PdfArray":
        return super().__new__(cls, tuple(items))

    def __repr__(self) -> str:
        return f"PdfArray({list(self)!r})"


@dataclass(frozen=True)
class Operator:
    """単一のコンテンツストリーム命令。

    属性:
        name: 演算子名（例: "q", "cm", "Tj"）。
        args: オペランド列（数値/PdfName/PdfHexString/PdfArray）。
    """

    name: str
    args: tuple[Any, ...] = ()

    @classmethod
    def of(cls, name: str, *args: Any) -> "Operator":
        return cls(name, tuple(args))

    def __str__(self) -> str:
        return format_operator(self)


def format_number(value: float, decimals: int | None = None) -> str:
    """数値を PDF 実数表記へ整形する（指数表記なし、末尾 0 除去、`-0` は `0`）。"""
    if isinstance(value, bool):
        raise TypeError(f"bool is not a PDF number: {value!r}")
    if isinstance(value, numbers.Integral):
        return str(int(value))
    nd = settings.get().NUMBER_DECIMALS if decimals is None else int(decimals)
    text = f"{float(value):.{nd}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def format_operand(value: Any, decimals: int | None = None) -> str:
    """オペランド 1 つを直列化表記へ変換する。"""
    if isinstance(value, PdfName):
        return f"/{value}"
    if isinstance(value, PdfHexString):
        return f"<{bytes(value).hex().upper()}>"
    if isinstance(value, PdfArray):
        return "[" + " ".join(format_operand(v, decimals) for v in value) + "]"
    if isinstance(value, numbers.Real):
        return format_number(value, decimals)
    raise TypeError(f"unsupported operand type: {type(value)!r}")


def format_operator(op: Operator, decimals: int | None = None) -> str:
    """命令 1 つを `operand ... name` 形式の文字列へ変換する。"""
    parts = [format_operand(a, decimals) for a in op.args]
    parts.append(op.name)
    return " ".join(parts)


def compact(items: Iterable[Operator | None]) -> list[Operator]:
    """`None`（省略された任意ステップ）を取り除き、順序を保って命令列を返す。"""
    return [op for op in items if op is not None]


__all__ = [
    "Operator",
    "PdfName",
    "PdfHexString",
    "PdfArray",
    "compact",
    "format_number",
    "format_operand",
    "format_operator",
]
