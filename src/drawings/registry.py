"""
どこで: `drawings` のレジストリ層（関数専用）。
何を: `@drawing` デコレータで描画関数を登録し、取得/一覧/検査を提供。
なぜ: 描画プリミティブの拡張を一貫 API で管理し、`api.drawings` から名前で安全に解決するため。

概要:
- `@drawing` / `get_drawing` / `list_drawings` / `is_drawing_registered`。
- 登録対象は「関数」のみ（`list[Operator]` を返す純関数）。
- デコレータは名前省略可（`@drawing` / `@drawing()`）と明示名指定をサポート。
- キーは正規化される（"drawSvgPath" と "draw_svg_path" は同一）。
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

from common.base_registry import BaseRegistry
from engine.core.operator import Operator

DrawingFn = Callable[..., list[Operator]]

_drawing_registry: BaseRegistry[DrawingFn] = BaseRegistry()


def drawing(arg: Any | None = None, /, name: str | None = None):
    """描画関数をレジストリに登録するデコレータ。

    使用例:
    - `@drawing` / `@drawing()`                        → 関数名から自動推論。
    - `@drawing("custom")` / `@drawing(name="custom")` → 明示名で登録。

    例外:
    - TypeError: 関数以外を登録しようとした場合。
    - ValueError: 同名で別の関数が登録済みの場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not inspect.isfunction(obj):
            raise TypeError(f"@drawing は関数のみ登録可能です: got {obj!r}")
        return _drawing_registry.register(resolved_name)(obj)

    # 直付け (@drawing)
    if inspect.isfunction(arg) and name is None:
        return _register_checked(arg, None)

    # 位置引数で名前を渡した (@drawing("name"))
    if isinstance(arg, str) and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    # name キーワード引数、または引数なし
    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_drawing(name: str) -> DrawingFn:
    """登録された描画関数を取得。

    例外:
        KeyError: 登録されていない場合
    """
    return _drawing_registry.get(name)


def list_drawings() -> list[str]:
    """登録されている描画関数名の一覧（ソート済み）。"""
    return sorted(_drawing_registry.list_all())


def is_drawing_registered(name: str) -> bool:
    return _drawing_registry.is_registered(name)


def unregister(name: str) -> None:
    """名前を指定して登録を解除（存在しない場合は無視）。"""
    _drawing_registry.unregister(name)


def get_registry() -> Mapping[str, Any]:
    """読み取り専用ビューとしてレジストリ辞書を返す。"""
    return _drawing_registry.snapshot()


__all__ = [
    "drawing",
    "get_drawing",
    "list_drawings",
    "is_drawing_registered",
    "unregister",
    "get_registry",
]
