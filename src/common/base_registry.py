"""
どこで: `common.base_registry`。
何を: 名前 → 値の小さなレジストリ。キーの正規化と重複検出だけを受け持つ。
なぜ: `drawings.registry` の `@drawing` と `api.drawings` の名前解決が
      同じ規則（"drawSvgPath" / "draw-svg-path" / "draw_svg_path" を同一視）で動くようにするため。
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Callable, Generic, Iterator, Mapping, TypeVar

T = TypeVar("T")

_CAMEL_WORD_RE = re.compile(r"(.)([A-Z][a-z]+)")
_CAMEL_TAIL_RE = re.compile(r"([a-z0-9])([A-Z])")


def normalize_key(name: str) -> str:
    """レジストリキーを snake_case へ正規化する。

    - '-' は '_' に置換。
    - 大文字を含む場合のみキャメル → スネーク変換（"My-Drawing" は "my__drawing"）。

    例外:
        TypeError: 文字列以外。
        ValueError: 空文字列。
    """
    if not isinstance(name, str):
        raise TypeError(f"registry key must be str: got {type(name)!r}")
    if not name:
        raise ValueError("registry key must not be empty")
    key = name.replace("-", "_")
    if not any(c.isupper() for c in key):
        return key
    key = _CAMEL_WORD_RE.sub(r"\1_\2", key)
    return _CAMEL_TAIL_RE.sub(r"\1_\2", key).lower()


class BaseRegistry(Generic[T]):
    """正規化キーで値を引くレジストリ。

    同じキーへ同一オブジェクトを再登録するのは許容し、別オブジェクトなら `ValueError`。
    """

    def __init__(self) -> None:
        self._entries: dict[str, T] = {}

    def register(self, name: str | None = None) -> Callable[[T], T]:
        """値を登録するデコレータ（名前省略時は `__name__` から推論）。"""

        def decorator(obj: T) -> T:
            key = normalize_key(name if name else getattr(obj, "__name__", ""))
            current = self._entries.get(key)
            if current is not None and current is not obj:
                raise ValueError(f"'{key}' is already registered")
            self._entries[key] = obj
            return obj

        return decorator

    def get(self, name: str) -> T:
        key = normalize_key(name)
        try:
            return self._entries[key]
        except KeyError:
            known = ", ".join(sorted(self._entries)) or "(none)"
            raise KeyError(f"'{name}' is not registered (known: {known})") from None

    def list_all(self) -> list[str]:
        """登録順のキー一覧。"""
        return list(self._entries)

    def is_registered(self, name: str) -> bool:
        return normalize_key(name) in self._entries

    def unregister(self, name: str) -> None:
        """登録を解除する（未登録なら何もしない）。"""
        self._entries.pop(normalize_key(name), None)

    def clear(self) -> None:
        self._entries.clear()

    def snapshot(self) -> Mapping[str, T]:
        """現時点の内容の読み取り専用コピー。"""
        return MappingProxyType(dict(self._entries))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and bool(name) and self.is_registered(name)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))


__all__ = ["BaseRegistry", "normalize_key"]
