"""
どこで: `api.drawings`（描画コンパイラの高レベル API）。
何を: 登録済み描画関数を名前で解決して命令列を返す薄いファサード `D`。
なぜ: 利用者が描画の種類を文字列/属性で選び、命令列またはバイト列まで一手で得られるようにするため。

Notes
-----
- `from api import D` として `D.draw_rectangle(opts)` / `D.compile("drawRectangle", opts)` のように呼ぶ。
- 名前は正規化される（"drawSvgPath" / "draw-svg-path" / "draw_svg_path" は同一）。
- 実体は `drawings.registry` の関数を `fn(*args, **kwargs)` で直接呼ぶだけ。キャッシュは持たない
  （各描画関数は純関数で、呼び出しごとに新しいリストを返す）。
- 例外方針: 未登録名は `AttributeError`。描画関数側の例外はそのまま伝播。

Examples
--------
    from api import D
    from drawings import DrawRectangleOptions
    from util.color import rgb

    ops = D.draw_rectangle(DrawRectangleOptions(x=10, y=10, width=50, height=20, color=rgb(1, 0, 0)))
    data = D.serialize("draw_rectangle", DrawRectangleOptions(x=0, y=0, width=1, height=1))
"""

from __future__ import annotations

import logging
from typing import Any, Callable

# レジストリ登録の副作用を発火させるため、drawings パッケージを 1 度だけ import すれば十分
import drawings  # noqa: F401  (登録目的の副作用)
from common import settings
from drawings.registry import get_drawing, is_drawing_registered, list_drawings
from engine.core.operator import Operator
from engine.export.content_stream import serialize

logger = logging.getLogger(__name__)


class DrawingsAPI:
    """描画関数の動的ディスパッチ（`D` の実体）。"""

    def compile(self, name: str, *args: Any, **kwargs: Any) -> list[Operator]:
        """名前で描画関数を解決し、命令列を返す。

        例外:
            AttributeError: 未登録の名前。
        """
        try:
            fn = get_drawing(name)
        except KeyError as exc:
            raise AttributeError(f"drawing '{name}' is not registered") from exc
        ops = fn(*args, **kwargs)
        if settings.get().DEBUG_OPERATORS:
            logger.debug("%s -> %s", name, " ".join(op.name for op in ops))
        return ops

    def serialize(self, name: str, *args: Any, decimals: int | None = None, **kwargs: Any) -> bytes:
        """`compile` の結果をコンテンツストリームのバイト列で返す。"""
        return serialize(self.compile(name, *args, **kwargs), decimals=decimals)

    def names(self) -> list[str]:
        return list_drawings()

    def __getattr__(self, name: str) -> Callable[..., list[Operator]]:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            registered = is_drawing_registered(name)
        except (TypeError, ValueError):
            registered = False
        if not registered:
            raise AttributeError(f"drawing '{name}' is not registered")

        def _call(*args: Any, **kwargs: Any) -> list[Operator]:
            return self.compile(name, *args, **kwargs)

        _call.__name__ = name
        return _call

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(list_drawings()))


D = DrawingsAPI()


__all__ = ["DrawingsAPI", "D"]
