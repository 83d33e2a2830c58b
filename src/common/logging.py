"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 既定では各モジュールが `logging.getLogger(__name__)` でロガーを取得する。
- 描画コンパイラ自体はハンドラを設定しない（ライブラリとして振る舞う）。
- 組み込み先アプリに設定が無い場合のみ、最小構成を 1 度だけ適用するヘルパーを提供する。
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_default_logging(level: int | str = "INFO") -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - 不明なレベル名は INFO として扱う
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
        if not isinstance(lvl, int):
            lvl = logging.INFO
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(level=lvl, format=_FORMAT)


__all__ = ["setup_default_logging"]
