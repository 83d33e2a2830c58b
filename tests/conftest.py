"""共通フィクスチャ。

- 代表色
- 呼び出しを記録する色展開 / パス変換のダミー
- 設定の再読込（環境変数をいじるテスト用）
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from tests._utils.recorders import RecordingColors, RecordingPaths
from util.color import Color, rgb


@pytest.fixture()
def red() -> Color:
    return rgb(1, 0, 0)


@pytest.fixture()
def blue() -> Color:
    return rgb(0, 0, 1)


@pytest.fixture()
def recording_colors() -> RecordingColors:
    return RecordingColors()


@pytest.fixture()
def recording_paths() -> RecordingPaths:
    return RecordingPaths()


@pytest.fixture()
def reload_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """環境変数を書き換えた後に `settings.reload_from_env()` を呼ぶテスト用。終了時に既定へ戻す。"""
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()
