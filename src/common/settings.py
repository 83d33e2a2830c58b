"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_float, env_int


@dataclass
class _Settings:
    # シリアライズ（数値の小数桁）
    NUMBER_DECIMALS: int = 6

    # SVG 円弧 → ベジェ近似の 1 区間あたり最大角 [deg]
    ARC_MAX_SEGMENT_DEG: float = 90.0

    # Debug
    DEBUG_OPERATORS: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 小数桁は下限 0 に丸める。
    - 円弧の分割角は (0, 90] に収める（0 以下は既定値へ戻す）。
    """
    _settings.NUMBER_DECIMALS = env_int("PGD_NUMBER_DECIMALS", 6, min_value=0) or 0

    arc = env_float("PGD_ARC_MAX_SEGMENT_DEG", 90.0, max_value=90.0)
    _settings.ARC_MAX_SEGMENT_DEG = arc if arc > 0.0 else 90.0

    _settings.DEBUG_OPERATORS = env_bool("PGD_DEBUG_OPERATORS", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
