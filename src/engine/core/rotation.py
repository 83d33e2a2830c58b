"""
どこで: `engine.core.rotation`。
何を: 単位タグ付きの角度 `Rotation`（度/ラジアン）と、その正規化ヘルパを提供。
なぜ: 回転・スキュー角を各描画関数の境界で 1 度だけラジアンへ変換し、単位の取り違えを防ぐため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class RotationTypes(str, Enum):
    DEGREES = "degrees"
    RADIANS = "radians"


@dataclass(frozen=True)
class Rotation:
    """単位付きの角度。

    属性:
        type: 単位（`RotationTypes.DEGREES` / `RotationTypes.RADIANS`）。
        angle: 角度の値。
    """

    type: RotationTypes
    angle: float


def radians(radian_angle: float) -> Rotation:
    return Rotation(RotationTypes.RADIANS, float(radian_angle))


def degrees(degree_angle: float) -> Rotation:
    return Rotation(RotationTypes.DEGREES, float(degree_angle))


def degrees_to_radians(degree: float) -> float:
    return (float(degree) * math.pi) / 180.0


def radians_to_degrees(radian: float) -> float:
    return (float(radian) * 180.0) / math.pi


def to_radians(rotation: Rotation) -> float:
    """`Rotation` をラジアン値へ正規化する。

    例外:
        ValueError: 未知の単位タグ。
    """
    if rotation.type == RotationTypes.RADIANS:
        return float(rotation.angle)
    if rotation.type == RotationTypes.DEGREES:
        return degrees_to_radians(rotation.angle)
    raise ValueError(f"Invalid rotation: {rotation!r}")


def to_degrees(rotation: Rotation) -> float:
    """`Rotation` を度数値へ正規化する。"""
    if rotation.type == RotationTypes.RADIANS:
        return radians_to_degrees(rotation.angle)
    if rotation.type == RotationTypes.DEGREES:
        return float(rotation.angle)
    raise ValueError(f"Invalid rotation: {rotation!r}")


def reduce_rotation(degree_angle: float = 0.0) -> int:
    """ページ回転用に角度を [0, 360) の 90 度単位へ丸める。

    例: 450 → 90, -90 → 270, 100 → 90
    """
    quadrants = math.floor(float(degree_angle) / 90.0) % 4
    return int(quadrants * 90)


ZERO = radians(0.0)


__all__ = [
    "RotationTypes",
    "Rotation",
    "radians",
    "degrees",
    "degrees_to_radians",
    "radians_to_degrees",
    "to_radians",
    "to_degrees",
    "reduce_rotation",
    "ZERO",
]
