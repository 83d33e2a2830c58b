"""
どこで: `util.color`。
何を: 色モデル（Grayscale/RGB/CMYK）と、塗り/線の色設定命令への展開、色指定の正規化（Hex, 0–1, 0–255）。
なぜ: 描画コンパイラが色の内部表現を知らずに「色あり/なし」だけで命令列を組み立てられるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, Union

from engine.core.operator import Operator
from engine.core.operators import (
    set_filling_cmyk_color,
    set_filling_gray_color,
    set_filling_rgb_color,
    set_stroking_cmyk_color,
    set_stroking_gray_color,
    set_stroking_rgb_color,
)


@dataclass(frozen=True)
class Grayscale:
    gray: float


@dataclass(frozen=True)
class RGB:
    red: float
    green: float
    blue: float


@dataclass(frozen=True)
class CMYK:
    cyan: float
    magenta: float
    yellow: float
    key: float


Color = Union[Grayscale, RGB, CMYK]

# 描画オプションで受け付ける色指定（Color、Hex 文字列、0–1 または 0–255 の 3 要素）
ColorLike = Union[Color, str, Sequence[float]]


def _check_unit(name: str, value: float) -> float:
    v = float(value)
    if not 0.0 <= v <= 1.0:
        raise ValueError(f"{name} must be in [0, 1]: got {value!r}")
    return v


def grayscale(gray: float) -> Grayscale:
    return Grayscale(_check_unit("gray", gray))


def rgb(red: float, green: float, blue: float) -> RGB:
    return RGB(_check_unit("red", red), _check_unit("green", green), _check_unit("blue", blue))


def cmyk(cyan: float, magenta: float, yellow: float, key: float) -> CMYK:
    return CMYK(
        _check_unit("cyan", cyan),
        _check_unit("magenta", magenta),
        _check_unit("yellow", yellow),
        _check_unit("key", key),
    )


def set_filling_color(color: Color) -> Operator:
    """塗り色の設定命令（g / rg / k）。"""
    if isinstance(color, Grayscale):
        return set_filling_gray_color(color.gray)
    if isinstance(color, RGB):
        return set_filling_rgb_color(color.red, color.green, color.blue)
    if isinstance(color, CMYK):
        return set_filling_cmyk_color(color.cyan, color.magenta, color.yellow, color.key)
    raise TypeError(f"unsupported color type: {type(color)!r}")


def set_stroking_color(color: Color) -> Operator:
    """線色の設定命令（G / RG / K）。"""
    if isinstance(color, Grayscale):
        return set_stroking_gray_color(color.gray)
    if isinstance(color, RGB):
        return set_stroking_rgb_color(color.red, color.green, color.blue)
    if isinstance(color, CMYK):
        return set_stroking_cmyk_color(color.cyan, color.magenta, color.yellow, color.key)
    raise TypeError(f"unsupported color type: {type(color)!r}")


def color_to_components(color: Color) -> tuple[float, ...]:
    if isinstance(color, Grayscale):
        return (color.gray,)
    if isinstance(color, RGB):
        return (color.red, color.green, color.blue)
    if isinstance(color, CMYK):
        return (color.cyan, color.magenta, color.yellow, color.key)
    raise TypeError(f"unsupported color type: {type(color)!r}")


def components_to_color(components: Sequence[float] | None) -> Color | None:
    """成分数から色を復元する（1→Grayscale, 3→RGB, 4→CMYK, それ以外→None）。"""
    if not components:
        return None
    n = len(components)
    if n == 1:
        return grayscale(components[0])
    if n == 3:
        return rgb(components[0], components[1], components[2])
    if n == 4:
        return cmyk(components[0], components[1], components[2], components[3])
    return None


# === 正規化（Hex / 0–1 / 0–255 → RGB） ===


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color_str(s: str) -> RGB:
    """Hex 文字列から RGB(0–1) を返す。

    受理形式: "#RRGGBB", "0xRRGGBB", "RRGGBB", "#RGB"。大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) == 3:
        t = "".join(ch * 2 for ch in t)
    if len(t) != 6:
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RGB)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return RGB(r / 255.0, g / 255.0, b / 255.0)


def normalize_color(value: ColorLike) -> Color:
    """色指定を `Color` へ正規化する。

    - 受理: `Color` インスタンス（そのまま）, Hex 文字列, (r,g,b)（0–1 または 0–255）
    - 返値: `Color`
    """
    if isinstance(value, (Grayscale, RGB, CMYK)):
        return value
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if len(value) != 3:
        raise ValueError("color tuple/list must be length 3")
    try:
        fseq = [float(v) for v in value]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    # まず 0–1 とみなし、全要素が範囲内ならそのまま
    if all(0.0 <= x <= 1.0 for x in fseq):
        return RGB(*fseq)
    # 次に 0–255 とみなし、整数丸め → 0–1 へスケール
    r, g, b = (max(0, min(255, int(round(x)))) for x in fseq)
    return RGB(_clamp01(r / 255.0), _clamp01(g / 255.0), _clamp01(b / 255.0))


# === 描画コンパイラへ注入する能力 ===


class ColorExpander(Protocol):
    """色を塗り/線それぞれの色設定命令列へ展開する能力。"""

    def fill(self, color: Color) -> list[Operator]: ...

    def stroke(self, color: Color) -> list[Operator]: ...


class DeviceColorExpander:
    """デバイス色空間（DeviceGray/RGB/CMYK）への既定の展開。"""

    def fill(self, color: Color) -> list[Operator]:
        return [set_filling_color(color)]

    def stroke(self, color: Color) -> list[Operator]:
        return [set_stroking_color(color)]


DEFAULT_COLORS: ColorExpander = DeviceColorExpander()


__all__ = [
    "Grayscale",
    "RGB",
    "CMYK",
    "Color",
    "ColorLike",
    "grayscale",
    "rgb",
    "cmyk",
    "set_filling_color",
    "set_stroking_color",
    "color_to_components",
    "components_to_color",
    "parse_hex_color_str",
    "normalize_color",
    "ColorExpander",
    "DeviceColorExpander",
    "DEFAULT_COLORS",
]
