"""
どこで: `drawings` パッケージ（描画コンパイラ）。
何を: ビルトインの描画関数を import 副作用で登録し、`api.drawings` から解決できるようにする。
なぜ: 描画プリミティブの拡張点を一箇所に集約し、薄いファサードから再利用するため。

すべての描画関数は「オプション（+ ペイロード）→ `list[Operator]`」の純関数で、
出力は必ず `q` で始まり対応する `Q` で終わる。
"""

from .ellipse import KAPPA, draw_ellipse, draw_ellipse_path, ellipse_control_points
from .line import draw_line
from .options import (
    DrawEllipseOptions,
    DrawEllipsePathOptions,
    DrawImageOptions,
    DrawLineOptions,
    DrawLinesOfTextOptions,
    DrawPageOptions,
    DrawRectangleOptions,
    DrawSvgPathOptions,
    DrawTextOptions,
)
from .paint import select_paint_operator
from .placement import draw_image, draw_page
from .rectangle import draw_rectangle
from .registry import drawing, get_drawing, is_drawing_registered, list_drawings
from .svg_path import draw_svg_path
from .text import draw_lines_of_text, draw_text

__all__ = [
    "drawing",
    "get_drawing",
    "list_drawings",
    "is_drawing_registered",
    "draw_text",
    "draw_lines_of_text",
    "draw_image",
    "draw_page",
    "draw_line",
    "draw_rectangle",
    "draw_ellipse_path",
    "draw_ellipse",
    "draw_svg_path",
    "select_paint_operator",
    "ellipse_control_points",
    "KAPPA",
    "DrawTextOptions",
    "DrawLinesOfTextOptions",
    "DrawImageOptions",
    "DrawPageOptions",
    "DrawLineOptions",
    "DrawRectangleOptions",
    "DrawEllipsePathOptions",
    "DrawEllipseOptions",
    "DrawSvgPathOptions",
]
