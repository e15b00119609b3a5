import argparse

from PIL import Image

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)


class Canvas:
    """
    RGBA のピクセルバッファ（Pillow Image を保持）。
    draw / blend / swap は座標が範囲外なら何もしない（例外も出さない）。
    座標は符号付き int。引き算で負になった座標も範囲外として扱う。
    """

    def __init__(self, width: int, height: int, background: Color = WHITE):
        if width <= 0 or height <= 0:
            raise ValueError("width/height must be positive")

        self.width = width
        self.height = height
        self.buffer = Image.new("RGBA", (width, height), tuple(background))
        self._px = self.buffer.load()

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Color | None:
        if not self.is_inside(x, y):
            return None
        return self._px[x, y]

    def fill(self, color: Color) -> None:
        self.buffer.paste(tuple(color), (0, 0, self.width, self.height))

    def draw(self, x: int, y: int, color: Color) -> None:
        if not self.is_inside(x, y):
            return
        self._px[x, y] = tuple(color)

    def blend(self, x: int, y: int, color: Color) -> None:
        # over 合成（0..1 に正規化して計算）
        if not self.is_inside(x, y):
            return

        sr, sg, sb, sa = color
        dr, dg, db, da = self._px[x, y]
        a = sa / 255.0
        inv = 1.0 - a

        def mix(s, d):
            return _clamp(round(s * a + d * inv))

        out_a = _clamp(round((a + (da / 255.0) * inv) * 255.0))
        self._px[x, y] = (mix(sr, dr), mix(sg, dg), mix(sb, db), out_a)

    def swap(self, x1: int, y1: int, x2: int, y2: int) -> None:
        # 片方でも範囲外なら両方そのまま
        if not self.is_inside(x1, y1) or not self.is_inside(x2, y2):
            return
        a = self._px[x1, y1]
        self._px[x1, y1] = self._px[x2, y2]
        self._px[x2, y2] = a

    def save(self, path: str) -> None:
        # 形式は拡張子から（失敗は OSError / ValueError のまま呼び出し側へ）
        self.buffer.save(path)


def _clamp(v: int) -> int:
    return max(0, min(255, v))


def parse_color(text: str) -> Color:
    """ "r,g,b" または "r,g,b,a" を RGBA タプルに（argparse の type= 用）。"""
    parts = text.split(",")
    try:
        values = [int(p) for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"color must be r,g,b[,a]: {text!r}")
    if len(values) == 3:
        values.append(255)
    if len(values) != 4 or any(not (0 <= v <= 255) for v in values):
        raise argparse.ArgumentTypeError(f"color must be r,g,b[,a] in 0..255: {text!r}")
    return tuple(values)
