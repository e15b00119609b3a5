import random
import argparse

from walker import Map
from pixel_canvas import Canvas, BLACK, WHITE, parse_color
from export import export_canvas


def generate_map(width: int, height: int, seed: int | None = None) -> Map:
    rnd = random.Random(seed)
    m = Map(width, height)
    m.carve(rnd.random)
    return m


def render_map(m: Map, cnv: Canvas, color=BLACK) -> int:
    # 訪問済みセル → 不透明ピクセル（セル座標 = ピクセル座標）
    drawn = 0
    for x, y, visited in m.iter():
        if visited:
            cnv.draw(x, y, color)
            drawn += 1
    return drawn


def main(argv=None):
    ap = argparse.ArgumentParser(description="Self-avoiding random walk map")
    ap.add_argument("--width", type=int, default=901)
    ap.add_argument("--height", type=int, default=901)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--fg", type=parse_color, default=BLACK, help="path color r,g,b[,a]")
    ap.add_argument("--bg", type=parse_color, default=WHITE, help="background color r,g,b[,a]")
    ap.add_argument("--out", type=str, default="map.png")
    ap.add_argument("--pdf", type=str, default=None, help="also write an A4 PDF")
    args = ap.parse_args(argv)

    try:
        m = generate_map(args.width, args.height, seed=args.seed)
    except ValueError as e:
        ap.error(str(e))
    print(f"Carved: {m.visited_count()} of {args.width * args.height} cells")

    cnv = Canvas(args.width, args.height, background=args.bg)
    render_map(m, cnv, color=args.fg)

    export_canvas(cnv, args.out, args.pdf)


if __name__ == "__main__":
    main()
