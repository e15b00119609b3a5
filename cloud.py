"""
雲のようなテクスチャ。
1ピクセル刻みのランダムウォークで半透明の黒を重ね塗りし、
最後に対角線方向のピクセル入れ替えで模様を崩す。
"""
import random
import argparse

from walker import Direction
from pixel_canvas import Canvas, parse_color
from export import export_canvas

GREY = (200, 200, 200, 255)

# (k, k') : (x-k, y-k) <-> (x+k', y+k')
SWAP_OFFSETS = ((5, 5), (4, 6), (3, 7))


def drift(cnv: Canvas, rand, steps: int, start: tuple[int, int], max_alpha: int = 55):
    """
    start から steps 回歩く。キャンバスの外には出ない（その回は何もしない）。
    入ったピクセルに alpha = int(rand() * max_alpha) の黒を blend する。
    戻り値は最終位置。
    """
    x, y = start
    for _ in range(steps):
        color = (0, 0, 0, int(rand() * max_alpha))
        dx, dy = Direction.gen(rand()).delta
        nx, ny = x + dx, y + dy
        if not cnv.is_inside(nx, ny):
            continue
        cnv.blend(nx, ny, color)
        x, y = nx, ny
    return x, y


def scramble(cnv: Canvas, rand, count: int, offsets=SWAP_OFFSETS) -> None:
    # 1パス目: 主対角線方向, 2パス目: 反対角線方向
    w, h = cnv.width, cnv.height
    for _ in range(count):
        x = int(rand() * w)
        y = int(rand() * h)
        for a, b in offsets:
            cnv.swap(x - a, y - a, x + b, y + b)

    for _ in range(count):
        x = int(rand() * w)
        y = int(rand() * h)
        for a, b in offsets:
            cnv.swap(x + a, y - a, x - b, y + b)


def generate_cloud(
    width: int,
    height: int,
    passes: int = 10,
    steps: int = 200_000,
    swaps: int = 50_000,
    seed: int | None = None,
    background=GREY,
) -> Canvas:
    rnd = random.Random(seed)
    cnv = Canvas(width, height, background=background)

    pos = (width // 2, height // 2)
    for i in range(passes):
        pos = drift(cnv, rnd.random, steps, pos)
        print(f"pass {i + 1}/{passes} done at {pos}")

    scramble(cnv, rnd.random, swaps)
    return cnv


def main(argv=None):
    ap = argparse.ArgumentParser(description="Random-walk cloud texture")
    ap.add_argument("--width", type=int, default=400)
    ap.add_argument("--height", type=int, default=400)
    ap.add_argument("--passes", type=int, default=10)
    ap.add_argument("--steps", type=int, default=200_000, help="walk steps per pass")
    ap.add_argument("--swaps", type=int, default=50_000, help="swap centers per scramble pass")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--bg", type=parse_color, default=GREY, help="background color r,g,b[,a]")
    ap.add_argument("--out", type=str, default="cloud.png")
    ap.add_argument("--pdf", type=str, default=None, help="also write an A4 PDF")
    args = ap.parse_args(argv)

    try:
        cnv = generate_cloud(
            args.width,
            args.height,
            passes=args.passes,
            steps=args.steps,
            swaps=args.swaps,
            seed=args.seed,
            background=args.bg,
        )
    except ValueError as e:
        ap.error(str(e))

    export_canvas(cnv, args.out, args.pdf)


if __name__ == "__main__":
    main()
