import enum
from dataclasses import dataclass
from typing import Callable, Iterator, NamedTuple

# ---- 方向（4方向、乱数の四分位で選ぶ） ----


class Direction(enum.Enum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @classmethod
    def gen(cls, r: float) -> "Direction":
        """
        [0,1) の一様乱数を方向に写す。
        [0,0.25)→UP, [0.25,0.5)→RIGHT, [0.5,0.75)→DOWN, [0.75,1)→LEFT
        境界値は右側のバケットに入る（重複なし）。
        """
        if not (0.0 <= r < 1.0):
            raise ValueError(f"random value must be in [0, 1): {r!r}")
        if r < 0.25:
            return cls.UP
        if r < 0.5:
            return cls.RIGHT
        if r < 0.75:
            return cls.DOWN
        return cls.LEFT

    @property
    def delta(self) -> tuple[int, int]:
        return DELTA[self]


DELTA = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


@dataclass(frozen=True)
class Posn:
    x: int
    y: int

    def shift(self, dx: int, dy: int) -> "Posn":
        # 座標は符号付き。グリッド外（負を含む）は within_bounds で弾く
        return Posn(self.x + dx, self.y + dy)

    def neighbor(self, d: Direction) -> "Posn":
        dx, dy = d.delta
        return self.shift(dx * 2, dy * 2)


class WalkEvent(NamedTuple):
    kind: str          # "move" / "backtrack"
    posn: Posn         # move: 新しい先頭, backtrack: 取り除いたセル
    trail_len: int
    visited: int


class Map:
    """
    2セル刻みの自己回避ランダムウォーク（スタックによるバックトラック付き）。
    1歩目と2歩目の両方を訪問済みにするので、平行する通路の間に幅1の壁が残る。
    """

    def __init__(self, width: int, height: int):
        if width < 3 or height < 3:
            raise ValueError("width/height must be >= 3")

        self.width = width
        self.height = height
        self.bits = [False] * (width * height)
        self.visited = 0
        self.trail: list[Posn] = []

        start = Posn(width // 2 + 1, height // 2 + 1)
        self.visit(start)
        self.trail.append(start)

    def within_bounds(self, posn: Posn) -> bool:
        return 0 <= posn.x < self.width and 0 <= posn.y < self.height

    def check(self, posn: Posn) -> bool:
        if not self.within_bounds(posn):
            return False
        return self.bits[posn.y * self.width + posn.x]

    def visit(self, posn: Posn) -> None:
        if not self.within_bounds(posn):
            return
        i = posn.y * self.width + posn.x
        if not self.bits[i]:
            self.bits[i] = True
            self.visited += 1

    def posn(self) -> Posn:
        return self.trail[-1]

    def can_move(self, d: Direction) -> bool:
        neighbor = self.posn().neighbor(d)
        return self.within_bounds(neighbor) and not self.check(neighbor)

    def is_stuck(self) -> bool:
        return not any(self.can_move(d) for d in Direction)

    def move_to(self, d: Direction) -> bool:
        """2セル先へ進む。進めない方向なら何もせず False。"""
        if not self.can_move(d):
            return False

        posn = self.posn()
        dx, dy = d.delta
        self.visit(posn.shift(dx, dy))
        self.visit(posn.shift(dx * 2, dy * 2))
        self.trail.append(posn.neighbor(d))
        return True

    def backtrack(self) -> Posn:
        return self.trail.pop()

    def walk(self, rand: Callable[[], float]) -> Iterator[WalkEvent]:
        """
        メインループ。rand は [0,1) の一様乱数を返す関数。
        行き止まりならトレイルを戻り、空になったら終了する。
        選んだ方向に進めなければ次の反復で引き直す。
        """
        while self.trail:
            d = Direction.gen(rand())

            while self.is_stuck():
                popped = self.backtrack()
                yield WalkEvent("backtrack", popped, len(self.trail), self.visited)
                if not self.trail:
                    return

            if self.move_to(d):
                yield WalkEvent("move", self.posn(), len(self.trail), self.visited)

    def carve(self, rand: Callable[[], float]) -> int:
        moves = 0
        for ev in self.walk(rand):
            if ev.kind == "move":
                moves += 1
        return moves

    def visited_count(self) -> int:
        return self.visited

    def iter(self) -> Iterator[tuple[int, int, bool]]:
        # 行優先。要素数はちょうど width*height
        for i in range(self.width * self.height):
            y, x = divmod(i, self.width)
            yield x, y, self.bits[i]

    def __iter__(self):
        return self.iter()
