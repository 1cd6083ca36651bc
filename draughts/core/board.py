"""Board data model, the move transition, and a stateful board wrapper.

A snapshot is a plain 8x8 ``list`` of cell codes indexed ``board[x][y]``,
``x`` being the row (row 0 at the top, where light pawns promote) and ``y``
the column. The core never mutates a snapshot it was handed; ``apply_move``
always works on a copy.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Sequence

from .errors import IllegalMove, InvalidBoardState, InvalidPosition

SIZE = 8

EMPTY = 0
LIGHT_PAWN = 1
DARK_PAWN = 2
LIGHT_QUEEN = 3
DARK_QUEEN = 4

SYMBOLS = {EMPTY: ".", LIGHT_PAWN: "w", DARK_PAWN: "b", LIGHT_QUEEN: "W", DARK_QUEEN: "B"}
FILES = "abcdefgh"

Grid = List[List[int]]


class Color(IntEnum):
    LIGHT = 0
    DARK = 1

    def opponent(self) -> "Color":
        return Color(1 - self)


def is_queen(code: int) -> bool:
    return code >= LIGHT_QUEEN


def belongs_to(code: int, color: int) -> bool:
    """True if ``code`` is a piece of ``color`` (odd codes are light)."""
    return code != EMPTY and code % 2 != color


def on_board(x: int, y: int) -> bool:
    return 0 <= x < SIZE and 0 <= y < SIZE


@dataclass(frozen=True)
class Move:
    x: int
    y: int
    x2: int
    y2: int
    xb: int = -1
    yb: int = -1

    @property
    def is_capture(self) -> bool:
        return self.xb != -1

    def __str__(self) -> str:
        sep = ":" if self.is_capture else "-"
        return f"{square_name(self.x, self.y)}{sep}{square_name(self.x2, self.y2)}"


def square_name(x: int, y: int) -> str:
    return f"{FILES[y]}{SIZE - x}"


def parse_square(name: str):
    """'c3' -> (5, 2)."""
    name = name.strip().lower()
    if len(name) != 2 or name[0] not in FILES or not name[1].isdigit():
        raise InvalidPosition(f"bad square: {name!r}")
    x, y = SIZE - int(name[1]), FILES.index(name[0])
    if not on_board(x, y):
        raise InvalidPosition(f"bad square: {name!r}")
    return x, y


def parse_move(text: str, board: Sequence[Sequence[int]]) -> Move:
    """Parse 'c3-d4' or 'c3:e5'. The captured piece is located on ``board``."""
    text = text.strip()
    for sep in ("-", ":", "x"):
        if sep in text:
            src, dst = text.split(sep, 1)
            break
    else:
        raise IllegalMove(f"bad move notation: {text!r}")
    x, y = parse_square(src)
    x2, y2 = parse_square(dst)
    dx, dy = x2 - x, y2 - y
    if dx == 0 or abs(dx) != abs(dy):
        raise IllegalMove(f"not a diagonal move: {text!r}")
    sx, sy = (1 if dx > 0 else -1), (1 if dy > 0 else -1)
    xb = yb = -1
    for step in range(1, abs(dx)):
        if board[x + sx * step][y + sy * step] != EMPTY:
            xb, yb = x + sx * step, y + sy * step
            break
    return Move(x, y, x2, y2, xb, yb)


def validate_board(board) -> None:
    if len(board) != SIZE or any(len(row) != SIZE for row in board):
        raise InvalidBoardState("board must be 8x8")
    for row in board:
        for code in row:
            if code not in SYMBOLS:
                raise InvalidBoardState(f"invalid cell code: {code!r}")


def check_square(board, x: int, y: int) -> int:
    """Return the code at (x, y); raise unless it holds a piece."""
    if not on_board(x, y):
        raise InvalidPosition(f"({x}, {y}) is off the board")
    code = board[x][y]
    if code == EMPTY:
        raise InvalidPosition(f"no piece at {square_name(x, y)}")
    return code


def apply_move(board: Grid, move: Move) -> Grid:
    """Return a new grid with ``move`` played; promotes on the farthest row."""
    mtx = [row[:] for row in board]
    if move.is_capture:
        mtx[move.xb][move.yb] = EMPTY
    piece = mtx[move.x][move.y]
    if (piece == LIGHT_PAWN and move.x2 == 0) or (piece == DARK_PAWN and move.x2 == SIZE - 1):
        piece += 2
    mtx[move.x2][move.y2] = piece
    mtx[move.x][move.y] = EMPTY
    return mtx


def initial_board() -> Grid:
    mtx = [[EMPTY] * SIZE for _ in range(SIZE)]
    for x in range(SIZE):
        for y in range(SIZE):
            if (x + y) % 2 == 0:
                continue
            if x < 3:
                mtx[x][y] = DARK_PAWN
            elif x > 4:
                mtx[x][y] = LIGHT_PAWN
    return mtx


def render(board) -> str:
    lines = []
    for x in range(SIZE):
        lines.append(f"{SIZE - x} " + " ".join(SYMBOLS[c] for c in board[x]))
    lines.append("  " + " ".join(FILES))
    return "\n".join(lines)


class CheckersBoard:
    """Persistent game position: the grid, side to move and turn history."""

    def __init__(self, grid: Optional[Grid] = None, turn: Color = Color.LIGHT):
        self.grid: Grid = initial_board()
        self.turn = Color.LIGHT
        self.history: List[List[Move]] = []
        self._undo: List[Grid] = []
        if grid is not None:
            self.set_position(grid, turn)

    def reset(self):
        """Reset to the initial position."""
        self.grid = initial_board()
        self.turn = Color.LIGHT
        self.history.clear()
        self._undo.clear()

    def set_position(self, grid, turn: Color = Color.LIGHT):
        """Replace the position; the grid is validated and copied."""
        validate_board(grid)
        self.grid = [list(row) for row in grid]
        self.turn = Color(turn)
        self.history.clear()
        self._undo.clear()

    def get_snapshot(self) -> Grid:
        """Return a copy of the grid for the search."""
        return [row[:] for row in self.grid]

    def make_turn(self, moves: Sequence[Move]):
        """Commit a whole turn for the side to move, then pass the move."""
        # local import: movegen depends on this module's data model
        from .movegen import generate_for_color, generate_for_piece

        if not moves:
            raise IllegalMove("empty turn")
        mtx = self.get_snapshot()
        legal, _ = generate_for_color(self.turn, mtx)
        for i, move in enumerate(moves):
            if i > 0:
                if not moves[i - 1].is_capture:
                    raise IllegalMove(f"{move} follows a non-capture")
                legal, has_capture = generate_for_piece(moves[i - 1].x2, moves[i - 1].y2, mtx)
                if not has_capture:
                    legal = []
            if move not in legal:
                raise IllegalMove(f"illegal move: {move}")
            mtx = apply_move(mtx, move)
        last = moves[-1]
        if last.is_capture and generate_for_piece(last.x2, last.y2, mtx)[1]:
            raise IllegalMove(f"capture chain must continue from {square_name(last.x2, last.y2)}")

        self._undo.append(self.grid)
        self.grid = mtx
        self.history.append(list(moves))
        self.turn = self.turn.opponent()

    def undo_turn(self):
        """Pop the last committed turn."""
        if self.history:
            self.grid = self._undo.pop()
            self.history.pop()
            self.turn = self.turn.opponent()

    def count(self, color: Color) -> int:
        return sum(belongs_to(c, color) for row in self.grid for c in row)

    def print_board(self):
        """Print ASCII representation."""
        print(render(self.grid))
