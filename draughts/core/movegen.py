"""Legal move generation with mandatory-capture priority."""

import random
import time
from typing import List, Optional, Tuple

from .board import EMPTY, SIZE, Move, belongs_to, check_square, is_queen, on_board

DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class MoveShuffler:
    """Randomises move order; only tie-breaking in the search depends on it.

    With ``seed=None`` the generator is seeded from the wall clock. A fixed
    seed makes the order reproducible, and ``reset`` rewinds to it.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(int(time.time()) if seed is None else seed)

    def reset(self):
        if self.seed is not None:
            self._rng.seed(self.seed)

    def shuffle(self, moves: List[Move]) -> None:
        self._rng.shuffle(moves)


def _piece_captures(x: int, y: int, board) -> List[Move]:
    code = board[x][y]
    moves = []
    if not is_queen(code):
        for dx, dy in DIAGONALS:
            x2, y2 = x + 2 * dx, y + 2 * dy
            if not on_board(x2, y2) or board[x2][y2] != EMPTY:
                continue
            xb, yb = x + dx, y + dy
            mid = board[xb][yb]
            if mid == EMPTY or mid % 2 == code % 2:
                continue
            moves.append(Move(x, y, x2, y2, xb, yb))
        return moves

    for dx, dy in DIAGONALS:
        xb = yb = -1
        x2, y2 = x + dx, y + dy
        while on_board(x2, y2):
            cell = board[x2][y2]
            if cell != EMPTY:
                # own piece, or a second piece after the victim, blocks the ray
                if cell % 2 == code % 2 or xb != -1:
                    break
                xb, yb = x2, y2
            elif xb != -1:
                moves.append(Move(x, y, x2, y2, xb, yb))
            x2, y2 = x2 + dx, y2 + dy
    return moves


def _piece_steps(x: int, y: int, board) -> List[Move]:
    code = board[x][y]
    moves = []
    if not is_queen(code):
        x2 = x - 1 if code % 2 else x + 1
        for y2 in (y - 1, y + 1):
            if on_board(x2, y2) and board[x2][y2] == EMPTY:
                moves.append(Move(x, y, x2, y2))
        return moves

    for dx, dy in DIAGONALS:
        x2, y2 = x + dx, y + dy
        while on_board(x2, y2) and board[x2][y2] == EMPTY:
            moves.append(Move(x, y, x2, y2))
            x2, y2 = x2 + dx, y2 + dy
    return moves


def generate_for_piece(x: int, y: int, board) -> Tuple[List[Move], bool]:
    """Moves of the piece on (x, y); captures only, if it has any."""
    check_square(board, x, y)
    captures = _piece_captures(x, y, board)
    if captures:
        return captures, True
    return _piece_steps(x, y, board), False


def generate_for_color(color: int, board, shuffler: Optional[MoveShuffler] = None) -> Tuple[List[Move], bool]:
    """All legal moves for ``color``.

    The first piece found with a capture discards the quiet moves gathered
    so far; after that only capturing pieces contribute.
    """
    moves: List[Move] = []
    mandatory = False
    for x in range(SIZE):
        for y in range(SIZE):
            if not belongs_to(board[x][y], color):
                continue
            piece_moves, has_capture = generate_for_piece(x, y, board)
            if has_capture and not mandatory:
                mandatory = True
                moves.clear()
            if has_capture or not mandatory:
                moves.extend(piece_moves)
    if shuffler is not None:
        shuffler.shuffle(moves)
    return moves, mandatory
