from typing import List, Optional, Sequence

from draughts.core.board import CheckersBoard, Color, apply_move, parse_move
from draughts.core.movegen import generate_for_color
from draughts.core.search import SearchEngine


class Engine:
    def __init__(self, depth: Optional[int] = None, config=None, seed: Optional[int] = None):
        self.board = CheckersBoard()
        self.search = SearchEngine(self.board, config=config, depth=depth, seed=seed)

    def get_best_turn(self):
        turn = self.search.find_best_turns(self.board.turn)
        return [str(m) for m in turn], self.search.last_score

    def make_turn(self, notation: Sequence[str]):
        """Play a turn given as ['c3:e5', 'e5:g7']. Raises IllegalMove."""
        mtx = self.board.get_snapshot()
        moves = []
        for text in notation:
            move = parse_move(text, mtx)
            moves.append(move)
            mtx = apply_move(mtx, move)
        self.board.make_turn(moves)

    def legal_moves(self) -> List[str]:
        moves, _ = generate_for_color(self.board.turn, self.board.grid)
        return [str(m) for m in moves]

    def winner(self) -> Optional[Color]:
        """The side that wins because its opponent cannot move, else None."""
        if self.legal_moves():
            return None
        return self.board.turn.opponent()

    def print_board(self):
        self.board.print_board()
