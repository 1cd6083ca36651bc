import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from draughts.config import CONFIG, Config
from draughts.core.board import CheckersBoard, Color, Move, apply_move, validate_board
from draughts.core.errors import InvalidSearchDepth
from draughts.core.evaluator import INF, Evaluator
from draughts.core.movegen import MoveShuffler, generate_for_color, generate_for_piece
from draughts.core.utils import format_info

logger = logging.getLogger(__name__)

# Nudge applied to a cut-off node's value so that a pruned branch ranks
# slightly worse than a fully searched one with the same score.
PRUNE_OFFSET = 1


@dataclass
class SearchNode:
    """Best first-turn move found in one state and the state its chain continues in."""
    move: Optional[Move] = None
    next_state: int = -1


class SearchEngine:
    def __init__(self, board: CheckersBoard, config: Optional[Config] = None,
                 evaluator: Optional[Evaluator] = None, depth: Optional[int] = None,
                 seed: Optional[int] = None):
        self.board = board
        self.config = config or CONFIG
        self.evaluator = evaluator or Evaluator(self.config("Bot", "BotScoringType"))
        self.max_depth = self.config("Bot", "MaxDepth") if depth is None else depth
        self._check_depth()
        if seed is None and self.config("Bot", "NoRandom"):
            seed = 0
        self.shuffler = MoveShuffler(seed)
        self.pruning = self.config("Bot", "Optimization") != "O0"

        self.turns: List[Move] = []
        self.have_beats = False
        self.nodes = 0
        self.last_score = None
        self._arena: List[SearchNode] = []

    # ------------------------------------------------------------------
    # public interface
    # ------------------------------------------------------------------

    def find_best_turns(self, color: Color) -> List[Move]:
        """Best full turn for ``color``; empty if it has no legal move."""
        self._check_depth()
        color = Color(color)
        mtx = self.board.get_snapshot()
        validate_board(mtx)

        self._arena = []
        self.nodes = 0
        self.shuffler.reset()
        start_time = time.time()

        score = self._find_first_best_turn(mtx, color, -1, -1, 0)

        turn = []
        state = 0
        while state != -1 and self._arena[state].move is not None:
            node = self._arena[state]
            turn.append(node.move)
            state = node.next_state

        self.last_score = score
        logger.info(format_info(self.max_depth, score, self.nodes, time.time() - start_time, turn))
        return turn

    def list_moves(self, color_or_x: int, y: Optional[int] = None) -> Tuple[List[Move], bool]:
        """``list_moves(color)`` for a whole side, ``list_moves(x, y)`` for one piece.

        The result is also kept in ``turns`` and ``have_beats``.
        """
        mtx = self.board.get_snapshot()
        if y is None:
            self.turns, self.have_beats = generate_for_color(Color(color_or_x), mtx, self.shuffler)
        else:
            self.turns, self.have_beats = generate_for_piece(color_or_x, y, mtx)
        return self.turns, self.have_beats

    def _check_depth(self):
        if not isinstance(self.max_depth, int) or self.max_depth < 0:
            raise InvalidSearchDepth(f"search depth must be a non-negative integer, got {self.max_depth!r}")

    # ------------------------------------------------------------------
    # phase A: the first turn, kept as a chain of arena states
    # ------------------------------------------------------------------

    def _find_first_best_turn(self, mtx, color: Color, x: int, y: int, state: int,
                              alpha: float = -1) -> float:
        self._arena.append(SearchNode())
        best_score = -1

        if state == 0:
            turns, have_beats = generate_for_color(color, mtx, self.shuffler)
        else:
            turns, have_beats = generate_for_piece(x, y, mtx)
            if not have_beats:
                # capture chain is over, the opponent replies
                return self._evaluate(mtx, color.opponent(), 0, alpha)

        for move in turns:
            next_state = len(self._arena)
            if have_beats:
                score = self._find_first_best_turn(apply_move(mtx, move), color, move.x2, move.y2,
                                                   next_state, best_score)
            else:
                score = self._evaluate(apply_move(mtx, move), color.opponent(), 0, best_score)

            if score > best_score:
                best_score = score
                node = self._arena[state]
                node.move = move
                node.next_state = next_state if have_beats else -1

        return best_score

    # ------------------------------------------------------------------
    # phase B: alternating minimax, odd depths maximise
    # ------------------------------------------------------------------

    def _evaluate(self, mtx, color: Color, depth: int, alpha: float = -1, beta: float = INF + 1,
                  x: int = -1, y: int = -1) -> float:
        self.nodes += 1
        if depth == self.max_depth:
            # scored from the minimising side's view: larger favours the searching side
            return self.evaluator.score(mtx, depth % 2 == color)

        if x != -1:
            turns, have_beats = generate_for_piece(x, y, mtx)
            if not have_beats:
                return self._evaluate(mtx, color.opponent(), depth + 1, alpha, beta)
        else:
            turns, have_beats = generate_for_color(color, mtx, self.shuffler)

        if not turns:
            # side to move is stuck and loses
            return 0 if depth % 2 else INF

        maximizing = depth % 2 == 1
        min_score = INF + 1
        max_score = -1
        for move in turns:
            if have_beats:
                score = self._evaluate(apply_move(mtx, move), color, depth, alpha, beta, move.x2, move.y2)
            else:
                score = self._evaluate(apply_move(mtx, move), color.opponent(), depth + 1, alpha, beta)

            min_score = min(min_score, score)
            max_score = max(max_score, score)
            if maximizing:
                alpha = max(alpha, max_score)
            else:
                beta = min(beta, min_score)

            if self.pruning and alpha >= beta:
                return max_score + PRUNE_OFFSET if maximizing else min_score - PRUNE_OFFSET

        return max_score if maximizing else min_score
