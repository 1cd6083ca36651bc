"""Core engine components: board model, move generation, evaluation and search."""

from .board import CheckersBoard, Color, Move, apply_move
from .errors import DraughtsError, IllegalMove, InvalidBoardState, InvalidPosition, InvalidSearchDepth
from .evaluator import Evaluator
from .movegen import MoveShuffler, generate_for_color, generate_for_piece
from .search import SearchEngine
