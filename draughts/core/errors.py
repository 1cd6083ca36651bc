"""Exceptions raised for contract violations by callers of the core."""


class DraughtsError(Exception):
    pass


class InvalidPosition(DraughtsError, ValueError):
    """Coordinates off the board, or a cell without a (matching) piece."""


class InvalidBoardState(DraughtsError, ValueError):
    """Grid is not 8x8 or holds a code outside 0..4."""


class IllegalMove(DraughtsError, ValueError):
    """A move or turn that the side to move may not play."""


class InvalidSearchDepth(DraughtsError, ValueError):
    """Search depth is not a non-negative integer."""
