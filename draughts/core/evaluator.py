from typing import Optional

from draughts.config import CONFIG, SCORING_TYPES
from draughts.core.board import DARK_PAWN, DARK_QUEEN, LIGHT_PAWN, LIGHT_QUEEN, SIZE

INF = 1e9
POTENTIAL_BONUS = 0.05


class Evaluator:
    """Material ratio of the opponent over the bot: lower is better for the bot."""

    def __init__(self, scoring_mode: Optional[str] = None):
        mode = scoring_mode or CONFIG("Bot", "BotScoringType")
        # unknown modes only weaken the heuristic, so fall back to the basic one
        self.scoring_mode = mode if mode in SCORING_TYPES else "Number"

    @property
    def with_potential(self) -> bool:
        return self.scoring_mode == "NumberAndPotential"

    def score(self, board, bot_is_light: bool) -> float:
        w = wq = b = bq = 0.0
        potential = self.with_potential
        for i in range(SIZE):
            for j in range(SIZE):
                code = board[i][j]
                if code == LIGHT_PAWN:
                    w += 1
                    if potential:
                        w += POTENTIAL_BONUS * (SIZE - 1 - i)
                elif code == DARK_PAWN:
                    b += 1
                    if potential:
                        b += POTENTIAL_BONUS * i
                elif code == LIGHT_QUEEN:
                    wq += 1
                elif code == DARK_QUEEN:
                    bq += 1

        if not bot_is_light:
            w, b = b, w
            wq, bq = bq, wq
        if w + wq == 0:
            return INF
        if b + bq == 0:
            return 0
        q_coef = 5 if potential else 4
        return (b + bq * q_coef) / (w + wq * q_coef)
