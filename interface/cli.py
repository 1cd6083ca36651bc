import logging

from draughts.config import CONFIG
from draughts.core.board import Color
from draughts.core.errors import DraughtsError
from draughts.main import Engine


def _is_bot(color, cfg):
    return cfg("Bot", "IsLightBot") if color == Color.LIGHT else cfg("Bot", "IsDarkBot")


def _bot_level(color, cfg):
    return cfg("Bot", "LightBotLevel") if color == Color.LIGHT else cfg("Bot", "DarkBotLevel")


def play(cfg=CONFIG, engine=None):
    """Run a terminal game; returns the winning Color, or None on a draw."""
    engine = engine or Engine(config=cfg)
    board = engine.board

    for _ in range(cfg("Game", "MaxNumTurns")):
        print(board.turn.name.capitalize(), "to move")
        engine.print_board()
        print("----------------------------")

        winner = engine.winner()
        if winner is not None:
            print(f"Game Over: {winner.name.lower()} wins")
            return winner

        if _is_bot(board.turn, cfg):
            engine.search.max_depth = _bot_level(board.turn, cfg)
            turn, score = engine.get_best_turn()
            engine.make_turn(turn)
            print(f"Engine plays: {' '.join(turn)} | Eval: {score:.2f}")
            continue

        while True:
            user_turn = input("Enter your turn (e.g. c3-d4, or c3:e5 e5:g7; 'undo' to take back): ")
            if user_turn.strip() == "undo":
                # take back the bot's reply too
                board.undo_turn()
                board.undo_turn()
                break
            try:
                engine.make_turn(user_turn.replace(",", " ").split())
                break
            except DraughtsError as e:
                print(f"Illegal turn ({e}), try again.")

    print("Game Over: turn limit reached, draw")
    return None


if __name__ == "__main__":
    logging.basicConfig(level=CONFIG.log_level)
    play()
