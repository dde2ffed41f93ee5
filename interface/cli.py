"""Play Rollerball in the terminal: you are white, the engine plays black."""

import argparse
import logging
import time

from rollerball.config import CONFIG
from rollerball.core.board import STARTING_PLACEMENT
from rollerball.main import Engine

HELP = "Enter a move like a2a3, or: moves, undo, quit"


def main(argv=None):
    parser = argparse.ArgumentParser(prog="rollerball", description=__doc__)
    parser.add_argument("--depth", type=int, default=CONFIG.search.depth, help="engine search depth")
    parser.add_argument("--delay", type=float, default=CONFIG.ui.think_delay_ms / 1000,
                        help="seconds the engine pauses before replying")
    parser.add_argument("--placement", default=STARTING_PLACEMENT,
                        help="starting position, e.g. rnknr/ppppp/5/5/PPPPP/RNKNR")
    args = parser.parse_args(argv)

    try:
        engine = Engine(depth=args.depth, placement=args.placement)
    except ValueError as e:
        parser.error(f"invalid --placement: {e}")

    logging.basicConfig(level=CONFIG.log_level)
    print(HELP)

    while not engine.is_game_over():
        engine.print_board()
        print("----------------------------")

        if engine.white_to_move:  # human plays white
            command = input("Your move: ").strip().lower()
            if command in ("quit", "exit"):
                break
            if command == "moves":
                print(" ".join(engine.get_legal_moves()))
                continue
            if command == "undo":
                # take back the engine's reply and your move
                engine.undo_move()
                engine.undo_move()
                continue
            if not engine.make_move(command):
                print("Invalid move!")
                continue
        else:
            print("Black (AI) thinking...")
            time.sleep(args.delay)
            move = engine.play_best_move()
            if move is None:
                break
            print(f"Engine plays: {move} | Eval: {engine.evaluate()}")

    engine.print_board()
    print(engine.status())


if __name__ == "__main__":
    main()
