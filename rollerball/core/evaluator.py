"""Material-only static evaluator. Positive scores favor white."""

import chess

from rollerball.config import CONFIG, PIECE_VALUES
from rollerball.core.board import Board, PIECE_TYPES, is_white


class Evaluator:
    def __init__(self, piece_values=None):
        values = {**PIECE_VALUES, **(piece_values or CONFIG.eval.piece_values)}
        # Map python-chess piece types to configured values ("PAWN" -> chess.PAWN).
        self.values = {pt: values[chess.piece_name(pt).upper()] for pt in PIECE_TYPES}

    def evaluate(self, board: Board) -> int:
        score = 0
        for piece in board.piece_map().values():
            value = self.values[piece.piece_type]
            score += value if is_white(piece) else -value
        return score


_default = None


def evaluate(board: Board) -> int:
    global _default
    if _default is None:
        _default = Evaluator()
    return _default.evaluate(board)
