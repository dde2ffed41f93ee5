"""Game session wrapper that drivers (CLI, REST API) play through."""

import logging
from typing import List, Optional, Tuple

import chess

from rollerball.core.board import Board, STARTING_PLACEMENT
from rollerball.core.evaluator import Evaluator
from rollerball.core.moves import Move, apply_move, generate_moves
from rollerball.core.search import SearchEngine

logger = logging.getLogger(__name__)


def side_name(color: chess.Color) -> str:
    return "White" if color == chess.WHITE else "Black"


class Engine:
    def __init__(self, depth=None, placement: str = STARTING_PLACEMENT, white_to_move: bool = True):
        """Initialize from a placement string or the starting position."""
        self.search = SearchEngine(Evaluator(), depth=depth)
        self.set_position(placement, white_to_move)

    def reset(self):
        """Reset to the initial position, white to move."""
        self.set_position(STARTING_PLACEMENT, True)

    def set_position(self, placement: str, white_to_move: bool = True):
        """Set the position; raises ValueError on a malformed placement."""
        self.board = Board(placement)
        self.turn = chess.WHITE if white_to_move else chess.BLACK
        self.move_history: List[str] = []
        self._previous: List[Board] = []

    @property
    def white_to_move(self) -> bool:
        return self.turn == chess.WHITE

    def get_legal_moves(self) -> List[str]:
        return [m.uci() for m in generate_moves(self.board, self.turn)]

    def make_move(self, move_str: str) -> bool:
        """Play a move such as 'a2a3' for the side to move. Returns True if legal."""
        if self.winner() is not None:
            return False
        try:
            move = Move.from_uci(move_str)
        except ValueError:
            return False
        if move not in generate_moves(self.board, self.turn):
            return False
        self._push(move)
        return True

    def _push(self, move: Move):
        self._previous.append(self.board)
        self.board = apply_move(self.board, move)
        self.move_history.append(move.uci())
        self.turn = not self.turn

    def undo_move(self):
        """Take back the last ply."""
        if self.move_history:
            self.board = self._previous.pop()
            self.move_history.pop()
            self.turn = not self.turn

    def get_best_move(self, depth: Optional[int] = None) -> Tuple[Optional[str], int]:
        """Best move for the side to move and its score (positive favors white)."""
        result = self.search.search_best_move(self.board, self.turn, depth)
        return (result.move.uci() if result.move else None), result.score

    def play_best_move(self, depth: Optional[int] = None) -> Optional[str]:
        """Search and play. None means there is no continuation."""
        if self.winner() is not None:
            return None
        result = self.search.search_best_move(self.board, self.turn, depth)
        if result.move is None:
            logger.info("%s has no move to play", side_name(self.turn))
            return None
        self._push(result.move)
        return result.move.uci()

    def evaluate(self) -> int:
        return self.search.evaluator.evaluate(self.board)

    def winner(self) -> Optional[chess.Color]:
        """Color that captured the opposing king, if any."""
        if not self.board.has_king(chess.WHITE):
            return chess.BLACK
        if not self.board.has_king(chess.BLACK):
            return chess.WHITE
        return None

    def is_game_over(self) -> bool:
        return self.winner() is not None or not generate_moves(self.board, self.turn)

    def status(self) -> str:
        winner = self.winner()
        if winner is not None:
            return f"Game over! {side_name(winner)} wins!"
        if not generate_moves(self.board, self.turn):
            return f"Game over! {side_name(self.turn)} has no legal moves."
        return f"{side_name(self.turn)} to move"

    def print_board(self):
        """Print the board with piece glyphs."""
        print(self.board.unicode())
