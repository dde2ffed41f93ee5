import logging
import math
import time
from typing import NamedTuple, Optional

import chess

from rollerball.config import CONFIG
from rollerball.core.board import Board
from rollerball.core.evaluator import Evaluator
from rollerball.core.moves import Move, apply_move, generate_moves
from rollerball.core.utils import format_info

logger = logging.getLogger(__name__)

INF = math.inf
WIN_SCORE = 9999  # a king has been captured


class SearchResult(NamedTuple):
    score: int
    move: Optional[Move]


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None, depth: Optional[int] = None,
                 use_alpha_beta: Optional[bool] = None):
        self.evaluator = evaluator or Evaluator()
        self.max_depth = CONFIG.search.depth if depth is None else depth
        self.use_alpha_beta = CONFIG.search.use_alpha_beta if use_alpha_beta is None else use_alpha_beta
        self.nodes = 0

    def search_best_move(self, board: Board, color: chess.Color, depth: Optional[int] = None) -> SearchResult:
        """Search from the root for ``color`` and log a summary line."""
        d = self.max_depth if depth is None else depth
        self.nodes = 0
        start_time = time.time()

        result = self.minimax(board, d, -INF, INF, color == chess.WHITE)

        elapsed = time.time() - start_time
        logger.info(format_info(d, result.score, self.nodes, elapsed, result.move, WIN_SCORE))
        return result

    def minimax(self, board: Board, depth: int, alpha: float, beta: float, maximizing: bool) -> SearchResult:
        self.nodes += 1

        # King capture decides the game before depth or mobility matter.
        if not board.has_king(chess.WHITE):
            return SearchResult(-WIN_SCORE, None)
        if not board.has_king(chess.BLACK):
            return SearchResult(WIN_SCORE, None)

        if depth <= 0:
            return SearchResult(self.evaluator.evaluate(board), None)

        moves = generate_moves(board, chess.WHITE if maximizing else chess.BLACK)
        if not moves:
            return SearchResult(self.evaluator.evaluate(board), None)

        best_move = None
        if maximizing:
            best_score = -INF
            for move in moves:
                score = self.minimax(apply_move(board, move), depth - 1, alpha, beta, False).score
                # strict '>' keeps the first move among equals
                if score > best_score:
                    best_score = score
                    best_move = move
                alpha = max(alpha, score)
                if self.use_alpha_beta and beta <= alpha:
                    break
        else:
            best_score = INF
            for move in moves:
                score = self.minimax(apply_move(board, move), depth - 1, alpha, beta, True).score
                if score < best_score:
                    best_score = score
                    best_move = move
                beta = min(beta, score)
                if self.use_alpha_beta and beta <= alpha:
                    break

        return SearchResult(best_score, best_move)


def search(board: Board, depth: int, alpha: float = -INF, beta: float = INF,
           maximizing: bool = True) -> SearchResult:
    """Minimax with alpha-beta pruning; ``maximizing`` means white to move."""
    return SearchEngine(depth=depth, use_alpha_beta=True).minimax(board, depth, alpha, beta, maximizing)
