"""Core engine components: board, move generation, evaluator, and search."""

from .board import Board, Square, STARTING_PLACEMENT, is_white, is_black
from .moves import Move, generate_moves, apply_move
from .evaluator import Evaluator, evaluate
from .search import SearchEngine, SearchResult, search, WIN_SCORE, INF
