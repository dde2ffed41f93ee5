"""Rollerball chess engine: a 6x5 board with kings, knights, rooks and pawns."""

from rollerball.core import (
    Board,
    Square,
    Move,
    STARTING_PLACEMENT,
    generate_moves,
    apply_move,
    evaluate,
    search,
    SearchEngine,
    SearchResult,
    WIN_SCORE,
)

__version__ = "1.0.0"
