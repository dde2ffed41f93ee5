"""Pseudo-legal move generation and move application.

Moves are generated in a fixed order (row-major over source squares, then
each piece's own direction order). Search relies on that order for its
tie-break, so do not sort or shuffle the output.
"""

from dataclasses import dataclass
from typing import List

import chess

from rollerball.core.board import Board, Square, SQUARES, ROWS, in_bounds, is_black, is_white

ROOK_DIRECTIONS = [(-1, 0), (1, 0), (0, -1), (0, 1)]
KNIGHT_OFFSETS = [(-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1)]
KING_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


@dataclass(frozen=True)
class Move:
    from_square: Square
    to_square: Square

    def uci(self) -> str:
        return self.from_square.name + self.to_square.name

    @classmethod
    def from_uci(cls, text: str) -> "Move":
        """Parse a move such as 'a2a3'. Raises ValueError on bad input."""
        text = text.strip()
        if len(text) != 4:
            raise ValueError(f"invalid move text: {text!r}")
        return cls(Square.parse(text[:2]), Square.parse(text[2:]))

    def __str__(self) -> str:
        return self.uci()


def owned_by(piece: chess.Piece, color: chess.Color) -> bool:
    return is_white(piece) if color == chess.WHITE else is_black(piece)


def promotion_row(color: chess.Color) -> int:
    """Row on which a pawn of ``color`` promotes."""
    return 0 if color == chess.WHITE else ROWS - 1


def generate_moves(board: Board, color: chess.Color) -> List[Move]:
    """All pseudo-legal moves for ``color``. An empty list is a valid result."""
    moves: List[Move] = []
    for sq in SQUARES:
        piece = board.piece_at(sq)
        if piece is None or not owned_by(piece, color):
            continue
        moves.extend(piece_moves(board, sq, piece))
    return moves


def piece_moves(board: Board, sq: Square, piece: chess.Piece) -> List[Move]:
    pt = piece.piece_type
    if pt == chess.PAWN:
        return _pawn_moves(board, sq, piece.color)
    if pt == chess.ROOK:
        return _slide_moves(board, sq, piece.color, ROOK_DIRECTIONS)
    if pt == chess.KNIGHT:
        return _step_moves(board, sq, piece.color, KNIGHT_OFFSETS)
    if pt == chess.KING:
        return _step_moves(board, sq, piece.color, KING_OFFSETS)
    return []


def _pawn_moves(board: Board, sq: Square, color: chess.Color) -> List[Move]:
    moves = []
    nr = sq.row + (-1 if color == chess.WHITE else 1)
    if in_bounds(nr, sq.col) and board.piece_at(Square(nr, sq.col)) is None:
        moves.append(Move(sq, Square(nr, sq.col)))
    for dc in (-1, 1):
        nc = sq.col + dc
        if not in_bounds(nr, nc):
            continue
        target = board.piece_at(Square(nr, nc))
        # Diagonals capture only, never onto an empty square.
        if target is not None and not owned_by(target, color):
            moves.append(Move(sq, Square(nr, nc)))
    return moves


def _slide_moves(board: Board, sq: Square, color: chess.Color, directions) -> List[Move]:
    moves = []
    for dr, dc in directions:
        nr, nc = sq.row + dr, sq.col + dc
        while in_bounds(nr, nc):
            dest = Square(nr, nc)
            target = board.piece_at(dest)
            if target is None:
                moves.append(Move(sq, dest))
            else:
                if not owned_by(target, color):
                    moves.append(Move(sq, dest))
                break
            nr, nc = nr + dr, nc + dc
    return moves


def _step_moves(board: Board, sq: Square, color: chess.Color, offsets) -> List[Move]:
    moves = []
    for dr, dc in offsets:
        nr, nc = sq.row + dr, sq.col + dc
        if not in_bounds(nr, nc):
            continue
        dest = Square(nr, nc)
        target = board.piece_at(dest)
        if target is None or not owned_by(target, color):
            moves.append(Move(sq, dest))
    return moves


def apply_move(board: Board, move: Move) -> Board:
    """Return the board after ``move``; ``board`` itself is left untouched.

    The move is not re-validated against the generator. Moving from an empty
    square is a caller bug and raises ValueError rather than producing a
    board with a phantom piece.
    """
    piece = board.piece_at(move.from_square)
    if piece is None:
        raise ValueError(f"no piece on {move.from_square.name} to move")

    placed = piece
    if piece.piece_type == chess.PAWN and move.to_square.row == promotion_row(piece.color):
        placed = chess.Piece(chess.KNIGHT, piece.color)

    return board.with_changes({move.to_square: placed, move.from_square: None})

