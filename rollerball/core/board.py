"""Immutable 6x5 Rollerball board built on python-chess piece values.

Row 0 is black's back rank (rank 6), row 5 is white's back rank (rank 1).
Cells hold a ``chess.Piece`` or ``None`` for an empty square, the same
convention ``chess.Board.piece_at`` follows.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

import chess

ROWS = 6
COLS = 5

FILE_NAMES = ["a", "b", "c", "d", "e"]
RANK_NAMES = ["1", "2", "3", "4", "5", "6"]

PIECE_TYPES = (chess.PAWN, chess.KNIGHT, chess.ROOK, chess.KING)
VALID_SYMBOLS = "PNRKpnrk"

STARTING_PLACEMENT = "rnknr/ppppp/5/5/PPPPP/RNKNR"


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < ROWS and 0 <= col < COLS


@dataclass(frozen=True, order=True)
class Square:
    row: int
    col: int

    def __post_init__(self):
        if not in_bounds(self.row, self.col):
            raise ValueError(f"square out of range: ({self.row}, {self.col})")

    @property
    def name(self) -> str:
        """Square name such as 'a2' (file letter + rank digit)."""
        return FILE_NAMES[self.col] + RANK_NAMES[ROWS - 1 - self.row]

    @classmethod
    def parse(cls, name: str) -> "Square":
        if len(name) != 2 or name[0] not in FILE_NAMES or name[1] not in RANK_NAMES:
            raise ValueError(f"invalid square name: {name!r}")
        return cls(ROWS - 1 - RANK_NAMES.index(name[1]), FILE_NAMES.index(name[0]))

    def __str__(self) -> str:
        return self.name


SQUARES = [Square(r, c) for r in range(ROWS) for c in range(COLS)]


def is_white(piece: Optional[chess.Piece]) -> bool:
    if piece is None:
        raise ValueError("empty square has no color")
    return piece.color == chess.WHITE


def is_black(piece: Optional[chess.Piece]) -> bool:
    if piece is None:
        raise ValueError("empty square has no color")
    return piece.color == chess.BLACK


def _parse_placement(placement: str) -> Tuple[Optional[chess.Piece], ...]:
    rows = placement.strip().split("/")
    if len(rows) != ROWS:
        raise ValueError(f"expected {ROWS} rows in placement, got {len(rows)}: {placement!r}")

    cells: List[Optional[chess.Piece]] = []
    for text in rows:
        row: List[Optional[chess.Piece]] = []
        previous_digit = False
        for ch in text:
            if ch.isdigit():
                # one nonzero digit per run of empty squares, as in FEN
                if ch == "0" or previous_digit:
                    raise ValueError(f"invalid empty-square count in row {text!r}")
                row.extend([None] * int(ch))
                previous_digit = True
                continue
            previous_digit = False
            if ch in VALID_SYMBOLS:
                row.append(chess.Piece.from_symbol(ch))
            else:
                raise ValueError(f"invalid piece symbol {ch!r} in placement {placement!r}")
        if len(row) != COLS:
            raise ValueError(f"row {text!r} does not cover {COLS} columns")
        cells.extend(row)
    return tuple(cells)


def _check_kings(cells: Iterable[Optional[chess.Piece]]):
    kings = [p.color for p in cells if p is not None and p.piece_type == chess.KING]
    for color in (chess.WHITE, chess.BLACK):
        if kings.count(color) > 1:
            raise ValueError(f"more than one {chess.COLOR_NAMES[color]} king on the board")


class Board:
    """A 6x5 grid of pieces with value semantics.

    Boards are never mutated after construction; ``with_changes`` and
    ``apply_move`` produce new boards, so search branches never alias.
    """

    __slots__ = ("_cells",)

    def __init__(self, placement: str = STARTING_PLACEMENT):
        cells = _parse_placement(placement)
        _check_kings(cells)
        self._cells = cells

    @classmethod
    def empty(cls) -> "Board":
        return cls("5/5/5/5/5/5")

    @classmethod
    def from_grid(cls, grid: Iterable[Iterable[Optional[chess.Piece]]]) -> "Board":
        """Build a board from six rows of five cells each."""
        cells: List[Optional[chess.Piece]] = []
        rows = [list(row) for row in grid]
        if len(rows) != ROWS or any(len(row) != COLS for row in rows):
            raise ValueError(f"grid must be {ROWS}x{COLS}")
        for row in rows:
            for piece in row:
                if piece is not None and piece.piece_type not in PIECE_TYPES:
                    raise ValueError(f"unsupported piece: {piece.symbol()}")
                cells.append(piece)
        _check_kings(cells)
        return cls._from_cells(tuple(cells))

    @classmethod
    def _from_cells(cls, cells: Tuple[Optional[chess.Piece], ...]) -> "Board":
        board = cls.__new__(cls)
        board._cells = cells
        return board

    def piece_at(self, square: Square) -> Optional[chess.Piece]:
        return self._cells[square.row * COLS + square.col]

    def with_changes(self, changes: Mapping[Square, Optional[chess.Piece]]) -> "Board":
        """Return a new board with the given squares overwritten."""
        cells = list(self._cells)
        for square, piece in changes.items():
            cells[square.row * COLS + square.col] = piece
        return Board._from_cells(tuple(cells))

    def copy(self) -> "Board":
        return Board._from_cells(self._cells)

    def piece_map(self) -> Dict[Square, chess.Piece]:
        return {sq: p for sq, p in zip(SQUARES, self._cells) if p is not None}

    def king_square(self, color: chess.Color) -> Optional[Square]:
        for sq, piece in zip(SQUARES, self._cells):
            if piece is not None and piece.piece_type == chess.KING and piece.color == color:
                return sq
        return None

    def has_king(self, color: chess.Color) -> bool:
        return chess.Piece(chess.KING, color) in self._cells

    def rows(self) -> Iterator[Tuple[Optional[chess.Piece], ...]]:
        for r in range(ROWS):
            yield self._cells[r * COLS:(r + 1) * COLS]

    def placement(self) -> str:
        """Serialize to the FEN-like placement string."""
        parts = []
        for row in self.rows():
            text = ""
            empty = 0
            for piece in row:
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    text += str(empty)
                    empty = 0
                text += piece.symbol()
            if empty:
                text += str(empty)
            parts.append(text)
        return "/".join(parts)

    def unicode(self, empty_square: str = "·") -> str:
        lines = []
        for r, row in enumerate(self.rows()):
            glyphs = " ".join(p.unicode_symbol() if p else empty_square for p in row)
            lines.append(f"{RANK_NAMES[ROWS - 1 - r]} {glyphs}")
        lines.append("  " + " ".join(FILE_NAMES))
        return "\n".join(lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self.placement())

    def __str__(self) -> str:
        return "\n".join(" ".join(p.symbol() if p else "." for p in row) for row in self.rows())

    def __repr__(self) -> str:
        return f"Board({self.placement()!r})"
