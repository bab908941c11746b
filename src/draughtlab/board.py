"""Draughts board — N×N grid addressed by (x, y) positions.

Cells hold a PieceKind or None (empty). Internally the grid is stored
row-major, so position (x, y) lives at ``grid[y][x]``.

Piece symbols (used by layouts and debug output):
  "."  — empty
  "a"  — side A man
  "A"  — side A king
  "b"  — side B man
  "B"  — side B king

Side A men move toward increasing y, side B men toward decreasing y.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from draughtlab.errors import OutOfRange

__all__ = ["Board", "Cell", "PieceKind", "Position", "Rank", "Side"]

Position = tuple[int, int]  # (x, y)


class Side(Enum):
    A = "a"
    B = "b"

    @property
    def opponent(self) -> Side:
        return Side.B if self is Side.A else Side.A


class Rank(Enum):
    MAN = "man"
    KING = "king"


class PieceKind(Enum):
    """Every piece the engine knows about: {man, king} × {A, B}."""

    A_MAN = "a"
    A_KING = "A"
    B_MAN = "b"
    B_KING = "B"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def side(self) -> Side:
        return Side.A if self in (PieceKind.A_MAN, PieceKind.A_KING) else Side.B

    @property
    def rank(self) -> Rank:
        return Rank.KING if self in (PieceKind.A_KING, PieceKind.B_KING) else Rank.MAN

    @classmethod
    def from_symbol(cls, symbol: str) -> PieceKind | None:
        """Return the piece for *symbol*, None for "."; ValueError otherwise."""
        if symbol == ".":
            return None
        return cls(symbol)


Cell = PieceKind | None


class Board:
    """Authoritative grid of cells with bounds-checked access."""

    def __init__(self, size: int, cells: list[list[Cell]] | None = None) -> None:
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        self._size = size
        if cells is None:
            self._grid: list[list[Cell]] = [[None] * size for _ in range(size)]
        else:
            if len(cells) != size or any(len(row) != size for row in cells):
                raise ValueError(f"cells must form a {size}x{size} grid")
            self._grid = [list(row) for row in cells]
            for row in self._grid:
                for cell in row:
                    _check_cell(cell)

    @classmethod
    def empty(cls, size: int = 10) -> Board:
        return cls(size)

    @classmethod
    def from_rows(cls, rows: list[list[Cell]]) -> Board:
        """Build a board from rows ordered by y (row 0 first)."""
        return cls(len(rows), rows)

    @property
    def size(self) -> int:
        return self._size

    # ── Accessors ────────────────────────────────────────────────

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self._size and 0 <= y < self._size

    def get(self, pos: Position) -> Cell:
        self._require(pos)
        x, y = pos
        return self._grid[y][x]

    def set(self, pos: Position, cell: Cell) -> None:
        self._require(pos)
        _check_cell(cell)
        x, y = pos
        self._grid[y][x] = cell

    def _require(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise OutOfRange(pos, self._size)

    # ── Whole-board views ────────────────────────────────────────

    def pieces(self) -> Iterator[tuple[Position, PieceKind]]:
        """Yield ``((x, y), piece)`` for every occupied cell, row by row."""
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                if cell is not None:
                    yield (x, y), cell

    def rows(self) -> list[list[Cell]]:
        """Return a snapshot of the grid (row 0 first) for rendering."""
        return [row[:] for row in self._grid]

    def copy(self) -> Board:
        return Board(self._size, self._grid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._grid == other._grid

    def __repr__(self) -> str:
        ranks = "/".join(
            "".join(cell.symbol if cell else "." for cell in row)
            for row in self._grid
        )
        return f"Board({self._size}, {ranks!r})"


def _check_cell(cell: object) -> None:
    if cell is not None and not isinstance(cell, PieceKind):
        raise TypeError(f"cell must be a PieceKind or None, got {cell!r}")
