"""Move types and legal-move generation.

Two kinds of move:
  Slide     — one diagonal step onto an empty square.
  JumpChain — one or more consecutive captures; the chain may stop
              after any capture, so every prefix of a longer chain is
              offered as a move in its own right.

Generation never modifies the board. During the capture search the
moving piece stays on its origin and captured pieces stay where they
are; a square already captured in the current chain cannot be captured
again, which is what bounds the recursion.
"""

from __future__ import annotations

from dataclasses import dataclass

from draughtlab.board import Board, PieceKind, Position, Side
from draughtlab.errors import OutOfRange

__all__ = [
    "DIRECTIONS",
    "JumpChain",
    "Move",
    "Slide",
    "all_legal_moves",
    "explore_jumps",
    "legal_moves",
    "legal_moves_at",
]

_ALL_DIAGONALS = ((-1, 1), (1, 1), (-1, -1), (1, -1))

DIRECTIONS: dict[PieceKind, tuple[tuple[int, int], ...]] = {
    PieceKind.A_MAN: ((-1, 1), (1, 1)),
    PieceKind.B_MAN: ((-1, -1), (1, -1)),
    PieceKind.A_KING: _ALL_DIAGONALS,
    PieceKind.B_KING: _ALL_DIAGONALS,
}


@dataclass(frozen=True)
class Slide:
    """A single non-capturing diagonal step."""

    origin: Position
    destination: Position

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", tuple(self.origin))
        object.__setattr__(self, "destination", tuple(self.destination))

    @property
    def captured(self) -> tuple[Position, ...]:
        return ()

    def __str__(self) -> str:
        return f"{_fmt(self.origin)}->{_fmt(self.destination)}"


@dataclass(frozen=True)
class JumpChain:
    """A capture sequence: captures[i] is jumped to reach landings[i]."""

    origin: Position
    captures: tuple[Position, ...]
    landings: tuple[Position, ...]

    def __post_init__(self) -> None:
        # Accept lists from callers but keep the move hashable.
        object.__setattr__(self, "origin", tuple(self.origin))
        object.__setattr__(self, "captures", tuple(tuple(p) for p in self.captures))
        object.__setattr__(self, "landings", tuple(tuple(p) for p in self.landings))

    @property
    def destination(self) -> Position:
        return self.landings[-1]

    @property
    def captured(self) -> tuple[Position, ...]:
        return self.captures

    def __str__(self) -> str:
        path = "->".join(_fmt(p) for p in (self.origin, *self.landings))
        caps = "x".join(_fmt(c) for c in self.captures)
        return f"{path}(captures:{caps})"


Move = Slide | JumpChain


def _fmt(pos: Position) -> str:
    return f"[{pos[0]},{pos[1]}]"


# ── Capture search ───────────────────────────────────────────────


def explore_jumps(
    board: Board,
    piece: PieceKind,
    pos: Position,
    captures: tuple[Position, ...],
    landings: tuple[Position, ...],
    out: list[Move],
    origin: Position | None = None,
) -> None:
    """Append every capture chain reachable from *pos* to *out*.

    *captures* and *landings* describe the chain walked so far (both
    empty on the first call). Each branch extends its own copy of the
    history, so sibling branches never see one another's captures.
    """
    if origin is None:
        origin = pos
    side = piece.side
    x, y = pos

    for dx, dy in DIRECTIONS[piece]:
        mid = (x + dx, y + dy)
        land = (x + 2 * dx, y + 2 * dy)

        if not board.in_bounds(land) or board.get(land) is not None:
            continue
        if not board.in_bounds(mid):
            continue
        victim = board.get(mid)
        if victim is None or victim.side == side:
            continue
        if mid in captures:
            continue  # already captured this chain

        new_captures = captures + (mid,)
        new_landings = landings + (land,)
        out.append(JumpChain(origin, new_captures, new_landings))
        explore_jumps(board, piece, land, new_captures, new_landings, out, origin)


# ── Move generation ──────────────────────────────────────────────


def legal_moves(board: Board, piece: PieceKind | None, pos: Position) -> list[Move]:
    """Return every slide and capture chain available to *piece* at *pos*.

    Slides and captures are both returned; whether captures are
    mandatory is left to the caller. An empty or unknown piece yields
    an empty list.
    """
    if not isinstance(piece, PieceKind):
        return []
    if not board.in_bounds(pos):
        raise OutOfRange(pos, board.size)

    moves: list[Move] = []
    x, y = pos
    for dx, dy in DIRECTIONS[piece]:
        step = (x + dx, y + dy)
        if board.in_bounds(step) and board.get(step) is None:
            moves.append(Slide(pos, step))

    explore_jumps(board, piece, pos, (), (), moves)
    return moves


def legal_moves_at(board: Board, pos: Position) -> list[Move]:
    """Like legal_moves, resolving the piece from the board first."""
    return legal_moves(board, board.get(pos), pos)


def all_legal_moves(board: Board, side: Side) -> list[Move]:
    """Return the moves of every piece belonging to *side*, row by row."""
    moves: list[Move] = []
    for pos, piece in board.pieces():
        if piece.side is side:
            moves.extend(legal_moves(board, piece, pos))
    return moves
