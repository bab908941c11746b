"""Move application and victory detection."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from draughtlab.board import Board, Position, Side
from draughtlab.errors import InvalidMove
from draughtlab.moves import DIRECTIONS, JumpChain, Move, Slide

__all__ = [
    "ValidationResult",
    "apply_move",
    "check_victory",
    "count_pieces",
    "validate_move",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Result of checking a move's structure against a board."""

    legal: bool
    reason: str | None = None


def _diagonal_step(a: Position, b: Position) -> tuple[int, int] | None:
    dx, dy = b[0] - a[0], b[1] - a[1]
    if abs(dx) == 1 and abs(dy) == 1:
        return dx, dy
    return None


# ── Validation ───────────────────────────────────────────────────


def validate_move(board: Board, move: Move) -> ValidationResult:
    """Check a move against the board. Does not modify the board.

    Beyond the move's shape this checks that every step goes in a
    direction the moving piece may take, that each captured square holds
    an opposing piece, and that every landing is empty.
    """
    if isinstance(move, Slide):
        squares = [move.origin, move.destination]
    elif isinstance(move, JumpChain):
        if not move.landings:
            return ValidationResult(legal=False, reason="Jump chain has no landings.")
        if len(move.captures) != len(move.landings):
            return ValidationResult(
                legal=False,
                reason=f"Jump chain has {len(move.captures)} captures "
                f"but {len(move.landings)} landings.",
            )
        squares = [move.origin, *move.captures, *move.landings]
    else:
        return ValidationResult(legal=False, reason=f"Unknown move type: {move!r}.")

    for sq in squares:
        if not board.in_bounds(sq):
            return ValidationResult(
                legal=False, reason=f"Square {list(sq)} is off the board."
            )

    piece = board.get(move.origin)
    if piece is None:
        return ValidationResult(
            legal=False, reason=f"No piece at {list(move.origin)}."
        )
    directions = DIRECTIONS[piece]

    if isinstance(move, Slide):
        step = _diagonal_step(move.origin, move.destination)
        if step is None:
            return ValidationResult(
                legal=False,
                reason=f"Slide {move} is not a single diagonal step.",
            )
        if step not in directions:
            return ValidationResult(
                legal=False,
                reason=f"Slide {move} goes in a direction the piece cannot move.",
            )
    else:
        if len(set(move.captures)) != len(move.captures):
            return ValidationResult(
                legal=False, reason="Jump chain captures a square twice."
            )
        current = move.origin
        for cap, land in zip(move.captures, move.landings):
            step = _diagonal_step(current, cap)
            if step is None:
                return ValidationResult(
                    legal=False,
                    reason=f"Capture {list(cap)} is not diagonally adjacent "
                    f"to {list(current)}.",
                )
            if step not in directions:
                return ValidationResult(
                    legal=False,
                    reason=f"Capture {list(cap)} is in a direction the piece "
                    f"cannot move.",
                )
            beyond = (cap[0] + step[0], cap[1] + step[1])
            if land != beyond:
                return ValidationResult(
                    legal=False,
                    reason=f"Landing {list(land)} is not directly beyond "
                    f"capture {list(cap)}.",
                )
            victim = board.get(cap)
            if victim is None or victim.side == piece.side:
                return ValidationResult(
                    legal=False,
                    reason=f"Capture {list(cap)} does not hold an opposing piece.",
                )
            if board.get(land) is not None:
                return ValidationResult(
                    legal=False, reason=f"Landing {list(land)} is occupied."
                )
            current = land

    if board.get(move.destination) is not None:
        return ValidationResult(
            legal=False, reason=f"Destination {list(move.destination)} is occupied."
        )

    return ValidationResult(legal=True)


# ── Move execution ───────────────────────────────────────────────


def apply_move(board: Board, move: Move) -> None:
    """Apply *move* to *board* in place.

    The move is validated before anything is written, so a rejected
    move raises InvalidMove and leaves the board unchanged.
    """
    result = validate_move(board, move)
    if not result.legal:
        logger.warning("Rejected move %s: %s", move, result.reason)
        raise InvalidMove(result.reason)

    piece = board.get(move.origin)
    for sq in move.captured:
        board.set(sq, None)
    board.set(move.origin, None)
    board.set(move.destination, piece)
    logger.debug("Applied %s move %s", piece.symbol, move)


# ── Game-over detection ──────────────────────────────────────────


def count_pieces(board: Board) -> dict[Side, int]:
    """Count remaining pieces (men and kings) for each side."""
    counts = {Side.A: 0, Side.B: 0}
    for _, piece in board.pieces():
        counts[piece.side] += 1
    return counts


def check_victory(board: Board) -> Side | None:
    """Return the winning side if the other side has no pieces left.

    Side A is checked first, so a board with no pieces at all reports
    side B as the winner.
    """
    counts = count_pieces(board)
    if counts[Side.A] == 0:
        return Side.B
    if counts[Side.B] == 0:
        return Side.A
    return None
