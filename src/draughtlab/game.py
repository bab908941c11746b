"""GameState — board plus side to move, owned by the caller.

The state machine has two states:
  in progress --play, one side wiped out--> over (winner set)
  in progress --play, both sides remain--> in progress, side flipped
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from draughtlab.board import Board, Position, Side
from draughtlab.config import GameConfig
from draughtlab.errors import InvalidMove
from draughtlab.moves import Move, legal_moves_at
from draughtlab.rules import apply_move, check_victory

__all__ = ["GameState"]

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    board: Board
    to_move: Side = Side.A
    over: bool = False
    winner: Side | None = None

    @classmethod
    def from_config(cls, config: GameConfig | None = None) -> GameState:
        config = config or GameConfig()
        return cls(board=config.build_board(), to_move=config.first_to_move)

    def advance_turn(self) -> None:
        self.to_move = self.to_move.opponent

    def moves_for(self, pos: Position) -> list[Move]:
        """Return the moves of the piece at *pos* if it belongs to the side to move."""
        piece = self.board.get(pos)
        if piece is None or piece.side is not self.to_move:
            return []
        return legal_moves_at(self.board, pos)

    def play(self, move: Move) -> Side | None:
        """Apply *move* for the side to move and settle the turn.

        Returns the winner if the move ended the game.
        """
        if self.over:
            raise InvalidMove("Game is already over.")
        if not self.board.in_bounds(move.origin):
            raise InvalidMove(f"Origin {list(move.origin)} is off the board.")
        piece = self.board.get(move.origin)
        if piece is None:
            raise InvalidMove(f"No piece at {list(move.origin)}.")
        if piece.side is not self.to_move:
            raise InvalidMove(
                f"Piece at {list(move.origin)} belongs to side {piece.side.value}, "
                f"not side {self.to_move.value}."
            )
        if move not in legal_moves_at(self.board, move.origin):
            raise InvalidMove(f"No legal move {move} for the piece at {list(move.origin)}.")

        apply_move(self.board, move)

        winner = check_victory(self.board)
        if winner is not None:
            self.over = True
            self.winner = winner
            logger.info("Side %s wins", winner.value)
        else:
            self.advance_turn()
        return winner
