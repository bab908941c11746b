"""Tests for GameState turn handling."""

import logging

import pytest

from draughtlab.board import Board, PieceKind, Side
from draughtlab.config import GameConfig
from draughtlab.errors import InvalidMove
from draughtlab.game import GameState
from draughtlab.moves import JumpChain, Slide

A, AK, B, BK = PieceKind.A_MAN, PieceKind.A_KING, PieceKind.B_MAN, PieceKind.B_KING


@pytest.fixture
def game():
    return GameState.from_config()


def _state_with(pieces: dict, to_move: Side = Side.A) -> GameState:
    board = Board.empty(10)
    for pos, piece in pieces.items():
        board.set(pos, piece)
    return GameState(board=board, to_move=to_move)


# ------------------------------------------------------------------
# Setup
# ------------------------------------------------------------------

class TestGameSetup:
    def test_default_start(self, game):
        assert game.to_move is Side.A
        assert game.over is False
        assert game.winner is None
        assert game.board.size == 10

    def test_first_to_move_from_config(self):
        state = GameState.from_config(GameConfig(first_to_move=Side.B))
        assert state.to_move is Side.B

    def test_advance_turn(self, game):
        game.advance_turn()
        assert game.to_move is Side.B
        game.advance_turn()
        assert game.to_move is Side.A


# ------------------------------------------------------------------
# Move lookup
# ------------------------------------------------------------------

class TestMovesFor:
    def test_own_piece(self, game):
        moves = game.moves_for((2, 3))
        assert set(moves) == {Slide((2, 3), (1, 4)), Slide((2, 3), (3, 4))}

    def test_opponent_piece_has_no_moves(self, game):
        assert game.moves_for((1, 6)) == []

    def test_empty_square_has_no_moves(self, game):
        assert game.moves_for((4, 4)) == []


# ------------------------------------------------------------------
# Playing moves
# ------------------------------------------------------------------

class TestPlay:
    def test_turns_alternate(self, game):
        game.play(Slide((2, 3), (3, 4)))
        assert game.to_move is Side.B
        assert game.board.get((3, 4)) is A
        game.play(Slide((1, 6), (2, 5)))
        assert game.to_move is Side.A

    def test_wrong_side_rejected(self, game):
        before = game.board.copy()
        with pytest.raises(InvalidMove, match="belongs to side b"):
            game.play(Slide((1, 6), (2, 5)))
        assert game.board == before
        assert game.to_move is Side.A

    def test_malformed_move_keeps_turn(self, game):
        with pytest.raises(InvalidMove):
            game.play(Slide((2, 3), (2, 4)))
        assert game.to_move is Side.A

    def test_own_piece_capture_rejected(self):
        state = _state_with({(3, 3): A, (4, 4): A, (0, 9): B})
        before = state.board.copy()
        with pytest.raises(InvalidMove):
            state.play(JumpChain((3, 3), [(4, 4)], [(5, 5)]))
        assert state.board == before
        assert state.to_move is Side.A

    def test_backward_man_slide_rejected(self):
        state = _state_with({(3, 3): A, (0, 9): B})
        with pytest.raises(InvalidMove, match="No legal move"):
            state.play(Slide((3, 3), (2, 2)))
        assert state.board.get((3, 3)) is A
        assert state.board.get((2, 2)) is None
        assert state.to_move is Side.A

    def test_empty_origin_rejected(self, game):
        with pytest.raises(InvalidMove, match="No piece"):
            game.play(Slide((4, 4), (5, 5)))

    def test_move_built_from_lists_accepted(self, game):
        game.play(Slide([2, 3], [3, 4]))
        assert game.board.get((3, 4)) is A

    def test_capturing_last_piece_ends_game(self, caplog):
        state = _state_with({(3, 3): A, (4, 4): B})
        with caplog.at_level(logging.INFO, logger="draughtlab.game"):
            winner = state.play(JumpChain((3, 3), [(4, 4)], [(5, 5)]))
        assert winner is Side.A
        assert state.over is True
        assert state.winner is Side.A
        assert state.to_move is Side.A  # not flipped once over
        assert "Side a wins" in caplog.text

    def test_side_b_can_win(self):
        state = _state_with({(5, 5): BK, (4, 4): A}, to_move=Side.B)
        assert state.play(JumpChain((5, 5), [(4, 4)], [(3, 3)])) is Side.B
        assert state.over is True

    def test_no_play_after_game_over(self):
        state = _state_with({(3, 3): A, (4, 4): B})
        state.play(JumpChain((3, 3), [(4, 4)], [(5, 5)]))
        with pytest.raises(InvalidMove, match="over"):
            state.play(Slide((5, 5), (6, 6)))

    def test_play_returns_none_while_in_progress(self, game):
        assert game.play(Slide((0, 3), (1, 4))) is None
        assert game.over is False
