"""draughtlab — rules engine for draughts on an N×N board."""

from draughtlab.board import Board, Cell, PieceKind, Position, Rank, Side
from draughtlab.config import GameConfig, load_config, standard_layout
from draughtlab.errors import ConfigError, DraughtsError, InvalidMove, OutOfRange
from draughtlab.game import GameState
from draughtlab.moves import (
    JumpChain,
    Move,
    Slide,
    all_legal_moves,
    explore_jumps,
    legal_moves,
    legal_moves_at,
)
from draughtlab.rules import (
    ValidationResult,
    apply_move,
    check_victory,
    count_pieces,
    validate_move,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Cell",
    "ConfigError",
    "DraughtsError",
    "GameConfig",
    "GameState",
    "InvalidMove",
    "JumpChain",
    "Move",
    "OutOfRange",
    "PieceKind",
    "Position",
    "Rank",
    "Side",
    "Slide",
    "ValidationResult",
    "all_legal_moves",
    "apply_move",
    "check_victory",
    "count_pieces",
    "explore_jumps",
    "legal_moves",
    "legal_moves_at",
    "load_config",
    "standard_layout",
]
