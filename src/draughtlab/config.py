"""Game configuration loader.

A game is configured by a YAML file with a single ``game`` mapping:

    game:
      size: 10
      first_to_move: a
      rows_per_side: 4      # used when no layout is given
      layout:               # optional, one string per rank, y = 0 first
        - ". a . a . a . a . a"
        - ...

The raw document is validated against ``schema.json`` before any
dataclass is built.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import jsonschema
import yaml

from draughtlab.board import Board, Cell, PieceKind, Side
from draughtlab.errors import ConfigError
from draughtlab.schemas import load_schema

__all__ = ["GameConfig", "load_config", "parse_config", "parse_layout", "standard_layout"]

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 10
DEFAULT_ROWS_PER_SIDE = 4


@dataclass
class GameConfig:
    size: int = DEFAULT_SIZE
    first_to_move: Side = Side.A
    rows_per_side: int = DEFAULT_ROWS_PER_SIDE
    layout: list[list[Cell]] | None = None  # None → standard layout

    def build_board(self) -> Board:
        """Return a fresh board holding the configured starting position."""
        rows = self.layout
        if rows is None:
            rows = standard_layout(self.size, self.rows_per_side)
        return Board(self.size, rows)


def standard_layout(
    size: int = DEFAULT_SIZE, rows_per_side: int = DEFAULT_ROWS_PER_SIDE
) -> list[list[Cell]]:
    """Return men on the dark squares of the first and last *rows_per_side* ranks.

    Dark squares: (x + y) % 2 == 1. Side A fills the low ranks and moves
    toward increasing y; side B fills the high ranks and moves toward
    decreasing y, so the two camps face each other.
    """
    if rows_per_side < 1 or 2 * rows_per_side > size:
        raise ConfigError(
            f"{rows_per_side} rows per side do not fit on a {size}x{size} board"
        )
    rows: list[list[Cell]] = [[None] * size for _ in range(size)]
    for y in range(size):
        for x in range(size):
            if (x + y) % 2 != 1:
                continue  # light square
            if y < rows_per_side:
                rows[y][x] = PieceKind.A_MAN
            elif y >= size - rows_per_side:
                rows[y][x] = PieceKind.B_MAN
    return rows


def parse_layout(lines: list[str], size: int) -> list[list[Cell]]:
    """Parse layout strings (whitespace-separated symbols) into grid rows."""
    if len(lines) != size:
        raise ConfigError(f"layout has {len(lines)} ranks, expected {size}")
    rows: list[list[Cell]] = []
    for y, line in enumerate(lines):
        tokens = line.split()
        if len(tokens) != size:
            raise ConfigError(
                f"layout rank {y} has {len(tokens)} cells, expected {size}"
            )
        row: list[Cell] = []
        for token in tokens:
            try:
                row.append(PieceKind.from_symbol(token))
            except ValueError:
                raise ConfigError(
                    f"unknown piece symbol {token!r} in layout rank {y}"
                ) from None
        rows.append(row)
    return rows


def parse_config(raw: dict | None) -> GameConfig:
    """Validate a raw config mapping and build a GameConfig."""
    if raw is None:
        raw = {"game": {}}
    try:
        jsonschema.validate(raw, load_schema())
    except jsonschema.ValidationError as e:
        raise ConfigError(f"Schema validation: {e.message}") from e

    g = raw["game"]
    size = g.get("size", DEFAULT_SIZE)
    layout = None
    if "layout" in g:
        layout = parse_layout(g["layout"], size)

    return GameConfig(
        size=size,
        first_to_move=Side(g.get("first_to_move", Side.A.value)),
        rows_per_side=g.get("rows_per_side", DEFAULT_ROWS_PER_SIDE),
        layout=layout,
    )


def load_config(path: Path) -> GameConfig:
    """Load game config from YAML file."""
    logger.debug("Loading game config from %s", path)
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e
    return parse_config(raw)
