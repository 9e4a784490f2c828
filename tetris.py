"""
Tetris rules engine
===================

A pure state machine for a falling-tetromino game. Each operation takes a
``Game`` and returns the following ``Game``; nothing is mutated, and a move
that cannot be made returns the very object it was given.

-------------------------------------------------------------
STRUCTURE OVERVIEW
-------------------------------------------------------------

  • tetris_piece: constants, the seven tetrominoes, rotation, projection
  • tetris_rng:   the 7-bag, a value that yields (piece, next bag)
  • tetris_board: field collision queries, lock, line clear
  • tetris_score: level, line-clear table, drop points
  • tetris:       this module, the Game record and its operations

-------------------------------------------------------------
TURNS
-------------------------------------------------------------

``tick`` (also ``next_turn``) moves the piece down one cell. When it cannot,
the turn ends: the game is lost if the piece already overlaps locked
blocks; otherwise the piece is locked, full lines are cleared and scored,
two pieces are drawn from the bag (the new current and the new next), and
the game is lost if the new current piece does not fit at the start.

``soft_drop`` is a tick worth 1 point per cell actually descended.
``hard_drop`` descends as far as possible, adds 2 points per cell, then ends
the turn. Rotation never kicks: a blocked rotation is simply refused.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, Union

from tetris_board import (Field, blocked_by_field, clear_lines, in_field,
                          is_blocked, lock, new_field)
from tetris_piece import (BUFFER_ROWS, STARTING_POSITION, Coord, Tetromino,
                          block_coordinates, rotated_ccw, rotated_cw)
from tetris_rng import Bag, new_bag
from tetris_score import (HARD_DROP_PER_CELL, SOFT_DROP_PER_CELL, Score,
                          add_points, cleared_lines, new_score)
from tetris_score import level as score_level

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Game:
    field: Field
    current_tetromino: Tetromino
    next_tetromino: Tetromino
    bag: Bag
    position: Coord
    score: Score
    game_over: bool = False


@dataclass(frozen=True)
class Descended:
    game: Game


@dataclass(frozen=True)
class Blocked:
    game: Game


def new_game(seed: Optional[int] = None, bag: Optional[Bag] = None) -> Game:
    """Start a game on an empty field, drawing current and next from the bag.

    Pass `seed` for a reproducible piece sequence, or a ready-made `bag`.
    """
    if bag is None:
        bag = new_bag(seed)
    current, bag = bag.draw()
    nxt, bag = bag.draw()
    return Game(field=new_field(), current_tetromino=current,
                next_tetromino=nxt, bag=bag, position=STARTING_POSITION,
                score=new_score())


def is_game_over(game: Game) -> bool:
    return game.game_over


def lose(game: Game) -> Game:
    logger.info("game over with %d points", game.score.points)
    return replace(game, game_over=True)


# -------------------------------------------------------------
# MOVES
# -------------------------------------------------------------

def _shift(game: Game, dx: int) -> Game:
    if game.game_over:
        return game
    x, y = game.position
    pos = (x + dx, y)
    if is_blocked(game.field, game.current_tetromino, pos):
        return game
    return replace(game, position=pos)


def left(game: Game) -> Game:
    return _shift(game, -1)


def right(game: Game) -> Game:
    return _shift(game, 1)


def _rotate(game: Game, turn: Callable[[Tetromino], Tetromino]) -> Game:
    if game.game_over:
        return game
    piece = turn(game.current_tetromino)
    if is_blocked(game.field, piece, game.position):
        return game
    return replace(game, current_tetromino=piece)


def rotate_cw(game: Game) -> Game:
    return _rotate(game, rotated_cw)


def rotate_ccw(game: Game) -> Game:
    return _rotate(game, rotated_ccw)


def descend(game: Game) -> Union[Descended, Blocked]:
    x, y = game.position
    pos = (x, y + 1)
    if is_blocked(game.field, game.current_tetromino, pos):
        return Blocked(game)
    return Descended(replace(game, position=pos))


def soft_drop(game: Game) -> Game:
    if game.game_over:
        return game
    step = descend(game)
    if isinstance(step, Blocked):
        return lock_and_advance(game)
    dropped = step.game
    return replace(dropped, score=add_points(SOFT_DROP_PER_CELL, dropped.score))


def hard_drop(game: Game) -> Game:
    if game.game_over:
        return game
    dropped = 0
    step = descend(game)
    while isinstance(step, Descended):
        game = step.game
        dropped += 1
        step = descend(game)
    game = replace(game, score=add_points(dropped * HARD_DROP_PER_CELL, game.score))
    return lock_and_advance(game)


def tick(game: Game) -> Game:
    """Advance one turn: descend a cell, or lock and bring on the next piece."""
    if game.game_over:
        return game
    step = descend(game)
    if isinstance(step, Descended):
        return step.game
    return lock_and_advance(game)


next_turn = tick


def lock_and_advance(game: Game) -> Game:
    piece, pos = game.current_tetromino, game.position
    if blocked_by_field(game.field, piece, pos):
        return lose(game)

    field, lines = clear_lines(lock(game.field, piece, pos))
    score = cleared_lines(lines, game.score)
    logger.debug("locked %s at %s, %d line(s) cleared", piece.block_kind, pos, lines)

    current, bag = game.bag.draw()
    nxt, bag = bag.draw()
    advanced = replace(game, field=field, current_tetromino=current,
                       next_tetromino=nxt, bag=bag,
                       position=STARTING_POSITION, score=score)
    if blocked_by_field(field, current, STARTING_POSITION):
        return lose(advanced)
    return advanced


# -------------------------------------------------------------
# READ-ONLY ACCESSORS
# -------------------------------------------------------------

def level(game: Game) -> int:
    return score_level(game.score)


def cell(game: Game, x: int, y: int) -> str:
    return game.field[y][x]


def visible_field(field: Field) -> Field:
    """The rows below the buffer zone, top to bottom."""
    return field[BUFFER_ROWS:]


def piece_cells(game: Game) -> List[Coord]:
    """In-field cells covered by the active piece."""
    return [c for c in block_coordinates(game.current_tetromino, game.position)
            if in_field(*c)]


def field_with_piece(game: Game) -> Field:
    """The field with the active piece drawn in, for display."""
    if game.game_over:
        return game.field
    return lock(game.field, game.current_tetromino, game.position)


# -------------------------------------------------------------
# COMMAND SURFACE
# -------------------------------------------------------------

COMMANDS: Dict[str, Callable[[Game], Game]] = {
    "left": left,
    "right": right,
    "rotate_cw": rotate_cw,
    "rotate_ccw": rotate_ccw,
    "soft_drop": soft_drop,
    "hard_drop": hard_drop,
    "tick": tick,
}


def apply_command(game: Game, command: str) -> Game:
    """Run the operation a host names by string, e.g. from a key binding."""
    try:
        op = COMMANDS[command]
    except KeyError:
        raise ValueError(f"unknown command {command!r}") from None
    return op(game)
