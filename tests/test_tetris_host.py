from dataclasses import replace

import pygame

from tetris import COMMANDS, new_game
from tetris_app import parse_args
from tetris_input import KEY_COMMANDS, command_for
from tetris_layout import cell_rect, compute_dims
from tetris_overlay import Overlay


def test_key_bindings_name_engine_commands():
    assert set(KEY_COMMANDS.values()) <= set(COMMANDS)
    assert command_for(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)) == "hard_drop"
    assert command_for(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q)) is None
    assert command_for(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT)) is None


def test_layout_shows_only_visible_rows():
    d = compute_dims(20)
    assert (d.board_w, d.board_h) == (200, 400)
    assert cell_rect(d, 0, 1) is None
    assert cell_rect(d, 0, 2) == (d.board_x, d.board_y, 20, 20)
    assert cell_rect(d, 9, 21) == (d.board_x + 180, d.board_y + 380, 20, 20)
    assert cell_rect(d, 10, 21) is None


def test_overlay_messages():
    overlay = Overlay(None, None)
    game = new_game(seed=1)
    assert overlay.message(game) is None
    overlay.toggle()
    assert overlay.message(game)[0] == "PAUSED"
    over = replace(game, game_over=True)
    assert overlay.message(over) == ("GAME OVER", "Final score: 0  (R to Restart)")


def test_parse_args():
    args = parse_args(["--seed", "3", "--tick-ms", "250"])
    assert (args.seed, args.tick_ms) == (3, 250)
