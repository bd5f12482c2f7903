# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
from argparse import ArgumentParser
from typing import Any, Optional, Sequence

from grid2048.config import GameConfig, add_arguments
from grid2048.core.gamemove import Direction
from grid2048.envs import GridEngine
from grid2048.utils import WindowBoard

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##: Keyboard keys bound to moves.
KEY_BINDINGS = {
    "left": Direction.LEFT,
    "up": Direction.UP,
    "right": Direction.RIGHT,
    "down": Direction.DOWN,
}


def redraw(envs: GridEngine, window: WindowBoard):
    """
    Redraw the game board.

    Parameters
    ----------
    envs: GridEngine
        The game engine

    window: WindowBoard
        Class to draw the game board
    """
    window.show_image(envs.observation, score=envs.score, finished=envs.is_finished)


def reset(envs: GridEngine, window: WindowBoard):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    envs: GridEngine
        The game engine

    window: WindowBoard
        Class to draw the game board
    """
    envs.reset()
    redraw(envs, window)


def step(envs: GridEngine, window: WindowBoard, direction: Direction):
    """
    Apply a move to the game and redraw it when the board changed.

    Parameters
    ----------
    envs: GridEngine
        The game engine

    window: WindowBoard
        Class to draw the game board

    direction: Direction
        Move to apply
    """
    result = envs.step(direction)
    if not result.changed:
        return

    redraw(envs, window)
    if result.finished:
        print(f"Game over! score={envs.score}, max tile={envs.max_tile}")


def key_handler(envs: GridEngine, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    envs: GridEngine
        The game engine

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    _logger.debug("pressed %s", event.key)

    if event.key == "escape":
        window.close()
        return

    if event.key == "backspace":
        reset(envs, window)
        return

    if event.key in KEY_BINDINGS:
        step(envs, window, KEY_BINDINGS[event.key])


def main(argv: Optional[Sequence[str]] = None):
    """Open a window and play with the arrow keys."""
    parser = add_arguments(ArgumentParser(description="Play 2048 with the arrow keys."))
    config = GameConfig.from_namespace(parser.parse_args(argv))
    config.setup_logging()

    env = GridEngine.from_config(config)
    window_board = WindowBoard(title="2048 Game", size=env.size)
    window_board.register_key_handler(lambda event: key_handler(env, window_board, event))

    redraw(env, window_board)

    # Blocking event loop
    window_board.show(block=True)


if __name__ == "__main__":
    main()
