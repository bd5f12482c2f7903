"""Stateful 2048 game engine owning one board."""

import logging
from enum import Enum
from typing import NamedTuple

from numpy import ndarray
from numpy.random import Generator, default_rng

from grid2048.config import GameConfig
from grid2048.core.gameboard import is_game_over, new_board, next_state, spawn_tile, validate_board
from grid2048.core.gamemove import Direction
from grid2048.core.spawn import SpawnPolicy, get_policy, is_tile_value

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##>: Number of tiles on a fresh board.
INITIAL_TILES = 2


class GameState(Enum):
    """Lifecycle of a game."""

    READY = 'ready'
    GAME_OVER = 'game_over'


class StepResult(NamedTuple):
    """
    Result of a step.

    Attributes
    ----------
    board : ndarray
        Read-only snapshot of the board after the step.
    reward : int
        Score gained by the step.
    changed : bool
        Whether the move changed the board.
    finished : bool
        Whether the game is over after the step.
    """

    board: ndarray
    reward: int
    changed: bool
    finished: bool


class GridEngine:
    """
    2048 game engine.

    This class owns the game board and runs the turn loop: move, spawn when the move changed the board, then
    check for the end of the game.
    """

    # ##: All Actions.
    ACTIONS = {direction.name.lower(): direction for direction in Direction}

    def __init__(
        self,
        size: int = 4,
        policy: str | SpawnPolicy = 'classic',
        target: int = 2048,
        seed: int | None = None,
        rng: Generator | None = None,
    ):
        """
        Initialize the engine and start a game.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4).
        policy : str | SpawnPolicy, optional
            Tile spawn policy or its name (default is "classic").
        target : int, optional
            Tile value counted as a win (default is 2048).
        seed : int, optional
            Seed of the engine generator.
        rng : Generator, optional
            Generator to use instead of seeding a new one.
        """
        if not is_tile_value(target):
            raise ValueError(f'Target tile must be a power of two >= 2, got {target}')

        self.size = size
        self.policy = get_policy(policy)
        self.target = target
        self._rng = rng if rng is not None else default_rng(seed)

        self._board = new_board(size)
        self._score = 0
        self._state = GameState.READY
        self.reset()

    @classmethod
    def from_config(cls, config: GameConfig) -> 'GridEngine':
        """Create an engine from a game configuration."""
        return cls(size=config.size, policy=config.spawn_policy, target=config.target, seed=config.seed)

    @property
    def observation(self) -> ndarray:
        """
        Get the current state of the game board.

        Returns
        -------
        ndarray
            A read-only copy of the board.
        """
        snapshot = self._board.copy()
        snapshot.setflags(write=False)
        return snapshot

    @property
    def score(self) -> int:
        """Score accumulated since the last reset."""
        return self._score

    @property
    def state(self) -> GameState:
        """Current lifecycle state."""
        return self._state

    @property
    def is_finished(self) -> bool:
        """True once no move can change the board."""
        return self._state is GameState.GAME_OVER

    @property
    def max_tile(self) -> int:
        """Largest tile on the board."""
        return int(self._board.max())

    @property
    def reached_target(self) -> bool:
        """True once a tile reaches the target value."""
        return self.max_tile >= self.target

    @property
    def rng(self) -> Generator:
        """Random generator used for spawns."""
        return self._rng

    def load(self, board: ndarray, score: int = 0) -> ndarray:
        """
        Replace the board with a given position.

        Parameters
        ----------
        board : ndarray
            Board to load. It must have the engine's size.
        score : int, optional
            Score to restart from (default is 0).

        Returns
        -------
        ndarray
            A read-only copy of the loaded board.

        Raises
        ------
        InvalidBoardError
            If the board is malformed.
        ValueError
            If the board size differs from the engine's size, or the score is negative.
        """
        board = validate_board(board)
        if board.shape != (self.size, self.size):
            raise ValueError(f'Expected a {self.size}x{self.size} board, got shape {board.shape}')
        if score < 0:
            raise ValueError(f'Score must be non-negative, got {score}')

        self._board = board.astype(self._board.dtype, copy=True)
        self._score = score
        self._state = GameState.GAME_OVER if is_game_over(self._board) else GameState.READY
        return self.observation

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Initialize an empty board and add the initial tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the engine generator, making the new game reproducible.

        Returns
        -------
        ndarray
            A read-only copy of the new board.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        board = new_board(self.size)
        while (board != 0).sum() < INITIAL_TILES:
            board = spawn_tile(board, policy=self.policy, rng=self._rng)

        self._board = board
        self._score = 0
        self._state = GameState.READY
        _logger.info('New %dx%d game with %r spawn policy.', self.size, self.size, self.policy.name)
        return self.observation

    def step(self, direction: Direction | int | str) -> StepResult:
        """
        Apply a move to the board.

        Parameters
        ----------
        direction : Direction | int | str
            The move, as a ``Direction``, its value or its name.

        Returns
        -------
        StepResult
            The board after the step, the score gained, whether the board changed and whether the game is over.

        Raises
        ------
        ValueError
            If the direction is not one of the four moves.

        Notes
        -----
        - Moves that do not change the board spawn nothing and score nothing.
        - Once the game is over, moves are ignored until ``reset``.
        """
        direction = Direction.parse(direction)
        if self._state is GameState.GAME_OVER:
            _logger.debug('Game over, %s ignored.', direction.name)
            return StepResult(self.observation, 0, False, True)

        had_target = self.reached_target
        outcome = next_state(self._board, direction, policy=self.policy, rng=self._rng)
        if not outcome.changed:
            _logger.debug('%s does not change the board, ignored.', direction.name)
            return StepResult(self.observation, 0, False, False)

        self._board = outcome.board
        self._score += outcome.score

        if not had_target and self.reached_target:
            _logger.info('Reached %d with score %d.', self.target, self._score)
        if is_game_over(self._board):
            self._state = GameState.GAME_OVER
            _logger.info('Game over with score %d, max tile %d.', self._score, self.max_tile)

        return StepResult(self.observation, outcome.score, True, self.is_finished)

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        print(f'score: {self._score}')
        for row in self._board.tolist():
            print(' \t'.join(map(str, row)))
