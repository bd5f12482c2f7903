# -*- coding: utf-8 -*-
"""
Game configuration shared by the command line entry points.
"""
import logging
from argparse import ArgumentParser, Namespace
from dataclasses import dataclass

from grid2048.core.spawn import SPAWN_POLICIES, SpawnPolicy, get_policy, is_tile_value

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class GameConfig:
    """Parameters of a game."""

    size: int = 4
    policy: str = "classic"
    target: int = 2048
    seed: int | None = None
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}")
        if not is_tile_value(self.target):
            raise ValueError(f"Target tile must be a power of two >= 2, got {self.target}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.log_level!r}, expected one of {LOG_LEVELS}")

        # ##: Fail early on unknown policy names.
        get_policy(self.policy)

    @property
    def spawn_policy(self) -> SpawnPolicy:
        """The resolved spawn policy."""
        return get_policy(self.policy)

    @classmethod
    def from_namespace(cls, args: Namespace) -> "GameConfig":
        """
        Build a configuration from parsed command line arguments.

        Parameters
        ----------
        args : Namespace
            Arguments parsed by a parser prepared with ``add_arguments``.

        Returns
        -------
        GameConfig
            The configuration.
        """
        return cls(size=args.size, policy=args.policy, target=args.target, seed=args.seed, log_level=args.log_level)

    def setup_logging(self):
        """Configure the root logger at the configured level."""
        logging.basicConfig(
            level=getattr(logging, self.log_level.upper()),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def add_arguments(parser: ArgumentParser) -> ArgumentParser:
    """
    Add the game options to a parser.

    Parameters
    ----------
    parser : ArgumentParser
        Parser to extend.

    Returns
    -------
    ArgumentParser
        The same parser.
    """
    defaults = GameConfig()
    parser.add_argument("--size", help="Side of the square grid", type=int, default=defaults.size)
    parser.add_argument(
        "--policy", help="Tile spawn policy", choices=sorted(SPAWN_POLICIES), type=str, default=defaults.policy
    )
    parser.add_argument("--target", help="Tile value counted as a win", type=int, default=defaults.target)
    parser.add_argument("--seed", help="Seed of the random generator", type=int, default=defaults.seed)
    parser.add_argument(
        "--log-level", help="Logging level", choices=LOG_LEVELS, type=str.upper, default=defaults.log_level
    )
    return parser
