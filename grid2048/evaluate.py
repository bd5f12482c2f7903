# -*- coding: utf-8 -*-
"""
Play many games with random legal moves and count the max tile of each.
"""
import logging
from argparse import ArgumentParser
from collections import Counter
from typing import Dict, Optional, Sequence

from tqdm import trange

from grid2048.config import GameConfig, add_arguments
from grid2048.core.gamemove import legal_actions
from grid2048.envs import GridEngine

# ##>: Module logger.
_logger = logging.getLogger(__name__)


def evaluate(length: int = 10, config: Optional[GameConfig] = None, progress: bool = True) -> Dict[int, int]:
    """
    Play games with uniformly random legal moves.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    config : GameConfig, optional
        Game parameters, the defaults when omitted.
    progress : bool, optional
        Whether to display a progress bar (default is True).

    Returns
    -------
    Dict[int, int]
        Number of games ending with each max tile.
    """
    config = config or GameConfig()
    env = GridEngine.from_config(config)
    score = []

    with trange(length, disable=not progress) as period:
        for num in period:
            env.reset()

            # ##: Play a game.
            while not env.is_finished:
                legal = legal_actions(env.observation)
                env.step(legal[env.rng.integers(len(legal))])

                # ##: Log.
                period.set_description(f"Evaluation: {num + 1}")
                period.set_postfix(score=env.score, max=env.max_tile)

            # ##: Save max cells.
            _logger.info("Game %d finished with score %d, max tile %d.", num + 1, env.score, env.max_tile)
            score.append(env.max_tile)

    # ##: Final log.
    frequency = Counter(score)
    return dict(frequency)


def main(argv: Optional[Sequence[str]] = None):
    """Run the evaluation from the command line."""
    parser = add_arguments(ArgumentParser(description="Play random games and count max tiles."))
    parser.add_argument("--games", help="Number of games to play", type=int, default=10)
    args = parser.parse_args(argv)

    config = GameConfig.from_namespace(args)
    config.setup_logging()

    result = evaluate(length=args.games, config=config)
    print(f"Max tiles over {args.games} games: {dict(sorted(result.items()))}")


if __name__ == "__main__":
    main()
