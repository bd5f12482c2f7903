"""
Tile spawn policies for the 2048 grid, describing which values appear after a move and how many tiles are placed.
"""

from dataclasses import dataclass

from numpy.random import Generator


def is_tile_value(value: int) -> bool:
    """Return True if ``value`` is a power of two greater or equal to 2."""
    return value >= 2 and value & (value - 1) == 0


@dataclass(frozen=True)
class SpawnPolicy:
    """
    Distribution of new tiles.

    Each spawn places every value of ``fixed`` first, then one value drawn from ``values``.

    Attributes
    ----------
    name : str
        Name of the policy, used to select it from the command line.
    values : tuple[int, ...]
        Candidate values for the random draw.
    probabilities : tuple[float, ...] | None
        Probability of each candidate value. ``None`` means uniform.
    fixed : tuple[int, ...]
        Values placed unconditionally before the random draw.
    """

    name: str
    values: tuple[int, ...]
    probabilities: tuple[float, ...] | None = None
    fixed: tuple[int, ...] = ()

    def __post_init__(self):
        if not self.values:
            raise ValueError(f'Spawn policy {self.name!r} needs at least one value')

        for value in self.values + self.fixed:
            if not is_tile_value(value):
                raise ValueError(f'Spawn policy {self.name!r}: {value} is not a power of two >= 2')

        if self.probabilities is not None:
            if len(self.probabilities) != len(self.values):
                raise ValueError(
                    f'Spawn policy {self.name!r}: {len(self.values)} values but {len(self.probabilities)} probabilities'
                )
            if abs(sum(self.probabilities) - 1.0) > 1e-9:
                raise ValueError(f'Spawn policy {self.name!r}: probabilities must sum to 1')

    @property
    def tiles_per_spawn(self) -> int:
        """Number of tiles placed by one spawn."""
        return len(self.fixed) + 1

    def probability(self, value: int) -> float:
        """
        Probability that the random draw yields ``value``.

        Parameters
        ----------
        value : int
            Tile value.

        Returns
        -------
        float
            Probability of drawing that value, 0.0 if the value is not a candidate.
        """
        if value not in self.values:
            return 0.0
        if self.probabilities is None:
            return 1.0 / len(self.values)
        return self.probabilities[self.values.index(value)]

    def draw(self, rng: Generator) -> list[int]:
        """
        Draw the values of one spawn.

        Parameters
        ----------
        rng : Generator
            Random generator used for the draw.

        Returns
        -------
        list[int]
            The fixed values followed by the drawn value.
        """
        drawn = rng.choice(self.values, p=self.probabilities)
        return [*self.fixed, int(drawn)]


# ##>: Built-in policies.
CLASSIC = SpawnPolicy(name='classic', values=(2, 4), probabilities=(0.9, 0.1))
ALWAYS_TWO = SpawnPolicy(name='two', values=(2,))
EVEN = SpawnPolicy(name='even', values=(2, 4))
DOUBLE = SpawnPolicy(name='double', values=(2, 4, 8, 16, 32), fixed=(2,))

SPAWN_POLICIES: dict[str, SpawnPolicy] = {policy.name: policy for policy in (CLASSIC, ALWAYS_TWO, EVEN, DOUBLE)}


def get_policy(policy: str | SpawnPolicy) -> SpawnPolicy:
    """
    Resolve a spawn policy from its name.

    Parameters
    ----------
    policy : str | SpawnPolicy
        Name of a built-in policy, or a policy instance returned as is.

    Returns
    -------
    SpawnPolicy
        The resolved policy.

    Raises
    ------
    ValueError
        If the name is not a known policy.
    """
    if isinstance(policy, SpawnPolicy):
        return policy
    try:
        return SPAWN_POLICIES[policy]
    except KeyError:
        raise ValueError(f'Unknown spawn policy {policy!r}, expected one of {sorted(SPAWN_POLICIES)}') from None
