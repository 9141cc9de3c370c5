"""Exact probability distributions of dice sums."""
from typing import Optional, Union

from .core.dice import Die, DiceSet
from .core.distribution import Distribution
from .core.errors import DistributionError, NotationError
from .core.notation import parse_dice
from .engine import DistributionBuilder, EngineConfig


def distribution_of(
    dice: Union[DiceSet, str],
    config: Optional[EngineConfig] = None
) -> Distribution:
    """Build the distribution of a dice set or a notation string like "2d6 1d8"."""
    if isinstance(dice, str):
        dice = parse_dice(dice)
    return DistributionBuilder(config).build(dice)


__all__ = [
    "Die",
    "DiceSet",
    "Distribution",
    "DistributionBuilder",
    "DistributionError",
    "EngineConfig",
    "NotationError",
    "distribution_of",
]
