"""Summary statistics of exact distributions."""
import numpy as np
from itertools import accumulate
from typing import Dict, List
from dataclasses import dataclass
from ..core.distribution import Distribution


PERCENTILES = (25, 50, 75, 95)


@dataclass
class DistributionSummary:
    """Summary statistics of a dice-sum distribution."""
    num_dice: int
    total_outcomes: int
    min_sum: int
    max_sum: int
    expected_value: float
    variance: float
    std_deviation: float
    percentiles: Dict[int, int]
    modes: List[int]

    def __str__(self) -> str:
        if self.total_outcomes == 0:
            return "Distribution Summary (no dice)"
        return (
            f"Distribution Summary ({self.num_dice} dice, {self.total_outcomes} outcomes):\n"
            f"  Range: {self.min_sum}..{self.max_sum}\n"
            f"  Expected Value: {self.expected_value:.3f}\n"
            f"  Std Deviation: {self.std_deviation:.3f}\n"
            f"  25th Percentile: {self.percentiles[25]}\n"
            f"  50th Percentile: {self.percentiles[50]}\n"
            f"  75th Percentile: {self.percentiles[75]}\n"
            f"  95th Percentile: {self.percentiles[95]}\n"
            f"  Most Likely: {', '.join(str(m) for m in self.modes)}"
        )


def exact_percentiles(distribution: Distribution) -> Dict[int, int]:
    """Smallest sum whose cumulative share of outcomes reaches each percentile.

    Compared in integers, so no rounding can move a boundary.
    """
    outcomes = distribution.total
    percentiles = {}
    pending = list(PERCENTILES)
    for total, running in zip(distribution.sums(), accumulate(distribution)):
        while pending and running * 100 >= outcomes * pending[0]:
            percentiles[pending.pop(0)] = total
        if not pending:
            break
    return percentiles


def summarize(distribution: Distribution) -> DistributionSummary:
    """Compute summary statistics from the exact counts."""
    if distribution.is_empty:
        return DistributionSummary(
            num_dice=0,
            total_outcomes=0,
            min_sum=0,
            max_sum=0,
            expected_value=0.0,
            variance=0.0,
            std_deviation=0.0,
            percentiles={p: 0 for p in PERCENTILES},
            modes=[],
        )

    sums = np.arange(distribution.min, distribution.max + 1)
    # Exact fractions first: counts can be far too large for a float.
    weights = np.array([float(p) for p in distribution.probabilities()])

    expected_value = float(np.dot(sums, weights))
    variance = float(np.dot((sums - expected_value) ** 2, weights))

    percentiles = exact_percentiles(distribution)

    peak = max(distribution.counts.values())
    modes = [total for total, count in distribution.items() if count == peak]

    return DistributionSummary(
        num_dice=distribution.n,
        total_outcomes=distribution.total,
        min_sum=distribution.min,
        max_sum=distribution.max,
        expected_value=expected_value,
        variance=variance,
        std_deviation=float(np.sqrt(variance)),
        percentiles=percentiles,
        modes=modes,
    )
