"""
Normalized probability renderer.
"""
from ...core.distribution import Distribution
from .base import Renderer


class ProbabilitiesRenderer(Renderer):
    """One `sum: probability` line per sum, exact fractions unless `decimal` is set."""
    
    name = "probabilities"
    description = "Probability of each sum, as fractions or decimals"
    default_precision = 6
    
    def render(self, distribution: Distribution) -> str:
        lines = []
        for total, probability in zip(distribution.sums(), distribution.probabilities()):
            if self.options.decimal:
                lines.append(f"{total}: {float(probability):.{self.precision}f}")
            else:
                lines.append(f"{total}: {probability}")
        return "\n".join(lines)
