"""
Summary statistics renderer.
"""
from rich.panel import Panel
from rich.table import Table
from ...core.distribution import Distribution
from ...engine.analysis import summarize
from .base import Renderer


class SummaryRenderer(Renderer):
    """Expected value, spread and percentiles in a panel."""
    
    name = "summary"
    description = "Expected value, standard deviation and percentiles"
    default_precision = 3
    
    def render(self, distribution: Distribution) -> Panel:
        summary = summarize(distribution)
        grid = Table.grid(padding=(0, 2))
        grid.add_column(style="cyan")
        grid.add_column(justify="right")
        
        grid.add_row("Dice", str(summary.num_dice))
        grid.add_row("Outcomes", str(summary.total_outcomes))
        if summary.total_outcomes:
            grid.add_row("Range", f"{summary.min_sum}..{summary.max_sum}")
            grid.add_row("Expected Value", f"{summary.expected_value:.{self.precision}f}")
            grid.add_row("Std Deviation", f"{summary.std_deviation:.{self.precision}f}")
            for p, value in summary.percentiles.items():
                grid.add_row(f"{p}th Percentile", str(value))
            grid.add_row("Most Likely", ", ".join(str(m) for m in summary.modes))
        
        return Panel(grid, title="Summary", border_style="blue")
