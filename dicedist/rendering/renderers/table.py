"""
Rich table renderer with a histogram column.
"""
from rich.table import Table
from ...core.distribution import Distribution
from .base import Renderer


class TableRenderer(Renderer):
    """Sum, exact count, probability and a scaled bar per row."""
    
    name = "table"
    description = "Table of counts and probabilities with a histogram"
    
    def render(self, distribution: Distribution) -> Table:
        bar_width = self.options.bar_width
        table = Table(title=f"Distribution of {distribution.n} dice")
        table.add_column("Sum", style="cyan", justify="right")
        table.add_column("Count", style="magenta", justify="right")
        table.add_column("Probability", style="green", justify="right")
        if bar_width:
            table.add_column("", style="yellow")
        
        if distribution.is_empty:
            return table
        
        peak = max(distribution.counts.values())
        for (total, count), probability in zip(distribution.items(), distribution.probabilities()):
            if self.options.decimal:
                shown = f"{float(probability):.{self.precision}f}"
            else:
                shown = f"{float(probability):.{self.precision}%}"
            row = [str(total), str(count), shown]
            if bar_width:
                # Integer division keeps huge counts exact.
                row.append("█" * (bar_width * count // peak))
            table.add_row(*row)
        
        return table
