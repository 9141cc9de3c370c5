import logging
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from rich.prompt import Prompt
from typing import Optional
from ..core.dice import DiceSet
from ..core.distribution import Distribution
from ..core.errors import DistributionError, NotationError
from ..core.notation import DEFAULT_NOTATION, parse_dice
from ..engine import DistributionBuilder, EngineConfig
from ..rendering import RenderOptions, renderer_registry


console = Console()
logger = logging.getLogger(__name__)


class DistributionCLI:
    """Command-line front end that builds and displays dice distributions."""
    
    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        output_format: str = "table",
        render_options: Optional[RenderOptions] = None
    ):
        self.builder = DistributionBuilder(config)
        self.output_format = output_format
        self.render_options = render_options or RenderOptions()
        self.last_notation = DEFAULT_NOTATION
    
    def compute(self, dice: DiceSet) -> Distribution:
        """Build a distribution, showing a spinner while large sets compute."""
        with console.status(f"[bold green]Computing distribution of {len(dice)} dice..."):
            return self.builder.build(dice)
    
    def display_distribution(self, distribution: Distribution, output_format: Optional[str] = None):
        """Render a distribution in the requested format."""
        renderer = renderer_registry.get_renderer(output_format or self.output_format, self.render_options)
        console.print(renderer.render(distribution))
    
    def show_notation(self, notation: str, output_format: Optional[str] = None) -> bool:
        """Parse, compute and display one request. Returns False on failure."""
        try:
            dice = parse_dice(notation)
        except NotationError as e:
            console.print(f"[red]Invalid dice notation '{escape(notation)}': {escape(str(e))}[/red]")
            return False
        
        console.print(f"[dim]Dice: {dice if len(dice) else 'none'}[/dim]")
        try:
            distribution = self.compute(dice)
        except DistributionError:
            logger.exception("Computation failed for %r", notation)
            console.print("[bold red]Computation failed.[/bold red]")
            return False
        
        self.display_distribution(distribution, output_format)
        return True
    
    def select_format(self):
        """Allow user to pick the output format."""
        descriptions = renderer_registry.descriptions()
        
        table = Table(title="Available Output Formats")
        table.add_column("Name", style="cyan")
        table.add_column("Description", style="green")
        
        for name, description in descriptions.items():
            table.add_row(name, description)
        
        console.print(table)
        console.print(f"\n[bold]Current format: {self.output_format}[/bold]")
        
        self.output_format = Prompt.ask(
            "\n[cyan]Select format[/cyan]",
            choices=list(descriptions),
            default=self.output_format
        )
        console.print(f"\n[green]Format set to: {self.output_format}[/green]")
    
    def run(self):
        """Main interactive loop."""
        console.print(Panel.fit(
            "[bold cyan]Welcome to dicedist![/bold cyan]\n"
            "Exact probability distributions of dice sums",
            border_style="blue"
        ))
        
        while True:
            choice = Prompt.ask(
                "\n[cyan]What would you like to do?[/cyan]",
                choices=["roll", "format", "quit"],
                default="roll"
            )
            
            if choice == "roll":
                notation = Prompt.ask(
                    "[cyan]Dice (e.g. '2d6 1d8')[/cyan]",
                    default=self.last_notation
                )
                if self.show_notation(notation):
                    self.last_notation = notation
            elif choice == "format":
                self.select_format()
            elif choice == "quit":
                console.print("[yellow]Goodbye![/yellow]")
                break
