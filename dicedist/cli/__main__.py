import logging
import sys
import click
from rich.console import Console
from rich.logging import RichHandler
from ..core.notation import DEFAULT_NOTATION
from ..engine import EngineConfig
from ..rendering import RenderOptions, renderer_registry
from ..rendering.renderers.base import MAX_PRECISION
from .interface import DistributionCLI


def configure_logging(level: str):
    """Send log records through rich on stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@click.command()
@click.argument('notation', nargs=-1)
@click.option('--format', '-f', 'output_format', default='table',
              type=click.Choice(renderer_registry.names(), case_sensitive=False),
              help='Output format')
@click.option('--sequential', is_flag=True, help='Compute every split on the calling thread')
@click.option('--parallel-threshold', type=click.IntRange(min=2), default=2,
              help='Smallest number of dice for which a split spawns a worker thread')
@click.option('--precision', type=click.IntRange(0, MAX_PRECISION), default=None,
              help='Decimal places for probabilities and statistics')
@click.option('--decimal', is_flag=True, help='Show probabilities as decimals instead of fractions')
@click.option('--bar-width', type=click.IntRange(min=0), default=40,
              help='Histogram width in the table format, 0 to hide it')
@click.option('--interactive', '-i', is_flag=True, help='Run in interactive mode')
@click.option('--log-level', default='WARNING',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging verbosity')
def main(notation, output_format, sequential, parallel_threshold, precision, decimal, bar_width,
         interactive, log_level):
    """Exact probability distribution of the sum of NOTATION, e.g. 2d6 1d8."""
    configure_logging(log_level)
    config = EngineConfig(parallel=not sequential, parallel_threshold=parallel_threshold)
    options = RenderOptions(precision=precision, decimal=decimal, bar_width=bar_width)
    cli = DistributionCLI(config, output_format=output_format.lower(), render_options=options)
    
    if interactive:
        cli.run()
        return
    
    if not cli.show_notation(" ".join(notation) or DEFAULT_NOTATION):
        sys.exit(1)


if __name__ == "__main__":
    main()
