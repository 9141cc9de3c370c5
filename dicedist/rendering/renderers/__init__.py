"""
Renderer implementations for dice distributions.
"""
from .base import Renderer, RenderOptions
from .text import TextRenderer
from .table import TableRenderer
from .probabilities import ProbabilitiesRenderer
from .summary import SummaryRenderer

__all__ = [
    "Renderer",
    "RenderOptions",
    "TextRenderer",
    "TableRenderer",
    "ProbabilitiesRenderer",
    "SummaryRenderer",
]
