"""
Base class and shared formatting options for distribution renderers.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional
from rich.console import RenderableType
from ...core.distribution import Distribution


MAX_PRECISION = 50


@dataclass(frozen=True)
class RenderOptions:
    """
    Formatting options shared by every renderer; each reads the ones it uses.
    Fields:
        precision (int|None): Decimal places for probabilities and statistics.
            None falls back to the renderer's own default.
        decimal (bool): Show probabilities as decimals instead of exact fractions.
        bar_width (int): Width of the histogram column; 0 hides it.
    """
    precision: Optional[int] = None
    decimal: bool = False
    bar_width: int = 40
    
    def __post_init__(self):
        if self.precision is not None and not 0 <= self.precision <= MAX_PRECISION:
            raise ValueError(f"precision must be between 0 and {MAX_PRECISION}, got {self.precision}")
        if self.bar_width < 0:
            raise ValueError(f"bar_width cannot be negative, got {self.bar_width}")


class Renderer(ABC):
    """Turns a finished distribution into something a rich console can print."""
    
    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    default_precision: ClassVar[int] = 4
    
    def __init__(self, options: Optional[RenderOptions] = None):
        self.options = options or RenderOptions()
    
    @property
    def precision(self) -> int:
        if self.options.precision is None:
            return self.default_precision
        return self.options.precision
    
    @abstractmethod
    def render(self, distribution: Distribution) -> RenderableType:
        pass
