"""
Plain text renderer.
"""
from ...core.distribution import Distribution
from .base import Renderer


class TextRenderer(Renderer):
    """Header line followed by one `sum: count` line per sum."""
    
    name = "text"
    description = "Exact counts as plain text"
    
    def render(self, distribution: Distribution) -> str:
        return distribution.render()
