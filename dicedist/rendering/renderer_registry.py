"""
Lookup of output formats by name.
"""
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Type
from .renderers import (
    Renderer, RenderOptions, TextRenderer, TableRenderer,
    ProbabilitiesRenderer, SummaryRenderer
)


BUILTIN_RENDERERS = (TextRenderer, TableRenderer, ProbabilitiesRenderer, SummaryRenderer)


class RendererRegistry:
    """Maps format names to renderer classes."""
    
    def __init__(self, renderers: Iterable[Type[Renderer]] = BUILTIN_RENDERERS):
        self._renderers: Dict[str, Type[Renderer]] = {}
        for renderer_class in renderers:
            self.register(renderer_class)
    
    def register(self, renderer_class: Type[Renderer]):
        """Add a renderer under its `name`; names are unique and lowercase."""
        name = renderer_class.name
        if not name or name != name.lower():
            raise ValueError(f"{renderer_class.__name__} needs a lowercase name, got {name!r}")
        if name in self._renderers:
            raise ValueError(f"A renderer named {name!r} is already registered")
        self._renderers[name] = renderer_class
    
    def names(self) -> List[str]:
        return list(self._renderers)
    
    def descriptions(self) -> Dict[str, str]:
        return {name: cls.description for name, cls in self._renderers.items()}
    
    def get_renderer(
        self,
        name: str,
        options: Optional[RenderOptions] = None,
        **overrides
    ) -> Renderer:
        """Instantiate the renderer for `name`, with `overrides` applied on top of `options`."""
        renderer_class = self._renderers.get(name.lower())
        if renderer_class is None:
            raise ValueError(f"Unknown format {name!r}, expected one of: {', '.join(self._renderers)}")
        
        options = options or RenderOptions()
        if overrides:
            try:
                options = replace(options, **overrides)
            except TypeError as e:
                raise ValueError(f"Unknown render option: {e}") from None
        return renderer_class(options)


renderer_registry = RendererRegistry()
