"""Rendering layer for dicedist."""
from .renderers import Renderer, RenderOptions
from .renderer_registry import RendererRegistry, renderer_registry

__all__ = [
    "Renderer",
    "RenderOptions",
    "RendererRegistry",
    "renderer_registry",
]
