"""Distribution engine for dicedist."""
from .analysis import DistributionSummary, summarize
from .builder import DistributionBuilder, split_index
from .config import EngineConfig

__all__ = [
    "DistributionBuilder",
    "DistributionSummary",
    "EngineConfig",
    "split_index",
    "summarize",
]
