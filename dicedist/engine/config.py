"""Configuration for the distribution engine."""
from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """
    Controls how the recursive builder schedules its work.
    Fields:
        parallel (bool): Spawn a worker thread per split. When False every
            split is computed on the calling thread.
        parallel_threshold (int): Smallest number of dice for which a split
            spawns a worker; smaller sub-multisets are combined sequentially.
            The default of 2 spawns a worker at every split.
    """
    parallel: bool = True
    parallel_threshold: int = 2
    
    def __post_init__(self):
        if self.parallel_threshold < 2:
            raise ValueError(
                f"parallel_threshold must be at least 2, got {self.parallel_threshold}"
            )
    
    def spawns_worker(self, num_dice: int) -> bool:
        """Whether a split of `num_dice` dice runs one half on a new thread."""
        return self.parallel and num_dice >= self.parallel_threshold
