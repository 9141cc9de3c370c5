"""Recursive fork-join construction of dice distributions."""
import logging
import queue
import threading
from typing import Optional, Tuple

from ..core.dice import DiceSet
from ..core.distribution import Distribution
from ..core.errors import DistributionError
from .config import EngineConfig


logger = logging.getLogger(__name__)

# A worker hands back either a distribution or the exception that stopped it.
WorkerResult = Tuple[Optional[Distribution], Optional[BaseException]]


def split_index(length: int) -> int:
    """Largest power of two strictly below `length` (1 for lengths up to 2)."""
    current = 1
    following = 2
    while following < length:
        current = following
        following *= 2
    return current


class DistributionBuilder:
    """Builds the exact distribution of a dice set by divide and conquer."""
    
    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
    
    def build(self, dice: DiceSet) -> Distribution:
        """Compute the distribution of `dice`.
        
        Raises:
            DistributionError: If any branch of the computation failed.
        """
        try:
            distribution = self._build(dice, depth=0)
        except DistributionError:
            raise
        except Exception as exc:
            raise DistributionError("Distribution computation failed") from exc
        
        logger.info(
            "Built distribution of %d dice: sums %d..%d",
            distribution.n, distribution.min, distribution.max,
        )
        return distribution
    
    def _build(self, dice: DiceSet, depth: int) -> Distribution:
        if len(dice) == 0:
            return Distribution.empty()
        if len(dice) == 1:
            return Distribution.single_die(dice[0].sides)
        
        index = split_index(len(dice))
        left, right = dice.partition(index)
        logger.debug(
            "Depth %d: splitting %d dice into %d + %d",
            depth, len(dice), len(left), len(right),
        )
        
        if not self.config.spawns_worker(len(dice)):
            return self._build(left, depth + 1).combine(self._build(right, depth + 1))
        
        channel: "queue.Queue[WorkerResult]" = queue.Queue(maxsize=1)
        worker = threading.Thread(
            target=self._work,
            args=(right, depth + 1, channel),
            name=f"dicedist-d{depth + 1}-{len(right)}",
            daemon=True,
        )
        worker.start()
        try:
            left_distribution = self._build(left, depth + 1)
        finally:
            worker.join()
        
        right_distribution = self._receive(channel)
        return left_distribution.combine(right_distribution)
    
    def _work(self, dice: DiceSet, depth: int, channel: "queue.Queue[WorkerResult]"):
        """Worker thread body: compute one half and hand it to the parent."""
        try:
            result = self._build(dice, depth)
        except DistributionError as exc:
            channel.put((None, exc))
        except Exception as exc:
            logger.exception("Worker for %d dice at depth %d failed", len(dice), depth)
            channel.put((None, exc))
        else:
            channel.put((result, None))
    
    @staticmethod
    def _receive(channel: "queue.Queue[WorkerResult]") -> Distribution:
        """Collect the result of a finished worker."""
        try:
            result, error = channel.get_nowait()
        except queue.Empty:
            raise DistributionError("Worker exited without producing a distribution") from None
        
        if error is not None:
            if isinstance(error, DistributionError):
                raise error
            raise DistributionError("Distribution computation failed") from error
        return result
