"""Exact sum distributions for sets of dice."""
from dataclasses import dataclass
from fractions import Fraction
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Tuple


@dataclass(frozen=True)
class Distribution:
    """Exact count of outcome tuples for every attainable sum of n dice.

    `counts` holds exactly the keys `min..max`. Distributions are symmetric:
    `counts[min + i] == counts[max - i]`, because flipping every die
    (v -> sides - v + 1) maps a tuple summing to s onto one summing to
    `min + max - s`.
    """
    counts: Mapping[int, int]
    min: int
    max: int
    size: int
    n: int

    def __post_init__(self):
        counts = dict(self.counts)
        if self.size == 0:
            if counts or self.min or self.max:
                raise ValueError("An empty distribution has no sums and min = max = 0")
        elif self.size != self.max - self.min + 1:
            raise ValueError(
                f"size {self.size} does not match the range {self.min}..{self.max}"
            )
        elif counts.keys() != set(range(self.min, self.max + 1)):
            raise ValueError(f"counts must hold exactly the sums {self.min}..{self.max}")
        object.__setattr__(self, "counts", MappingProxyType(counts))

    def __hash__(self) -> int:
        return hash((tuple(self), self.min, self.max, self.size, self.n))

    def __reduce__(self):
        return (type(self), (dict(self.counts), self.min, self.max, self.size, self.n))

    @classmethod
    def empty(cls) -> "Distribution":
        """Distribution of rolling no dice at all."""
        return cls(counts={}, min=0, max=0, size=0, n=0)

    @classmethod
    def single_die(cls, sides: int) -> "Distribution":
        """Uniform distribution of one die: one way to show each face."""
        if sides < 1:
            raise ValueError(f"A die needs at least one side, got {sides}")
        return cls(
            counts={face: 1 for face in range(1, sides + 1)},
            min=1,
            max=sides,
            size=sides,
            n=1,
        )

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    @property
    def total(self) -> int:
        """Total number of outcome tuples."""
        return sum(self.counts.values())

    def count(self, total: int) -> int:
        """Number of outcome tuples summing to `total`."""
        return self.counts.get(total, 0)

    def combine(self, other: "Distribution") -> "Distribution":
        """Convolve two distributions into the distribution of their sum.

        Only the lower half of the result is multiplied out; the upper half is
        mirrored from it.
        """
        if other.is_empty:
            return self
        if self.is_empty:
            return other

        low = self.min + other.min
        high = self.max + other.max
        size = high - low + 1
        halfway = size // 2 + size % 2

        # sorted() is stable, so equal sizes keep their original order.
        smaller, larger = sorted((self, other), key=lambda d: d.size)

        counts: Dict[int, int] = {}
        for i in range(halfway):
            counts[low + i] = sum(
                smaller.counts[smaller.min + j] * larger.count(low + i - smaller.min - j)
                for j in range(min(i + 1, smaller.size))
            )
        for i in range(halfway, size):
            counts[low + i] = counts[high - i]

        return Distribution(counts=counts, min=low, max=high, size=size, n=self.n + other.n)

    def __add__(self, other: "Distribution") -> "Distribution":
        if not isinstance(other, Distribution):
            return NotImplemented
        return self.combine(other)

    def sums(self) -> range:
        """Attainable sums in ascending order."""
        if self.is_empty:
            return range(0)
        return range(self.min, self.max + 1)

    def items(self) -> Iterator[Tuple[int, int]]:
        """(sum, count) pairs in ascending sum order."""
        for total in self.sums():
            yield total, self.counts[total]

    def probabilities(self) -> List[Fraction]:
        """Exact probability of every sum, ascending."""
        outcomes = self.total
        return [Fraction(count, outcomes) for count in self]

    def is_symmetric(self) -> bool:
        """Check the mirror invariant explicitly."""
        return all(
            self.counts[self.min + i] == self.counts[self.max - i]
            for i in range(self.size)
        )

    def render(self) -> str:
        """Deterministic plain-text dump: a header line, then one line per sum."""
        lines = [f"min: {self.min}, max: {self.max}, size: {self.size}, n: {self.n}"]
        lines.extend(f"{total}: {count}" for total, count in self.items())
        return "\n".join(lines)

    def __iter__(self) -> Iterator[int]:
        """Counts in ascending sum order; each call starts a fresh traversal."""
        for _, count in self.items():
            yield count

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, total: int) -> int:
        return self.count(total)

    def __str__(self) -> str:
        return self.render()
