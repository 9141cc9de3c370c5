from dataclasses import dataclass
from math import prod
from typing import Iterable, Iterator, Tuple, Union


@dataclass(frozen=True, order=True)
class Die:
    """A uniform die, modelled only by its number of faces."""
    sides: int = 6
    
    def __post_init__(self):
        if self.sides < 1:
            raise ValueError(f"A die needs at least one side, got {self.sides}")
    
    def __len__(self) -> int:
        return self.sides
    
    def __int__(self) -> int:
        return self.sides
    
    def __str__(self) -> str:
        return f"d{self.sides}"


class DiceSet:
    """Immutable multiset of dice, kept sorted by face count."""
    
    def __init__(self, dice: Iterable[Union[Die, int]] = ()):
        self._dice: Tuple[Die, ...] = tuple(
            sorted(d if isinstance(d, Die) else Die(d) for d in dice)
        )
    
    @classmethod
    def from_die(cls, die: Die) -> "DiceSet":
        return cls([die])
    
    @classmethod
    def from_sides(cls, sides: int) -> "DiceSet":
        return cls([Die(sides)])
    
    @classmethod
    def default(cls) -> "DiceSet":
        """A single six-sided die."""
        return cls.from_die(Die())
    
    @property
    def dice(self) -> Tuple[Die, ...]:
        return self._dice
    
    @property
    def min_total(self) -> int:
        """Smallest attainable sum (every die shows 1)."""
        return len(self._dice)
    
    @property
    def max_total(self) -> int:
        """Largest attainable sum (every die shows its top face)."""
        return sum(d.sides for d in self._dice)
    
    @property
    def total_outcomes(self) -> int:
        """Number of distinct outcome tuples when rolling every die once."""
        return prod(d.sides for d in self._dice)
    
    def partition(self, index: int) -> Tuple["DiceSet", "DiceSet"]:
        """Split into the first `index` dice and the rest."""
        if not 0 <= index <= len(self._dice):
            raise IndexError(
                f"Partition index {index} out of range for {len(self._dice)} dice"
            )
        return DiceSet(self._dice[:index]), DiceSet(self._dice[index:])
    
    def __len__(self) -> int:
        return len(self._dice)
    
    def __getitem__(self, index: int) -> Die:
        return self._dice[index]
    
    def __iter__(self) -> Iterator[Die]:
        return iter(self._dice)
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, DiceSet):
            return NotImplemented
        return self._dice == other._dice
    
    def __hash__(self) -> int:
        return hash(self._dice)
    
    def __repr__(self) -> str:
        return f"DiceSet({[d.sides for d in self._dice]})"
    
    def __str__(self) -> str:
        return " ".join(str(d) for d in self._dice)
