"""Dice notation parsing.

Notation is a whitespace-separated list of groups ``MdN``: M dice of N sides
each. ``"2d6 3d8"`` is two six-sided and three eight-sided dice.
"""
from typing import List

from .dice import Die, DiceSet
from .errors import NotationError


DEFAULT_NOTATION = "1d6"

# Face counts must fit in an unsigned byte.
MAX_SIDES = 255

# Each split spawns a thread, so the whole set is capped.
MAX_DICE = 1000


def parse_die(text: str) -> Die:
    """Parse a single die, either ``"d6"`` or just ``"6"``."""
    digits = text[1:] if text.startswith("d") else text
    if not digits.isdecimal():
        raise NotationError("Number of sides must be an integer")
    
    sides = int(digits)
    if not 1 <= sides <= MAX_SIDES:
        raise NotationError(f"Number of sides must be between 1 and {MAX_SIDES}")
    return Die(sides)


def parse_dice(text: str) -> DiceSet:
    """Parse a full notation string into a sorted dice set."""
    groups = text.split()
    if not groups:
        raise NotationError("Incorrect string format")
    
    dice: List[Die] = []
    for group in groups:
        parts = group.lower().split("d")
        if len(parts) != 2:
            raise NotationError("Incorrect string format")
        
        count, sides = parts
        if not count.isdecimal():
            raise NotationError("Number of dice must be an integer")
        die = parse_die(sides)
        if len(dice) + int(count) > MAX_DICE:
            raise NotationError(f"At most {MAX_DICE} dice can be rolled at once")
        dice.extend([die] * int(count))
    
    return DiceSet(dice)


def format_dice(dice: DiceSet) -> str:
    """Render a dice set back as one token per die, e.g. ``"d6 d6 d8"``."""
    return str(dice)
