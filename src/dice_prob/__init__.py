"""
Fair dice rolling on top of an injectable random source.
"""

from .dice_roller import DiceRoller, lowest_index, sum_range
from .random_source import RandomSource

__all__ = ["DiceRoller", "RandomSource", "lowest_index", "sum_range"]
