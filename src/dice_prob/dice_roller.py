from typing import List, Optional, Tuple

from .random_source import RandomSource


def sum_range(dice_count: int, side_count: int, discard_lowest: bool) -> Tuple[int, int]:
    """
    Inclusive (min, max) achievable sum for NdS, with or without the lowest
    die dropped.
    """
    kept = dice_count - 1 if discard_lowest else dice_count
    return kept, kept * side_count


class DiceRoller:
    """
    DiceRoller

    Rolls a fixed number of fair dice against a RandomSource and either sums
    all of them or sums all but the lowest.

    Discard-lowest drops exactly ONE die. When several dice tie for lowest,
    the first of them in roll order is the one dropped, so a scripted source
    always yields the same result.
    """

    def __init__(self, source: Optional[RandomSource] = None):
        self.source = source if source is not None else RandomSource()

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def roll(self, dice_count: int, side_count: int) -> List[int]:
        """
        Roll dice_count dice and return the individual values in roll order.
        """
        _check_dice(dice_count, side_count)
        return [self.source.int_in_range(1, side_count) for _ in range(dice_count)]

    def roll_sum(self, dice_count: int, side_count: int) -> int:
        """Sum of all dice, in [dice_count, dice_count * side_count]."""
        _check_dice(dice_count, side_count)

        total = 0
        for _ in range(dice_count):
            total += self.source.int_in_range(1, side_count)
        return total

    def roll_sum_discard_lowest(self, dice_count: int, side_count: int) -> int:
        """Sum without the lowest die, in [dice_count - 1, (dice_count - 1) * side_count]."""
        if dice_count == 0:
            raise ValueError("cannot discard the lowest of zero dice")

        rolls = self.roll(dice_count, side_count)
        low_idx = lowest_index(rolls)

        total = 0
        for i, r in enumerate(rolls):
            if i != low_idx:
                total += r
        return total


def lowest_index(rolls: List[int]) -> int:
    """
    Index of the lowest roll; the first one wins on ties.
    """
    if not rolls:
        raise ValueError("rolls must be non-empty")

    low_idx = 0
    for i in range(1, len(rolls)):
        if rolls[i] < rolls[low_idx]:
            low_idx = i
    return low_idx


def _check_dice(dice_count: int, side_count: int) -> None:
    if dice_count < 0:
        raise ValueError("dice_count must be >= 0")
    if side_count < 2:
        raise ValueError("side_count must be >= 2")
