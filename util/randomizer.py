import math
import random
from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, the way Math.round does."""
    return int(math.floor(value + 0.5))


def pick(items: Sequence[T], rng: Optional[random.Random] = None) -> T:
    if not items:
        raise ValueError("Cannot pick from an empty sequence")
    return (rng or random).choice(items)


def chance(probability: float, rng: Optional[random.Random] = None) -> bool:
    return (rng or random).random() < probability


def weighted_first_fit(
    candidates: Sequence[Tuple[T, float]],
    rng: Optional[random.Random] = None
) -> Optional[T]:
    """
    Cumulative first-fit draw over candidates in insertion order.

    Returns None when floating point leaves the roll above zero after the
    last candidate, so callers can apply their own fallback.
    """
    total_weight = sum(weight for _, weight in candidates)
    roll = (rng or random).random() * total_weight

    for item, weight in candidates:
        roll -= weight
        if roll <= 0:
            return item

    return None
