import random
from typing import Callable, List, Optional

MASK_32 = 0xFFFFFFFF
MULBERRY_INCREMENT = 0x6D2B79F5
TWO_POW_32 = 4294967296


def _imul(a: int, b: int) -> int:
    # 32-bit truncated multiply (low word of the product)
    return (a * b) & MASK_32


def create_seeded_random(seed: int) -> Callable[[], float]:
    """
    Mulberry32. Returns a callable producing floats in [0, 1).
    Same seed -> same sequence, bit for bit.
    """
    state = seed & MASK_32

    def next_float() -> float:
        nonlocal state
        state = (state + MULBERRY_INCREMENT) & MASK_32
        r = state
        r = _imul(r ^ (r >> 15), r | 1)
        r ^= (r + _imul(r ^ (r >> 7), r | 61)) & MASK_32
        return ((r ^ (r >> 14)) & MASK_32) / TWO_POW_32

    return next_float


def generate_random_array(size: int, max_value: Optional[int] = None) -> List[int]:
    top = max_value if max_value is not None else size
    return [random.randint(1, top) for _ in range(size)]


def generate_random_array_with_seed(size: int, seed: int, max_value: Optional[int] = None) -> List[int]:
    rand = create_seeded_random(seed)
    top = max_value if max_value is not None else size
    return [int(rand() * top) + 1 for _ in range(size)]


def shuffle_array(values: List[int], rand: Optional[Callable[[], float]] = None) -> List[int]:
    """Fisher-Yates on a copy. Pass a seeded `rand` for a reproducible order."""
    if rand is None:
        rand = random.random
    shuffled = list(values)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(rand() * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
