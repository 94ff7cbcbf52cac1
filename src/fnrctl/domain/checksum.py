"""Modulo-11 weighted-sum checks for the two control digits.

Both sums must be divisible by 11. The second table runs over all eleven
positions, so the second control digit enters its own sum with weight 1.
For every digit that can actually occur this accepts exactly the numbers
the published recompute-and-compare scheme accepts.
"""

from __future__ import annotations

from collections.abc import Sequence

MODULUS = 11

FIRST_CHECK_WEIGHTS: tuple[int, ...] = (3, 7, 6, 1, 8, 9, 4, 5, 2, 1)
SECOND_CHECK_WEIGHTS: tuple[int, ...] = (5, 4, 3, 2, 7, 6, 5, 4, 3, 2, 1)


def weighted_sum(digits: Sequence[int], weights: Sequence[int]) -> int:
    """Sum ``weights[i] * digits[i]`` over the length of *weights*."""
    return sum(w * d for w, d in zip(weights, digits, strict=False))


def first_check_ok(digits: Sequence[int]) -> bool:
    return weighted_sum(digits, FIRST_CHECK_WEIGHTS) % MODULUS == 0


def second_check_ok(digits: Sequence[int]) -> bool:
    return weighted_sum(digits, SECOND_CHECK_WEIGHTS) % MODULUS == 0


def checksums_ok(digits: Sequence[int]) -> bool:
    """Check both control digits of an 11-digit sequence."""
    return first_check_ok(digits) and second_check_ok(digits)
