"""Shared service-layer helper functions."""

from __future__ import annotations


def mask_candidate(candidate: str, *, visible: int = 6) -> str:
    """Keep the first *visible* characters and star out the rest.

    Works on any string, including ones that failed validation.

    Examples:
        >>> mask_candidate("01019012480")
        '010190*****'
        >>> mask_candidate("0101", visible=6)
        '0101'
    """
    visible = max(0, visible)
    return candidate[:visible] + "*" * max(0, len(candidate) - visible)
