"""Baluster (Spindle) Layout Engine for Baluster Studio.
Counts how many fixed-width balusters with a fixed gap fit along a span and
places them along a 1-D axis (the rail length, or the base of a stair triangle).
"""
import math


def _degenerate_layout(span):
    return {
        "count": 0,
        "positions": [],
        "used_length": 0.0,
        "remaining_length": max(0.0, span) if math.isfinite(span) else 0.0,
    }


def _usable(span, item_width, gap):
    """All sizes finite and a positive pitch to divide by."""
    return all(math.isfinite(v) for v in (span, item_width, gap)) and item_width + gap > 0


def fence_post_count(span: float, item_width: float, gap: float) -> int:
    """n items and n-1 gaps fit in span iff n*w + (n-1)*g <= span,
    i.e. n <= (span + g) / (w + g).

    Returns 0 instead of dividing by a non-positive pitch.
    """
    if not _usable(span, item_width, gap):
        return 0
    return max(0, math.floor((span + gap) / (item_width + gap)))


def compute_layout(span: float, item_width: float, gap: float) -> dict:
    """
    Lays out as many balusters as fit along `span`, left-aligned from 0.

    Args:
        span: Length of the axis (rail length or triangle base).
        item_width: Width of a single baluster.
        gap: Clear space between neighbouring balusters.

    Returns:
        dict with `count`, `positions` (start offset of each baluster),
        `used_length` and `remaining_length` (never negative).
    """
    if not _usable(span, item_width, gap):
        print(f"    [LAYOUT] WARNING: unusable sizing (width={item_width}, gap={gap}), no balusters placed.", flush=True)
        return _degenerate_layout(span)

    count = fence_post_count(span, item_width, gap)
    if count == 0:
        return _degenerate_layout(span)

    used_length = count * item_width + max(0, count - 1) * gap
    pitch = item_width + gap
    positions = [i * pitch for i in range(count)]

    return {
        "count": count,
        "positions": positions,
        "used_length": used_length,
        "remaining_length": max(0.0, span - used_length),
    }
