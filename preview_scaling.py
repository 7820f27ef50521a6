"""Preview scaling for Baluster Studio.
Maps physical-unit layouts (cm) onto the bounded pixel canvas used by the
browser preview and the SVG export.
"""
import math

from stair_slope import slope_metrics

# Preview canvas limits (px)
PREVIEW_MAX_WIDTH = 760
PREVIEW_MAX_HEIGHT_FLAT = 80
PREVIEW_MAX_HEIGHT_TRIANGLE = 120

# Max px per unit on flat rails
FLAT_SCALE_CEILING = 3.0

MODES = ("flat", "triangle")


def round_px(value: float) -> int:
    """Half-up rounding, matching how the browser snaps lengths to pixels."""
    if not math.isfinite(value):
        return 0
    return math.floor(value + 0.5)


def _extent(value):
    """Length used as a scaling divisor: at least 1 unit, NaN counted as 1."""
    if math.isnan(value):
        return 1
    return max(value, 1)


def compute_scale(mode: str, span: float, height_used: float,
                  max_width_px: float, max_height_px: float) -> float:
    """
    Picks the px-per-unit factor that keeps the drawing inside the canvas.

    Flat rails only need to fit horizontally and are capped at
    FLAT_SCALE_CEILING. Triangles must fit both base and height, so the
    smaller of the two ratios wins and the same factor is used on both axes.
    """
    width_ratio = max_width_px / _extent(span)
    if mode == "flat":
        return min(FLAT_SCALE_CEILING, width_ratio)
    if mode == "triangle":
        return min(width_ratio, max_height_px / _extent(height_used))
    raise ValueError(f"Unknown preview mode: {mode!r} (expected one of {MODES})")


def to_pixels(layout: dict, item_width: float, gap: float, scale: float,
              canvas_width_px: float) -> dict:
    """
    Converts a physical layout into pixel positions centred on the canvas.

    Balusters never collapse below 1px wide. The leftover canvas width is
    split evenly into two end gaps.
    """
    count = layout["count"]
    item_width_px = max(1, round_px(item_width * scale))
    gap_px = round_px(gap * scale)

    total_width_px = count * item_width_px + max(0, count - 1) * gap_px
    end_gap_px = max(0, (canvas_width_px - total_width_px) / 2)

    return {
        "scale": scale,
        "item_width_px": item_width_px,
        "gap_px": gap_px,
        "end_gap_px": end_gap_px,
        "item_positions_px": [end_gap_px + i * (item_width_px + gap_px) for i in range(count)],
    }


def build_viewport(mode, span, item_width, gap, layout, height_used=0.0, placements=None):
    """Full pixel geometry for one preview, including stringer extras in triangle mode."""
    if mode == "flat":
        max_height_px = PREVIEW_MAX_HEIGHT_FLAT
    else:
        max_height_px = PREVIEW_MAX_HEIGHT_TRIANGLE

    scale = compute_scale(mode, span, height_used, PREVIEW_MAX_WIDTH, max_height_px)
    canvas_width_px = max(0, round_px(span * scale))

    viewport = to_pixels(layout, item_width, gap, scale, canvas_width_px)
    viewport["canvas_width_px"] = canvas_width_px
    viewport["canvas_height_px"] = max_height_px

    if mode == "triangle":
        placements = placements or []
        viewport["item_heights_px"] = [max(0, round_px(p["height"] * scale)) for p in placements]
        metrics = slope_metrics(span, height_used)
        viewport["hypotenuse_px"] = metrics["hypotenuse_length"] * scale
        viewport["slope_angle_radians"] = metrics["slope_angle_radians"]

    return viewport
