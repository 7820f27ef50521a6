"""Stair slope projection for Baluster Studio.
Resolves the rise of a stair-stringer triangle from either a manual height or
a pitch angle, and projects each baluster's height along the straight
hypotenuse from (0, 0) to (base, height).
"""
import math


def _flat_stringer(reason):
    print(f"    [SLOPE] WARNING: {reason}, using a height of 0.", flush=True)
    return 0.0


def resolve_height(base: float, height: float, angle_degrees: float) -> float:
    """Angle wins over the manual height whenever it is positive.

    Non-finite angles or heights resolve to 0 (a flat stringer).
    """
    if not math.isfinite(angle_degrees):
        return _flat_stringer(f"unusable angle {angle_degrees}")
    if angle_degrees > 0:
        height_used = base * math.tan(math.radians(angle_degrees))
    else:
        height_used = height
    if not math.isfinite(height_used):
        return _flat_stringer(f"unusable height {height_used}")
    return height_used


def resolve_triangle(base: float, height: float, angle_degrees: float) -> dict:
    """
    Returns the effective triangle used for the layout.

    `angle_used` is the supplied angle when it drives the height, otherwise the
    pitch derived from the rise/run pair (height / base).
    """
    height_used = resolve_height(base, height, angle_degrees)
    from_input = math.isfinite(angle_degrees) and angle_degrees > 0
    if from_input:
        angle_used = angle_degrees
    else:
        angle_used = slope_metrics(base, height_used)["slope_angle_degrees"]
    return {
        "base": base,
        "height_used": height_used,
        "angle_used": angle_used,
        "angle_from_input": from_input,
    }


def project_heights(positions, base: float, height_used: float) -> list[dict]:
    """
    Computes the rise under the hypotenuse at each baluster position.

    Args:
        positions: x offsets along the base, as laid out by compute_layout().
        base: Triangle base (run).
        height_used: Resolved triangle height (rise).

    Returns:
        list of {index (1-based), x, height}.
    """
    # Zero or unusable run: every height is 0
    slope = height_used / base if base and math.isfinite(base) else 0.0
    if not math.isfinite(slope):
        slope = 0.0
    return [
        {"index": i + 1, "x": x, "height": slope * x}
        for i, x in enumerate(positions)
    ]


def slope_metrics(base: float, height_used: float) -> dict:
    if not (math.isfinite(base) and math.isfinite(height_used)):
        return {"slope_angle_radians": 0.0, "slope_angle_degrees": 0.0, "hypotenuse_length": 0.0}
    angle_rad = math.atan2(height_used, base)
    hypotenuse = math.hypot(base, height_used)
    return {
        "slope_angle_radians": angle_rad,
        "slope_angle_degrees": math.degrees(angle_rad),
        "hypotenuse_length": hypotenuse if math.isfinite(hypotenuse) else 0.0,
    }
