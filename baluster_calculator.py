"""Baluster Calculator.
Computes how many balusters fit on a rail and where they go, for either:
- a flat rail (rail length, baluster width, spacing)
- a triangle stair stringer (base, height or pitch angle, baluster width, spacing)

Usage:
    python baluster_calculator.py [--mode flat|triangle] [--rail_length 150] [--angle 35]
"""
import argparse

from baluster_layout import compute_layout
from stair_slope import resolve_triangle, project_heights, slope_metrics
from preview_scaling import build_viewport

# Default Configuration (cm)
DEFAULT_CONFIG = {
    "mode": "flat",
    "rail_length": 150.0,
    "baluster_width": 1.2,
    "spacing": 9.0,
    "triangle_base": 150.0,
    "triangle_height": 80.0,
    "triangle_angle_deg": 0.0,
}


def calc_flat(config):
    """Layout along a straight horizontal rail."""
    rail_length = config["rail_length"]
    width = config["baluster_width"]
    spacing = config["spacing"]

    layout = compute_layout(rail_length, width, spacing)
    viewport = build_viewport("flat", rail_length, width, spacing, layout)

    return {"mode": "flat", "layout": layout, "viewport": viewport}


def calc_triangle(config):
    """Layout along the base of a stair triangle, with each baluster's rise under the slope."""
    base = config["triangle_base"]
    width = config["baluster_width"]
    spacing = config["spacing"]

    triangle = resolve_triangle(base, config["triangle_height"], config["triangle_angle_deg"])
    height_used = triangle["height_used"]

    layout = compute_layout(base, width, spacing)
    placements = project_heights(layout["positions"], base, height_used)
    viewport = build_viewport("triangle", base, width, spacing, layout,
                              height_used=height_used, placements=placements)

    return {
        "mode": "triangle",
        "layout": layout,
        "triangle": triangle,
        "placements": placements,
        "slope": slope_metrics(base, height_used),
        "viewport": viewport,
    }


def calculate(config=None):
    """Run the calculator for config merged over DEFAULT_CONFIG."""
    params = DEFAULT_CONFIG.copy()
    if config:
        params.update({k: v for k, v in config.items() if v is not None})

    mode = params["mode"]
    if mode == "flat":
        print(f"[CALC] Flat rail: L={params['rail_length']}, W={params['baluster_width']}, S={params['spacing']}")
        return calc_flat(params)
    if mode == "triangle":
        print(f"[CALC] Triangle: B={params['triangle_base']}, H={params['triangle_height']}, "
              f"A={params['triangle_angle_deg']}, W={params['baluster_width']}, S={params['spacing']}")
        return calc_triangle(params)
    raise ValueError(f"Unknown mode: {mode!r}")


def format_summary(result):
    """Plain-text results block, as shown beside the preview."""
    layout = result["layout"]
    lines = [f"Balusters that fit: {layout['count']}"]

    if result["mode"] == "flat":
        lines.append(f"Used length: {layout['used_length']:.2f} cm")
        lines.append(f"Remaining: {layout['remaining_length']:.2f} cm")
        return "\n".join(lines)

    triangle = result["triangle"]
    using = f"Using height: {triangle['height_used']:.2f} cm"
    if triangle["angle_from_input"]:
        using += f" (derived from angle {triangle['angle_used']:.2f}°)"
    lines.append(using)
    lines.append(f"Slope: {result['slope']['slope_angle_degrees']:.2f}°, "
                 f"hypotenuse {result['slope']['hypotenuse_length']:.2f} cm")
    lines.append(f"{'#':>4}  {'X (cm)':>10}  {'Height (cm)':>12}")
    for p in result["placements"]:
        lines.append(f"{p['index']:>4}  {p['x']:>10.2f}  {p['height']:>12.2f}")
    return "\n".join(lines)


if __name__ == "__main__":
    from schedule_export import generate_csv
    from layout_dxf import build_layout_dxf, dxf_to_string
    from preview_svg import render_preview_svg

    parser = argparse.ArgumentParser()
    parser.add_argument("--mode", choices=["flat", "triangle"], default=DEFAULT_CONFIG["mode"])
    parser.add_argument("--rail_length", type=float, default=DEFAULT_CONFIG["rail_length"])
    parser.add_argument("--width", type=float, default=DEFAULT_CONFIG["baluster_width"])
    parser.add_argument("--spacing", type=float, default=DEFAULT_CONFIG["spacing"])
    parser.add_argument("--base", type=float, default=DEFAULT_CONFIG["triangle_base"])
    parser.add_argument("--height", type=float, default=DEFAULT_CONFIG["triangle_height"])
    parser.add_argument("--angle", type=float, default=DEFAULT_CONFIG["triangle_angle_deg"],
                        help="Pitch in degrees; overrides --height when > 0")
    parser.add_argument("--csv", help="Write the cut schedule to this CSV file")
    parser.add_argument("--dxf", help="Write the layout drawing to this DXF file")
    parser.add_argument("--svg", help="Write the scaled preview to this SVG file")
    args = parser.parse_args()

    config = DEFAULT_CONFIG.copy()
    config.update({
        "mode": args.mode,
        "rail_length": args.rail_length,
        "baluster_width": args.width,
        "spacing": args.spacing,
        "triangle_base": args.base,
        "triangle_height": args.height,
        "triangle_angle_deg": args.angle,
    })

    result = calculate(config)
    print(format_summary(result))

    if args.csv:
        with open(args.csv, "w", newline="") as f:
            f.write(generate_csv(result))
        print(f"Exported: {args.csv}")
    if args.dxf:
        with open(args.dxf, "w") as f:
            f.write(dxf_to_string(build_layout_dxf(result, config)))
        print(f"Exported: {args.dxf}")
    if args.svg:
        with open(args.svg, "w") as f:
            f.write(render_preview_svg(result))
        print(f"Exported: {args.svg}")
