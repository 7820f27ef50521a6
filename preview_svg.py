"""SVG preview for Baluster Studio.
Draws the scaled schematic (rail or stringer plus one rectangle per baluster)
from the pixel geometry produced by preview_scaling.build_viewport().
"""
import math

from baluster_calculator import calculate, DEFAULT_CONFIG

# Flat preview: rail bar and baluster placement inside the 80px canvas
FLAT_RAIL_BOTTOM = 40
FLAT_RAIL_THICKNESS = 8
FLAT_BALUSTER_BOTTOM = 12
FLAT_BALUSTER_HEIGHT = 60


def render_preview_svg(result):
    """Returns the preview as an SVG document string."""
    vp = result["viewport"]
    w = vp["canvas_width_px"]
    h = vp["canvas_height_px"]
    bw = vp["item_width_px"]

    svg_lines = [
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" xmlns="http://www.w3.org/2000/svg">',
        f'<rect x="0" y="0" width="{w}" height="{h}" fill="#f9fafb" stroke="#d1d5db" stroke-width="1" />',
    ]

    if result["mode"] == "flat":
        rail_y = h - FLAT_RAIL_BOTTOM - FLAT_RAIL_THICKNESS
        svg_lines.append(
            f'<rect x="0" y="{rail_y}" width="{w}" height="{FLAT_RAIL_THICKNESS}" fill="black" fill-opacity="0.6" />'
        )
        top = h - FLAT_BALUSTER_BOTTOM - FLAT_BALUSTER_HEIGHT
        for x in vp["item_positions_px"]:
            svg_lines.append(
                f'<rect x="{x:.2f}" y="{top}" width="{bw}" height="{FLAT_BALUSTER_HEIGHT}" rx="4" fill="black" />'
            )
    else:
        # Stringer line rises from the bottom-left corner
        angle = vp["slope_angle_radians"]
        x2 = vp["hypotenuse_px"] * math.cos(angle)
        y2 = h - vp["hypotenuse_px"] * math.sin(angle)
        svg_lines.append(f'<line x1="0" y1="{h}" x2="{x2:.2f}" y2="{y2:.2f}" stroke="black" stroke-width="2" />')
        for x, bh in zip(vp["item_positions_px"], vp["item_heights_px"]):
            svg_lines.append(
                f'<rect x="{x:.2f}" y="{h - bh}" width="{bw}" height="{bh}" rx="3" fill="black" />'
            )

    svg_lines.append('</svg>')
    return "\n".join(svg_lines)

if __name__ == "__main__":
    try:
        for mode in ("flat", "triangle"):
            config = {**DEFAULT_CONFIG, "mode": mode}
            path = f"baluster_preview_{mode}.svg"
            with open(path, "w") as f:
                f.write(render_preview_svg(calculate(config)))
            print(f"Saved preview to {path}")
    except Exception as e:
        print(f"Error: {e}")
        import traceback
        traceback.print_exc()
