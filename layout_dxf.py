"""DXF export for Baluster Studio.
Draws the rail (or stringer triangle) and every baluster at true size, using
the same offsets as the cut schedule so the drawing can be dimensioned on site.
"""
import io
import ezdxf

# Drawn height of balusters on a flat rail (cm); the layout itself is 1-D
FLAT_BALUSTER_HEIGHT = 90.0
LABEL_HEIGHT = 2.0


def _rect(x, y, w, h):
    return [(x, y), (x + w, y), (x + w, y + h), (x, y + h), (x, y)]


def build_layout_dxf(result, config):
    """
    Args:
        result: Output of baluster_calculator.calculate().
        config: The config the result was computed from (for baluster width
                and rail/base length).

    Returns:
        ezdxf Drawing with RAIL, BALUSTERS and LABELS layers.
    """
    doc = ezdxf.new()
    doc.layers.add("RAIL", color=7)
    doc.layers.add("BALUSTERS", color=3)
    doc.layers.add("LABELS", color=1)
    msp = doc.modelspace()

    width = config["baluster_width"]

    if result["mode"] == "flat":
        length = config["rail_length"]
        msp.add_line((0, FLAT_BALUSTER_HEIGHT), (length, FLAT_BALUSTER_HEIGHT), dxfattribs={'layer': 'RAIL'})
        msp.add_line((0, 0), (length, 0), dxfattribs={'layer': 'RAIL'})
        for i, x in enumerate(result["layout"]["positions"]):
            msp.add_lwpolyline(_rect(x, 0, width, FLAT_BALUSTER_HEIGHT), dxfattribs={'layer': 'BALUSTERS'})
            msp.add_text(str(i + 1), dxfattribs={
                'layer': 'LABELS',
                'height': LABEL_HEIGHT,
            }).set_placement((x, -LABEL_HEIGHT * 2))
    else:
        base = config["triangle_base"]
        rise = result["triangle"]["height_used"]
        msp.add_lwpolyline([(0, 0), (base, 0), (base, rise), (0, 0)], dxfattribs={'layer': 'RAIL'})
        for p in result["placements"]:
            if p["height"] > 0:
                msp.add_lwpolyline(_rect(p["x"], 0, width, p["height"]), dxfattribs={'layer': 'BALUSTERS'})
            msp.add_text(f"{p['index']}: {p['height']:.1f}", dxfattribs={
                'layer': 'LABELS',
                'height': LABEL_HEIGHT,
            }).set_placement((p["x"], -LABEL_HEIGHT * 2))

    return doc


def dxf_to_string(doc):
    dxf_buffer = io.StringIO()
    doc.write(dxf_buffer)
    return dxf_buffer.getvalue()
