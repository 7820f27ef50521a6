import io
import csv


def generate_csv(result):
    """
    Builds a baluster cut schedule from a calculator result.

    Flat rails list each baluster's offset along the rail. Triangle stairs
    also list the rise under the stringer at that offset, which is what each
    baluster has to be cut down by.

    Args:
        result (dict): Output of baluster_calculator.calculate().

    Returns:
        str: A formatted CSV string.
    """
    layout = result["layout"]

    output = io.StringIO()
    writer = csv.writer(output)

    if result["mode"] == "triangle":
        writer.writerow(["#", "X (cm)", "Height (cm)"])
        for p in result["placements"]:
            writer.writerow([p["index"], f"{p['x']:.2f}", f"{p['height']:.2f}"])
    else:
        writer.writerow(["#", "X (cm)"])
        for i, x in enumerate(layout["positions"]):
            writer.writerow([i + 1, f"{x:.2f}"])

    writer.writerow([])
    writer.writerow(["Balusters", layout["count"]])
    writer.writerow(["Used length (cm)", f"{layout['used_length']:.2f}"])
    writer.writerow(["Remaining (cm)", f"{layout['remaining_length']:.2f}"])
    if result["mode"] == "triangle":
        writer.writerow(["Height used (cm)", f"{result['triangle']['height_used']:.2f}"])
        writer.writerow(["Slope angle (deg)", f"{result['slope']['slope_angle_degrees']:.2f}"])
        writer.writerow(["Hypotenuse (cm)", f"{result['slope']['hypotenuse_length']:.2f}"])

    return output.getvalue()

if __name__ == "__main__":
    from baluster_calculator import calculate
    print(generate_csv(calculate({"mode": "triangle"})))
