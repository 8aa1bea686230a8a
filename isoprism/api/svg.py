import numpy as np

PRECISION = 8


def get_bounds(polygon_sets, force_square: bool = False) -> tuple:
    """
    Gets the rectangular bounds of every point of every polygon.

    Args:
        polygon_sets (iterable): Mappings of color -> list of polygons.
        force_square (bool, optional): Pad the shorter side symmetrically
                                       so that width == height.

    Returns:
        tuple: (shift_x, shift_y, width, height), where the shift moves the
               (padded) minimum corner to the origin.
    """
    points = [
        point
        for polygons_by_color in polygon_sets
        for polygons in polygons_by_color.values()
        for polygon in polygons
        for point in polygon
    ]
    if not points:
        return 0.0, 0.0, 0.0, 0.0

    arr = np.asarray(points, dtype=float)
    min_x, min_y = arr.min(axis=0)
    max_x, max_y = arr.max(axis=0)
    shift_x, shift_y = -float(min_x), -float(min_y)
    width, height = float(max_x - min_x), float(max_y - min_y)
    if not force_square:
        return shift_x, shift_y, width, height

    side = max(width, height)
    shift_x += (side - width) / 2.0
    shift_y += (side - height) / 2.0
    return shift_x, shift_y, side, side


def format_coord(n: float) -> str:
    """Formats a coordinate with fixed precision, trimming trailing zeros and the dot."""
    s = f"{n:.{PRECISION}f}".rstrip('0').rstrip('.')
    if s == '-0':
        return '0'
    return s


def path_data(polygon, shift_x: float, shift_y: float, unit: float) -> str:
    """Serializes one closed polygon as `M x y L x y ... Z`."""
    coords = [f"{format_coord((x + shift_x) * unit)} {format_coord((y + shift_y) * unit)}" for x, y in polygon]
    return "M" + "L".join(coords) + "Z"


def path_element(color: str, polygons, shift_x: float, shift_y: float, unit: float) -> str:
    d = "".join(path_data(p, shift_x, shift_y, unit) for p in polygons if p)
    if not d:
        return ""
    return f'<path d="{d}" fill="{color}"/>'


def to_svg(base: dict, overlay: dict, unit: float, force_square: bool = False) -> tuple:
    """
    Converts colored polygons to an SVG document.

    Base colors are painted first and overlay (shader) colors on top.

    Args:
        base (dict): color -> list of polygons for the face colors.
        overlay (dict): color -> list of polygons for the shader colors.
        unit (float): Pixels per lattice unit.
        force_square (bool, optional): Pad the image to a square.

    Returns:
        tuple: (svg, shift_x, shift_y). The shift is the offset that was
               added to every lattice point before scaling, i.e. the negated
               minimum corner plus any square padding, not the minimum itself.
    """
    shift_x, shift_y, width, height = get_bounds((base, overlay), force_square)
    paths = []
    for polygons_by_color in (base, overlay):
        for color, polygons in polygons_by_color.items():
            paths.append(path_element(color, polygons, shift_x, shift_y, unit))
    svg = (
        f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" '
        f'width="{format_coord(width * unit)}" height="{format_coord(height * unit)}">'
        + "".join(paths)
        + "</svg>"
    )
    return svg, shift_x, shift_y
