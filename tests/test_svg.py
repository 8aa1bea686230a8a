import math
import re

import pytest
from isoprism import prism, group, Shader, Scene, render_svg, to_svg
from isoprism.api.svg import format_coord, get_bounds, path_data

COS30 = math.sqrt(3) / 2


def svg_size(svg):
    m = re.search(r'width="([^"]+)" height="([^"]+)"', svg)
    return float(m.group(1)), float(m.group(2))


def test_format_coord():
    assert format_coord(1.0) == "1"
    assert format_coord(2.5) == "2.5"
    assert format_coord(17.320508075688775) == "17.32050808"
    assert format_coord(-0.0) == "0"
    assert format_coord(-1e-12) == "0"


def test_path_data_closes_polygon():
    d = path_data([(0, 0), (1, 0), (1, 1)], 0, 0, 10)
    assert d == "M0 0L10 0L10 10Z"


def test_get_bounds_empty():
    assert get_bounds(({}, {}), force_square=True) == (0.0, 0.0, 0.0, 0.0)


def test_get_bounds_shifts_to_origin():
    polys = {"#fff": [[(-1.0, 2.0), (3.0, 2.0), (3.0, 4.0)]]}
    assert get_bounds((polys, {})) == (1.0, -2.0, 4.0, 2.0)
    shift_x, shift_y, w, h = get_bounds((polys, {}), force_square=True)
    assert (w, h) == (4.0, 4.0)
    assert shift_x == 1.0
    assert shift_y == pytest.approx(-1.0)


def test_single_red_cube():
    svg, shift_x, shift_y = render_svg(group(prism((0, 0, 0), 1, color="#ff0000")), unit=20)
    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
    assert svg.endswith("</svg>")
    assert svg.count("<path ") == 1
    assert 'fill="#ff0000"' in svg
    d = re.search(r'd="([^"]+)"', svg).group(1)
    assert d.count("M") == 1
    assert d.count("Z") == 1
    assert d.count("L") == 5
    assert shift_x == 0
    assert shift_y == 0
    width, height = svg_size(svg)
    assert width == pytest.approx(20 * 2 * COS30, abs=1e-6)
    assert height == pytest.approx(40)


def test_force_square():
    # a 3x1x1 box projects to 4*cos30 by 3 lattice units
    root = group(prism((0, 0, 0), (3, 1, 1)))
    svg, _, _ = render_svg(root, unit=20, force_square=True)
    width, height = svg_size(svg)
    assert width == height
    assert width == pytest.approx(20 * 4 * COS30, abs=1e-6)

    svg, _, _ = render_svg(root, unit=20, force_square=False)
    width, height = svg_size(svg)
    assert width == pytest.approx(20 * 4 * COS30, abs=1e-6)
    assert height == pytest.approx(20 * 3)
    assert width / height == pytest.approx(4 * COS30 / 3, abs=1e-6)


def test_unit_scales_output():
    root = group(prism((0, 0, 0), 1))
    w1, h1 = svg_size(render_svg(root, unit=10)[0])
    w2, h2 = svg_size(render_svg(root, unit=30)[0])
    assert w2 == pytest.approx(3 * w1, abs=1e-6)
    assert h2 == pytest.approx(3 * h1, abs=1e-6)


def test_empty_scene():
    svg, shift_x, shift_y = render_svg(group())
    assert svg == '<svg xmlns="http://www.w3.org/2000/svg" version="1.1" width="0" height="0"></svg>'
    assert (shift_x, shift_y) == (0.0, 0.0)


def test_overlays_follow_base_colors():
    shader = Shader(x="#00000026", y="#00000066", z="#ffffff33")
    svg, _, _ = render_svg(group(prism((0, 0, 0), 2, color="#3080ff")), shader=shader)
    fills = re.findall(r'fill="([^"]+)"', svg)
    assert fills == ["#3080ff", "#00000026", "#00000066", "#ffffff33"]


def test_shift_is_applied_to_coordinates():
    svg, shift_x, shift_y = render_svg(group(prism((5, 0, 0), 1)))
    assert shift_x > 0
    assert shift_y < 0
    numbers = [float(n) for n in re.findall(r'-?\d+(?:\.\d+)?', re.search(r'd="([^"]+)"', svg).group(1))]
    assert min(numbers) == pytest.approx(0.0, abs=1e-6)


def test_to_svg_from_polygons():
    svg, _, _ = to_svg({"#ff0000": [[(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]]}, {}, unit=10)
    assert svg.endswith('<path d="M0 0L10 0L10 10Z" fill="#ff0000"/></svg>')


def test_scene_stages(unit_cube, default_shader):
    scene = Scene(unit_cube, shader=default_shader)
    assert len(scene.flatten()) == 1
    assert len(scene.faces()) == 3
    base, overlay = scene.lattices()
    assert list(base) == ["#ffffff"]
    assert set(overlay) == {"#00000026", "#00000066"}
    base_polys, overlay_polys = scene.polygons()
    assert len(base_polys["#ffffff"]) == 1
    assert scene.to_svg()[0] == unit_cube.to_svg(shader=default_shader)[0]


def test_scene_root_color():
    scene = Scene(group(prism()), color="#123456")
    assert scene.flatten()[0].color == "#123456"


def test_scene_rejects_non_node():
    with pytest.raises(TypeError):
        Scene([prism()])
