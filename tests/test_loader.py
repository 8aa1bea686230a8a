import json

import pytest
from isoprism import load_scene, scene_from_dict, SceneError, Shader, Group, Prism, DEFAULT_SHADER

HOUSE = """
unit: 10
square: false
color: "#ff0000"
pos: [1, 0, 0]
prism:
  - pos: [0, 0, 0]
    size: [4, 4, 2]
  - pos: [1, 1, 0]
    name: roof
    color: "#00ff00"
    children:
      - pos: [0, 0, 2]
        size: [2, 2, 1]
      - pos: [1, 0, 2]
        size: [1, 1, 1]
        cut: true
"""


def test_load_yaml(scene_file):
    scene = load_scene(scene_file(HOUSE))
    assert scene.unit == 10
    assert scene.force_square is False
    assert isinstance(scene.root, Group)
    assert scene.root.color == "#ff0000"

    base, roof = scene.root.children
    assert isinstance(base, Prism)
    assert base.position == (1, 0, 0)
    assert base.size == (4, 4, 2)
    assert roof.name == "roof"
    assert roof.position == (2, 1, 0)
    assert roof.children[0].position == (2, 1, 2)
    assert roof.children[1].position == (3, 1, 2)
    assert roof.children[1].positive is False


def test_loaded_scene_flattens(scene_file):
    scene = load_scene(scene_file(HOUSE))
    boxes = scene.flatten()
    assert sum(b.volume() for b in boxes) == 32 + 4 - 1
    assert {b.color for b in boxes} == {"#ff0000", "#00ff00"}


def test_load_json(tmp_path):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps({"prism": [{"pos": [0, 0, 0], "size": [1, 1, 1]}]}))
    scene = load_scene(path)
    assert scene.unit == 20
    assert scene.force_square is True
    assert scene.root.color == "#ffffff"
    assert len(scene.flatten()) == 1


def test_default_shader():
    scene = scene_from_dict({"prism": []})
    assert scene.shader == Shader(**DEFAULT_SHADER)
    assert scene.shader == Shader(x="#00000026", y="#00000066", z=None)


def test_shader_overrides_and_null_slots():
    scene = scene_from_dict({"shader": {"x": None, "z": "#ffffff33"}, "prism": []})
    assert scene.shader == Shader(x=None, y="#00000066", z="#ffffff33")


def test_hidden_node():
    scene = scene_from_dict({"prism": [{"pos": [0, 0, 0], "size": [1, 1, 1], "hidden": True}]})
    assert scene.flatten() == []


@pytest.mark.parametrize("node, message", [
    ({"size": [1, 1, 1]}, "missing 'pos'"),
    ({"pos": [0, 0, 0]}, "either 'size' or 'children'"),
    ({"pos": [0, 0], "size": [1, 1, 1]}, "pos"),
    ({"pos": [0, 0, 0], "size": [1, -1, 1]}, "negative"),
    ({"pos": [0, 0, 0], "size": [1, 1, 1], "children": []}, "both"),
    ({"pos": [0, 0, 0], "size": [1, 1, 1], "colour": "#fff"}, "unknown keys"),
    ("box", "expected a mapping"),
    ({"pos": 0, "size": [1, 1, 1]}, "'pos' must be a list"),
    ({"pos": [0, 0, 0], "size": 2}, "'size' must be a list"),
    ({"pos": [0, 0, 0], "size": [1, 1, 1], "cut": "false"}, "'cut' must be true or false"),
    ({"pos": [0, 0, 0], "size": [1, 1, 1], "hidden": 1}, "'hidden' must be true or false"),
])
def test_malformed_nodes(node, message):
    with pytest.raises(SceneError, match=message) as exc:
        scene_from_dict({"prism": [node]})
    assert "prism[0]" in str(exc.value)


def test_error_names_nested_node():
    data = {"prism": [{"pos": [0, 0, 0], "children": [{"pos": [0, 0, 0]}]}]}
    with pytest.raises(SceneError, match=r"prism\[0\]\.children\[0\]"):
        scene_from_dict(data)


def test_scene_level_errors():
    with pytest.raises(SceneError):
        scene_from_dict([])
    with pytest.raises(SceneError):
        scene_from_dict({"unit": 20})
    with pytest.raises(SceneError):
        scene_from_dict({"unit": -1, "prism": []})
    with pytest.raises(SceneError):
        scene_from_dict({"shader": {"w": "#fff"}, "prism": []})


def test_scene_error_is_value_error():
    assert issubclass(SceneError, ValueError)


def test_unknown_extension(tmp_path):
    path = tmp_path / "scene.toml"
    path.write_text("")
    with pytest.raises(SceneError, match="Unsupported"):
        load_scene(path)


def test_invalid_yaml(scene_file):
    with pytest.raises(SceneError, match="invalid YAML"):
        load_scene(scene_file("prism: [unclosed"))


def test_cut_string_is_not_a_subtraction():
    data = {"prism": [
        {"pos": [0, 0, 0], "size": [2, 2, 2]},
        {"pos": [0, 0, 0], "size": [1, 1, 1], "cut": "false"},
    ]}
    with pytest.raises(SceneError, match=r"prism\[1\]"):
        scene_from_dict(data)


def test_square_must_be_boolean():
    with pytest.raises(SceneError, match="'square'"):
        scene_from_dict({"square": "no", "prism": []})
