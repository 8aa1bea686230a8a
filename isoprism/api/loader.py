import json
from pathlib import Path

import yaml

from .core import DEFAULT_COLOR, Vec3, _vec3
from .primitives import Prism
from .compositors import Group
from .scene import Scene, DEFAULT_UNIT
from .shader import Shader

# Overlay colors used when a scene file does not override them.
DEFAULT_SHADER = {
    'x': "#00000026",
    'y': "#00000066",
    'z': None,
}

_NODE_KEYS = {'pos', 'size', 'children', 'color', 'cut', 'hidden', 'name'}


class SceneError(ValueError):
    """Raised when a scene file cannot be turned into a Scene."""


def _read_vector(value, where: str, key: str) -> Vec3:
    if not isinstance(value, (list, tuple)):
        raise SceneError(f"{where}: '{key}' must be a list of 3 integers, got {value!r}")
    try:
        return _vec3(value, key)
    except (TypeError, ValueError) as e:
        raise SceneError(f"{where}: {e}")


def _read_flag(data: dict, key: str, where: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise SceneError(f"{where}: '{key}' must be true or false, got {value!r}")
    return value


def _build_shader(data) -> Shader:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SceneError(f"shader: expected a mapping, got {type(data).__name__}")
    unknown = set(data) - set(DEFAULT_SHADER)
    if unknown:
        raise SceneError(f"shader: unknown axes {sorted(unknown)}")
    # an explicit null disables the slot, a missing key keeps the default
    colors = {axis: data.get(axis, default) for axis, default in DEFAULT_SHADER.items()}
    return Shader(**colors)


def _build_node(data, offset: Vec3, where: str):
    """Builds one node, turning its file-relative position into an absolute one."""
    if not isinstance(data, dict):
        raise SceneError(f"{where}: expected a mapping, got {type(data).__name__}")
    unknown = set(data) - _NODE_KEYS
    if unknown:
        raise SceneError(f"{where}: unknown keys {sorted(unknown)}")
    if 'pos' not in data:
        raise SceneError(f"{where}: missing 'pos'")

    rel = _read_vector(data['pos'], where, 'pos')
    pos = Vec3(offset.x + rel.x, offset.y + rel.y, offset.z + rel.z)
    color = data.get('color')
    if color is not None and not isinstance(color, str):
        raise SceneError(f"{where}: 'color' must be a string")
    kwargs = dict(
        color=color,
        positive=not _read_flag(data, 'cut', where, False),
        hidden=_read_flag(data, 'hidden', where, False),
        name=str(data.get('name', "")),
    )

    if 'size' in data and 'children' in data:
        raise SceneError(f"{where}: a node cannot have both 'size' and 'children'")
    if 'size' in data:
        size = _read_vector(data['size'], where, 'size')
        if min(size) < 0:
            raise SceneError(f"{where}: 'size' must not be negative, got {tuple(size)}")
        return Prism(position=pos, size=size, **kwargs)
    if 'children' in data:
        children = data['children'] or []
        if not isinstance(children, list):
            raise SceneError(f"{where}: 'children' must be a list")
        nodes = [_build_node(child, pos, f"{where}.children[{i}]") for i, child in enumerate(children)]
        return Group(nodes, position=pos, **kwargs)
    raise SceneError(f"{where}: node needs either 'size' or 'children'")


def scene_from_dict(data: dict) -> Scene:
    """
    Builds a Scene from parsed scene file contents.

    Node positions in the file are relative to their parent. The returned
    tree carries absolute positions.

    Args:
        data (dict): The parsed scene description.

    Raises:
        SceneError: If the description is malformed.
    """
    if not isinstance(data, dict):
        raise SceneError(f"Scene must be a mapping, got {type(data).__name__}")
    if 'prism' not in data:
        raise SceneError("Scene is missing the 'prism' list")

    origin = _read_vector(data.get('pos', (0, 0, 0)), 'scene', 'pos')
    prisms = data['prism'] or []
    if not isinstance(prisms, list):
        raise SceneError("'prism' must be a list")
    children = [_build_node(node, origin, f"prism[{i}]") for i, node in enumerate(prisms)]

    unit = data.get('unit', DEFAULT_UNIT)
    if isinstance(unit, bool) or not isinstance(unit, (int, float)) or unit <= 0:
        raise SceneError(f"'unit' must be a positive number, got {unit!r}")

    root = Group(children, position=origin, color=data.get('color', DEFAULT_COLOR))
    return Scene(
        root,
        shader=_build_shader(data.get('shader')),
        unit=unit,
        force_square=_read_flag(data, 'square', 'scene', True),
    )


def load_scene(path) -> Scene:
    """
    Loads a scene from a `.yaml`, `.yml` or `.json` file.

    Args:
        path (str): Path to the scene file.

    Raises:
        SceneError: If the file format is unknown or the contents are malformed.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in ('.yaml', '.yml', '.json'):
        raise SceneError(f"Unsupported scene format '{suffix}'. Use .yaml, .yml or .json.")
    with open(path, 'r', encoding='utf-8') as f:
        if suffix == '.json':
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise SceneError(f"{path}: invalid JSON: {e}")
        else:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise SceneError(f"{path}: invalid YAML: {e}")
    return scene_from_dict(data)
