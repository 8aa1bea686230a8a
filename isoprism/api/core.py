import copy
from abc import ABC, abstractmethod
from collections import namedtuple

DEFAULT_COLOR = "#ffffff"
TRANSPARENT = "transparent"

Vec3 = namedtuple('Vec3', ['x', 'y', 'z'])


def _vec3(value, name: str = 'vector') -> Vec3:
    """Coerces a 3-sequence of integers (or a single integer) into a Vec3."""
    if isinstance(value, Vec3):
        return value
    if isinstance(value, int):
        return Vec3(value, value, value)
    try:
        items = list(value)
    except TypeError:
        raise ValueError(f"{name} must be a sequence of 3 integers, got {value!r}")
    if len(items) != 3:
        raise ValueError(f"{name} must have exactly 3 components, got {len(items)}")
    for item in items:
        if isinstance(item, bool) or int(item) != item:
            raise ValueError(f"{name} components must be integers, got {value!r}")
    return Vec3(*(int(i) for i in items))


class Box:
    """An axis-aligned region `[position, position + size)` of unit cubes."""

    def __init__(self, position, size):
        self.position = _vec3(position, 'position')
        self.size = _vec3(size, 'size')

    @property
    def end(self) -> Vec3:
        """The exclusive maximum corner."""
        p, s = self.position, self.size
        return Vec3(p.x + s.x, p.y + s.y, p.z + s.z)

    def has_positive_volume(self) -> bool:
        return self.size.x > 0 and self.size.y > 0 and self.size.z > 0

    def volume(self) -> int:
        if not self.has_positive_volume():
            return 0
        return self.size.x * self.size.y * self.size.z

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.position == other.position and self.size == other.size

    def __hash__(self):
        return hash((self.position, self.size))

    def __repr__(self):
        return f"Box(position={tuple(self.position)}, size={tuple(self.size)})"


class RenderBox(Box):
    """A flattened box with its resolved color."""

    def __init__(self, position, size, color: str):
        super().__init__(position, size)
        self.color = color

    def with_bounds(self, position, size) -> 'RenderBox':
        return RenderBox(position, size, self.color)

    def __eq__(self, other):
        if not isinstance(other, RenderBox):
            return NotImplemented
        return super().__eq__(other) and self.color == other.color

    def __hash__(self):
        return hash((self.position, self.size, self.color))

    def __repr__(self):
        return f"RenderBox(position={tuple(self.position)}, size={tuple(self.size)}, color={self.color!r})"


class PrismNode(ABC):
    """Abstract base class for all nodes in a prism tree."""

    def __init__(self, color: str = None, positive: bool = True, hidden: bool = False, name: str = ""):
        super().__init__()
        self.color = color
        self.positive = positive
        self.hidden = hidden
        self.name = name

    @abstractmethod
    def to_render_boxes(self, inherited_color: str) -> list:
        """
        Flattens this node into a list of RenderBox objects.

        Args:
            inherited_color (str): The color to use when this node has none.
        """
        raise NotImplementedError

    @abstractmethod
    def translate(self, offset) -> 'PrismNode':
        """Returns a copy of this node moved by `offset`."""
        raise NotImplementedError

    def negative(self) -> 'PrismNode':
        """Returns a copy of this node that is subtracted from its earlier siblings."""
        node = copy.copy(self)
        node.positive = False
        return node

    def hide(self) -> 'PrismNode':
        """Returns a copy of this node excluded from the output."""
        node = copy.copy(self)
        node.hidden = True
        return node

    def named(self, name: str) -> 'PrismNode':
        node = copy.copy(self)
        node.name = name
        return node

    def to_svg(self, shader=None, unit: float = None, force_square: bool = False, **kwargs):
        """
        Renders this node as the root of a scene.

        Returns:
            tuple: (svg, shift_x, shift_y)
        """
        from .scene import Scene
        return Scene(self, shader=shader, unit=unit, force_square=force_square, **kwargs).to_svg()

    def save(self, path, shader=None, unit: float = None, force_square: bool = False, verbose: bool = True, **kwargs):
        """
        Renders this node and writes it to a file.

        Args:
            path (str): Output path, `.svg` or `.png`.
            shader (Shader, optional): Per-axis overlay colors.
            unit (float, optional): Pixels per lattice unit. Defaults to 20.
            force_square (bool, optional): Pad the image to a square.
            verbose (bool, optional): Whether to print progress information.
        """
        from .scene import Scene
        Scene(self, shader=shader, unit=unit, force_square=force_square, **kwargs).save(path, verbose=verbose)

    def __or__(self, other):
        from .compositors import Group
        return Group([self, other])

    def __sub__(self, other):
        from .compositors import Group
        return Group([self, other.negative()])
