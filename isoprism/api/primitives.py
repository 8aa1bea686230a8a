from .core import PrismNode, RenderBox, Vec3, _vec3

# --- Primitive Classes ---

class Prism(PrismNode):
    """A single axis-aligned box of unit cubes."""
    def __init__(self, position=(0, 0, 0), size=(1, 1, 1), color: str = None, positive: bool = True, hidden: bool = False, name: str = ""):
        super().__init__(color=color, positive=positive, hidden=hidden, name=name)
        self.position = _vec3(position, 'position')
        self.size = _vec3(size, 'size')

    def to_render_boxes(self, inherited_color: str) -> list:
        if self.hidden:
            return []
        box = RenderBox(self.position, self.size, self.color or inherited_color)
        if not box.has_positive_volume():
            return []
        return [box]

    def translate(self, offset) -> 'Prism':
        o = _vec3(offset, 'offset')
        p = self.position
        return Prism(Vec3(p.x + o.x, p.y + o.y, p.z + o.z), self.size, self.color, self.positive, self.hidden, self.name)

    def __repr__(self):
        sign = '+' if self.positive else '-'
        return f"Prism({sign}{tuple(self.position)}, size={tuple(self.size)}, color={self.color!r})"


def prism(position=(0, 0, 0), size=1, color: str = None, name: str = "") -> PrismNode:
    """
    Creates a box with its minimum corner at `position`.

    Args:
        position (tuple, optional): The (x, y, z) minimum corner. Defaults to the origin.
        size (int or tuple, optional): The size of the box. If an int,
                                       creates a cube. If a tuple, specifies
                                       (x, y, z) extents. Defaults to 1.
        color (str, optional): Fill color. Inherited from the parent when None.
        name (str, optional): A label for the node.
    """
    return Prism(position=position, size=size, color=color, name=name)


def cube(position=(0, 0, 0), color: str = None) -> PrismNode:
    """Creates a single unit cube at `position`."""
    return Prism(position=position, size=(1, 1, 1), color=color)
