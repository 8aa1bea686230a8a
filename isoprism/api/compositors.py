from .core import PrismNode, Vec3, _vec3
from .operations import subtract_all


class Group(PrismNode):
    """
    An ordered collection of prism nodes.

    Children are combined in declaration order: positive children add their
    boxes, negative children cut their boxes out of everything added by
    the siblings before them. Children declared after a negative child are
    not affected by it.

    The group's own position is informational. Child positions are
    absolute and are never offset by it.
    """

    def __init__(self, children=(), position=(0, 0, 0), color: str = None, positive: bool = True, hidden: bool = False, name: str = ""):
        super().__init__(color=color, positive=positive, hidden=hidden, name=name)
        self.position = _vec3(position, 'position')
        self.children = list(children)
        for child in self.children:
            if not isinstance(child, PrismNode):
                raise TypeError(f"Group children must be PrismNode objects, got {type(child).__name__}")

    def to_render_boxes(self, inherited_color: str) -> list:
        if self.hidden:
            return []
        color = self.color or inherited_color
        out = []
        for child in self.children:
            boxes = child.to_render_boxes(color)
            if child.positive:
                out.extend(boxes)
            else:
                out = subtract_all(out, boxes)
        return out

    def translate(self, offset) -> 'Group':
        o = _vec3(offset, 'offset')
        p = self.position
        return Group(
            [c.translate(o) for c in self.children],
            position=Vec3(p.x + o.x, p.y + o.y, p.z + o.z),
            color=self.color, positive=self.positive, hidden=self.hidden, name=self.name,
        )

    def add(self, *children) -> 'Group':
        """Returns a copy of this group with `children` appended."""
        return Group(self.children + list(children), self.position, self.color, self.positive, self.hidden, self.name)

    def __repr__(self):
        sign = '+' if self.positive else '-'
        return f"Group({sign}{len(self.children)} children, color={self.color!r})"


def group(*children, color: str = None, position=(0, 0, 0), name: str = "") -> PrismNode:
    """
    Creates a group of prism nodes.

    Args:
        *children (PrismNode): The child nodes, combined in order.
        color (str, optional): Color inherited by children without one.
        position (tuple, optional): Informational group position.
        name (str, optional): A label for the node.
    """
    return Group(list(children), position=position, color=color, name=name)


def flatten(node: PrismNode, inherited_color: str) -> list:
    """Flattens a prism tree into its final list of RenderBox objects."""
    return node.to_render_boxes(inherited_color)
