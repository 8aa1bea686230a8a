from .core import Vec3

AXES = ('x', 'y', 'z')


class Face:
    """
    One visible unit square of a cube.

    Only the +X, +Y and +Z faces of a cube face the viewer; the other three
    are always hidden behind them and are never produced.
    """

    def __init__(self, position, axis: str, color: str):
        if axis not in AXES:
            raise ValueError(f"Unknown face axis: {axis}")
        self.position = Vec3(*position)
        self.axis = axis
        self.color = color

    def layer(self) -> int:
        """
        Rendering layer of the face. Higher layers are closer to the viewer.

        A step in +Z moves a face as far toward the viewer as a step in +X
        followed by a step in +Y, so Z counts twice.
        """
        p = self.position
        return p.x + p.y + 2 * p.z

    def cells(self) -> tuple:
        """The two triangle cells (u, v) covered by this face on the lattice."""
        p = self.position
        u = -p.x + p.y
        v = p.x + p.y - 2 * p.z
        if self.axis == 'z':
            return (u, v), (u + 1, v)
        if self.axis == 'x':
            return (u, v + 1), (u, v + 2)
        return (u + 1, v + 1), (u + 1, v + 2)

    def __eq__(self, other):
        if not isinstance(other, Face):
            return NotImplemented
        return (self.position, self.axis, self.color) == (other.position, other.axis, other.color)

    def __hash__(self):
        return hash((self.position, self.axis, self.color))

    def __repr__(self):
        return f"Face({tuple(self.position)}, {self.axis!r}, {self.color!r})"


def _box_faces(box, out: list):
    (x1, y1, z1), (x2, y2, z2) = box.position, box.end
    # top
    for x in range(x1, x2):
        for y in range(y1, y2):
            out.append(Face((x, y, z2 - 1), 'z', box.color))
    # front
    for y in range(y1, y2):
        for z in range(z1, z2):
            out.append(Face((x2 - 1, y, z), 'x', box.color))
    # side
    for x in range(x1, x2):
        for z in range(z1, z2):
            out.append(Face((x, y2 - 1, z), 'y', box.color))


def extract_faces(boxes) -> list:
    """
    Breaks render boxes into visible unit faces, nearest layer first.

    The sort is stable, so faces on the same layer keep the order of their
    boxes.
    """
    out = []
    for box in boxes:
        _box_faces(box, out)
    out.sort(key=Face.layer, reverse=True)
    return out
