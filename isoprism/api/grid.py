from .core import TRANSPARENT
from .shader import Shader


class Lattice:
    """
    A sparse triangular grid keyed by (u, v).

    u is horizontal, v is vertical. The triangle at (u, v) points left when
    u + v is even and right otherwise. Writes never overwrite an occupied
    cell, so the first writer wins.
    """

    def __init__(self, cells=None):
        self._cells = {}
        if cells is not None:
            for cell in cells:
                self.set(cell[0], cell[1], True)

    def set(self, u: int, v: int, value) -> bool:
        """Stores `value` at (u, v) if the cell is empty. Returns whether it was stored."""
        key = (u, v)
        if key in self._cells:
            return False
        self._cells[key] = value
        return True

    def get(self, u: int, v: int, default=None):
        return self._cells.get((u, v), default)

    def remove(self, u: int, v: int) -> bool:
        """Removes (u, v). Returns whether the cell was filled."""
        return self._cells.pop((u, v), None) is not None

    def pop_one(self):
        """Removes and returns any filled cell as (u, v, value)."""
        (u, v), value = self._cells.popitem()
        return u, v, value

    def copy(self) -> 'Lattice':
        out = Lattice()
        out._cells = dict(self._cells)
        return out

    def items(self):
        return self._cells.items()

    def __contains__(self, uv) -> bool:
        return tuple(uv) in self._cells

    def __iter__(self):
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __bool__(self) -> bool:
        return bool(self._cells)

    def __repr__(self):
        return f"Lattice({len(self._cells)} cells)"


def draw_faces(faces) -> Lattice:
    """
    Draws faces, nearest first, onto a lattice of (color, axis) cells.

    `faces` must already be sorted by descending layer so that the nearest
    surface claims each cell.
    """
    canvas = Lattice()
    for face in faces:
        for u, v in face.cells():
            canvas.set(u, v, (face.color, face.axis))
    return canvas


def separate_colors(canvas: Lattice, shader) -> tuple:
    """
    Splits a (color, axis) canvas into one boolean lattice per color.

    Returns:
        tuple: (base lattices by color, overlay lattices by shader color)
    """
    if shader is None:
        shader = Shader()
    base = {}
    overlay = {color: Lattice() for color in shader.colors()}
    for (u, v), (color, axis) in canvas.items():
        if color == TRANSPARENT:
            continue
        base.setdefault(color, Lattice()).set(u, v, True)
        shade = shader.for_axis(axis)
        if shade is not None:
            overlay[shade].set(u, v, True)
    return base, overlay


def rasterize(faces, shader) -> tuple:
    """
    Projects depth-sorted faces onto the lattice and partitions it by color.

    Returns:
        tuple: (base lattices by color, overlay lattices by shader color)
    """
    return separate_colors(draw_faces(faces), shader)
