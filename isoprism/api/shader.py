from .core import TRANSPARENT


class Shader:
    """Per-axis overlay colors that fake directional lighting."""

    def __init__(self, x: str = None, y: str = None, z: str = None):
        """
        Initializes the shader.

        Each color is painted over every visible face pointing along that
        axis, on top of the face's own color. A slot left as None (or set
        to "transparent") adds no overlay.

        Args:
            x (str, optional): Overlay for +X (front) faces. Defaults to None.
            y (str, optional): Overlay for +Y (side) faces. Defaults to None.
            z (str, optional): Overlay for +Z (top) faces. Defaults to None.

        Example:
            >>> from isoprism import prism, Shader
            >>> shader = Shader(x="#00000026", y="#00000066")
            >>> svg, shift_x, shift_y = prism(size=2, color="#3080ff").to_svg(shader=shader)
        """
        self.x = x
        self.y = y
        self.z = z

    def for_axis(self, axis: str):
        """Returns the active overlay color for a face axis, or None."""
        color = getattr(self, axis)
        if color is None or color == TRANSPARENT:
            return None
        return color

    def colors(self) -> list:
        """The distinct active overlay colors, in x, y, z order."""
        out = []
        for axis in ('x', 'y', 'z'):
            color = self.for_axis(axis)
            if color is not None and color not in out:
                out.append(color)
        return out

    def __eq__(self, other):
        if not isinstance(other, Shader):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    def __repr__(self):
        return f"Shader(x={self.x!r}, y={self.y!r}, z={self.z!r})"
