from .core import PrismNode, DEFAULT_COLOR
from .faces import extract_faces
from .grid import rasterize
from .polygons import trace_all, DEFAULT_MAX_DEPTH
from .shader import Shader
from .svg import to_svg

DEFAULT_UNIT = 20.0


class Scene:
    """A prism tree together with everything needed to render it."""

    def __init__(self, root: PrismNode, shader: Shader = None, unit: float = None, force_square: bool = False,
                 color: str = DEFAULT_COLOR, max_trace_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initializes the scene.

        Args:
            root (PrismNode): The root of the prism tree.
            shader (Shader, optional): Per-axis overlay colors. Defaults to no overlays.
            unit (float, optional): Pixels per lattice unit. Defaults to 20.
            force_square (bool, optional): Pad the output to a square. Defaults to False.
            color (str, optional): Color inherited by nodes without one.
                                   Defaults to "#ffffff".
            max_trace_depth (int, optional): Depth cap for tracing one
                                             connected region.
        """
        if not isinstance(root, PrismNode):
            raise TypeError(f"Scene root must be a PrismNode, got {type(root).__name__}")
        self.root = root
        self.shader = shader if shader is not None else Shader()
        self.unit = float(unit) if unit is not None else DEFAULT_UNIT
        self.force_square = force_square
        self.color = color
        self.max_trace_depth = max_trace_depth

    def flatten(self) -> list:
        return self.root.to_render_boxes(self.root.color or self.color)

    def faces(self) -> list:
        return extract_faces(self.flatten())

    def lattices(self) -> tuple:
        """Returns (base lattices, overlay lattices), each keyed by color."""
        return rasterize(self.faces(), self.shader)

    def polygons(self) -> tuple:
        """Returns (base polygons, overlay polygons), each keyed by color."""
        base, overlay = self.lattices()
        return trace_all(base, self.max_trace_depth), trace_all(overlay, self.max_trace_depth)

    def to_svg(self) -> tuple:
        """
        Runs the whole pipeline.

        Returns:
            tuple: (svg, shift_x, shift_y)
        """
        base, overlay = self.polygons()
        return to_svg(base, overlay, self.unit, self.force_square)

    def save(self, path, verbose: bool = True):
        """Renders the scene to a `.svg` or `.png` file."""
        from .io import save as save_func
        save_func(self, path, verbose=verbose)


def render_svg(root: PrismNode, shader: Shader = None, unit: float = DEFAULT_UNIT, force_square: bool = False) -> tuple:
    """
    Renders a prism tree to SVG.

    Args:
        root (PrismNode): The root of the prism tree.
        shader (Shader, optional): Per-axis overlay colors.
        unit (float, optional): Pixels per lattice unit. Defaults to 20.
        force_square (bool, optional): Pad the output to a square.

    Returns:
        tuple: (svg, shift_x, shift_y)
    """
    return Scene(root, shader=shader, unit=unit, force_square=force_square).to_svg()
