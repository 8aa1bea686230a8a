from .api.core import PrismNode, Vec3, Box, RenderBox, DEFAULT_COLOR, TRANSPARENT
from .api.primitives import Prism, prism, cube
from .api.compositors import Group, group, flatten
from .api.shader import Shader
from .api.faces import Face, extract_faces
from .api.grid import Lattice, rasterize
from .api.polygons import trace, DEFAULT_MAX_DEPTH
from .api.svg import to_svg
from .api.scene import Scene, render_svg, DEFAULT_UNIT
from .api.loader import load_scene, scene_from_dict, SceneError, DEFAULT_SHADER
from .api.io import save
