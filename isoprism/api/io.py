import math
import time
from pathlib import Path

import numpy as np
from PIL import Image, ImageColor
from skimage.draw import polygon as fill_polygon

from .svg import get_bounds, to_svg

SUPPORTED_FORMATS = ('.svg', '.png')


def _parse_color(color: str) -> np.ndarray:
    """Parses an HTML color into normalized RGBA."""
    try:
        rgba = ImageColor.getcolor(color, 'RGBA')
    except ValueError:
        raise ValueError(f"Cannot rasterize color '{color}'.")
    return np.array(rgba, dtype=float) / 255.0


def _blend(canvas: np.ndarray, mask: np.ndarray, rgba: np.ndarray):
    """Alpha-composites a solid color over the masked pixels of an RGBA canvas."""
    src_a = rgba[3]
    dst = canvas[mask]
    out_a = src_a + dst[:, 3] * (1.0 - src_a)
    rgb = rgba[:3] * src_a + dst[:, :3] * dst[:, 3:4] * (1.0 - src_a)
    safe = np.where(out_a > 0, out_a, 1.0)
    canvas[mask, :3] = rgb / safe[:, None]
    canvas[mask, 3] = out_a


def rasterize_png(base: dict, overlay: dict, unit: float, force_square: bool = False) -> np.ndarray:
    """
    Fills colored polygons into an RGBA pixel array.

    The image has the same bounds and shift as the SVG output, rounded up to
    whole pixels. Pixels are either covered or not; there is no anti-aliasing.

    Returns:
        np.ndarray: (height, width, 4) uint8 array.
    """
    shift_x, shift_y, width, height = get_bounds((base, overlay), force_square)
    w = max(1, math.ceil(round(width * unit, 6)))
    h = max(1, math.ceil(round(height * unit, 6)))
    canvas = np.zeros((h, w, 4), dtype=float)

    for polygons_by_color in (base, overlay):
        for color, polygons in polygons_by_color.items():
            mask = np.zeros((h, w), dtype=bool)
            for poly in polygons:
                pts = np.asarray(poly, dtype=float)
                rows = (pts[:, 1] + shift_y) * unit
                cols = (pts[:, 0] + shift_x) * unit
                rr, cc = fill_polygon(rows, cols, shape=(h, w))
                mask[rr, cc] = True
            if mask.any():
                _blend(canvas, mask, _parse_color(color))

    return np.round(np.clip(canvas, 0.0, 1.0) * 255).astype(np.uint8)


def _write_svg(path, svg: str):
    with open(path, 'w', encoding='utf-8') as f:
        f.write(svg)


def _write_png(path, pixels: np.ndarray):
    Image.fromarray(pixels, 'RGBA').save(path)


def save(scene, path, verbose: bool = True):
    """
    Renders a scene and writes it to disk.

    Args:
        scene (Scene): The scene to render.
        path (str): Output path. The format is chosen by extension,
                    `.svg` or `.png`.
        verbose (bool, optional): Whether to print progress information.
    """
    start = time.time()
    path = str(path)
    suffix = Path(path).suffix.lower()
    if suffix not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported format '{suffix}'. Supported formats: {', '.join(SUPPORTED_FORMATS)}")

    base, overlay = scene.polygons()
    count = sum(len(p) for p in base.values()) + sum(len(p) for p in overlay.values())
    if verbose:
        print(f"INFO: Saving {count} polygons to '{path}'...")

    if suffix == '.svg':
        svg, _, _ = to_svg(base, overlay, scene.unit, scene.force_square)
        _write_svg(path, svg)
    else:
        _write_png(path, rasterize_png(base, overlay, scene.unit, scene.force_square))

    if verbose:
        print(f"SUCCESS: Saved '{path}' in {time.time() - start:.2f}s.")
