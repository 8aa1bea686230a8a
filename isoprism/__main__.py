"""
Command line renderer for isoprism scene files.

Usage:
    isoprism SCENE [-o OUT] [--no-square] [--unit N] [--watch]

Examples:
    # Print the SVG to stdout
    isoprism house.yaml

    # Save a PNG and re-render it whenever house.yaml changes
    isoprism house.yaml -o house.png --watch
"""

import argparse
import sys

from .api.loader import load_scene, SceneError
from .api.watch import SceneWatcher


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='isoprism',
        description='Render an isometric prism scene file to SVG or PNG.',
    )
    parser.add_argument('scene', help='Scene file (.yaml, .yml or .json)')
    parser.add_argument('-o', '--output', help='Output file (.svg or .png). Prints SVG to stdout if omitted.')
    parser.add_argument('--no-square', action='store_true', help='Do not pad the image to a square')
    parser.add_argument('--unit', type=float, help="Pixels per lattice unit, overrides the scene file's unit")
    parser.add_argument('--watch', action='store_true', help='Re-render whenever the scene file changes (requires -o)')
    return parser


def render(args):
    """Loads the scene file named by `args` and writes the result."""
    scene = load_scene(args.scene)
    if args.no_square:
        scene.force_square = False
    if args.unit is not None:
        scene.unit = args.unit
    if args.output:
        scene.save(args.output, verbose=True)
    else:
        svg, _, _ = scene.to_svg()
        sys.stdout.write(svg + "\n")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.watch and not args.output:
        print("ERROR: --watch requires an output file (-o).", file=sys.stderr)
        return 1
    if args.unit is not None and args.unit <= 0:
        print("ERROR: --unit must be positive.", file=sys.stderr)
        return 1

    try:
        render(args)
    except (SceneError, ValueError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.watch:
        SceneWatcher(args.scene, lambda: render(args)).run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
