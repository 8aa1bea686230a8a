import math
import sys
from collections import deque, namedtuple

DEFAULT_MAX_DEPTH = 2048

_COS30 = math.sqrt(3) / 2

# One edge of a lattice triangle.
# vertical=False: the top edge of the triangle at (u, v).
# vertical=True: the right edge of the left-pointing triangle at (u, v).
Segment = namedtuple('Segment', ['u', 'v', 'vertical'])


def is_pointing_left(u: int, v: int) -> bool:
    return (u + v) % 2 == 0


# (vertical, pointing_left, negative_v) of the current segment
#   -> {(du, dv, next_vertical): next_negative_v}
#
# Each entry is one of the five other edges meeting at the current
# segment's end point, and the direction it must be walked in to start there.
NEXT_DIRECTION = {
    (True, True, True): {
        (0, 0, False): False,
        (0, -1, False): True,
        (0, -2, True): True,
        (1, -1, False): True,
        (1, 0, False): False,
    },
    (True, True, False): {
        (1, 1, False): True,
        (1, 2, False): False,
        (0, 2, True): False,
        (0, 2, False): False,
        (0, 1, False): True,
    },
    (False, True, True): {
        (0, -1, False): True,
        (0, -2, True): True,
        (1, -1, False): True,
        (1, 0, False): False,
        (0, 0, True): False,
    },
    (False, False, True): {
        (-1, 0, True): False,
        (-1, 0, False): False,
        (-1, -1, False): True,
        (-1, -2, True): True,
        (0, -1, False): True,
    },
    (False, True, False): {
        (0, 1, False): False,
        (-1, 1, True): False,
        (-1, 1, False): False,
        (-1, 0, False): True,
        (-1, -1, True): True,
    },
    (False, False, False): {
        (0, -1, True): True,
        (1, 0, False): True,
        (1, 1, False): False,
        (0, 1, True): False,
        (0, 1, False): False,
    },
}


class TraceError(RuntimeError):
    """Raised when boundary segments do not join into a closed loop."""


def next_direction(current: Segment, negative_v: bool, candidate: Segment):
    """
    Checks whether `candidate` continues the boundary after `current`.

    Returns:
        bool or None: The candidate's direction (True for negative v), or
                      None if it does not start where `current` ends.
    """
    key = (current.vertical, is_pointing_left(current.u, current.v), negative_v)
    offset = (candidate.u - current.u, candidate.v - current.v, candidate.vertical)
    return NEXT_DIRECTION.get(key, {}).get(offset)


def segment_start(segment: Segment, negative_v: bool) -> tuple:
    """The 2D point where a segment begins when walked in the given direction."""
    u, v = segment.u, segment.v
    if is_pointing_left(u, v):
        if not negative_v:
            return ((u + 1) * _COS30, v * 0.5)
        if segment.vertical:
            return ((u + 1) * _COS30, v * 0.5 + 1.0)
        return (u * _COS30, (v + 1) * 0.5)
    # right-pointing triangles never own a vertical segment
    if negative_v:
        return ((u + 1) * _COS30, (v + 1) * 0.5)
    return (u * _COS30, v * 0.5)


def segment_end(segment: Segment, negative_v: bool) -> tuple:
    return segment_start(segment, not negative_v)


def is_collinear(a: Segment, b: Segment) -> bool:
    """Whether two adjacent boundary segments lie on the same straight line."""
    if a.vertical != b.vertical:
        return False
    if a.vertical:
        return True
    return is_pointing_left(a.u, a.v) == is_pointing_left(b.u, b.v)


class _Cell:
    """A node of the spanning tree over one connected region."""

    def __init__(self, u: int, v: int):
        self.u = u
        self.v = v
        self.top = None
        self.bottom = None
        self.side = None

    @property
    def pointing_left(self) -> bool:
        return is_pointing_left(self.u, self.v)

    def neighbor(self, side: str) -> tuple:
        if side == 'top':
            return self.u, self.v - 1
        if side == 'bottom':
            return self.u, self.v + 1
        return (self.u + 1, self.v) if self.pointing_left else (self.u - 1, self.v)

    def edge(self, side: str) -> Segment:
        if side == 'top':
            return Segment(self.u, self.v, False)
        if side == 'bottom':
            return Segment(self.u, self.v + 1, False)
        if self.pointing_left:
            return Segment(self.u, self.v, True)
        return Segment(self.u - 1, self.v, True)


def build_trees(lattice) -> list:
    """Splits the filled cells of a lattice into one spanning tree per connected region."""
    remaining = lattice.copy()
    trees = []
    while remaining:
        u, v, _ = remaining.pop_one()
        root = _Cell(u, v)
        queue = deque([root])
        while queue:
            cell = queue.popleft()
            for side in ('top', 'bottom', 'side'):
                nu, nv = cell.neighbor(side)
                if remaining.remove(nu, nv):
                    child = _Cell(nu, nv)
                    setattr(cell, side, child)
                    queue.append(child)
        trees.append(root)
    return trees


# (side the cell was entered from, pointing_left) -> sides to visit in order.
# The root is entered from nowhere and visits all three.
_WALK_ORDER = {
    (None, True): ('top', 'side', 'bottom'),
    (None, False): ('top', 'bottom', 'side'),
    ('top', True): ('side', 'bottom'),
    ('bottom', True): ('top', 'side'),
    ('side', True): ('bottom', 'top'),
    ('top', False): ('bottom', 'side'),
    ('bottom', False): ('side', 'top'),
    ('side', False): ('top', 'bottom'),
}

# a child reached through its parent's top is entered from its own bottom
_ENTERED_FROM = {'top': 'bottom', 'bottom': 'top', 'side': 'side'}


def tree_segments(root: _Cell, max_depth: int = DEFAULT_MAX_DEPTH) -> tuple:
    """
    Walks a spanning tree clockwise and collects the edges of its outline.

    Subtrees deeper than `max_depth` are treated as absent, which cuts the
    region off at that depth.

    Returns:
        tuple: (list of Segment, whether the walk was truncated)
    """
    segments = []
    truncated = False
    stack = [(root, iter(_WALK_ORDER[(None, root.pointing_left)]), 0)]
    while stack:
        cell, sides, depth = stack[-1]
        side = next(sides, None)
        if side is None:
            stack.pop()
            continue
        child = getattr(cell, side)
        if child is not None and depth < max_depth:
            order = _WALK_ORDER[(_ENTERED_FROM[side], child.pointing_left)]
            stack.append((child, iter(order), depth + 1))
            continue
        if child is not None:
            truncated = True
        segments.append(cell.edge(side))
    return segments, truncated


def direct_segments(segments: list) -> list:
    """
    Assigns a walking direction to each segment and cancels retraced edges.

    An edge between two cells that are adjacent on the lattice but not in
    the spanning tree is emitted once from each side. The two copies end up
    next to each other (possibly across the end of the list) and cancel out.

    Returns:
        list: (Segment, negative_v) pairs forming a closed loop.

    Raises:
        TraceError: If a segment does not continue from its predecessor.
    """
    directed = []
    skip = False
    for i, seg in enumerate(segments):
        if skip:
            skip = False
            continue
        if not directed:
            if i + 1 >= len(segments):
                raise TraceError(f"Dangling segment {tuple(seg)} at the end of the outline.")
            nxt = segments[i + 1]
            if next_direction(seg, False, nxt) is not None:
                directed.append((seg, False))
            elif next_direction(seg, True, nxt) is not None:
                directed.append((seg, True))
            elif seg == nxt:
                skip = True
            else:
                raise TraceError(f"Segment {tuple(nxt)} does not continue from {tuple(seg)}.")
            continue

        last, last_negative = directed[-1]
        negative = next_direction(last, last_negative, seg)
        if negative is not None:
            directed.append((seg, negative))
        elif seg == last:
            directed.pop()
        else:
            raise TraceError(f"Segment {tuple(seg)} does not continue from {tuple(last)}.")

    while len(directed) >= 2 and directed[0][0] == directed[-1][0]:
        directed.pop()
        directed.pop(0)
    return directed


def polygon_vertices(directed: list) -> list:
    """Emits one corner per directed segment, merging straight runs into one edge."""
    points = []
    for i, (seg, negative) in enumerate(directed):
        # index -1 wraps to the last segment, the loop is closed
        if not is_collinear(seg, directed[i - 1][0]):
            points.append(segment_start(seg, negative))
    return points


def trace(lattice, max_depth: int = DEFAULT_MAX_DEPTH) -> list:
    """
    Converts the filled cells of a lattice into closed polygons.

    Each connected region becomes exactly one polygon. Regions with holes
    are not split into outer and inner rings; they come out as a single
    self-touching loop.

    Args:
        lattice (Lattice): The filled cells.
        max_depth (int, optional): Maximum spanning tree depth walked per
                                   region. Deeper cells are cut off with a
                                   warning. Defaults to DEFAULT_MAX_DEPTH.

    Returns:
        list: Polygons, each a list of (x, y) points.
    """
    polygons = []
    for root in build_trees(lattice):
        segments, truncated = tree_segments(root, max_depth)
        if truncated:
            print(f"WARNING: Region at ({root.u}, {root.v}) is deeper than max_depth={max_depth}. Truncating.", file=sys.stderr)
        if len(segments) < 3:
            continue
        try:
            directed = direct_segments(segments)
        except TraceError as e:
            print(f"WARNING: {e} Dropping the region at ({root.u}, {root.v}).", file=sys.stderr)
            continue
        if len(directed) < 3:
            continue
        points = polygon_vertices(directed)
        if len(points) >= 3:
            polygons.append(points)
    return polygons


def trace_all(lattices: dict, max_depth: int = DEFAULT_MAX_DEPTH) -> dict:
    """Traces every lattice of a color -> Lattice mapping."""
    return {color: trace(lattice, max_depth) for color, lattice in lattices.items()}
