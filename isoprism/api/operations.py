from .core import Vec3, RenderBox


def intersection(a: RenderBox, b: RenderBox) -> RenderBox:
    """
    Returns the overlap of two boxes, colored like `a`.

    When the boxes do not overlap the result has a non-positive size
    along at least one axis.
    """
    a_end, b_end = a.end, b.end
    lo = Vec3(max(a.position.x, b.position.x), max(a.position.y, b.position.y), max(a.position.z, b.position.z))
    hi = Vec3(min(a_end.x, b_end.x), min(a_end.y, b_end.y), min(a_end.z, b_end.z))
    return a.with_bounds(lo, (hi.x - lo.x, hi.y - lo.y, hi.z - lo.z))


def subtract(a: RenderBox, b: RenderBox) -> list:
    """
    Subtracts `b` from `a`, returning the remaining pieces of `a`.

    The remainder is cut into at most 6 non-overlapping slabs: below the
    overlap in Z, the +X/-X sides, the +Y/-Y sides, then above the overlap
    in Z. Empty slabs are dropped.
    """
    i = intersection(a, b)
    if not i.has_positive_volume():
        return [a]

    ap, ae, asz = a.position, a.end, a.size
    ip, ie, isz = i.position, i.end, i.size

    slabs = [
        # below
        ((ap.x, ap.y, ap.z), (asz.x, asz.y, ip.z - ap.z)),
        # +x
        ((ie.x, ap.y, ip.z), (ae.x - ie.x, asz.y, isz.z)),
        # -x
        ((ap.x, ap.y, ip.z), (ip.x - ap.x, asz.y, isz.z)),
        # +y
        ((ip.x, ie.y, ip.z), (isz.x, ae.y - ie.y, isz.z)),
        # -y
        ((ip.x, ap.y, ip.z), (isz.x, ip.y - ap.y, isz.z)),
        # above
        ((ap.x, ap.y, ie.z), (asz.x, asz.y, ae.z - ie.z)),
    ]
    out = []
    for position, size in slabs:
        piece = a.with_bounds(position, size)
        if piece.has_positive_volume():
            out.append(piece)
    return out


def subtract_all(boxes: list, operands: list) -> list:
    """
    Subtracts every operand from every box.

    Each box is reduced by the operands one after another, so the result
    never contains volume covered by any operand. Fragments are not merged.
    """
    if not operands:
        return list(boxes)
    out = []
    for box in boxes:
        rest = [box]
        for operand in operands:
            rest = [piece for r in rest for piece in subtract(r, operand)]
        out.extend(rest)
    return out
