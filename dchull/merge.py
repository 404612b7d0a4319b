from dchull import tangents
from dchull.data import Hull


def _walk(hull: Hull, start: int, end: int) -> Hull:
    # counterclockwise from start to end, both included
    current = start
    visited = [hull[current]]
    while current != end:
        current = (current + 1) % len(hull)
        visited.append(hull[current])
    return visited


def stitch(
    left: Hull,
    right: Hull,
    upper: tangents.Tangent,
    lower: tangents.Tangent,
) -> Hull:
    return (_walk(left, upper[0], lower[0])
            + _walk(right, lower[1], upper[1]))


def merge_hulls(left: Hull, right: Hull) -> Hull:
    upper = tangents.upper_tangent(left, right)
    lower = tangents.lower_tangent(left, right)
    return stitch(left, right, upper, lower)
