import typing as t

from dchull import constants, geometry, merge
from dchull.data import Hull, Point


def small_hull(points: t.Sequence[Point], left: int, right: int) -> Hull:
    size = right - left + 1
    if size == 1:
        return [points[left]]
    if size == 2:
        return [points[left], points[right]]

    p1, p2, p3 = points[left], points[left + 1], points[right]
    turn = geometry.orientation(p1, p2, p3)
    if turn == constants.Orientation.COUNTERCLOCKWISE:
        return [p1, p2, p3]
    elif turn == constants.Orientation.CLOCKWISE:
        return [p1, p3, p2]
    # collinear, keep the extremes
    return [p1, p3]


def _divide(points: t.Sequence[Point], left: int, right: int) -> Hull:
    if right - left + 1 <= constants.BASE_CASE_SIZE:
        return small_hull(points, left, right)

    mid = (left + right) // 2
    left_hull = _divide(points, left, mid)
    right_hull = _divide(points, mid + 1, right)
    return merge.merge_hulls(left_hull, right_hull)


def sort_points(points: t.Iterable[Point]) -> t.List[Point]:
    return sorted(points, key=lambda p: (p.x, p.y))


def sorted_hull(points: t.Sequence[Point]) -> Hull:
    """Hull of points already sorted by (x, y)."""
    if not points:
        return []
    return _divide(points, 0, len(points) - 1)


def convex_hull(points: t.Sequence[Point]) -> Hull:
    """
    Counterclockwise convex hull of points by divide and conquer.

    Fewer than three points are returned as given. Duplicates are not
    removed, and coordinates are compared exactly, so NaN or infinite
    values give undefined results; use data.validate_points at the
    boundary to reject them.

    A collinear candidate stops both tangent walks, so when three or more
    input points are collinear across a merge boundary the result can drop
    input points and need not enclose them: four points on y = 0 give
    [(1, 0), (2, 0)], five points on x = 0 give [(0, 0), (0, 3)].
    Containment holds for points in general position.
    """
    if len(points) < constants.MIN_HULL_SIZE:
        return list(points)
    return sorted_hull(sort_points(points))
