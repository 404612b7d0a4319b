from dchull import constants
from dchull.data import Hull, Point


def cross_product(p1: Point, p2: Point, p3: Point) -> float:
    """
    Signed area of the parallelogram spanned by p1->p2 and p1->p3.
    Positive for a left turn, negative for a right turn, zero if collinear.
    """
    return (p2.x - p1.x) * (p3.y - p1.y) - (p2.y - p1.y) * (p3.x - p1.x)


def orientation(p1: Point, p2: Point, p3: Point) -> constants.Orientation:
    cp = cross_product(p1, p2, p3)
    if cp > 0:
        return constants.Orientation.COUNTERCLOCKWISE
    elif cp < 0:
        return constants.Orientation.CLOCKWISE
    return constants.Orientation.COLLINEAR


def rightmost(hull: Hull) -> int:
    idx = 0
    for i in range(1, len(hull)):
        if hull[i].x > hull[idx].x:
            idx = i
    return idx


def leftmost(hull: Hull) -> int:
    idx = 0
    for i in range(1, len(hull)):
        if hull[i].x < hull[idx].x:
            idx = i
    return idx


def is_convex(hull: Hull) -> bool:
    """No right turn between any three cyclically consecutive vertices."""
    n = len(hull)
    if n < constants.MIN_HULL_SIZE:
        return True
    return all(cross_product(hull[i], hull[(i + 1) % n], hull[(i + 2) % n])
               >= 0 for i in range(n))


def _on_segment(a: Point, b: Point, p: Point) -> bool:
    return (cross_product(a, b, p) == 0
            and min(a.x, b.x) <= p.x <= max(a.x, b.x)
            and min(a.y, b.y) <= p.y <= max(a.y, b.y))


def encloses(hull: Hull, point: Point) -> bool:
    """True when point lies on or inside the counterclockwise hull."""
    n = len(hull)
    if n == 0:
        return False
    if n == 1:
        return hull[0] == point
    if n == 2:
        return _on_segment(hull[0], hull[1], point)
    return all(cross_product(hull[i], hull[(i + 1) % n], point) >= 0
               for i in range(n))
