import logging
import typing as t

import numpy as np
from dataclasses import dataclass

from dchull import constants

logger = logging.getLogger(__name__)

Coords = t.Tuple[float, float]
NPCoords = t.List[float]


class InvalidInputError(ValueError):
    """Raised when a point carries a NaN or infinite coordinate."""


@dataclass(frozen=True, order=True)
class Point:
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @property
    def coords(self) -> Coords:
        return self.x, self.y

    def array(self) -> NPCoords:
        return [self.x, self.y]

    def __str__(self):
        return f"({self.x:.2f}, {self.y:.2f})"


Hull = t.List[Point]


def validate_points(points: t.Sequence[Point]) -> t.Sequence[Point]:
    if not points:
        return points
    finite = np.isfinite(np.array([p.array() for p in points],
                                  dtype=float)).all(axis=1)
    if not finite.all():
        index = int(np.argmin(finite))
        raise InvalidInputError(
            f"Point {index} has a non-finite coordinate: {points[index]!r}")
    return points


def create_point(x: float, y: float) -> Point:
    return Point(float(x), float(y))


def create_points(coords: t.Iterable[Coords]) -> t.List[Point]:
    points = [create_point(x, y) for x, y in coords]
    validate_points(points)
    return points


def random_points(
    n: int,
    seed: int = constants.DEFAULT_SEED,
    scale: float = constants.COORD_RANGE,
) -> t.List[Point]:
    rng = np.random.default_rng(seed)
    return [Point(float(x), float(y))
            for x, y in rng.uniform(0.0, scale, size=(n, 2))]


EXAMPLE_POINTS: t.Tuple[Point, ...] = (
    Point(0.0, 0.0),
    Point(1.0, 1.0),
    Point(2.0, 0.0),
    Point(2.0, 2.0),
    Point(1.0, 0.5),
    Point(0.0, 2.0),
)


def load_datafile(path_name: str) -> t.List[Point]:
    with open(path_name) as fh:
        points = _read_points(fh)
    validate_points(points)
    logger.info("Loaded %s points from %s", len(points), path_name)
    return points


def _read_points(fh: t.TextIO) -> t.List[Point]:
    points = []
    for read_line in fh:
        fields = read_line.split()
        if len(fields) == 3:
            fields = fields[1:]
        if len(fields) != 2:
            continue
        try:
            x, y = fields
            points.append(create_point(float(x), float(y)))
        except ValueError:
            pass
    return points
