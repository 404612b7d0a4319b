from enum import Enum

BASE_CASE_SIZE = 3
MIN_HULL_SIZE = 3

DEFAULT_SEED = 42
DEFAULT_SIZES = (10, 100, 1000, 5000, 10000, 50000, 100000)
COORD_RANGE = 1000.0

TANGENT_STEP_FACTOR = 4
PARALLEL_THRESHOLD = 2048


class Orientation(int, Enum):
    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTERCLOCKWISE = 1
