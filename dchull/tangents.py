import logging
import typing as t

from dchull import constants, geometry
from dchull.data import Hull

logger = logging.getLogger(__name__)

Tangent = t.Tuple[int, int]


class TangentSearchError(RuntimeError):
    """Raised when a tangent walk moves more often than two hulls allow."""


class _StepCounter:
    steps: int
    limit: int

    def __init__(self, left: Hull, right: Hull):
        self.steps = 0
        self.limit = constants.TANGENT_STEP_FACTOR * (len(left) + len(right))

    def step(self):
        self.steps += 1
        if self.steps > self.limit:
            raise TangentSearchError(
                f"Tangent search exceeded {self.limit} steps; "
                f"hulls are not convex or not separated")


def upper_tangent(left: Hull, right: Hull) -> Tangent:
    """
    Returns (left index, right index) of the line touching both hulls with
    both of them on or below it. Left pointer walks counterclockwise, right
    pointer clockwise, until a full pass moves neither.
    """
    left_idx = geometry.rightmost(left)
    right_idx = geometry.leftmost(right)
    counter = _StepCounter(left, right)

    done = False
    while not done:
        done = True

        while True:
            next_left = (left_idx + 1) % len(left)
            if geometry.cross_product(right[right_idx], left[left_idx],
                                      left[next_left]) >= 0:
                break
            left_idx = next_left
            counter.step()
            done = False

        while True:
            prev_right = (right_idx - 1) % len(right)
            if geometry.cross_product(left[left_idx], right[right_idx],
                                      right[prev_right]) <= 0:
                break
            right_idx = prev_right
            counter.step()
            done = False

    logger.debug("Upper tangent %s after %s steps",
                 (left_idx, right_idx), counter.steps)
    return left_idx, right_idx


def lower_tangent(left: Hull, right: Hull) -> Tangent:
    """
    Returns (left index, right index) of the line touching both hulls with
    both of them on or above it. Left pointer walks clockwise, right pointer
    counterclockwise.
    """
    left_idx = geometry.rightmost(left)
    right_idx = geometry.leftmost(right)
    counter = _StepCounter(left, right)

    done = False
    while not done:
        done = True

        while True:
            prev_left = (left_idx - 1) % len(left)
            if geometry.cross_product(right[right_idx], left[left_idx],
                                      left[prev_left]) <= 0:
                break
            left_idx = prev_left
            counter.step()
            done = False

        while True:
            next_right = (right_idx + 1) % len(right)
            if geometry.cross_product(left[left_idx], right[right_idx],
                                      right[next_right]) >= 0:
                break
            right_idx = next_right
            counter.step()
            done = False

    logger.debug("Lower tangent %s after %s steps",
                 (left_idx, right_idx), counter.steps)
    return left_idx, right_idx
