import random

import pytest
from shapely.geometry import MultiPoint

from dchull import convex_hull, data, geometry
from dchull.data import Point


def _rotate_to_min(hull):
    start = hull.index(min(hull))
    return hull[start:] + hull[:start]


def _shapely_vertices(points):
    exterior = MultiPoint([p.coords for p in points]).convex_hull.exterior
    return {Point(x, y) for x, y in exterior.coords}


def test_small_hull_single_point():
    points = [Point(1, 2)]
    assert convex_hull.small_hull(points, 0, 0) == [Point(1, 2)]


def test_small_hull_two_points():
    points = [Point(0, 0), Point(3, 1)]
    assert convex_hull.small_hull(points, 0, 1) == points


def test_small_hull_three_points():
    left_turn = [Point(0, 0), Point(1, -1), Point(2, 0)]
    assert convex_hull.small_hull(left_turn, 0, 2) == left_turn
    right_turn = [Point(0, 0), Point(1, 1), Point(2, 0)]
    assert convex_hull.small_hull(right_turn, 0, 2) == [
        Point(0, 0), Point(2, 0), Point(1, 1)]
    collinear = [Point(0, 0), Point(1, 0), Point(2, 0)]
    assert convex_hull.small_hull(collinear, 0, 2) == [
        Point(0, 0), Point(2, 0)]


def test_small_hull_uses_range():
    points = [Point(9, 9), Point(0, 0), Point(1, 1), Point(2, 0)]
    assert convex_hull.small_hull(points, 1, 3) == [
        Point(0, 0), Point(2, 0), Point(1, 1)]


def test_fewer_than_three_points_returned_unchanged():
    assert convex_hull.convex_hull([]) == []
    assert convex_hull.convex_hull([Point(4, 4)]) == [Point(4, 4)]
    two = [Point(5, 5), Point(0, 0)]
    result = convex_hull.convex_hull(two)
    assert result == two
    assert result is not two


def test_two_points():
    assert convex_hull.convex_hull([Point(0, 0), Point(5, 5)]) == [
        Point(0, 0), Point(5, 5)]


def test_collinear_triple():
    points = [Point(1, 0), Point(0, 0), Point(2, 0)]
    assert convex_hull.convex_hull(points) == [Point(0, 0), Point(2, 0)]


def test_square_with_interior_points():
    hull = convex_hull.convex_hull(list(data.EXAMPLE_POINTS))
    assert hull == [Point(0, 2), Point(0, 0), Point(2, 0), Point(2, 2)]
    assert _rotate_to_min(hull) == [
        Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]


def test_unit_square():
    points = [Point(1, 1), Point(0, 0), Point(1, 0), Point(0, 1)]
    assert convex_hull.convex_hull(points) == [
        Point(0, 1), Point(0, 0), Point(1, 0), Point(1, 1)]


def test_input_is_not_mutated():
    points = list(data.EXAMPLE_POINTS)
    convex_hull.convex_hull(points)
    assert points == list(data.EXAMPLE_POINTS)


@pytest.mark.parametrize("n", [4, 5, 6, 7, 8, 13, 50, 257, 2000])
@pytest.mark.parametrize("seed", [1, 7, 42])
def test_matches_reference_hull(n, seed):
    points = data.random_points(n, seed=seed)
    hull = convex_hull.convex_hull(points)
    assert len(hull) == len(set(hull))
    assert set(hull) == _shapely_vertices(points)


@pytest.mark.parametrize("seed", [3, 11, 42])
def test_convex_and_encloses_every_point(seed):
    points = data.random_points(1000, seed=seed)
    hull = convex_hull.convex_hull(points)
    assert len(hull) >= 3
    assert geometry.is_convex(hull)
    assert all(geometry.encloses(hull, p) for p in points)


@pytest.mark.parametrize("seed", [5, 6])
def test_order_invariance(seed):
    points = data.random_points(500, seed=seed)
    shuffled = list(points)
    random.Random(seed).shuffle(shuffled)
    assert convex_hull.convex_hull(shuffled) == convex_hull.convex_hull(points)


def test_idempotence():
    points = data.random_points(800, seed=9)
    hull = convex_hull.convex_hull(points)
    again = convex_hull.convex_hull(hull)
    assert _rotate_to_min(again) == _rotate_to_min(hull)


def test_sorted_hull_matches_convex_hull():
    points = data.random_points(100, seed=2)
    assert convex_hull.sorted_hull(convex_hull.sort_points(points)) == \
        convex_hull.convex_hull(points)
    assert convex_hull.sorted_hull([]) == []


def test_duplicate_points_are_kept():
    points = [Point(1, 1)] * 4
    assert convex_hull.convex_hull(points) == [Point(1, 1), Point(1, 1)]


def test_horizontal_run_stops_at_collinear_tangents():
    points = [Point(3, 0), Point(0, 0), Point(2, 0), Point(1, 0)]
    assert convex_hull.convex_hull(points) == [Point(1, 0), Point(2, 0)]


def test_vertical_run_stops_at_collinear_tangents():
    points = [Point(0, i) for i in range(5)]
    hull = convex_hull.convex_hull(points)
    assert hull == [Point(0, 0), Point(0, 3)]
    assert not geometry.encloses(hull, Point(0, 4))


def test_vertical_run_split_across_halves():
    points = [Point(1, 0), Point(0, 2), Point(0, 0), Point(0, 1)]
    hull = convex_hull.convex_hull(points)
    assert hull == [Point(0, 0), Point(1, 0), Point(0, 2)]
    assert geometry.is_convex(hull)
    assert all(geometry.encloses(hull, p) for p in points)


@pytest.mark.parametrize("seed", [8, 42])
def test_merged_hull_has_no_collinear_vertices(seed):
    points = data.random_points(400, seed=seed)
    hull = convex_hull.convex_hull(points)
    n = len(hull)
    assert n > 3
    assert all(geometry.cross_product(hull[i], hull[(i + 1) % n],
                                      hull[(i + 2) % n]) > 0
               for i in range(n))


def test_square_example_has_no_collinear_vertices():
    hull = convex_hull.convex_hull(list(data.EXAMPLE_POINTS))
    assert all(geometry.cross_product(hull[i], hull[(i + 1) % 4],
                                      hull[(i + 2) % 4]) > 0
               for i in range(4))
