import math

import pytest

from stealthai.geometry import (
    MAP_SECTION_SIZE,
    Vector2,
    distance,
    grid_to_screen,
    point_in_triangle,
    rotate_point,
    rotation_of,
    screen_to_grid,
)


def test_grid_to_screen_uses_section_size():
    assert grid_to_screen(1) == MAP_SECTION_SIZE
    assert MAP_SECTION_SIZE == 64.0


@pytest.mark.parametrize("cell", [0, 1, 7, 19])
def test_grid_round_trip(cell):
    assert screen_to_grid(grid_to_screen(cell)) == cell


def test_screen_to_grid_truncates_inside_cell():
    cell = 5
    start = grid_to_screen(cell)
    assert screen_to_grid(start + MAP_SECTION_SIZE - 0.5) == cell
    assert screen_to_grid(start + MAP_SECTION_SIZE) == cell + 1


def test_vector_arithmetic():
    a = Vector2(1.5, -2.0)
    b = Vector2(0.5, 4.0)
    assert (a + b) - b == a


def test_distance_properties():
    a = Vector2(10.0, -3.0)
    b = Vector2(-2.0, 8.0)
    assert distance(a, a) == 0.0
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(Vector2(0, 0), Vector2(3, 4)) == pytest.approx(5.0)


def test_rotation_of_reference_direction_is_zero():
    assert rotation_of(Vector2(0.0, 1.0)) == pytest.approx(0.0)


def test_rotation_of_then_rotate_reference_points_along_vector():
    vector = Vector2(3.0, -7.0)
    angle = rotation_of(vector)
    pointed = rotate_point(Vector2(0.0, 1.0), angle)
    length = distance(Vector2(0, 0), vector)
    assert pointed.x == pytest.approx(vector.x / length)
    assert pointed.y == pytest.approx(vector.y / length)


def test_rotate_point_zero_and_full_turn():
    p = Vector2(-128.0, 256.0)
    assert rotate_point(p, 0.0) == p
    full = rotate_point(p, 2 * math.pi)
    assert full.x == pytest.approx(p.x)
    assert full.y == pytest.approx(p.y)


def test_rotate_point_preserves_length():
    origin = Vector2(0.0, 0.0)
    p = Vector2(128.0, 256.0)
    rotated = rotate_point(p, 1.234)
    assert distance(origin, rotated) == pytest.approx(distance(origin, p))


TRIANGLE = (Vector2(0.0, 0.0), Vector2(-128.0, 256.0), Vector2(128.0, 256.0))


def test_point_in_triangle_inside_and_vertices():
    centroid = Vector2(0.0, 512.0 / 3)
    assert point_in_triangle(*TRIANGLE, centroid)
    for vertex in TRIANGLE:
        assert point_in_triangle(*TRIANGLE, vertex)


def test_point_on_edge_counts_as_inside():
    midpoint = Vector2(0.0, 256.0)
    assert point_in_triangle(*TRIANGLE, midpoint)


@pytest.mark.parametrize(
    "point",
    [Vector2(0.0, -1.0), Vector2(500.0, 100.0), Vector2(0.0, 300.0)],
)
def test_point_outside_triangle(point):
    assert not point_in_triangle(*TRIANGLE, point)


def test_point_in_triangle_ignores_winding():
    p1, p2, p3 = TRIANGLE
    inside = Vector2(0.0, 100.0)
    outside = Vector2(200.0, 0.0)
    assert point_in_triangle(p1, p3, p2, inside)
    assert not point_in_triangle(p1, p3, p2, outside)