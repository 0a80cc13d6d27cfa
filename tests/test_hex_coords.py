import math

from hex_puzzle.hex_coords import (
    axial_to_offset,
    hex_corners,
    hex_round,
    hex_steps,
    neighbor_coords,
    offset_to_axial,
    offset_to_pixel,
    pixel_bounds,
    pixel_to_axial,
    translate,
)


def test_offset_axial_round_trip():
    for q in range(-8, 9):
        for r in range(-8, 9):
            assert offset_to_axial(*axial_to_offset(q, r)) == (q, r)


def test_odd_row_offset_conversion():
    assert offset_to_axial(0, 0) == (0, 0)
    assert offset_to_axial(0, 1) == (0, 1)
    assert offset_to_axial(0, 2) == (-1, 2)
    assert offset_to_axial(3, 3) == (2, 3)
    assert axial_to_offset(-1, 2) == (0, 2)


def test_pixel_projection_round_trip():
    for q in range(-8, 9):
        for r in range(-8, 9):
            x, y = offset_to_pixel(q, r)
            assert pixel_to_axial(x, y) == (q, r)


def test_pixel_projection_with_other_size():
    for q, r in [(0, 0), (3, -2), (-4, 5)]:
        x, y = offset_to_pixel(q, r, 17.5)
        assert pixel_to_axial(x, y, 17.5) == (q, r)


def test_pixel_near_center_snaps_to_cell():
    x, y = offset_to_pixel(2, 1)
    assert pixel_to_axial(x + 20, y - 20) == (2, 1)
    assert pixel_to_axial(x - 30, y + 10) == (2, 1)


def test_hex_round_keeps_cube_constraint():
    assert hex_round(0.1, -0.1) == (0, 0)
    assert hex_round(0.9, 0.05) == (1, 0)
    q, r = hex_round(0.4, 0.4)
    assert (q, r) in {(0, 0), (1, 0), (0, 1)}


def test_hex_steps_are_cached():
    steps = hex_steps(50.0)
    assert math.isclose(steps.step_x, 50.0 * math.sqrt(3))
    assert math.isclose(steps.step_y, 75.0)
    assert math.isclose(steps.odd_row_offset_x, 25.0 * math.sqrt(3))
    assert hex_steps(50.0) is steps


def test_neighbors_and_translate():
    neighbors = neighbor_coords(0, 0)
    assert len(set(neighbors)) == 6
    assert (1, 0) in neighbors and (0, 1) in neighbors and (-1, 1) in neighbors
    assert translate([(0, 0), (1, 0)], (3, -1)) == [(3, -1), (4, -1)]


def test_pixel_bounds():
    assert pixel_bounds([]) == (0.0, 0.0, 0.0, 0.0)
    min_x, min_y, max_x, max_y = pixel_bounds([(0, 0)], 10.0)
    assert math.isclose(max_x - min_x, 10.0 * math.sqrt(3))
    assert math.isclose(max_y - min_y, 20.0)


def test_hex_corners_are_pointy_top():
    corners = hex_corners(0.0, 0.0, 10.0)
    assert len(corners) == 6
    ys = [y for _, y in corners]
    assert math.isclose(min(ys), -10.0)
    assert math.isclose(max(ys), 10.0)


def test_pixel_bounds_follow_step_width():
    steps = hex_steps(50.0)
    min_x, _, max_x, _ = pixel_bounds([(0, 0)], 50.0)
    assert math.isclose(max_x - min_x, steps.step_x)
    min_x, _, max_x, _ = pixel_bounds([(0, 0), (1, 0)], 50.0)
    assert math.isclose(max_x - min_x, 2 * steps.step_x)
