import math

import pygame
import pytest

from arachnid import draw

RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)
RED_COLOR = pygame.Color(*RED)
BLACK_COLOR = pygame.Color(*BLACK)


@pytest.fixture
def surface():
    s = pygame.Surface((40, 40), pygame.SRCALPHA, 32)
    s.fill(BLACK)
    return s


def test_bezier_points_start_at_first_point():
    points = draw.bezier_points((0, 0), (10, 20), (20, 0))
    assert points[0] == (0, 0)


def test_bezier_points_stay_in_control_hull_box():
    p0, p1, p2 = (0, 0), (10, 20), (20, 0)
    points = draw.bezier_points(p0, p1, p2)
    assert len(points) > 10
    for x, y in points:
        assert 0 <= x <= 20
        assert 0 <= y <= 20


def test_bezier_points_end_near_last_point():
    points = draw.bezier_points((0, 0), (10, 20), (20, 0))
    assert math.dist(points[-1], (20, 0)) < 2


def test_bezier_points_degenerate_is_empty():
    assert draw.bezier_points((5, 5), (5, 5), (5, 5)) == []


def test_bezier4_points_start_at_first_point():
    points = draw.bezier4_points((0, 0), (0, 10), (10, 10), (10, 0))
    assert points[0] == (0, 0)
    assert all(0 <= x <= 10 and 0 <= y <= 10 for x, y in points)


def test_bezier4_points_degenerate_is_empty():
    assert draw.bezier4_points((3, 3), (3, 3), (3, 3), (3, 3)) == []


def test_circle_points_lie_on_radius():
    center = (20, 20)
    points = draw.circle_points(center, 10)
    assert points
    for point in points:
        assert abs(math.dist(point, center) - 10) < 1


def test_circle_points_are_symmetric():
    points = set(draw.circle_points((20, 20), 8))
    for x, y in points:
        assert (40 - x, y) in points
        assert (x, 40 - y) in points


def test_circle_points_zero_radius_empty():
    assert draw.circle_points((5, 5), 0) == []


def test_diamond_lines_form_closed_loop():
    edges = draw.diamond_lines((10, 10), 5)
    assert len(edges) == 4
    for (_, end), (start, _) in zip(edges, edges[1:] + edges[:1]):
        assert end == start


def test_diamond_lines_points_at_radius():
    for start, end in draw.diamond_lines((10, 10), 5):
        for x, y in (start, end):
            assert abs(x - 10) + abs(y - 10) == 5


def test_draw_pixel(surface):
    before = pygame.image.tobytes(surface, "RGBA")
    draw.draw_pixel(surface, (3.7, 4.2), RED)
    assert pygame.image.tobytes(surface, "RGBA") != before
    assert surface.get_at((3, 4)) == RED_COLOR


def test_draw_pixel_outside_is_ignored(surface):
    before = pygame.image.tobytes(surface, "RGBA")
    draw.draw_pixel(surface, (100, 100), RED)
    assert pygame.image.tobytes(surface, "RGBA") == before


def test_draw_pixels(surface):
    draw.draw_pixels(surface, [(1, 1), (2, 5)], RED)
    assert surface.get_at((1, 1)) == RED_COLOR
    assert surface.get_at((2, 5)) == RED_COLOR
    assert surface.get_at((3, 3)) == BLACK_COLOR


def test_draw_line_endpoints(surface):
    draw.draw_line(surface, (2, 2), (12, 2), RED)
    assert surface.get_at((2, 2)) == RED_COLOR
    assert surface.get_at((12, 2)) == RED_COLOR
    assert surface.get_at((2, 3)) == BLACK_COLOR


def test_draw_lines(surface):
    draw.draw_lines(surface, [(0, 0), (5, 5)], [(0, 10), (15, 5)], RED)
    assert surface.get_at((0, 10)) == RED_COLOR
    assert surface.get_at((15, 5)) == RED_COLOR
    assert surface.get_at((30, 30)) == BLACK_COLOR


def test_draw_lines_mismatched_lengths(surface):
    with pytest.raises(ValueError):
        draw.draw_lines(surface, [(0, 0), (1, 1)], [(2, 2)], RED)


def test_draw_rect_outline(surface):
    draw.draw_rect(surface, (2, 2, 10, 10), RED)
    assert surface.get_at((2, 2)) == RED_COLOR
    assert surface.get_at((6, 6)) == BLACK_COLOR


def test_draw_rect_filled(surface):
    draw.draw_rect_filled(surface, (2, 2, 10, 10), RED)
    assert surface.get_at((6, 6)) == RED_COLOR
    assert surface.get_at((20, 20)) == BLACK_COLOR


def test_draw_rects(surface):
    draw.draw_rects(surface, [(0, 0, 5, 5), (10, 10, 5, 5)], RED)
    assert surface.get_at((0, 0)) == RED_COLOR
    assert surface.get_at((10, 10)) == RED_COLOR
    assert surface.get_at((30, 30)) == BLACK_COLOR


def test_draw_circle_matches_points(surface):
    draw.draw_circle(surface, (20, 20), 6, RED)
    points = draw.circle_points((20, 20), 6)
    assert points
    assert [surface.get_at(p) for p in points] == [RED_COLOR] * len(points)
    assert surface.get_at((20, 20)) == BLACK_COLOR


def test_draw_diamond_vertices(surface):
    draw.draw_diamond(surface, (20, 20), 5, RED)
    assert surface.get_at((20, 15)) == RED_COLOR
    assert surface.get_at((25, 20)) == RED_COLOR
    assert surface.get_at((20, 25)) == RED_COLOR
    assert surface.get_at((15, 20)) == RED_COLOR
    assert surface.get_at((20, 20)) == BLACK_COLOR


def test_draw_polygon_single_point_draws_nothing(surface):
    before = pygame.image.tobytes(surface, "RGBA")
    draw.draw_polygon(surface, [(5, 5)], RED)
    assert pygame.image.tobytes(surface, "RGBA") == before


def test_draw_polygon_closes(surface):
    draw.draw_polygon(surface, [(2, 2), (20, 2), (20, 20)], RED)
    assert surface.get_at((2, 2)) == RED_COLOR
    assert surface.get_at((11, 11)) == RED_COLOR
    assert surface.get_at((5, 15)) == BLACK_COLOR


def test_draw_point_list_empty(surface):
    before = pygame.image.tobytes(surface, "RGBA")
    draw.draw_point_list(surface, [], RED)
    assert pygame.image.tobytes(surface, "RGBA") == before


def test_draw_bezier_curve_start(surface):
    draw.draw_bezier_curve(surface, (2, 2), (15, 30), (30, 2), RED)
    assert surface.get_at((2, 2)) == RED_COLOR
    assert surface.get_at((38, 38)) == BLACK_COLOR


def test_draw_bezier4_curve_start(surface):
    draw.draw_bezier4_curve(surface, (2, 2), (2, 20), (20, 20), (20, 2), RED)
    assert surface.get_at((2, 2)) == RED_COLOR
    assert surface.get_at((38, 38)) == BLACK_COLOR