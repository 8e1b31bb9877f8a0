"""Primitive drawing: pixels, lines, rectangles, circles, polygons and bezier curves."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence, Union

import pygame

Vector = Sequence[float]
Point = tuple[float, float]
IntPoint = tuple[int, int]
ColorLike = Union[pygame.Color, Sequence[int]]


def _color(color: ColorLike) -> pygame.Color:
    if isinstance(color, pygame.Color):
        return color
    return pygame.Color(*(int(c) for c in color))


def _ipoint(point: Vector) -> IntPoint:
    return (int(point[0]), int(point[1]))


def _distance(a: Vector, b: Vector) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def bezier_points(p0: Vector, p1: Vector, p2: Vector) -> list[Point]:
    """Sample a quadratic bezier curve from ``p0`` through reference ``p1`` to ``p2``.

    Returns an empty list when all three points coincide.
    """
    total_length = _distance(p0, p1) + _distance(p1, p2)
    if total_length == 0:
        return []
    tstep = abs(1.0 / (total_length * 0.9))
    v0 = (p1[0] - p0[0], p1[1] - p0[1])
    v1 = (p2[0] - p1[0], p2[1] - p1[1])
    points: list[Point] = []
    t = 0.0
    while t <= 1:
        qx, qy = p0[0] + v0[0] * t, p0[1] + v0[1] * t
        q2x, q2y = p1[0] + v1[0] * t, p1[1] + v1[1] * t
        points.append((qx + (q2x - qx) * t, qy + (q2y - qy) * t))
        t += tstep
    return points


def bezier4_points(p0: Vector, r0: Vector, r1: Vector, p1: Vector) -> list[Point]:
    """Sample a cubic bezier curve between end points ``p0`` and ``p1``.

    One point is produced per whole unit of control-polygon length.
    """
    length = int(_distance(r1, p1) + _distance(r0, r1) + _distance(r0, p0))
    if length <= 0:
        return []
    step = 1.0 / length
    points: list[Point] = []
    t = 0.0
    for _ in range(length):
        u = 1 - t
        a, b, c, d = u**3, 3 * t * u**2, 3 * t * t * u, t**3
        points.append(
            (
                a * p0[0] + b * r0[0] + c * r1[0] + d * p1[0],
                a * p0[1] + b * r0[1] + c * r1[1] + d * p1[1],
            )
        )
        t += step
    return points


def _octant_points(center: Vector, x: int, y: int) -> list[IntPoint]:
    cx, cy = center[0], center[1]
    if x == 0:
        offsets = [(0, y), (0, -y), (y, 0), (-y, 0)]
    elif x == y:
        offsets = [(x, y), (-x, y), (x, -y), (-x, -y)]
    elif x < y:
        offsets = [
            (x, y), (-x, y), (x, -y), (-x, -y),
            (y, x), (-y, x), (y, -x), (-y, -x),
        ]
    else:
        return []
    return [(int(cx + dx), int(cy + dy)) for dx, dy in offsets]


def circle_points(center: Vector, radius: int) -> list[IntPoint]:
    """Pixel positions of a circle outline found with the midpoint algorithm."""
    radius = int(radius)
    if radius <= 0:
        return []
    capacity = radius * 8
    x, y = 0, radius
    p = int((5 - radius * 4) / 4)
    points = _octant_points(center, x, y)
    while x < y:
        x += 1
        if p < 0:
            p += 2 * x + 1
        else:
            y -= 1
            p += 2 * (x - y) + 1
        points.extend(_octant_points(center, x, y))
        if len(points) + 8 >= capacity:
            break
    return points


def diamond_lines(center: Vector, radius: float) -> list[tuple[Point, Point]]:
    """The four edges of a diamond around ``center``, as (start, end) pairs."""
    cx, cy = center[0], center[1]
    top = (cx, cy - radius)
    right = (cx + radius, cy)
    bottom = (cx, cy + radius)
    left = (cx - radius, cy)
    return [(top, right), (right, bottom), (bottom, left), (left, top)]


def draw_pixel(surface: pygame.Surface, pixel: Vector, color: ColorLike) -> None:
    """Set one pixel; positions outside the surface are ignored."""
    surface.set_at(_ipoint(pixel), _color(color))


def draw_pixels(surface: pygame.Surface, pixels: Iterable[Vector], color: ColorLike) -> None:
    """Set every pixel in ``pixels`` to ``color``."""
    draw_color = _color(color)
    for pixel in pixels:
        surface.set_at(_ipoint(pixel), draw_color)


def draw_line(surface: pygame.Surface, p1: Vector, p2: Vector, color: ColorLike) -> None:
    """Draw a one-pixel line from ``p1`` to ``p2``."""
    pygame.draw.line(surface, _color(color), _ipoint(p1), _ipoint(p2))


def draw_lines(
    surface: pygame.Surface,
    starts: Sequence[Vector],
    ends: Sequence[Vector],
    color: ColorLike,
) -> None:
    """Draw a line from each start point to the matching end point."""
    draw_color = _color(color)
    for start, end in zip(starts, ends, strict=True):
        pygame.draw.line(surface, draw_color, _ipoint(start), _ipoint(end))


def _rect(rect: Sequence[float]) -> pygame.Rect:
    x, y, w, h = rect
    return pygame.Rect(int(x), int(y), int(w), int(h))


def draw_rect(surface: pygame.Surface, rect: Sequence[float], color: ColorLike) -> None:
    """Draw the outline of a rectangle given as (x, y, w, h)."""
    pygame.draw.rect(surface, _color(color), _rect(rect), 1)


def draw_rect_filled(surface: pygame.Surface, rect: Sequence[float], color: ColorLike) -> None:
    """Draw a solid rectangle given as (x, y, w, h)."""
    pygame.draw.rect(surface, _color(color), _rect(rect))


def draw_rects(
    surface: pygame.Surface, rects: Iterable[Sequence[float]], color: ColorLike
) -> None:
    """Draw the outlines of several rectangles."""
    draw_color = _color(color)
    for rect in rects:
        pygame.draw.rect(surface, draw_color, _rect(rect), 1)


def draw_circle(surface: pygame.Surface, center: Vector, radius: int, color: ColorLike) -> None:
    """Draw a circle outline."""
    draw_pixels(surface, circle_points(center, radius), color)


def draw_diamond(surface: pygame.Surface, center: Vector, radius: float, color: ColorLike) -> None:
    """Draw a diamond whose points lie ``radius`` away from ``center``."""
    edges = diamond_lines(center, radius)
    draw_lines(surface, [s for s, _ in edges], [e for _, e in edges], color)


def draw_polygon(surface: pygame.Surface, points: Sequence[Vector], color: ColorLike) -> None:
    """Draw a closed polygon through ``points``; fewer than two points draw nothing."""
    if len(points) < 2:
        return
    pygame.draw.lines(surface, _color(color), True, [_ipoint(p) for p in points])


def draw_point_list(
    surface: pygame.Surface, points: Optional[Sequence[Vector]], color: ColorLike
) -> None:
    """Draw each point in ``points`` as a single pixel."""
    if not points:
        return
    draw_pixels(surface, points, color)


def draw_bezier_curve(
    surface: pygame.Surface, p0: Vector, p1: Vector, p2: Vector, color: ColorLike
) -> None:
    """Draw a quadratic bezier curve as a set of pixels."""
    draw_point_list(surface, bezier_points(p0, p1, p2), color)


def draw_bezier4_curve(
    surface: pygame.Surface,
    p0: Vector,
    r0: Vector,
    r1: Vector,
    p1: Vector,
    color: ColorLike,
) -> None:
    """Draw a cubic bezier curve with end points ``p0``, ``p1`` and references ``r0``, ``r1``."""
    draw_point_list(surface, bezier4_points(p0, r0, r1, p1), color)