"""A 2D camera that tracks a world-space position and can be kept inside bounds."""

from __future__ import annotations

from dataclasses import dataclass

Vector = tuple[float, float]
Rect = tuple[float, float, float, float]


@dataclass
class Camera:
    """Viewport into the world: a top-left position, a screen size and optional bounds."""

    position: Vector = (0.0, 0.0)
    size: Vector = (0.0, 0.0)
    bounds: Rect = (0.0, 0.0, 0.0, 0.0)
    bind: bool = False

    def offset(self) -> Vector:
        """Offset to add to world coordinates to draw them relative to the camera."""
        x, y = self.position
        return (-x, -y)

    def set_size(self, size: Vector) -> None:
        """Set the width and height of the visible area."""
        self.size = (float(size[0]), float(size[1]))

    def set_bounds(self, bounds: Rect) -> None:
        """Set the rectangle the camera is kept inside when binding is enabled."""
        x, y, w, h = bounds
        self.bounds = (float(x), float(y), float(w), float(h))

    def enable_binding(self, bind: bool) -> None:
        """Turn keeping the camera inside its bounds on or off."""
        self.bind = bool(bind)

    def set_position(self, position: Vector) -> None:
        """Move the camera, snapping it into bounds if binding is enabled."""
        self.position = (float(position[0]), float(position[1]))
        if self.bind:
            self.apply_bounds()

    def center_on(self, target: Vector) -> None:
        """Place the camera so that ``target`` is in the middle of the view."""
        width, height = self.size
        self.set_position((target[0] - width * 0.5, target[1] - height * 0.5))
        if self.bind:
            self.apply_bounds()

    def apply_bounds(self) -> None:
        """Snap the camera so the view lies within the bounds, favouring the top-left edge."""
        x, y = self.position
        width, height = self.size
        bx, by, bw, bh = self.bounds
        if x + width > bx + bw:
            x = bx + bw - width
        if y + height > by + bh:
            y = by + bh - height
        if x < bx:
            x = bx
        if y < by:
            y = by
        self.position = (x, y)