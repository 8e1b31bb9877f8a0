"""Window, off-screen render target and frame pacing."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import pygame

log = logging.getLogger(__name__)


class Graphics:
    """Owns the game window and a logical-resolution surface everything draws onto."""

    def __init__(
        self,
        window_name: str,
        view_width: int,
        view_height: int,
        render_width: int,
        render_height: int,
        bgcolor: Sequence[float],
        fullscreen: bool,
    ) -> None:
        pygame.init()
        flags = 0
        size = (view_width, view_height)
        if fullscreen:
            flags |= pygame.FULLSCREEN
            if render_width == 0:
                size = (0, 0)
        self.window: Optional[pygame.Surface] = pygame.display.set_mode(size, flags)
        pygame.display.set_caption(window_name)
        if not render_width or not render_height:
            render_width, render_height = self.window.get_size()
        self.render_width = int(render_width)
        self.render_height = int(render_height)
        self.surface: Optional[pygame.Surface] = pygame.Surface(
            (self.render_width, self.render_height), pygame.SRCALPHA, 32
        )
        self.background_color = pygame.Color(*(int(c) for c in bgcolor))
        self.frame_delay = 0
        self.fps = 0.0
        self._now = 0
        self._then = 0
        log.info("graphics initialized")

    def __enter__(self) -> "Graphics":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def set_frame_delay(self, frame_delay: int) -> None:
        """Set the target time, in milliseconds, that each frame should take."""
        self.frame_delay = int(frame_delay)

    def frames_per_second(self) -> float:
        """The frame rate measured over the last frame."""
        return self.fps

    def resolution(self) -> tuple[float, float]:
        """The logical rendering resolution."""
        return (float(self.render_width), float(self.render_height))

    def clear_screen(self) -> None:
        """Fill the render surface with the background colour."""
        if self.surface is None:
            return
        self.surface.fill(self.background_color)

    def next_frame(self) -> None:
        """Present the render surface in the window and wait out the frame delay."""
        if self.window is not None and self.surface is not None:
            if self.window.get_size() == self.surface.get_size():
                self.window.blit(self.surface, (0, 0))
            else:
                scaled = pygame.transform.smoothscale(self.surface, self.window.get_size())
                self.window.blit(scaled, (0, 0))
            pygame.display.flip()
        self._frame_delay()

    def _frame_delay(self) -> None:
        self._then = self._now
        self._now = pygame.time.get_ticks()
        diff = self._now - self._then
        if diff < self.frame_delay:
            pygame.time.delay(self.frame_delay - diff)
        self.fps = 1000.0 / max(pygame.time.get_ticks() - self._then, 0.001)

    def create_surface(self, width: int, height: int) -> pygame.Surface:
        """Create a surface in the same pixel format as the render surface."""
        return pygame.Surface((int(width), int(height)), pygame.SRCALPHA, 32)

    def blit_surface_to_screen(
        self,
        surface: Optional[pygame.Surface],
        src_rect: Optional[pygame.Rect],
        dst_rect: Optional[pygame.Rect],
    ) -> None:
        """Copy ``surface`` (or its ``src_rect`` part) onto the render surface at ``dst_rect``."""
        if surface is None:
            return
        if self.surface is None:
            raise RuntimeError("no screen surface loaded")
        destination = (0, 0) if dst_rect is None else pygame.Rect(dst_rect).topleft
        self.surface.blit(surface, destination, src_rect)

    def screen_convert(self, surface: Optional[pygame.Surface]) -> pygame.Surface:
        """Return ``surface`` converted to the render surface's pixel format."""
        if surface is None:
            raise ValueError("surface provided was None")
        if self.surface is None:
            raise RuntimeError("graphics not yet initialized")
        return surface.convert(self.surface)

    def get_render(self) -> pygame.Surface:
        """Return a copy of what has been rendered so far."""
        if self.surface is None:
            raise RuntimeError("graphics not yet initialized")
        return self.surface.copy()

    def save_screenshot(self, filename: str) -> None:
        """Write the current render to an image file."""
        if not filename:
            raise ValueError("no filename specified for screenshot")
        pygame.image.save(self.get_render(), str(filename))

    def close(self) -> None:
        """Release the window and render surface."""
        self.surface = None
        self.window = None
        pygame.display.quit()
        log.info("graphics closed")