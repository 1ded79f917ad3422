"""Pan and zoom state for viewing the simulation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import INITIAL_SCALE
from .vec2 import Vec2

LEFT_BUTTON = 1
_ZOOM_BASE = 1.1
_PIXELS_PER_LINE = 100.0


@dataclass
class Camera:
    """Viewport centre and scale, dragged with the left mouse button and zoomed with the wheel."""

    dragging: bool = False
    last_cursor_pos: Vec2 = field(default_factory=Vec2.zero)
    center: Vec2 = field(default_factory=Vec2.zero)
    scale: float = INITIAL_SCALE

    def mouse_button(self, button: int, pressed: bool) -> None:
        """Start or stop dragging when the left button changes state."""
        if button == LEFT_BUTTON:
            self.dragging = pressed

    def cursor_moved(self, x: float, y: float) -> None:
        """Track the cursor, panning the view while dragging."""
        current = Vec2(float(x), float(y))
        if self.dragging:
            delta = (current - self.last_cursor_pos) * (1.0 / self.scale)
            self.center = self.center - delta
        self.last_cursor_pos = current

    def scroll_lines(self, y: float) -> None:
        """Zoom by a wheel movement measured in lines."""
        self.scale *= _ZOOM_BASE ** float(y)

    def scroll_pixels(self, y: float) -> None:
        """Zoom by a wheel movement measured in pixels."""
        self.scale *= _ZOOM_BASE ** (float(y) / _PIXELS_PER_LINE)