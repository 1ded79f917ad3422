"""Software rasterisation of the simulation into an RGBA frame buffer."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .camera import Camera
from .constants import MAX_TRAIL_LEN
from .entity import Entity
from .vec2 import Vec2

Color = tuple[int, int, int, int]

_ENTITY_COLORS: tuple[Color, ...] = (
    (255, 255, 0, 255),  # Sun
    (200, 200, 200, 255),  # Mercury
    (255, 165, 0, 255),  # Venus
    (0, 0, 255, 255),  # Earth
    (255, 0, 0, 255),  # Mars
    (255, 215, 0, 255),  # Jupiter
    (210, 180, 140, 255),  # Saturn
    (0, 255, 255, 255),  # Uranus
    (0, 0, 128, 255),  # Neptune
)
_FALLBACK_COLOR: Color = (255, 255, 255, 255)
_TRAIL_RGB = (0x80, 0x80, 0x80)
_ORBIT_COLOR: Color = (0x44, 0x44, 0x44, 0xFF)
_ORBIT_SEGMENTS = 100
_ENTITY_RADIUS = 7
_TRAIL_RADIUS = 1


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def world_to_screen(pos: Vec2, center: Vec2, scale: float, width: int, height: int) -> tuple[int, int]:
    """Map a world position to integer pixel coordinates."""
    x = _round_half_away((pos.x - center.x) * scale + width / 2.0)
    y = _round_half_away((pos.y - center.y) * scale + height / 2.0)
    return x, y


def _put_pixel(frame: bytearray, width: int, height: int, x: int, y: int, color: Color) -> None:
    if 0 <= x < width and 0 <= y < height:
        idx = (y * width + x) * 4
        if idx + 3 < len(frame):
            frame[idx : idx + 4] = bytes(color)


def draw_entity(
    frame: bytearray, width: int, height: int, x: int, y: int, radius: int, color: Color
) -> None:
    """Fill a disc of the given radius centred on (x, y), clipped to the frame."""
    r2 = radius * radius
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            if dx * dx + dy * dy <= r2:
                _put_pixel(frame, width, height, x + dx, y + dy, color)


def draw_line(
    frame: bytearray,
    width: int,
    height: int,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    color: Color,
) -> None:
    """Draw a line with Bresenham's algorithm, clipped to the frame."""
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    x, y = x0, y0
    while True:
        _put_pixel(frame, width, height, x, y, color)
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


def get_entity_color(index: int) -> Color:
    """Colour of the body at this index in the solar system, white beyond it."""
    if 0 <= index < len(_ENTITY_COLORS):
        return _ENTITY_COLORS[index]
    return _FALLBACK_COLOR


def draw_orbit_circle(
    frame: bytearray,
    width: int,
    height: int,
    center_world: Vec2,
    radius_world: float,
    camera_center: Vec2,
    scale: float,
    color: Color,
) -> None:
    """Draw a circle in world coordinates as a polygon of line segments."""
    def point(i: int) -> tuple[int, int]:
        theta = (i / _ORBIT_SEGMENTS) * math.tau
        p = Vec2(
            center_world.x + radius_world * math.cos(theta),
            center_world.y + radius_world * math.sin(theta),
        )
        return world_to_screen(p, camera_center, scale, width, height)

    for i in range(_ORBIT_SEGMENTS):
        x1, y1 = point(i)
        x2, y2 = point(i + 1)
        draw_line(frame, width, height, x1, y1, x2, y2, color)


def render_frame(
    frame: bytearray, entities: Sequence[Entity], camera: Camera, size: tuple[int, int]
) -> None:
    """Clear the frame and draw trails, orbits and bodies; extends each moving body's trail."""
    width, height = size
    frame[:] = bytes(len(frame))

    for entity in entities:
        if not entity.static_body:
            entity.trail.append(entity.position)
            while len(entity.trail) > MAX_TRAIL_LEN:
                entity.trail.popleft()

    for entity in entities:
        count = len(entity.trail)
        for i, point in enumerate(entity.trail):
            x, y = world_to_screen(point, camera.center, camera.scale, width, height)
            alpha = int((i / count) * 255.0)
            draw_entity(frame, width, height, x, y, _TRAIL_RADIUS, (*_TRAIL_RGB, alpha))

    if entities:
        sun_pos = entities[0].position
        for entity in entities[1:]:
            orbit_radius = (entity.position - sun_pos).length()
            draw_orbit_circle(
                frame, width, height, sun_pos, orbit_radius, camera.center, camera.scale, _ORBIT_COLOR
            )

    for i, entity in enumerate(entities):
        x, y = world_to_screen(entity.position, camera.center, camera.scale, width, height)
        if 0 <= x < width and 0 <= y < height:
            draw_entity(frame, width, height, x, y, _ENTITY_RADIUS, get_entity_color(i))