from unrealize.camera import Camera
from unrealize.constants import MAX_TRAIL_LEN
from unrealize.draw import (
    draw_entity,
    draw_line,
    draw_orbit_circle,
    get_entity_color,
    render_frame,
    world_to_screen,
)
from unrealize.entity import Entity
from unrealize.vec2 import Vec2

RED = (255, 0, 0, 255)


def _frame(width, height):
    return bytearray(width * height * 4)


def _pixel(frame, width, x, y):
    idx = (y * width + x) * 4
    return tuple(frame[idx : idx + 4])


def _painted(frame):
    return sum(1 for i in range(0, len(frame), 4) if any(frame[i : i + 4]))


def test_world_origin_maps_to_screen_centre():
    assert world_to_screen(Vec2(0.0, 0.0), Vec2(0.0, 0.0), 1.0, 800, 600) == (400, 300)


def test_world_to_screen_rounds_half_away_from_zero():
    assert world_to_screen(Vec2(0.5, -0.5), Vec2.zero(), 1.0, 0, 0) == (1, -1)
    assert world_to_screen(Vec2(2.5, -2.5), Vec2.zero(), 1.0, 0, 0) == (3, -3)


def test_world_to_screen_respects_camera_centre():
    center = Vec2(5.0, -7.0)
    assert world_to_screen(center, center, 3.0, 100, 50) == (50, 25)


def test_draw_entity_radius_zero_sets_one_pixel():
    frame = _frame(10, 10)
    draw_entity(frame, 10, 10, 3, 4, 0, RED)
    assert _pixel(frame, 10, 3, 4) == RED
    assert _painted(frame) == 1


def test_draw_entity_disc_is_symmetric():
    frame = _frame(20, 20)
    draw_entity(frame, 20, 20, 10, 10, 3, RED)
    for dx, dy in [(3, 0), (-3, 0), (0, 3), (0, -3)]:
        assert _pixel(frame, 20, 10 + dx, 10 + dy) == RED
    assert _pixel(frame, 20, 13, 13) == (0, 0, 0, 0)


def test_draw_entity_clipped_outside_frame():
    frame = _frame(5, 5)
    draw_entity(frame, 5, 5, -10, -10, 2, RED)
    assert _painted(frame) == 0


def test_draw_line_horizontal_covers_endpoints():
    frame = _frame(10, 3)
    draw_line(frame, 10, 3, 1, 1, 8, 1, RED)
    assert _pixel(frame, 10, 1, 1) == RED
    assert _pixel(frame, 10, 8, 1) == RED
    assert _painted(frame) == 8 - 1 + 1


def test_draw_line_diagonal_both_directions_same_pixels():
    a = _frame(8, 8)
    b = _frame(8, 8)
    draw_line(a, 8, 8, 0, 0, 7, 7, RED)
    draw_line(b, 8, 8, 7, 7, 0, 0, RED)
    assert a == b
    assert all(_pixel(a, 8, i, i) == RED for i in range(8))


def test_entity_colors():
    assert get_entity_color(0) == (255, 255, 0, 255)
    assert get_entity_color(3) == (0, 0, 255, 255)
    assert get_entity_color(42) == (255, 255, 255, 255)


def test_orbit_circle_passes_through_radius_points():
    frame = _frame(100, 100)
    draw_orbit_circle(frame, 100, 100, Vec2.zero(), 20.0, Vec2.zero(), 1.0, RED)
    assert _pixel(frame, 100, 70, 50) == RED
    assert _pixel(frame, 100, 50, 50) == (0, 0, 0, 0)


def test_render_frame_clears_and_draws_sun():
    frame = bytearray(b"\x01" * (40 * 40 * 4))
    sun = Entity(1.0, Vec2(0.0, 0.0), 1.0)
    render_frame(frame, [sun], Camera(scale=1.0), (40, 40))
    assert _pixel(frame, 40, 20, 20) == get_entity_color(0)
    assert _pixel(frame, 40, 0, 0) == (0, 0, 0, 0)


def test_render_frame_trail_capped_and_static_skipped():
    moving = Entity(1.0, Vec2(0.0, 0.0), 1.0)
    fixed = Entity(1.0, Vec2(5.0, 0.0), 1.0, static_body=True)
    frame = _frame(30, 30)
    for _ in range(MAX_TRAIL_LEN + 5):
        render_frame(frame, [moving, fixed], Camera(), (30, 30))
    assert len(moving.trail) == MAX_TRAIL_LEN
    assert len(fixed.trail) == 0


def test_render_frame_empty_is_blank():
    frame = bytearray(b"\xff" * (4 * 4 * 4))
    render_frame(frame, [], Camera(), (4, 4))
    assert _painted(frame) == 0