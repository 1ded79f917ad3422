"""A model of the Sun and its eight planets."""

from __future__ import annotations

import math

from .constants import GRAVITY_CONSTANT
from .entity import Entity
from .vec2 import Vec2

_BODIES = (
    (1_989_000.0, 0.0, 5.0),  # Sun
    (0.33, 40.0, 1.2),  # Mercury
    (4.87, 70.0, 1.5),  # Venus
    (5.97, 100.0, 1.8),  # Earth
    (0.64, 150.0, 1.6),  # Mars
    (1898.0, 520.0, 3.0),  # Jupiter
    (568.0, 960.0, 2.8),  # Saturn
    (86.8, 1910.0, 2.6),  # Uranus
    (102.0, 3000.0, 2.6),  # Neptune
)


def create_solar_system() -> list[Entity]:
    """Return the Sun followed by the planets, each on a circular orbit."""
    bodies = [Entity(mass, Vec2(0.0, y), radius) for mass, y, radius in _BODIES]
    sun, *planets = bodies
    if sun.mass is None:
        raise ValueError("Central body must have a mass!")
    for planet in planets:
        r = abs(planet.position.y - sun.position.y)
        planet.velocity = Vec2(math.sqrt(GRAVITY_CONSTANT * sun.mass / r), 0.0)
    return bodies