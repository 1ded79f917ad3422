"""Point bodies that take part in the simulation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from .vec2 import Vec2


@dataclass
class Entity:
    """A massive body with position, velocity and acceleration."""

    mass: float | None
    position: Vec2
    radius: float
    velocity: Vec2 = field(default_factory=Vec2.zero)
    acceleration: Vec2 = field(default_factory=Vec2.zero)
    static_body: bool = False
    trail: deque = field(default_factory=deque)

    def __post_init__(self) -> None:
        if not isinstance(self.position, Vec2):
            x, y = self.position
            self.position = Vec2(float(x), float(y))

    def apply_force(self, force: Vec2) -> None:
        """Add force / mass to the acceleration; massless bodies are unaffected."""
        if self.mass is not None:
            self.acceleration = self.acceleration + force * (1.0 / self.mass)

    def integrate(self, dt: float, new_accel: Vec2) -> None:
        """Advance position and velocity using the mean of current and new acceleration."""
        mean_sum = self.acceleration + new_accel
        self.position = self.position + self.velocity * dt + mean_sum * (0.5 * dt * dt)
        self.velocity = self.velocity + mean_sum * (0.5 * dt)
        self.acceleration = new_accel