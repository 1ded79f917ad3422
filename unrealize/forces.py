"""Forces that act on collections of entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import combinations

from .entity import Entity
from .vec2 import Vec2

_MIN_DISTANCE = 1e-5


def _mass(entity: Entity) -> float:
    if entity.mass is None:
        raise ValueError("entity has no mass")
    return entity.mass


class Force(ABC):
    """Something that changes the accelerations of entities."""

    @abstractmethod
    def apply(self, entities: Sequence[Entity]) -> None:
        """Act on the entities in place."""


@dataclass
class LinearPushForce(Force):
    """A constant force applied to every non-static body."""

    force: Vec2

    def apply(self, entities: Sequence[Entity]) -> None:
        for entity in entities:
            if not entity.static_body:
                entity.apply_force(self.force)


@dataclass
class NewtonianGravity(Force):
    """Softened pairwise gravity with elastic collisions between overlapping bodies."""

    gravity_constant: float
    softening: float

    def apply(self, entities: Sequence[Entity]) -> None:
        for entity in entities:
            entity.acceleration = Vec2.zero()

        for a, b in combinations(entities, 2):
            delta = b.position - a.position
            distance = max(delta.length(), _MIN_DISTANCE)
            normal = delta.normalize()
            min_dist = a.radius + b.radius

            if distance < min_dist:
                self._collide(a, b, normal, min_dist - distance)

            r2 = distance * distance + self.softening * self.softening
            force = normal * (self.gravity_constant * _mass(a) * _mass(b) / r2)
            if not a.static_body:
                a.apply_force(force)
            if not b.static_body:
                b.apply_force(-force)

    @staticmethod
    def _collide(a: Entity, b: Entity, normal: Vec2, penetration: float) -> None:
        v1n = a.velocity.dot(normal)
        v2n = b.velocity.dot(normal)
        m1 = _mass(a)
        m2 = _mass(b)
        v1n_new = (v1n * (m1 - m2) + 2.0 * m2 * v2n) / (m1 + m2)
        v2n_new = (v2n * (m1 - m2) + 2.0 * m1 * v1n) / (m1 + m2)

        a.velocity = a.velocity + normal * (v1n_new - v1n)
        b.velocity = b.velocity + normal * (v2n_new - v2n)

        correction = normal * (penetration / 2.0)
        a.position = a.position - correction
        b.position = b.position + correction