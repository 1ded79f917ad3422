"""Kinetic and potential energy bookkeeping."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import combinations

from .entity import Entity

_MIN_DISTANCE = 0.01


def _mass(entity: Entity) -> float:
    if entity.mass is None:
        raise ValueError("entity has no mass")
    return entity.mass


def _kinetic(entity: Entity) -> float:
    v = entity.velocity
    return 0.5 * _mass(entity) * (v.x * v.x + v.y * v.y)


def _distance(a: Entity, b: Entity) -> float:
    return max((b.position - a.position).length(), _MIN_DISTANCE)


@dataclass
class EnergyBreakdown:
    kinetic: float
    potential: float
    total: float


@dataclass
class EnergyTracker:
    """Computes the energy of a set of bodies under Newtonian gravity."""

    gravity_constant: float

    def total_kinetic(self, entities: Sequence[Entity]) -> float:
        return sum(_kinetic(e) for e in entities)

    def total_potential(self, entities: Sequence[Entity]) -> float:
        return sum(
            -self.gravity_constant * _mass(a) * _mass(b) / _distance(a, b)
            for a, b in combinations(entities, 2)
        )

    def total_energy(self, entities: Sequence[Entity]) -> float:
        return self.total_kinetic(entities) + self.total_potential(entities)

    def per_entity_energy(self, entities: Sequence[Entity]) -> list[EnergyBreakdown]:
        """Energy of each body, with half of every pair potential assigned to it."""
        breakdowns = []
        for i, a in enumerate(entities):
            kinetic = _kinetic(a)
            potential = 0.5 * sum(
                self.gravity_constant * _mass(a) * _mass(b) / _distance(a, b)
                for j, b in enumerate(entities)
                if i != j
            )
            breakdowns.append(EnergyBreakdown(kinetic, potential, kinetic + potential))
        return breakdowns