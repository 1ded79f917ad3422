"""Time stepping of a set of entities under a list of forces."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import DT
from .entity import Entity
from .forces import Force


def apply_forces(entities: Sequence[Entity], forces: Sequence[Force]) -> None:
    """Apply every force, in order, to the entities."""
    for force in forces:
        force.apply(entities)


def advanced_integrate_step(
    entities: Sequence[Entity], forces: Sequence[Force], dt: float = DT
) -> None:
    """Advance non-static entities by one step of length dt.

    Forces are evaluated once at the start of the step, and that acceleration
    is used as both the current and the new acceleration of the step.
    """
    apply_forces(entities, forces)
    for entity in entities:
        if not entity.static_body:
            entity.integrate(dt, entity.acceleration)