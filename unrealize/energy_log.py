"""Console reporting of system energy and drift."""

from __future__ import annotations

from collections.abc import Sequence

from .energy import EnergyTracker
from .entity import Entity


def log(message: str, total: float, drift: float) -> None:
    print(f"{message} = {total:.6f}, Drift = {drift:.7f}")


def log_drift(
    particles: Sequence[Entity],
    tracker: EnergyTracker,
    initial_totals: Sequence[float],
) -> None:
    """Print each particle's energy and its drift from the initial total."""
    breakdowns = tracker.per_entity_energy(particles)
    if len(initial_totals) < len(breakdowns):
        raise ValueError("fewer initial totals than particles")
    for i, (e, initial) in enumerate(zip(breakdowns, initial_totals)):
        print(
            f"Particle {i}: KE = {e.kinetic:.4f}, PE = {e.potential:.4f}, "
            f"Total = {e.total:.4f}, Drift = {initial - e.total:.7f}"
        )


def log_initial_energy(tracker: EnergyTracker, particles: Sequence[Entity]) -> list[float]:
    """Print the starting energies and return each particle's total."""
    breakdowns = tracker.per_entity_energy(particles)
    print(f"Initial System Energy = {tracker.total_energy(particles):.6f}")
    totals = []
    for i, e in enumerate(breakdowns):
        print(f"Initial Particle {i}: Total = {e.total:.6f}")
        totals.append(e.total)
    return totals