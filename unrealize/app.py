"""Interactive window that runs and draws the solar-system simulation."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence

from .camera import Camera
from .constants import DT, GRAVITY_CONSTANT, SOFTENING
from .draw import render_frame
from .energy import EnergyTracker
from .energy_log import log, log_initial_energy
from .entity import Entity
from .forces import Force, NewtonianGravity
from .integrator import advanced_integrate_step
from .solar import create_solar_system

WINDOW_TITLE = "Unrealize Engine"
WINDOW_SIZE = (800, 600)


class Simulation:
    """Entities, the forces acting on them, and the worst energy drift seen so far."""

    def __init__(
        self,
        entities: list[Entity] | None = None,
        forces: Sequence[Force] | None = None,
        gravity_constant: float = GRAVITY_CONSTANT,
        softening: float = SOFTENING,
        dt: float = DT,
    ) -> None:
        self.entities = create_solar_system() if entities is None else entities
        self.forces = (
            [NewtonianGravity(gravity_constant, softening)] if forces is None else list(forces)
        )
        self.tracker = EnergyTracker(gravity_constant)
        self.dt = dt
        self.initial_energy = self.tracker.total_energy(self.entities)
        self.drift = 0.0

    def step(self) -> float:
        """Advance one time step, report any new maximum drift, and return the total energy."""
        advanced_integrate_step(self.entities, self.forces, self.dt)
        total = self.tracker.total_energy(self.entities)
        new_drift = abs(self.initial_energy - total)
        if new_drift > self.drift:
            self.drift = new_drift
            log("Total system energy", total, self.drift)
        return total


def run_render_loop() -> None:
    """Open the window and run the simulation until it is closed."""
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        width, height = screen.get_size()
        frame = bytearray(width * height * 4)

        camera = Camera()
        simulation = Simulation()
        log_initial_energy(simulation.tracker, simulation.entities)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    width, height = max(event.w, 1), max(event.h, 1)
                    frame = bytearray(width * height * 4)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    camera.mouse_button(event.button, True)
                elif event.type == pygame.MOUSEBUTTONUP:
                    camera.mouse_button(event.button, False)
                elif event.type == pygame.MOUSEMOTION:
                    camera.cursor_moved(*event.pos)
                elif event.type == pygame.MOUSEWHEEL:
                    camera.scroll_lines(event.y)
            if not running:
                break

            simulation.step()
            render_frame(frame, simulation.entities, camera, (width, height))
            image = pygame.image.frombuffer(bytes(frame), (width, height), "RGBA")
            surface = pygame.display.get_surface()
            surface.fill((0, 0, 0))
            surface.blit(image, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point."""
    parser = argparse.ArgumentParser(
        prog="unrealize", description="Interactive gravitational simulation of the solar system."
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING)
    run_render_loop()
    return 0