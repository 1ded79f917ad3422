# unrealize

A small two-dimensional N-body gravity simulator. It places a sun and eight
planets on circular orbits around it and steps their motion forward under
pairwise Newtonian gravity. Gravity is softened, and bodies that overlap
collide elastically. A window shows the bodies, a fading trail of each moving
body's last 100 positions, and a reference circle around the sun through each
planet. Each time the total-energy drift reaches a new maximum, it is printed
to standard output.

## Installation

```
pip install .
```

The window is drawn with `pygame`, which is installed as a dependency.

## Running

```
unrealize
```

The command takes no options besides `--help`.

Controls in the window:

- Drag with the left mouse button to pan the view.
- Use the mouse wheel to zoom in and out (a factor of 1.1 per wheel line).
- Close the window to quit.

When it starts, the program prints the initial energy of the whole system and
of each body:

```
Initial System Energy = ...
Initial Particle 0: Total = ...
```

After that it prints a line like this each time the drift grows:

```
Total system energy = -123.456789, Drift = 0.0000012
```

## Using the library

The simulation core can be used without a window:

```python
from unrealize.solar import create_solar_system
from unrealize.forces import NewtonianGravity
from unrealize.energy import EnergyTracker
from unrealize.integrator import advanced_integrate_step
from unrealize import constants

bodies = create_solar_system()
gravity = NewtonianGravity(constants.GRAVITY_CONSTANT, constants.SOFTENING)
tracker = EnergyTracker(constants.GRAVITY_CONSTANT)

before = tracker.total_energy(bodies)
for _ in range(1000):
    advanced_integrate_step(bodies, [gravity], constants.DT)
print(abs(before - tracker.total_energy(bodies)))
```

Each call to `advanced_integrate_step` applies every force once, then moves
each non-static body using the resulting acceleration. `dt` defaults to
`constants.DT`.

Main building blocks:

- `unrealize.vec2.Vec2`: an immutable 2-D vector supporting `+`, `-`, unary
  `-`, scalar `*`, `length()`, `dot()` and `normalize()` (a zero vector
  normalises to zero).
- `unrealize.entity.Entity`: a body with a mass (or `None`), position,
  radius, velocity, acceleration, a `static_body` flag and a `trail` of past
  positions; `apply_force()` and `integrate()` update it in place.
- `unrealize.forces`: the abstract `Force` with its `apply(entities)` method,
  and the `NewtonianGravity` and `LinearPushForce` forces.
- `unrealize.energy.EnergyTracker`: `total_kinetic()`, `total_potential()`,
  `total_energy()` and `per_entity_energy()`, the last returning
  `EnergyBreakdown` records.
- `unrealize.energy_log`: `log()`, `log_drift()` and `log_initial_energy()`,
  which print energies to standard output.
- `unrealize.solar.create_solar_system()`: the sun followed by the eight
  planets.
- `unrealize.camera.Camera`: pan and zoom state, driven by `mouse_button()`,
  `cursor_moved()`, `scroll_lines()` and `scroll_pixels()`.
- `unrealize.draw`: `render_frame()` and the drawing helpers it uses, writing
  into an RGBA `bytearray`.
- `unrealize.app.Simulation`: the simulation state the window drives; each
  `step()` advances one time step, prints the drift if it is a new maximum,
  and returns the total energy.

## Running the tests

```
pip install .[test]
pytest
```