"""Simulation and view constants."""

GRAVITY_CONSTANT = 6.6743
SOFTENING = 3.0
DT = 0.00694444 / 4.0
MAX_TRAIL_LEN = 100
INITIAL_SCALE = 0.9375