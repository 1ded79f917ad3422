"""Two-dimensional N-body gravity simulation with an interactive solar-system view."""

__version__ = "0.1.0"