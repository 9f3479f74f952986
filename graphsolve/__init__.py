"""Graph and grid algorithms: connectivity, colouring, shortest paths, cycles and maze escapes."""

__version__ = "0.1.0"

__all__ = ["cli", "graphs", "grids"]