"""Game of Life on a bounded grid, with generation dumps, change logs and rule trees."""

__version__ = "0.1.0"
__all__ = ["grid", "tasks", "cli"]