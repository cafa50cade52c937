"""Dynamic-programming and graph-search routines: subsequences, grid DP,
connected components, directed cycles and maze search."""

__version__ = "0.1.0"
__all__ = ["sequences", "grids", "components", "cycles", "maze", "cli"]