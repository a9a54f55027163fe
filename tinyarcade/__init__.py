"""Two small arcade games, OpenSimplex noise in 2, 3 and 4 dimensions, and a section timer."""

__version__ = "0.1.0"