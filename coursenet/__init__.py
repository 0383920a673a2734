"""A small social network store and teaching tools for graphs, grids and bags."""

__version__ = "0.1.0"