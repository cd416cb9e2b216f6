"""Street graph routing: triangulated node graphs, obstacles and A* routes over geographic coordinates."""

__version__ = "0.1.0"