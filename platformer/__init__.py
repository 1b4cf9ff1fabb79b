"""A small 2D platformer engine: entity registry, systems, data loading, state stack and UI toolkit."""

__version__ = "0.1.0"