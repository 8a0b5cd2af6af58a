"""A grid-based bomb-dropping arcade game built on pygame."""

__version__ = "0.1.0"