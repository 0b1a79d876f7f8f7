"""A pixel-art arcade shooter: two alien waves, a boss and a ship to defend."""

__version__ = "0.1.0"