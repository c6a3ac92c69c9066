"""A 2D maze game with an actor/component engine, steering behaviours and A* path finding."""

__version__ = "0.1.0"