"""A small 2D arcade game about a walking ducky, with screens, animation, movement and audio."""

__version__ = "0.1.0"