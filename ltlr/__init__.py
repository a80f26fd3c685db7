"""Simulation core of a side-scrolling platformer: math, collision, easing, timing and an ECS world."""

__version__ = "0.1.0"