"""Lumari: a step-powered virtual pet's game engines, persistence, sensor decoding and software renderer."""

__version__ = "0.1.0"