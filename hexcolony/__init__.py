"""Hex-grid colony simulation: coordinates, procedural terrain, fog of war, territories, buildings and goods."""

__version__ = "0.1.0"