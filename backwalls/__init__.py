"""Procedural thick-wall meshes with doorways and rectangular, circular and irregular holes."""

__version__ = "0.1.0"