"""Immediate-mode GUI building blocks: geometry, layout cursor, text editing, styles and mesh batching."""

__version__ = "0.4.5"