"""
Solid Showcase - Composition root for the shapes demo.

Builds the fixed set of shapes, wires them to their printers through the
capability protocols, and prints one line per shape.

Usage:
    python -m solid_showcase
    solid-showcase
"""

__version__ = "1.0.0"

from .config import ShowcaseConfig
from .app import ShowcaseShapes, build_shapes, run_showcase, main

__all__ = [
    "__version__",
    "ShowcaseConfig",
    "ShowcaseShapes",
    "build_shapes",
    "run_showcase",
    "main",
]
