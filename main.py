"""
Shapes Showcase Demo
====================

Prints the area of a rectangle, circle and square, then the volume of a cube.

Usage:
    python main.py
"""

from solid_showcase import main


if __name__ == "__main__":
    main()
