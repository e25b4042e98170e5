"""Shadesail - Sail geometry engine for shade structure mockups.

Shadesail turns a polygon outlined on a 2D canvas (placed point by point or
picked from a preset shape) into a "sail" outline whose edges are straight or
bowed gently inward, the way tensioned fabric sags between its corners. It
also estimates a scale/skew approximation of a perspective distortion from
four draggable corner anchors.

Example:
    $ shadesail preset triangle

This prints the SVG path data of a triangular sail with all edges curved.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
