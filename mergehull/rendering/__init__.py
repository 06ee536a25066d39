"""
Rendering Layer
===============

Stateless drawing of point sets and hulls (supervision + numpy).
"""

from mergehull.rendering.visualizer import CanvasTransform, HullVisualizer, render_hull

__all__ = [
    "CanvasTransform",
    "HullVisualizer",
    "render_hull",
]
