"""
Hull Visualizer Module
======================

Pure visualization layer for point sets and their hulls.

Design:
- Stateless rendering (pure functions over a canvas)
- No hull logic
- Configurable styles
- Uses supervision drawing utilities

Dependencies:
- supervision (draw utilities, Color, Point)
- numpy (arrays)
"""

from typing import Iterable, Tuple

import numpy as np
import supervision as sv

from mergehull.geometry.contour import Contour
from mergehull.geometry.point import Point


class CanvasTransform:
    """
    Maps hull coordinates to pixel coordinates.

    Keeps the aspect ratio, fits the bounding box of the given points inside
    the canvas minus margin, and flips y so that counter-clockwise hulls stay
    counter-clockwise on screen.
    """

    def __init__(self, points: Iterable[Point], canvas_wh: Tuple[int, int], margin: int):
        pts = list(points)
        if not pts:
            raise ValueError("CanvasTransform needs at least 1 point")

        width, height = canvas_wh
        self.canvas_wh = canvas_wh
        self.margin = margin
        self.min_x = min(pt.x for pt in pts)
        self.min_y = min(pt.y for pt in pts)
        span_x = max(pt.x for pt in pts) - self.min_x
        span_y = max(pt.y for pt in pts) - self.min_y

        usable_w = width - 2 * margin
        usable_h = height - 2 * margin
        spans = [s for s in (span_x / usable_w, span_y / usable_h) if s > 0]
        self.scale = 1.0 / max(spans) if spans else 1.0

    def __call__(self, pt: Point) -> Tuple[int, int]:
        _, height = self.canvas_wh
        px = self.margin + (pt.x - self.min_x) * self.scale
        py = height - self.margin - (pt.y - self.min_y) * self.scale
        return int(round(px)), int(round(py))

    def polygon(self, contour: Contour) -> np.ndarray:
        return np.array([self(pt) for pt in contour], dtype=np.int64)


class HullVisualizer:
    """
    Stateless visualizer for hull rendering.

    Usage:
        visualizer = HullVisualizer(hull_color=sv.Color.GREEN)
        frame = visualizer.create_canvas((800, 800))
        transform = CanvasTransform(points, (800, 800), margin=40)
        frame = visualizer.draw_hull(frame, hull, transform)
        frame = visualizer.draw_points(frame, points, transform)
    """

    def __init__(
        self,
        hull_color: sv.Color = sv.Color(r=0, g=255, b=0),
        point_color: sv.Color = sv.Color(r=255, g=100, b=0),
        vertex_color: sv.Color = sv.Color(r=0, g=0, b=255),
        text_color: sv.Color = sv.Color(r=255, g=255, b=255),
        background_color: sv.Color = sv.Color(r=0, g=0, b=0),
        thickness: int = 2,
        point_radius: int = 4,
        text_scale: float = 0.6,
        opacity: float = 0.3,
    ):
        """
        Initialize visualizer with style configuration.

        Args:
            hull_color: Color for hull outline/fill
            point_color: Color for input points
            vertex_color: Color for hull vertices
            text_color: Color for the vertex count label
            background_color: Canvas color
            thickness: Line thickness for hull edges
            point_radius: Radius of point markers
            text_scale: Scale factor for text
            opacity: Opacity for hull fill (0-1)
        """
        self.hull_color = hull_color
        self.point_color = point_color
        self.vertex_color = vertex_color
        self.text_color = text_color
        self.background_color = background_color
        self.thickness = thickness
        self.point_radius = point_radius
        self.text_scale = text_scale
        self.opacity = opacity

    def create_canvas(self, canvas_wh: Tuple[int, int]) -> np.ndarray:
        """Blank BGR canvas filled with the background color."""
        width, height = canvas_wh
        canvas = np.zeros((height, width, 3), dtype=np.uint8)
        canvas[:, :] = self.background_color.as_bgr()
        return canvas

    def draw_hull(
        self,
        frame: np.ndarray,
        hull: Contour,
        transform: CanvasTransform,
    ) -> np.ndarray:
        """
        Draw hull edges (filled when the hull has an interior).

        Returns:
            Frame with hull drawn
        """
        polygon = transform.polygon(hull)

        if not hull.is_degenerate():
            frame = sv.draw_filled_polygon(
                scene=frame,
                polygon=polygon,
                color=self.hull_color,
                opacity=self.opacity,
            )

        if len(polygon) >= 2:
            frame = sv.draw_polygon(
                scene=frame,
                polygon=polygon,
                color=self.hull_color,
                thickness=self.thickness,
            )

        for x, y in polygon:
            frame = self._draw_filled_circle(frame, int(x), int(y), self.point_radius + 2, self.vertex_color)

        text_x, text_y = polygon[0]
        frame = sv.draw_text(
            scene=frame,
            text=f"{len(hull)} vertices",
            text_anchor=sv.Point(x=int(text_x), y=int(text_y) - 20),
            text_color=self.text_color,
            text_scale=self.text_scale,
            background_color=self.background_color,
        )

        return frame

    def draw_points(
        self,
        frame: np.ndarray,
        points: Iterable[Point],
        transform: CanvasTransform,
    ) -> np.ndarray:
        """Draw input points as filled markers."""
        for pt in points:
            x, y = transform(pt)
            frame = self._draw_filled_circle(frame, x, y, self.point_radius, self.point_color)
        return frame

    def _draw_filled_circle(self, frame: np.ndarray, center_x: int, center_y: int, radius: int, color: sv.Color) -> np.ndarray:
        """Draw a filled circle using polygon approximation."""
        angles = np.linspace(0, 2 * np.pi, 30)
        points = np.array([
            [int(center_x + radius * np.cos(a)), int(center_y + radius * np.sin(a))]
            for a in angles
        ], dtype=np.int64)
        return sv.draw_filled_polygon(scene=frame, polygon=points, color=color)


def render_hull(
    points: Iterable[Point],
    hull: Contour,
    canvas_wh: Tuple[int, int] = (800, 800),
    margin: int = 40,
    visualizer: HullVisualizer = None,
) -> np.ndarray:
    """
    Render input points and their hull on a fresh canvas.

    Returns:
        BGR image of shape (height, width, 3)
    """
    pts = list(points)
    visualizer = visualizer or HullVisualizer()
    transform = CanvasTransform(pts, canvas_wh, margin)

    frame = visualizer.create_canvas(canvas_wh)
    frame = visualizer.draw_hull(frame, hull, transform)
    frame = visualizer.draw_points(frame, pts, transform)
    return frame
