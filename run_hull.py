"""
Hull Runner
===========

Computes the convex hull of the points listed in a YAML run config.

Outputs (in runs/hull/<timestamp>/):
- hull.json: input count and hull vertices in counter-clockwise order
- hull.png: points and hull drawn on a canvas (when rendering is enabled)

Usage:
    python run_hull.py config/hull.yaml
    python run_hull.py config/hull.yaml --render --log-level DEBUG
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

import cv2

from mergehull import Point, merge_hull
from mergehull.config import HullConfig
from mergehull.logging import LogEvent, create_logger
from mergehull.rendering import HullVisualizer, render_hull
from utils import get_target_run_folder


def run(config: HullConfig) -> Path:
    """
    Build the hull described by config and write the results.

    Returns:
        Run folder the results were written to
    """
    logger = create_logger("hull", level=getattr(logging, config.log_level))

    points = [Point.of(p) for p in config.points]
    hull = merge_hull(points, logger=logger)

    run_folder = Path(get_target_run_folder(application_name="hull", root=str(config.output_dir)))

    result_path = run_folder / "hull.json"
    with open(result_path, "w") as f:
        json.dump({"input_count": len(points), **hull.to_dict()}, f, indent=2)
    logger.info(
        event=LogEvent.RESULT_SAVED,
        message=f"Hull written to {result_path}",
        metadata={'path': str(result_path), 'vertex_count': len(hull)},
    )

    render = config.render_config
    if render.enabled:
        visualizer = HullVisualizer(thickness=render.thickness, point_radius=render.point_radius)
        frame = render_hull(
            points, hull, canvas_wh=render.canvas_wh, margin=render.margin, visualizer=visualizer
        )
        image_path = run_folder / "hull.png"
        cv2.imwrite(str(image_path), frame)
        logger.info(
            event=LogEvent.RENDER_SAVED,
            message=f"Hull image written to {image_path}",
            metadata={'path': str(image_path), 'canvas_wh': list(render.canvas_wh)},
        )

    return run_folder


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Compute the convex hull of a point set from a YAML config",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_hull.py config/hull.yaml
  python run_hull.py config/hull.yaml --render --output-dir /tmp/runs
        """,
    )
    parser.add_argument("config", help="Path to YAML run config")
    parser.add_argument("--render", action="store_true", help="Write hull.png")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log_level from config",
    )
    parser.add_argument("--output-dir", help="Override output_dir from config")
    args = parser.parse_args(argv)

    logger = create_logger("runner")

    try:
        config = HullConfig.from_yaml(Path(args.config))
        if args.log_level:
            config = replace(config, log_level=args.log_level)
        if args.output_dir:
            config = replace(config, output_dir=Path(args.output_dir))
        if args.render:
            config = replace(config, render_config=replace(config.render_config, enabled=True))
    except (FileNotFoundError, ValueError, TypeError) as e:
        logger.error(
            event=LogEvent.CONFIG_ERROR,
            message=f"Cannot load config {args.config}",
            exc_info=e,
        )
        return 1

    logger.set_level(getattr(logging, config.log_level))
    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message=f"Loaded {len(config.points)} points from {args.config}",
        metadata={'point_count': len(config.points), 'render': config.render_config.enabled},
    )

    run_folder = run(config)
    print(f"Hull computation completed. Output: {run_folder}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
