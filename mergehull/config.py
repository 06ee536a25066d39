"""
Configuration schema for run_hull.py.

This module defines the run configuration: the input point set, logging
level, output location and rendering settings.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple
import yaml


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class RenderConfig:
    """Hull image rendering configuration."""

    enabled: bool = False
    canvas_wh: Tuple[int, int] = (800, 800)  # (width, height)
    margin: int = 40
    thickness: int = 2
    point_radius: int = 4

    def __post_init__(self):
        """Validate rendering configuration."""
        width, height = self.canvas_wh
        if width <= 0 or height <= 0:
            raise ValueError(
                f"canvas_wh must have positive dimensions, got {self.canvas_wh}"
            )
        if width > 4096 or height > 4096:
            raise ValueError(
                f"canvas_wh dimensions too large (max 4096x4096), got {self.canvas_wh}"
            )

        if self.margin < 0 or 2 * self.margin >= min(width, height):
            raise ValueError(
                f"margin must be in [0, {min(width, height) // 2}), got {self.margin}"
            )

        if self.thickness < 1:
            raise ValueError(f"thickness must be >= 1, got {self.thickness}")

        if self.point_radius < 1:
            raise ValueError(f"point_radius must be >= 1, got {self.point_radius}")


@dataclass(frozen=True)
class HullConfig:
    """
    Main configuration for a hull run.

    Loaded from YAML and validated at startup.
    Immutable after construction (frozen dataclass).
    """

    points: List[Tuple[float, float]]
    log_level: str = "INFO"
    output_dir: Path = Path("./runs")
    render_config: RenderConfig = field(default_factory=RenderConfig)

    def __post_init__(self):
        """Validate hull configuration."""
        if len(self.points) < 2:
            raise ValueError(
                f"points must hold at least 2 points, got {len(self.points)}"
            )

        for point in self.points:
            if len(point) != 2:
                raise ValueError(f"each point must be [x, y], got {list(point)}")
            for coord in point:
                if isinstance(coord, bool) or not isinstance(coord, (int, float)):
                    raise ValueError(
                        f"point coordinates must be numbers, got {list(point)}"
                    )

        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {VALID_LOG_LEVELS}"
            )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "HullConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            points: [[0, 0], [2, 0], [1, 1], [1, -1]]
            log_level: "INFO"
            output_dir: "./runs"

            render_config:
              enabled: true
              canvas_wh: [800, 800]  # [width, height]
              margin: 40

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If YAML is invalid or a field fails validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping in {yaml_path}")
        if "points" not in data:
            raise ValueError(f"Missing required field 'points' in {yaml_path}")

        render_config_data = dict(data.get("render_config") or {})
        if "canvas_wh" in render_config_data:
            render_config_data["canvas_wh"] = tuple(render_config_data["canvas_wh"])
        render_config = RenderConfig(**render_config_data)

        points = [tuple(point) for point in data["points"]]

        return cls(
            points=points,
            log_level=str(data.get("log_level", "INFO")).upper(),
            output_dir=Path(data.get("output_dir", "./runs")),
            render_config=render_config,
        )
