"""Configuration management."""

import json
import yaml
from typing import Optional, Tuple
from pathlib import Path
from dataclasses import dataclass, asdict

FORCE_METHODS = ("vectorized", "direct")


@dataclass
class Config:
    """Simulation configuration."""
    # Physics constants
    G: float = 100.0
    base_time_step: float = 0.02
    tail_length: int = 100

    # Anchor body
    anchor_mass: float = 1000.0
    anchor_radius: float = 15.0
    anchor_color: str = "yellow"

    # Viewport (simulation space == pixels)
    width: int = 800
    height: int = 600

    # Time scale slider
    time_scale: float = 1.0
    min_time_scale: float = 0.1
    max_time_scale: float = 5.0

    # Orbit seeding for spawned satellites
    orbit_speed_factor: float = 0.8
    mass_range: Tuple[float, float] = (1.0, 10.0)
    radius_range: Tuple[float, float] = (3.0, 8.0)

    # None means unbounded; the per-step cost grows as N^2
    max_bodies: Optional[int] = None

    force_method: str = "vectorized"

    # Reproducibility
    seed: Optional[int] = None

    def __post_init__(self):
        # JSON/YAML hand back lists
        self.mass_range = tuple(float(v) for v in self.mass_range)
        self.radius_range = tuple(float(v) for v in self.radius_range)

        for name in ("G", "base_time_step", "anchor_mass", "anchor_radius", "orbit_speed_factor"):
            if not getattr(self, name) > 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.tail_length < 0:
            raise ValueError(f"tail_length must be non-negative, got {self.tail_length}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Viewport must be positive, got {self.width}x{self.height}")
        if not 0 < self.min_time_scale <= self.max_time_scale:
            raise ValueError(
                f"Invalid time scale bounds [{self.min_time_scale}, {self.max_time_scale}]"
            )
        for name in ("mass_range", "radius_range"):
            low, high = getattr(self, name)
            if not 0 < low < high:
                raise ValueError(f"{name} must satisfy 0 < low < high, got ({low}, {high})")
        if self.max_bodies is not None and self.max_bodies < 1:
            raise ValueError(f"max_bodies must be at least 1, got {self.max_bodies}")
        if self.force_method not in FORCE_METHODS:
            raise ValueError(
                f"Unknown force method '{self.force_method}'. Available: {list(FORCE_METHODS)}"
            )


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix == '.yaml' or config_path.suffix == '.yml':
            data = yaml.safe_load(f) or {}
        elif config_path.suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")

    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)
    data['mass_range'] = list(data['mass_range'])
    data['radius_range'] = list(data['radius_range'])

    with open(output_path, 'w') as f:
        if output_path.suffix == '.yaml' or output_path.suffix == '.yml':
            yaml.safe_dump(data, f, default_flow_style=False)
        elif output_path.suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json or .yaml")
