from __future__ import annotations

import os
from dataclasses import dataclass


def _read_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class OrbitConfig:
    """Geometry constants for subtask orbits (pixels / degrees)."""

    min_radius: float = 115.0
    ring_spacing: float = 40.0
    belt_buffer: float = 20.0
    # Celebration ring hugs the parent (parent body is 28px radius)
    celebration_radius: float = 70.0
    # Top of the circle
    default_angle: float = -90.0

    @classmethod
    def from_env(cls) -> "OrbitConfig":
        return cls(
            min_radius=_read_float_env("ORBIT_MIN_RADIUS", 115.0),
            ring_spacing=_read_float_env("ORBIT_RING_SPACING", 40.0),
            belt_buffer=_read_float_env("ORBIT_BELT_BUFFER", 20.0),
            celebration_radius=_read_float_env("ORBIT_CELEBRATION_RADIUS", 70.0),
            default_angle=_read_float_env("ORBIT_DEFAULT_ANGLE", -90.0),
        )


DEFAULT_CONFIG = OrbitConfig()


def resolve_config(config: OrbitConfig | None) -> OrbitConfig:
    return config if config is not None else DEFAULT_CONFIG
