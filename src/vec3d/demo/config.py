"""
Configuration module for the Vector3D demo.

Loads configuration from a YAML file with Pydantic validation.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from vec3d.core.constants import DEFAULT_PRECISION, ZERO_NORM_POLICY, ZeroNormPolicy


class OffsetConfig(BaseModel):
    """Displacement applied to the zero vector before it is normalized."""

    dx: float = 1.3
    dy: float = -9.8
    dz: float = 0.0


class DemoConfig(BaseModel):
    offset: OffsetConfig = OffsetConfig()
    precision: int = Field(default=DEFAULT_PRECISION, ge=1)
    zero_norm: ZeroNormPolicy = ZERO_NORM_POLICY
    debug: bool = False

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> "DemoConfig":
        """Load configuration from a YAML file."""
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        return cls(**data)
