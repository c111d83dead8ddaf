"""Demonstration driver for the Vector3D value type."""

from .config import DemoConfig, OffsetConfig

__all__ = ["DemoConfig", "OffsetConfig"]
