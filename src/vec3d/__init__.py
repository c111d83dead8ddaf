"""Three-dimensional vector value type with a small demonstration driver."""

from .core import Vector3D, Vector3DError, ZeroMagnitudeError, ZeroNormPolicy

__all__ = [
    "Vector3D",
    "Vector3DError",
    "ZeroMagnitudeError",
    "ZeroNormPolicy",
]
