"""Core vector value type and its shared constants."""

from .constants import DEFAULT_PRECISION, ZERO_NORM_POLICY, ZeroNormPolicy
from .vector_3d import Vector3D, Vector3DError, ZeroMagnitudeError

__all__ = [
    "DEFAULT_PRECISION",
    "ZERO_NORM_POLICY",
    "Vector3D",
    "Vector3DError",
    "ZeroMagnitudeError",
    "ZeroNormPolicy",
]
