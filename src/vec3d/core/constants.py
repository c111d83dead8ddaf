"""Shared constants for the Vector3D data model and the demo driver."""

import os
from enum import StrEnum


class ZeroNormPolicy(StrEnum):
    NAN = "nan"
    RAISE = "raise"


DEFAULT_PRECISION = 6

try:
    ZERO_NORM_POLICY = ZeroNormPolicy(os.getenv("VEC3D_ZERO_NORM", ZeroNormPolicy.NAN))
except ValueError:
    ZERO_NORM_POLICY = ZeroNormPolicy.NAN
