"""Three-component vector value type.

``Vector3D`` is a mutable pydantic model: fields are validated on construction
and on assignment, so an instance is always fully initialised with floats.
Arithmetic follows IEEE-754: normalizing the zero vector yields NaN components
where Python floats would otherwise raise ``ZeroDivisionError``.
"""

import logging
import math
from typing import Self

from pydantic import BaseModel, ConfigDict

from . import constants
from .constants import DEFAULT_PRECISION, ZeroNormPolicy

logger = logging.getLogger(__name__)


class Vector3DError(Exception):
    """Base exception for Vector3D errors."""

    pass


class ZeroMagnitudeError(Vector3DError, ValueError):
    """Raised when normalizing a zero-length vector under ZeroNormPolicy.RAISE."""

    pass


class Vector3D(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Self:
        return cls(x=0.0, y=0.0, z=0.0)

    def copy(self) -> Self:  # type: ignore[override]
        """Return an independent vector with the same components."""
        return self.model_copy()

    def magnitude(self) -> float:
        """Euclidean length without intermediate overflow or underflow.

        NaN and infinite components propagate; only the zero vector has length 0.
        """
        return math.hypot(self.x, self.y, self.z)

    def normalize(self, policy: ZeroNormPolicy | None = None) -> None:
        """Scale this vector in place to unit length.

        Args:
            policy: What to do when the magnitude is zero. Defaults to
                ``constants.ZERO_NORM_POLICY`` (``VEC3D_ZERO_NORM`` env var).

        Raises:
            ZeroMagnitudeError: If the magnitude is zero and the policy is
                ``ZeroNormPolicy.RAISE``. The vector is left unchanged.
        """
        if policy is None:
            policy = constants.ZERO_NORM_POLICY

        mag = self.magnitude()
        if mag == 0.0:
            if policy == ZeroNormPolicy.RAISE:
                raise ZeroMagnitudeError(f"Cannot normalize zero-length vector {self!r}")
            # 0/0 under IEEE-754; Python floats raise instead.
            logger.warning("Normalizing zero-length vector, components become NaN")
            self.x = self.y = self.z = math.nan
            return

        # All three components share one magnitude.
        self.x = self.x / mag
        self.y = self.y / mag
        self.z = self.z / mag

    def to_text(self, precision: int = DEFAULT_PRECISION) -> str:
        return (
            "Vector3D {\n"
            f"\t.x = {self.x:.{precision}g}\n"
            f"\t.y = {self.y:.{precision}g}\n"
            f"\t.z = {self.z:.{precision}g}\n"
            "}"
        )
