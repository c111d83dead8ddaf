"""Demo that builds, normalizes and copies a Vector3D, printing each stage."""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from vec3d.core.vector_3d import Vector3D, ZeroMagnitudeError

from .config import DemoConfig

logger = logging.getLogger(__name__)


def _show(label: str, vector: Vector3D, precision: int) -> None:
    print(f"{label}:")
    print(vector.to_text(precision))
    print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Vector3D demo")
    parser.add_argument("--config", type=str, help="Path to config.yaml")
    args = parser.parse_args(argv)

    load_dotenv()

    try:
        config = DemoConfig.from_yaml(args.config or os.getenv("VEC3D_CONFIG"))
    except (FileNotFoundError, ValidationError) as e:
        logger.error(f"Failed to load configuration: {e}")
        return 1

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.info("Starting Vector3D demo...")

    pos1 = Vector3D.zero()
    _show("Before", pos1, config.precision)

    pos1.x += config.offset.dx
    pos1.y += config.offset.dy
    pos1.z += config.offset.dz
    logger.debug(f"Magnitude before normalization: {pos1.magnitude()}")

    try:
        pos1.normalize(config.zero_norm)
    except ZeroMagnitudeError as e:
        logger.error(f"Normalization failed: {e}")
        return 1

    _show("After", pos1, config.precision)

    pos2 = pos1.copy()
    _show("Vector3D_2", pos2, config.precision)

    logger.info("Vector3D demo finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
