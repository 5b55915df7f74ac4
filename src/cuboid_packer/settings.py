"""Environment-driven settings for the CLI and the HTTP API."""

from __future__ import annotations

import logging
import os

from cuboid_packer.verify import VerifyOption

LOG_LEVEL_ENV = "CUBOID_PACKER_LOG_LEVEL"
VERIFY_ENV = "CUBOID_PACKER_VERIFY"


def log_level() -> int:
    name = os.getenv(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"{LOG_LEVEL_ENV} is not a logging level: {name!r}")
    return level


def verify_option() -> VerifyOption:
    value = os.getenv(VERIFY_ENV, VerifyOption.BEST_ONLY.value).strip().lower()
    try:
        return VerifyOption(value)
    except ValueError:
        raise ValueError(
            f"{VERIFY_ENV} must be one of {[o.value for o in VerifyOption]}, got {value!r}"
        ) from None


def configure_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
