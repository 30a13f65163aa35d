"""Console configuration dataclass."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_int(name: str, default: int | None, minimum: int | None = None) -> int | None:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s=%r; using default %s", name, raw, default)
        return default
    if minimum is not None:
        value = max(minimum, value)
    return value


def _env_float(name: str, default: float, minimum: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid number for %s=%r; using default %s", name, raw, default)
        return default
    if minimum is not None:
        value = max(minimum, value)
    return value


def _env_choice(name: str, default: str, choices: set[str]) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().upper()
    if value not in choices:
        logger.warning("Invalid value for %s=%r; using default %s", name, raw, default)
        return default
    return value


@dataclass(frozen=True)
class ConsoleConfig:
    """Immutable configuration for a console host.

    Attributes:
        fps: Target display refresh rate; one scheduler tick per frame.
        seed: Seed for scene construction and series noise. None draws one.
        scene: Name of the scene mounted at startup.
        log_level: Root logging level name.
        series_refresh: Seconds between series regenerations, 0 disables.
    """

    fps: int = 60
    seed: int | None = None
    scene: str = "factory"
    log_level: str = "INFO"
    series_refresh: float = 0.0

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ValueError("fps must be positive")
        if self.series_refresh < 0:
            raise ValueError("series_refresh must not be negative")

    @classmethod
    def from_env(cls) -> ConsoleConfig:
        return cls(
            fps=_env_int("OPSVIZ_FPS", 60, minimum=1) or 60,
            seed=_env_int("OPSVIZ_SEED", None),
            scene=os.getenv("OPSVIZ_SCENE", "factory").strip() or "factory",
            log_level=_env_choice("OPSVIZ_LOG_LEVEL", "INFO", _LOG_LEVELS),
            series_refresh=_env_float("OPSVIZ_SERIES_REFRESH", 0.0, minimum=0.0),
        )
