"""SeriesFeed - regenerable set of named series for one screen."""
from __future__ import annotations

import logging
from typing import Iterable

from opsviz_telemetry.generator import RandomSource, TimeSeriesSample, generate_series
from opsviz_telemetry.presets import SeriesSpec

logger = logging.getLogger(__name__)


class SeriesFeed:

    def __init__(self, specs: Iterable[SeriesSpec], rng: RandomSource | None = None) -> None:
        self._specs: dict[str, SeriesSpec] = {}
        for spec in specs:
            if spec.name in self._specs:
                raise ValueError(f"Duplicate series name {spec.name!r}")
            self._specs[spec.name] = spec
        self._rng = rng
        self._series: dict[str, list[TimeSeriesSample]] = {}
        self._generation = 0
        self.refresh()

    @property
    def generation(self) -> int:
        """Number of times the series have been generated."""
        return self._generation

    @property
    def specs(self) -> tuple[SeriesSpec, ...]:
        return tuple(self._specs.values())

    def refresh(self) -> dict[str, list[TimeSeriesSample]]:
        self._series = {
            name: generate_series(spec.count, spec.base, spec.variance, spec.trend, self._rng)
            for name, spec in self._specs.items()
        }
        self._generation += 1
        logger.debug("regenerated %d series (generation %d)", len(self._series), self._generation)
        return dict(self._series)

    def series(self, name: str) -> list[TimeSeriesSample]:
        return self._series[name]

    def spec(self, name: str) -> SeriesSpec:
        return self._specs[name]
