"""opsviz-telemetry - Synthetic time series for console charts."""
from __future__ import annotations

from opsviz_telemetry.feed import SeriesFeed
from opsviz_telemetry.generator import (
    TimeSeriesSample,
    envelope,
    generate_series,
    hour_label,
    series_bounds,
)
from opsviz_telemetry.presets import PRESETS, SeriesSpec

__all__ = [
    "TimeSeriesSample",
    "generate_series",
    "envelope",
    "hour_label",
    "series_bounds",
    "SeriesSpec",
    "SeriesFeed",
    "PRESETS",
]
