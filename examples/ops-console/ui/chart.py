"""Line charts for the telemetry series beside the scene."""
from __future__ import annotations

import pygame
from opsviz_telemetry import SeriesSpec, TimeSeriesSample, series_bounds

from ui.constants import CHART_GRID, CHART_LINE, CHART_PAD, PANEL_BG, TEXT_COLOR, TEXT_DIM


def draw_chart(
    surface: pygame.Surface,
    font: pygame.font.Font,
    rect: pygame.Rect,
    spec: SeriesSpec,
    samples: list[TimeSeriesSample],
) -> None:
    """Draw one series as a polyline scaled to its own range."""
    pygame.draw.rect(surface, PANEL_BG, rect)
    title = f"{spec.title} ({spec.unit})" if spec.unit else spec.title
    surface.blit(font.render(title, True, TEXT_COLOR), (rect.x + CHART_PAD, rect.y + 4))

    plot = pygame.Rect(
        rect.x + CHART_PAD,
        rect.y + 22,
        rect.width - CHART_PAD * 2,
        rect.height - 40,
    )
    pygame.draw.rect(surface, CHART_GRID, plot, 1)
    if len(samples) < 2:
        return

    low, high = series_bounds(samples)
    span = (high - low) or 1.0
    step = plot.width / (len(samples) - 1)
    points = [
        (plot.x + i * step, plot.bottom - (s.value - low) / span * plot.height)
        for i, s in enumerate(samples)
    ]
    pygame.draw.lines(surface, CHART_LINE, False, points, 2)

    # Every sixth label keeps a day of hours readable.
    for i in range(0, len(samples), 6):
        label = font.render(samples[i].label, True, TEXT_DIM)
        surface.blit(label, (plot.x + i * step - label.get_width() // 2, plot.bottom + 2))

    value = font.render(f"{samples[-1].value:.1f}", True, CHART_LINE)
    surface.blit(value, (rect.right - value.get_width() - CHART_PAD, rect.y + 4))
