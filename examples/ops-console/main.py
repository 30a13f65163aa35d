"""Ops Console - animated scenes beside synthetic telemetry charts.

Exercises opsviz, opsviz-telemetry, opsviz-motion, opsviz-schedule,
opsviz-signal, and opsviz-scenes.

Controls:
  Left/Right  Previous / next scene
  R           Regenerate the series
  H           Cycle system health status
  D           Start the deploy countdown
  T           Start a test run
  Esc         Quit
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
import time

import pygame

from opsviz import ClockSource, ConsoleConfig, FrameScheduler, Scene
from opsviz_scenes import HealthOrb, build_scene
from opsviz_schedule import Countdown, OneShot, RepeatingTimer, VirtualTimerHost
from opsviz_signal import EventBus, make_flush_callback
from opsviz_telemetry import PRESETS, SeriesFeed
from ui.chart import draw_chart
from ui.constants import (
    BG_COLOR,
    CHART_H,
    DEPLOY_COUNTDOWN,
    HEALTH_ORDER,
    PANEL_W,
    SCENE_ORDER,
    SCENE_PRESETS,
    SCREEN_H,
    SCREEN_W,
    TEST_RUN_SECONDS,
    VIEW_H,
    VIEW_W,
)
from ui.scene_view import draw_scene
from ui.status import draw_health, draw_status_bar

logger = logging.getLogger("ops_console")


def parse_args(config: ConsoleConfig) -> ConsoleConfig:
    """Command-line overrides on top of the OPSVIZ_* environment."""
    p = argparse.ArgumentParser(description="Ops Console - opsviz visual demo")
    p.add_argument("--seed", type=int, default=config.seed, help="Random seed (default: random)")
    p.add_argument("--fps", type=int, default=config.fps, help=f"Display refresh rate (default: {config.fps})")
    p.add_argument("--scene", choices=SCENE_ORDER,
                   default=config.scene if config.scene in SCENE_PRESETS else SCENE_ORDER[0],
                   help="Scene mounted at startup")
    p.add_argument("--log-level", default=config.log_level,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    p.add_argument("--series-refresh", type=float, default=config.series_refresh,
                   metavar="SECONDS", help="Regenerate series every SECONDS (0 disables)")
    args = p.parse_args()
    return ConsoleConfig(
        fps=max(1, args.fps),
        seed=args.seed,
        scene=args.scene,
        log_level=args.log_level,
        series_refresh=max(0.0, args.series_refresh),
    )


class ConsoleState:
    """Holds the scheduler, timers, mounted scene, and series feed."""

    def __init__(self, config: ConsoleConfig) -> None:
        self.config = config
        self.rng = random.Random(config.seed)
        self.host = VirtualTimerHost()
        self.bus = EventBus()
        self.scheduler = FrameScheduler(ClockSource(config.fps, time_fn=time.monotonic))
        self.scheduler.register(make_flush_callback(self.bus))

        self.scene_index = SCENE_ORDER.index(config.scene)
        self.scene: Scene | None = None
        self.feed: SeriesFeed | None = None
        self.health_index = HEALTH_ORDER.index("good")
        self.orb: HealthOrb | None = None

        self.clock_text = ""
        self.countdown_value: int | None = None
        self.test_state = "idle"
        self.pulse_count = 0
        self.bus.subscribe("health_pulse_pulsing", self._on_pulse)

        # Independent timers, each with its own lifecycle
        self.clock_timer = RepeatingTimer(self.host, 1.0, self._refresh_clock)
        self.series_timer: RepeatingTimer | None = None
        if config.series_refresh > 0:
            self.series_timer = RepeatingTimer(self.host, config.series_refresh, self.regenerate)
        self.countdown = Countdown(
            self.host, DEPLOY_COUNTDOWN, self._on_deployed, self._on_countdown_step
        )
        self.test_run = OneShot(self.host, TEST_RUN_SECONDS, self._on_test_done)

        self._refresh_clock()
        self.clock_timer.start()
        if self.series_timer is not None:
            self.series_timer.start()
        self.switch_scene(self.scene_index)
        self.set_health(self.health_index)

    # -- Scenes and series --

    def switch_scene(self, index: int) -> None:
        if self.scene is not None:
            self.scene.unmount()
        self.scene_index = index % len(SCENE_ORDER)
        name = SCENE_ORDER[self.scene_index]
        self.scene = build_scene(name, seed=self.config.seed, scheduler=self.scheduler)
        self.scene.mount()
        self.feed = SeriesFeed(PRESETS[SCENE_PRESETS[name]], rng=self.rng)
        logger.info("scene %s mounted (%d entities)", name, len(self.scene.arena))

    def regenerate(self) -> None:
        if self.feed is not None:
            self.feed.refresh()

    # -- Health orb --

    def set_health(self, index: int) -> None:
        if self.orb is not None:
            self.orb.scene.unmount()
        self.health_index = index % len(HEALTH_ORDER)
        status = HEALTH_ORDER[self.health_index]
        self.orb = HealthOrb(
            self.host, status=status, seed=self.config.seed,
            scheduler=self.scheduler, bus=self.bus,
        )
        self.orb.scene.mount()
        logger.info("health status %s", status)

    def _on_pulse(self, signal: str, data: dict) -> None:
        self.pulse_count += 1

    # -- Timer callbacks --

    def _refresh_clock(self) -> None:
        self.clock_text = time.strftime("%H:%M:%S")

    def start_deploy(self) -> None:
        if not self.countdown.running:
            logger.info("deploy countdown started")
            self.countdown.start()

    def _on_countdown_step(self, value: int) -> None:
        self.countdown_value = value

    def _on_deployed(self) -> None:
        self.countdown_value = None
        logger.info("deployment started")

    def start_test(self) -> None:
        if not self.test_run.running:
            self.test_state = "running"
            self.test_run.start()

    def _on_test_done(self) -> None:
        self.test_state = "passed"
        logger.info("test run complete")

    # -- Frame --

    def frame(self, dt: float) -> None:
        """Advance timers by the real frame time, then tick the scheduler once."""
        self.host.advance(dt)
        self.scheduler.tick()

    def close(self) -> None:
        for timer in (self.clock_timer, self.series_timer, self.countdown, self.test_run):
            if timer is not None:
                timer.stop()
        if self.scene is not None:
            self.scene.unmount()
        if self.orb is not None:
            self.orb.scene.unmount()
        self.scheduler.close()


def main() -> None:
    config = parse_args(ConsoleConfig.from_env())
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Ops Console - opsviz demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = ConsoleState(config)
    running = True

    try:
        while running:
            dt = clock.tick(config.fps) / 1000.0

            # --- Events ---
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_RIGHT:
                        state.switch_scene(state.scene_index + 1)
                    elif event.key == pygame.K_LEFT:
                        state.switch_scene(state.scene_index - 1)
                    elif event.key == pygame.K_r:
                        state.regenerate()
                    elif event.key == pygame.K_h:
                        state.set_health(state.health_index + 1)
                    elif event.key == pygame.K_d:
                        state.start_deploy()
                    elif event.key == pygame.K_t:
                        state.start_test()

            # --- Tick ---
            state.frame(dt)

            # --- Render ---
            screen.fill(BG_COLOR)
            name = SCENE_ORDER[state.scene_index]
            draw_scene(screen, state.scene.arena, font, name.replace("_", " ").title())

            for i, spec in enumerate(state.feed.specs):
                rect = pygame.Rect(VIEW_W, i * CHART_H, PANEL_W, CHART_H)
                draw_chart(screen, font, rect, spec, state.feed.series(spec.name))

            health_rect = pygame.Rect(0, VIEW_H - 100, VIEW_W, 100)
            draw_health(
                screen,
                font,
                health_rect,
                state.orb,
                clock_text=state.clock_text,
                countdown=state.countdown_value,
                test_state=state.test_state,
                pulses=state.pulse_count,
            )
            draw_status_bar(screen, font, clock.get_fps())

            pygame.display.flip()
    finally:
        state.close()
        pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
