"""Pygame shell for the layered sprite demo.

A single screen shows one card spinning at the centre of the default layer
viewport. Rendering logic lives in the pure core modules; this module only owns
the window, the frame loop and placeholder artwork.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

import pygame

from .assets import AssetStore
from .card import BASE_BITMAP, PORTRAIT_BITMAP, Card, digit_bitmap_name
from .clock import ElapsedTime, FrameTimer, RealClock
from .config import DemoConfig
from .pygame_backend import PygameRenderTarget
from .viewport import aspect_fit_screen_viewport, default_layer_viewport

logger = logging.getLogger(__name__)

BACKGROUND = (3, 9, 78)
LETTERBOX = (0, 0, 0)


class Screen(Protocol):
    def handle_event(self, event: pygame.event.Event) -> None: ...
    def update(self, elapsed: ElapsedTime) -> None: ...
    def render(self, surface: pygame.Surface, elapsed: ElapsedTime) -> None: ...


def add_placeholder_card_art(assets: AssetStore) -> None:
    """Register simple generated images under the names a Card expects."""
    base = pygame.Surface((180, 260), pygame.SRCALPHA)
    base.fill((226, 236, 255, 255))
    pygame.draw.rect(base, (18, 30, 118, 255), base.get_rect(), 6)
    # Transparent window so the portrait underneath shows through.
    window = pygame.Rect(0, 0, 100, 100)
    window.center = (90, 91)
    base.fill((0, 0, 0, 0), window)
    assets.add_bitmap(BASE_BITMAP, base)

    portrait = pygame.Surface((128, 128), pygame.SRCALPHA)
    portrait.fill((120, 142, 196, 255))
    pygame.draw.circle(portrait, (244, 248, 255, 255), (64, 52), 28)
    pygame.draw.ellipse(portrait, (244, 248, 255, 255), pygame.Rect(24, 84, 80, 60))
    assets.add_bitmap(PORTRAIT_BITMAP, portrait)

    font = pygame.font.Font(None, 64)
    for digit in range(10):
        tile = pygame.Surface((48, 48), pygame.SRCALPHA)
        pygame.draw.circle(tile, (14, 26, 74, 255), (24, 24), 24)
        text = font.render(str(digit), True, (238, 245, 255))
        tile.blit(text, text.get_rect(center=(24, 26)))
        assets.add_bitmap(digit_bitmap_name(digit), tile)


class CardDemoScreen:
    def __init__(self, assets: AssetStore, *, spin_deg_per_s: float, window_size: tuple[int, int]) -> None:
        self._layer_viewport = default_layer_viewport()
        self._screen_viewport = aspect_fit_screen_viewport(*window_size)
        # Sized to fit the 320-unit-high default layer viewport while spinning.
        self._card = Card(self._layer_viewport.x, self._layer_viewport.y, assets, width=120.0, height=172.0)
        self._card.angular_velocity = spin_deg_per_s

    @property
    def card(self) -> Card:
        return self._card

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.VIDEORESIZE:
            self._screen_viewport = aspect_fit_screen_viewport(max(1, event.w), max(1, event.h))
        elif event.type == pygame.KEYDOWN and pygame.K_0 <= event.key <= pygame.K_9:
            self._card.set_attack_value(event.key - pygame.K_0)

    def update(self, elapsed: ElapsedTime) -> None:
        self._card.update(elapsed)
        if elapsed.total_s > 0:
            self._card.set_health_value(int(elapsed.total_s) % 10)

    def render(self, surface: pygame.Surface, elapsed: ElapsedTime) -> None:
        surface.fill(LETTERBOX)
        sv = self._screen_viewport
        surface.fill(BACKGROUND, pygame.Rect(sv.left, sv.top, sv.width, sv.height))
        target = PygameRenderTarget(surface)
        drawn = self._card.draw(elapsed, target, self._layer_viewport, sv)
        logger.debug("frame %.2fs: %d layers drawn", elapsed.total_s, drawn)


def run(
    *,
    max_frames: int | None = None,
    event_injector: Callable[[int], None] | None = None,
    config: DemoConfig | None = None,
) -> int:
    cfg = config or DemoConfig.from_env()
    if cfg.log_level:
        logging.basicConfig(level=cfg.log_level)

    pygame.init()
    pygame.display.set_caption("Layered Sprites")
    surface = pygame.display.set_mode(cfg.window_size, pygame.RESIZABLE)
    clock = pygame.time.Clock()

    assets = AssetStore()
    if cfg.asset_dir is not None:
        assets.load_directory(cfg.asset_dir)
    else:
        add_placeholder_card_art(assets)

    screen: Screen = CardDemoScreen(assets, spin_deg_per_s=cfg.spin_deg_per_s, window_size=cfg.window_size)
    timer = FrameTimer(RealClock())
    logger.info("demo started at %d fps", cfg.target_fps)

    running = True
    frame = 0
    try:
        while running:
            if event_injector is not None:
                event_injector(frame)

            for event in pygame.event.get():
                if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                    running = False
                    continue
                screen.handle_event(event)

            elapsed = timer.tick()
            screen.update(elapsed)
            screen.render(surface, elapsed)

            pygame.display.flip()

            frame += 1
            if max_frames is not None and frame >= max_frames:
                break

            clock.tick(cfg.target_fps)
    finally:
        pygame.quit()
        logger.info("demo stopped after %d frames", frame)

    return 0
