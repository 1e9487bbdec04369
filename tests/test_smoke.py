"""Smoke tests for the pygame demo.

These tests verify that the demo loop can initialise and execute a handful of
frames without crashing when the SDL dummy video driver is used. They do not
check rendering correctness.
"""

from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")


def test_app_runs_headless() -> None:
    from layered_sprites.app import run
    from layered_sprites.config import DemoConfig

    exit_code = run(max_frames=3, config=DemoConfig())
    assert exit_code == 0


def test_app_handles_digit_keys_and_escape() -> None:
    import pygame

    from layered_sprites.app import run
    from layered_sprites.config import DemoConfig

    def inject(frame: int) -> None:
        if frame == 1:
            pygame.event.post(pygame.event.Event(pygame.KEYDOWN, {"key": pygame.K_7, "unicode": "7"}))
        elif frame == 3:
            pygame.event.post(pygame.event.Event(pygame.KEYDOWN, {"key": pygame.K_ESCAPE, "unicode": ""}))

    assert run(max_frames=20, event_injector=inject, config=DemoConfig(target_fps=60)) == 0


def test_module_entry_point_runs_headless() -> None:
    from layered_sprites.__main__ import main

    assert main(max_frames=2) == 0
