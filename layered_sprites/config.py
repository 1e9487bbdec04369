from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ASSET_DIR_ENV = "LAYERED_SPRITES_ASSET_DIR"
FPS_ENV = "LAYERED_SPRITES_FPS"
LOG_LEVEL_ENV = "LAYERED_SPRITES_LOG_LEVEL"

DEFAULT_TARGET_FPS = 20


@dataclass(frozen=True, slots=True)
class DemoConfig:
    window_size: tuple[int, int] = (960, 540)
    target_fps: int = DEFAULT_TARGET_FPS
    # None -> generate placeholder card images at startup.
    asset_dir: Path | None = None
    spin_deg_per_s: float = 30.0
    log_level: str | None = None

    def __post_init__(self) -> None:
        if self.target_fps <= 0:
            raise ValueError("target_fps must be > 0")
        if self.window_size[0] <= 0 or self.window_size[1] <= 0:
            raise ValueError("window_size must be > 0")

    @classmethod
    def from_env(cls) -> DemoConfig:
        asset_dir = os.environ.get(ASSET_DIR_ENV, "").strip()
        fps = os.environ.get(FPS_ENV, "").strip()
        log_level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
        return cls(
            target_fps=int(fps) if fps else DEFAULT_TARGET_FPS,
            asset_dir=Path(asset_dir) if asset_dir else None,
            log_level=log_level or None,
        )
