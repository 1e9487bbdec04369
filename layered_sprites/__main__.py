from __future__ import annotations

from .app import run


def main(max_frames: int | None = None) -> int:
    return run(max_frames=max_frames)


if __name__ == "__main__":
    raise SystemExit(main())
