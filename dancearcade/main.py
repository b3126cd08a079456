"""Command-line entry point that starts the game."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from dancearcade import log
from dancearcade.engine import Engine
from dancearcade.game import SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE
from dancearcade.scenes import home_scene


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window, show the home scene and run until closed."""
    ret = 0

    log.info("Starting Dance Arcade...")
    try:
        with Engine(SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE) as engine:
            log.info("Dance Arcade started successfully!")
            engine.load_scene(home_scene(engine))
            engine.set_current_scene("Home")
            engine.run()
    except Exception as exc:
        log.error(str(exc))
        log.error("Failed to start Dance Arcade")
        ret = 1

    if ret == 0:
        log.info("Exited good.")
    else:
        log.info("Exited badly.")
    return ret


if __name__ == "__main__":
    sys.exit(main())