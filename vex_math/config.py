#
# PROJECT: vex-math
# MODULE: vex_math/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
from dataclasses import dataclass


@dataclass
class ViewConfig:
    """Viewport and projection settings for the demo pipeline."""
    width: int = 78
    height: int = 44
    fov: float = 60.0
    near: float = 0.1
    far: float = 150.0
    distance: float = 6.0

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @classmethod
    def detect_terminal(cls) -> 'ViewConfig':
        """
        Size the viewport from the COLUMNS and LINES environment variables.

        Terminal cells are roughly twice as tall as they are wide, so each
        text row counts as two vertical units. Missing or malformed values
        fall back to an 80x24 terminal.
        """
        try:
            columns = int(os.environ.get('COLUMNS', '80'))
            lines = int(os.environ.get('LINES', '24'))
        except ValueError:
            columns, lines = 80, 24

        return cls(
            width=max(10, columns - 2),
            height=max(10, (lines - 2) * 2)
        )
