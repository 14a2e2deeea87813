"""Working state used while rendering one frame to escape sequences."""

from __future__ import annotations

import copy

from vtframe.cells import Renditions
from vtframe.framebuffer import Framebuffer


class FrameState:
    """Output buffer, emulated cursor and a private copy of the previous frame."""

    def __init__(self, last: Framebuffer) -> None:
        self.x = 0
        self.y = 0
        self.force_next_put = False
        self.output = ""
        self.cursor_x = 0
        self.cursor_y = 0
        self.current_rendition = Renditions(0)
        self.last_frame = copy.deepcopy(last)

    def append(self, s: str) -> None:
        self.output += s

    def append_silent_move(self, y: int, x: int) -> None:
        """Move the cursor to (y, x), hiding it first if it is visible."""
        if self.last_frame.ds.cursor_visible:
            self.append("\033[?25l")
            self.last_frame.ds.cursor_visible = False
        self.append(f"\033[{y + 1};{x + 1}H")
        self.cursor_x = x
        self.cursor_y = y