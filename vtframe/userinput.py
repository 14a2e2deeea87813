"""Translation of user keystrokes before they are sent to the host."""

from __future__ import annotations

import enum

from vtframe.actions import UserByte


class UserInputState(enum.Enum):
    GROUND = "ground"
    ESC = "esc"
    SS3 = "ss3"


class UserInput:
    """Converts application-mode cursor keys to ANSI form when needed.

    The user's terminal is always in application mode; if the emulated
    terminal is not, ESC O A..D is rewritten as ESC [ A..D.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self.state = UserInputState.GROUND

    def input(self, act: UserByte, application_mode_cursor_keys: bool) -> str:
        """Bytes to send to the host for this keystroke byte."""
        act.handled = True
        c = act.c

        if self.state is UserInputState.GROUND:
            if c == "\x1b":
                self.state = UserInputState.ESC
            return c

        if self.state is UserInputState.ESC:
            if c == "O":  # 7-bit SS3
                self.state = UserInputState.SS3
                return ""
            self.state = UserInputState.GROUND
            return c

        self.state = UserInputState.GROUND
        if not application_mode_cursor_keys and "A" <= c <= "D":
            return "[" + c
        return "O" + c

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserInput):
            return NotImplemented
        return self.state is other.state