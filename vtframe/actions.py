"""Actions produced by the escape-sequence parser and applied to an emulator."""

from __future__ import annotations

from typing import Any


class Action:
    """One parser action, optionally carrying the character that caused it."""

    name = "Action"
    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self.char_present = False
        self.ch = -1
        self.handled = False

    def __str__(self) -> str:
        if not self.char_present:
            return self.name
        if 0 <= self.ch <= 0x10FFFF and chr(self.ch).isprintable():
            return f"{self.name}({chr(self.ch)})"
        return f"{self.name}(0x{self.ch & 0xFFFFFFFF:x})"

    def __repr__(self) -> str:
        return f"<{self}>"

    def act_on_terminal(self, emu: Any) -> None:
        """Apply the action to an emulator; the base action has no effect."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Action):
            return NotImplemented
        return (
            self.char_present == other.char_present
            and self.ch == other.ch
            and self.handled == other.handled
        )


class Ignore(Action):
    name = "Ignore"


class Print(Action):
    name = "Print"

    def act_on_terminal(self, emu: Any) -> None:
        emu.print(self)


class Execute(Action):
    name = "Execute"

    def act_on_terminal(self, emu: Any) -> None:
        emu.execute(self)


class Clear(Action):
    name = "Clear"

    def act_on_terminal(self, emu: Any) -> None:
        emu.dispatch.clear(self)


class Collect(Action):
    name = "Collect"

    def act_on_terminal(self, emu: Any) -> None:
        emu.dispatch.collect(self)


class Param(Action):
    name = "Param"

    def act_on_terminal(self, emu: Any) -> None:
        emu.dispatch.newparamchar(self)


class EscDispatch(Action):
    name = "Esc_Dispatch"

    def act_on_terminal(self, emu: Any) -> None:
        emu.esc_dispatch(self)


class CSIDispatch(Action):
    name = "CSI_Dispatch"

    def act_on_terminal(self, emu: Any) -> None:
        emu.csi_dispatch(self)


class Hook(Action):
    name = "Hook"


class Put(Action):
    name = "Put"


class Unhook(Action):
    name = "Unhook"


class OSCStart(Action):
    name = "OSC_Start"

    def act_on_terminal(self, emu: Any) -> None:
        emu.dispatch.osc_start(self)


class OSCPut(Action):
    name = "OSC_Put"

    def act_on_terminal(self, emu: Any) -> None:
        emu.dispatch.osc_put(self)


class OSCEnd(Action):
    name = "OSC_End"

    def act_on_terminal(self, emu: Any) -> None:
        emu.osc_end(self)


class UserByte(Action):
    """A keystroke byte from the user, outside the host-side state machine."""

    name = "UserByte"

    def __init__(self, c: int | str) -> None:
        super().__init__()
        self.c = chr(c & 0xFF) if isinstance(c, int) else c

    def act_on_terminal(self, emu: Any) -> None:
        emu.dispatch.terminal_to_host += emu.user.input(
            self, emu.fb.ds.application_mode_cursor_keys
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UserByte):
            return self.c == other.c
        return super().__eq__(other)


class Resize(Action):
    """A window-size change, outside the host-side state machine."""

    name = "Resize"

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def act_on_terminal(self, emu: Any) -> None:
        emu.resize(self.width, self.height)
        self.handled = True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Resize):
            return self.width == other.width and self.height == other.height
        return super().__eq__(other)