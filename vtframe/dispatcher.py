"""Collects escape-sequence parameters and dispatches terminal functions."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from vtframe.actions import Action, Collect

if TYPE_CHECKING:
    from vtframe.framebuffer import Framebuffer

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LONG_MIN = -(2**63)


class FunctionType(enum.Enum):
    """Which table a terminal function is registered in."""

    ESCAPE = "escape"
    CSI = "csi"
    CONTROL = "control"


@dataclass
class Function:
    """A registered terminal function."""

    function: Callable[["Framebuffer", "Dispatcher"], None]
    clears_wrap_state: bool = True


@dataclass
class DispatchRegistry:
    """Tables mapping dispatch keys to terminal functions."""

    escape: dict[str, Function] = field(default_factory=dict)
    csi: dict[str, Function] = field(default_factory=dict)
    control: dict[str, Function] = field(default_factory=dict)

    def table(self, function_type: FunctionType) -> dict[str, Function]:
        """The table for the given function type."""
        return {
            FunctionType.ESCAPE: self.escape,
            FunctionType.CSI: self.csi,
            FunctionType.CONTROL: self.control,
        }[function_type]


_GLOBAL_REGISTRY = DispatchRegistry()


def get_global_dispatch_registry() -> DispatchRegistry:
    """The registry shared by every dispatcher."""
    return _GLOBAL_REGISTRY


def register_function(
    function_type: FunctionType,
    dispatch_chars: str,
    function: Callable[["Framebuffer", "Dispatcher"], None],
    clears_wrap_state: bool = True,
) -> Function:
    """Register a function under a key; an existing entry is kept."""
    table = get_global_dispatch_registry().table(function_type)
    return table.setdefault(dispatch_chars, Function(function, clears_wrap_state))


def _parse_segment(segment: str) -> int:
    match = _LEADING_INT.match(segment)
    if match is None:
        return -1
    value = int(match.group(1))
    if value > Dispatcher.PARAM_MAX or value < _LONG_MIN:
        return -1
    return value


class Dispatcher:
    """Accumulates parameters, intermediates and OSC strings, and runs functions."""

    PARAM_MAX = 65535  # keeps hostile sequences from causing long loops

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._params = ""
        self._parsed_params: list[int] = []
        self._parsed = False
        self._dispatch_chars = ""
        self._osc_string = ""  # only used to set the window title
        self.terminal_to_host = ""  # reply to the host

    @property
    def params(self) -> str:
        return self._params

    @property
    def dispatch_chars(self) -> str:
        return self._dispatch_chars

    @property
    def osc_string(self) -> str:
        return self._osc_string

    def _parse_params(self) -> None:
        if self._parsed:
            return
        self._parsed_params = [_parse_segment(seg) for seg in self._params.split(";")]
        self._parsed = True

    def getparam(self, n: int, defaultval: int) -> int:
        """Parameter n, or defaultval if it is absent or below 1."""
        self._parse_params()
        ret = self._parsed_params[n] if len(self._parsed_params) > n else defaultval
        return defaultval if ret < 1 else ret

    def param_count(self) -> int:
        self._parse_params()
        return len(self._parsed_params)

    def newparamchar(self, act: Action) -> None:
        """Append a digit or ';' to the parameter string."""
        if not act.char_present:
            raise ValueError("parameter action carries no character")
        if not (act.ch == ord(";") or ord("0") <= act.ch <= ord("9")):
            raise ValueError(f"invalid parameter character: {act.ch:#x}")
        if len(self._params) < 100:  # 16 five-digit params plus 15 semicolons
            self._params += chr(act.ch)
            act.handled = True
        self._parsed = False

    def collect(self, act: Action) -> None:
        """Append an intermediate character to the dispatch key."""
        if not act.char_present:
            raise ValueError("collect action carries no character")
        if len(self._dispatch_chars) < 8 and act.ch <= 255:
            self._dispatch_chars += chr(act.ch)
            act.handled = True

    def clear(self, act: Action) -> None:
        self._params = ""
        self._dispatch_chars = ""
        self._parsed = False
        act.handled = True

    def __str__(self) -> str:
        return f'[dispatch="{self._dispatch_chars}" params="{self._params}"]'[:63]

    def dispatch(self, function_type: FunctionType, act: Action, fb: "Framebuffer") -> None:
        """Look up and run the function selected by the action."""
        if function_type in (FunctionType.ESCAPE, FunctionType.CSI):
            if not act.char_present:
                raise ValueError("dispatch action carries no character")
            final = Collect()
            final.char_present = True
            final.ch = act.ch
            self.collect(final)

        if function_type is FunctionType.CONTROL:
            if not 0 <= act.ch <= 255:
                raise ValueError(f"control character out of range: {act.ch:#x}")
            key = chr(act.ch)
        else:
            key = self._dispatch_chars

        entry = get_global_dispatch_registry().table(function_type).get(key)
        if entry is None:
            fb.ds.next_print_will_wrap = False
            return
        act.handled = True
        if entry.clears_wrap_state:
            fb.ds.next_print_will_wrap = False
        entry.function(fb, self)

    def osc_put(self, act: Action) -> None:
        if not act.char_present:
            raise ValueError("OSC action carries no character")
        if len(self._osc_string) < 256:  # long enough for a window title
            self._osc_string += chr(act.ch)
            act.handled = True

    def osc_start(self, act: Action) -> None:
        self._osc_string = ""
        act.handled = True

    def osc_dispatch(self, act: Action, fb: "Framebuffer") -> None:
        """Apply an xterm title-setting OSC command."""
        s = self._osc_string
        if len(s) >= 2 and s[0] in "012" and s[1] == ";":
            title = s[2:]
            if s[0] in "01":
                fb.icon_name = title
            if s[0] in "02":
                fb.window_title = title
            act.handled = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dispatcher):
            return NotImplemented
        self._parse_params()
        other._parse_params()
        return (
            self._params == other._params
            and self._parsed_params == other._parsed_params
            and self._dispatch_chars == other._dispatch_chars
            and self._osc_string == other._osc_string
            and self.terminal_to_host == other.terminal_to_host
        )