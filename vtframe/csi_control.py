"""CSI functions for cursor movement, modes, renditions and reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vtframe.dispatcher import Dispatcher, FunctionType, register_function

if TYPE_CHECKING:
    from vtframe.framebuffer import Framebuffer


def csi_cursormove(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Relative (CUU, CUD, CUF, CUB) and absolute (CUP, HVP) cursor movement."""
    num = dispatch.getparam(0, 1)
    final = dispatch.dispatch_chars[0]
    if final == "A":
        fb.ds.move_row(-num, True)
    elif final == "B":
        fb.ds.move_row(num, True)
    elif final == "C":
        fb.ds.move_col(num, True)
    elif final == "D":
        fb.ds.move_col(-num, True)
    elif final in ("H", "f"):
        row = dispatch.getparam(0, 1)
        col = dispatch.getparam(1, 1)
        fb.ds.move_row(row - 1)
        fb.ds.move_col(col - 1)


def csi_da(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Device attributes: report a plain vt220."""
    dispatch.terminal_to_host += "\033[?62c"


def csi_sda(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Secondary device attributes."""
    dispatch.terminal_to_host += "\033[>1;10;0c"


def csi_tbc(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Tabulation clear."""
    param = dispatch.getparam(0, 0)
    if param == 0:  # this tab stop
        fb.ds.clear_tab(fb.ds.cursor_col)
    elif param == 3:  # all tab stops
        fb.ds.clear_default_tabs()
        for x in range(fb.ds.width):
            fb.ds.clear_tab(x)


def _dec_mode(param: int, fb: Framebuffer) -> str | None:
    """Name of the draw-state flag for a DEC private mode, with its side effects."""
    if param == 1:
        return "application_mode_cursor_keys"
    if param == 3:  # 80/132 columns: ignored, but the screen is cleared
        fb.ds.move_row(0)
        fb.ds.move_col(0)
        for y in range(fb.ds.height):
            fb.reset_row(fb.get_row(y))
        return None
    if param == 5:
        return "reverse_video"
    if param == 6:
        fb.ds.move_row(0)
        fb.ds.move_col(0)
        return "origin_mode"
    if param == 7:
        return "auto_wrap_mode"
    if param == 25:
        return "cursor_visible"
    return None


def _ansi_mode(param: int, fb: Framebuffer) -> str | None:
    if param == 4:
        return "insert_mode"
    return None


def _set_modes(fb: Framebuffer, dispatch: Dispatcher, lookup, value: bool) -> None:
    for i in range(dispatch.param_count()):
        name = lookup(dispatch.getparam(i, 0), fb)
        if name is not None:
            setattr(fb.ds, name, value)


def csi_decsm(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Set DEC private modes."""
    _set_modes(fb, dispatch, _dec_mode, True)


def csi_decrm(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Reset DEC private modes."""
    _set_modes(fb, dispatch, _dec_mode, False)


def csi_sm(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Set ANSI modes."""
    _set_modes(fb, dispatch, _ansi_mode, True)


def csi_rm(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Reset ANSI modes."""
    _set_modes(fb, dispatch, _ansi_mode, False)


def csi_decstbm(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Set top and bottom margins; invalid regions are ignored as xterm does."""
    top = dispatch.getparam(0, 1)
    bottom = dispatch.getparam(1, fb.ds.height)
    if bottom <= top or top > fb.ds.height or (top == 0 and bottom == 1):
        return
    fb.ds.set_scrolling_region(top - 1, bottom - 1)
    fb.ds.move_row(0)
    fb.ds.move_col(0)


def csi_sgr(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Select graphic rendition."""
    # In CSI 38;5;Ps m and CSI 48;5;Ps m a Ps of 0 is a colour, not a reset.
    if dispatch.param_count() == 3 and dispatch.getparam(1, -1) == 5:
        first = dispatch.getparam(0, -1)
        if first == 38:
            fb.ds.set_foreground_color(dispatch.getparam(2, 0))
            return
        if first == 48:
            fb.ds.set_background_color(dispatch.getparam(2, 0))
            return
    for i in range(dispatch.param_count()):
        fb.ds.add_rendition(dispatch.getparam(i, 0))


def csi_dsr(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Device status report, including cursor position."""
    param = dispatch.getparam(0, 0)
    if param == 5:
        dispatch.terminal_to_host += "\033[0n"
    elif param == 6:
        dispatch.terminal_to_host += f"\033[{fb.ds.cursor_row + 1};{fb.ds.cursor_col + 1}R"


def csi_vpa(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Line position absolute."""
    fb.ds.move_row(dispatch.getparam(0, 1) - 1)


def csi_hpa(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Character position absolute (CHA and HPA)."""
    fb.ds.move_col(dispatch.getparam(0, 1) - 1)


def csi_decstr(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Soft terminal reset."""
    fb.soft_reset()


for _final in "ABCDHf":
    register_function(FunctionType.CSI, _final, csi_cursormove)
register_function(FunctionType.CSI, "c", csi_da)
register_function(FunctionType.CSI, ">c", csi_sda)
register_function(FunctionType.CSI, "g", csi_tbc, False)
register_function(FunctionType.CSI, "?h", csi_decsm, False)
register_function(FunctionType.CSI, "?l", csi_decrm, False)
register_function(FunctionType.CSI, "h", csi_sm)
register_function(FunctionType.CSI, "l", csi_rm)
register_function(FunctionType.CSI, "r", csi_decstbm)
register_function(FunctionType.CSI, "m", csi_sgr, False)
register_function(FunctionType.CSI, "n", csi_dsr)
register_function(FunctionType.CSI, "d", csi_vpa)
register_function(FunctionType.CSI, "G", csi_hpa)
register_function(FunctionType.CSI, "`", csi_hpa)
register_function(FunctionType.CSI, "!p", csi_decstr)