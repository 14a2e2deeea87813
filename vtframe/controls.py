"""Terminal functions selected by control characters and plain escapes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vtframe.dispatcher import Dispatcher, FunctionType, register_function

if TYPE_CHECKING:
    from vtframe.framebuffer import Framebuffer


def esc_decaln(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Screen alignment test: fill the screen with 'E'."""
    for y in range(fb.ds.height):
        for x in range(fb.ds.width):
            cell = fb.get_cell(y, x)
            fb.reset_cell(cell)
            cell.contents.append("E")


def ctrl_lf(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Line feed (also index, vertical tab and form feed)."""
    fb.move_rows_autoscroll(1)


def ctrl_cr(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Carriage return."""
    fb.ds.move_col(0)


def ctrl_bs(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Backspace."""
    fb.ds.move_col(-1, True)


def ctrl_ri(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Reverse index: a line feed upwards."""
    fb.move_rows_autoscroll(-1)


def ctrl_nel(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Next line."""
    fb.ds.move_col(0)
    fb.move_rows_autoscroll(1)


def ctrl_ht(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Horizontal tab; keeps the pending-wrap flag but starts a new grapheme."""
    col = fb.ds.get_next_tab()
    if col is None:
        col = fb.ds.width - 1
    wrap_state = fb.ds.next_print_will_wrap
    fb.ds.move_col(col, False)
    fb.ds.next_print_will_wrap = wrap_state


def ctrl_hts(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Set a tab stop at the cursor column."""
    fb.ds.set_tab()


def ctrl_bel(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Ring the bell."""
    fb.ring_bell()


def esc_decsc(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Save cursor."""
    fb.ds.save_cursor()


def esc_decrc(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Restore cursor."""
    fb.ds.restore_cursor()


def esc_ris(fb: Framebuffer, dispatch: Dispatcher) -> None:
    """Reset to initial state."""
    fb.reset()


register_function(FunctionType.ESCAPE, "#8", esc_decaln)
register_function(FunctionType.CONTROL, "\x0a", ctrl_lf)
register_function(FunctionType.CONTROL, "\x84", ctrl_lf)
register_function(FunctionType.CONTROL, "\x0b", ctrl_lf)
register_function(FunctionType.CONTROL, "\x0c", ctrl_lf)
register_function(FunctionType.CONTROL, "\x0d", ctrl_cr)
register_function(FunctionType.CONTROL, "\x08", ctrl_bs)
register_function(FunctionType.CONTROL, "\x8d", ctrl_ri)
register_function(FunctionType.CONTROL, "\x85", ctrl_nel)
register_function(FunctionType.CONTROL, "\x09", ctrl_ht, False)
register_function(FunctionType.CONTROL, "\x88", ctrl_hts)
register_function(FunctionType.CONTROL, "\x07", ctrl_bel)
register_function(FunctionType.ESCAPE, "7", esc_decsc)
register_function(FunctionType.ESCAPE, "8", esc_decrc)
register_function(FunctionType.ESCAPE, "c", esc_ris)