# vtframe

`vtframe` is a pure-Python model of a VT100/xterm-style terminal screen. It
keeps a grid of cells with characters, colours and attributes, a cursor, tab
stops, a scrolling region, modes and a window title. It runs terminal
functions (cursor movement, modes, SGR, reports, tabs, resets) selected by
CSI sequences, escape sequences and control characters. It can also render
the difference between two screens as escape sequences that redraw one as the
other.

It has no dependencies outside the standard library and needs Python 3.10 or
later.

```
pip install vtframe
```

## Modules

- `vtframe.cells`: `Renditions` (SGR attributes and colours, with `sgr()` and
  `posterize()`), `Cell`, `Row` and `SavedCursor`.
- `vtframe.drawstate`: `DrawState`, which holds the cursor, the scrolling
  region, the tab stops, the current renditions, the saved cursor and the mode
  flags (`origin_mode`, `auto_wrap_mode`, `insert_mode`, `cursor_visible`,
  `reverse_video`, `application_mode_cursor_keys`, `next_print_will_wrap`).
- `vtframe.framebuffer`: `Framebuffer`, which holds the rows, the `ds` draw
  state, `icon_name`, `window_title` and `bell_count`. It scrolls, inserts and
  deletes lines and cells, resets, soft-resets, resizes and posterizes.
- `vtframe.dispatcher`: `Dispatcher`, which gathers parameters, intermediate
  characters and OSC strings and runs registered functions. The module also
  holds `FunctionType`, `register_function` and `get_global_dispatch_registry`.
- `vtframe.controls`: functions for control characters and plain escapes.
  These are BEL, BS, HT, LF/VT/FF/IND, CR, NEL, HTS and RI, plus DECSC,
  DECRC, DECALN and RIS. Importing the module registers them.
- `vtframe.csi_control`: CSI functions. These are CUU/CUD/CUF/CUB, CUP/HVP,
  CHA/HPA, VPA, DA, secondary DA, DSR, TBC, SM/RM, DECSET/DECRST, DECSTBM, SGR
  and DECSTR. Importing the module registers them.
- `vtframe.actions`: action classes (`Print`, `Execute`, `Param`, `Collect`,
  `CSIDispatch`, `EscDispatch`, `OSCStart`, `OSCPut`, `OSCEnd`, `UserByte`,
  `Resize`, and others).
- `vtframe.userinput`: `UserInput`, which rewrites the user's `ESC O A`..`D`
  cursor keys as `ESC [ A`..`D` when the application has not asked for
  application-mode cursor keys.
- `vtframe.framestate` and `vtframe.display`: `Display.new_frame()` renders a
  framebuffer, either in full or as a change from a previous one.

## Running terminal functions

```python
import vtframe.controls      # registers control and escape functions
import vtframe.csi_control   # registers CSI functions
from vtframe.actions import Clear, CSIDispatch, Execute, Param
from vtframe.dispatcher import Dispatcher, FunctionType
from vtframe.framebuffer import Framebuffer


def act(cls, ch):
    a = cls()
    a.char_present = True
    a.ch = ord(ch)
    return a


fb = Framebuffer(80, 24)
d = Dispatcher()

# CSI 5;10 H: move the cursor to row 5, column 10
d.clear(Clear())
for ch in "5;10":
    d.newparamchar(act(Param, ch))
d.dispatch(FunctionType.CSI, act(CSIDispatch, "H"), fb)
print(fb.ds.cursor_row, fb.ds.cursor_col)   # 4 9

# CSI 6 n: report the cursor position
d.clear(Clear())
d.newparamchar(act(Param, "6"))
d.dispatch(FunctionType.CSI, act(CSIDispatch, "n"), fb)
print(repr(d.terminal_to_host))            # '\x1b[5;10R'

# carriage return
d.dispatch(FunctionType.CONTROL, act(Execute, "\r"), fb)
print(fb.ds.cursor_col)                    # 0
```

A key that has no registered function is ignored, and the pending-wrap flag
is cleared. `register_function(function_type, dispatch_chars, function,
clears_wrap_state=True)` adds a function under a key that is still free. An
existing entry is kept.

`Dispatcher.osc_start`, `osc_put` and `osc_dispatch` handle OSC 0, 1 and 2,
which set `fb.icon_name` and `fb.window_title`.

## Rendering frames

```python
import copy
from vtframe.display import Display

display = Display(has_ech=True, has_bce=True, has_title=True,
                  posterize_colors=False)

first = display.new_frame(False, Framebuffer(80, 24), fb)   # full redraw

before = copy.deepcopy(fb)
fb.get_cell(0, 0).contents.append("x")
update = display.new_frame(True, before, fb)               # only the change
```

With `initialized=True`, `new_frame` compares against the previous frame. It
detects scrolled regions, and it uses erase-in-line, erase-character and
silent cursor moves to keep the output small. The `Display` flags describe the
real terminal:

- `has_ech`: the terminal supports ECH (erase character).
- `has_bce`: erasing fills cells with the background colour.
- `has_title`: title updates are sent.
- `posterize_colors`: `display.downgrade(fb)` reduces colours to the eight
  ANSI colours.

## What it does not do

- It does not decode bytes or run an escape-sequence state machine. You
  build the actions and send them to the `Dispatcher` yourself.
- It has no emulator object that puts printed characters into cells. Nothing
  handles wide or combining characters as they are printed, and nothing
  applies auto-wrap to printed text. `Action.act_on_terminal(emu)` expects an
  object that the caller supplies.
- The erase, insert/delete and scroll CSI functions are not registered. These
  are ED, EL, ECH, IL, DL, ICH, DCH, SU and SD. `Framebuffer` has the
  operations they would need (`insert_line`, `delete_line`, `insert_cell`,
  `delete_cell`, `scroll`, `reset_row`, `reset_cell`).
- It does not query terminfo. You set the `Display` capabilities yourself.