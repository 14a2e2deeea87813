"""Cell-level building blocks of the terminal framebuffer: renditions, cells, rows."""

from __future__ import annotations

import copy
import sys
from dataclasses import dataclass, field

# Maps the common 256-colour palette onto the eight ANSI system colours
# (closest CIE deltaE(2000)).
_STANDARD_POSTERIZATION = (
    0, 1, 2, 3, 4, 5, 6, 7, 7, 1, 2, 3, 4, 5, 6, 7,
    0, 4, 4, 4, 4, 4, 0, 0, 4, 4, 4, 4, 2, 6, 6, 6,
    6, 4, 2, 2, 6, 6, 6, 6, 2, 2, 2, 6, 6, 6, 2, 2,
    2, 2, 6, 6, 1, 4, 4, 4, 4, 4, 0, 0, 4, 4, 4, 4,
    2, 2, 6, 6, 4, 5, 2, 2, 6, 6, 6, 6, 2, 2, 2, 6,
    6, 6, 2, 2, 2, 2, 6, 6, 1, 5, 5, 4, 4, 4, 1, 1,
    5, 5, 5, 5, 3, 3, 7, 5, 5, 5, 2, 2, 2, 6, 7, 7,
    2, 2, 2, 6, 6, 6, 2, 2, 2, 2, 6, 6, 1, 5, 5, 5,
    5, 5, 1, 1, 5, 5, 5, 5, 3, 1, 7, 5, 5, 5, 3, 3,
    3, 7, 7, 7, 3, 3, 2, 7, 6, 7, 3, 2, 2, 2, 6, 6,
    1, 5, 5, 5, 5, 5, 1, 1, 5, 5, 5, 5, 3, 1, 1, 5,
    5, 5, 3, 3, 7, 7, 7, 7, 3, 3, 3, 7, 7, 7, 3, 3,
    3, 3, 7, 7, 1, 1, 5, 5, 5, 5, 1, 1, 5, 5, 5, 5,
    1, 1, 1, 5, 5, 5, 3, 7, 7, 7, 7, 7, 3, 3, 3, 7,
    7, 7, 3, 3, 3, 3, 7, 7, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 1, 1, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7,
)

_TOGGLES = {
    1: ("bold", True), 22: ("bold", False),
    4: ("underlined", True), 24: ("underlined", False),
    5: ("blink", True), 25: ("blink", False),
    7: ("inverse", True), 27: ("inverse", False),
    8: ("invisible", True), 28: ("invisible", False),
}


@dataclass
class Renditions:
    """Graphic rendition of a cell: attributes and colours."""

    background_color: int = 0
    foreground_color: int = 0
    bold: bool = False
    underlined: bool = False
    blink: bool = False
    inverse: bool = False
    invisible: bool = False

    def set_rendition(self, num: int) -> None:
        """Apply one SGR parameter (16-colour set only)."""
        if num == 0:
            self.bold = self.underlined = self.blink = False
            self.inverse = self.invisible = False
            self.foreground_color = self.background_color = 0
        elif num == 39:
            self.foreground_color = 0
        elif num == 49:
            self.background_color = 0
        elif 30 <= num <= 37:
            self.foreground_color = num
        elif 40 <= num <= 47:
            self.background_color = num
        elif 90 <= num <= 97:
            self.foreground_color = num - 90 + 38
        elif 100 <= num <= 107:
            self.background_color = num - 100 + 48
        elif num in _TOGGLES:
            name, value = _TOGGLES[num]
            setattr(self, name, value)

    def set_foreground_color(self, num: int) -> None:
        """Select a foreground colour from the 256-colour palette."""
        if 0 <= num <= 255:
            self.foreground_color = 30 + num

    def set_background_color(self, num: int) -> None:
        """Select a background colour from the 256-colour palette."""
        if 0 <= num <= 255:
            self.background_color = 40 + num

    def sgr(self) -> str:
        """Escape sequence that selects exactly this rendition."""
        parts = ["\033[0"]
        for flag, code in (
            (self.bold, ";1"),
            (self.underlined, ";4"),
            (self.blink, ";5"),
            (self.inverse, ";7"),
            (self.invisible, ";8"),
        ):
            if flag:
                parts.append(code)
        if self.foreground_color and self.foreground_color <= 37:
            parts.append(f";{self.foreground_color}")
        if self.background_color and self.background_color <= 47:
            parts.append(f";{self.background_color}")
        parts.append("m")
        if self.foreground_color > 37:
            parts.append(f"\033[38;5;{self.foreground_color - 30}m")
        if self.background_color > 47:
            parts.append(f"\033[48;5;{self.background_color - 40}m")
        return "".join(parts)

    def posterize(self) -> None:
        """Reduce colours to the eight ANSI colours."""
        if self.foreground_color:
            self.foreground_color = 30 + _STANDARD_POSTERIZATION[self.foreground_color - 30]
        if self.background_color:
            self.background_color = 40 + _STANDARD_POSTERIZATION[self.background_color - 40]


class Cell:
    """One character cell of the screen."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, background_color: int = 0) -> None:
        self.contents: list[str] = []
        self.fallback = False  # first character is a combining character
        self.width = 1
        self.renditions = Renditions(background_color)
        self.wrap = False  # if last cell, wrap to next line

    def reset(self, background_color: int) -> None:
        """Blank the cell, keeping the given background colour."""
        self.contents.clear()
        self.fallback = False
        self.width = 1
        self.renditions = Renditions(background_color)
        self.wrap = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return (
            self.contents == other.contents
            and self.fallback == other.fallback
            and self.width == other.width
            and self.renditions == other.renditions
            and self.wrap == other.wrap
        )

    def __repr__(self) -> str:
        return (
            f"Cell(contents={''.join(self.contents)!r}, fallback={self.fallback}, "
            f"width={self.width}, renditions={self.renditions!r}, wrap={self.wrap})"
        )

    def debug_contents(self) -> str:
        """First character of the cell, or '_' if empty."""
        return self.contents[0] if self.contents else "_"

    def is_blank(self) -> bool:
        """True for an empty cell or one holding a single space or no-break space."""
        return not self.contents or (
            len(self.contents) == 1 and self.contents[0] in (" ", "\xa0")
        )

    def contents_match(self, other: Cell) -> bool:
        """True if both cells are blank or hold the same characters."""
        return (self.is_blank() and other.is_blank()) or self.contents == other.contents

    def compare(self, other: Cell) -> bool:
        """Report differences to stderr; return True if the cells differ."""
        differ = False
        if not self.contents_match(other):
            differ = True
            print(
                f"Contents: {self.debug_contents()} vs. {other.debug_contents()}",
                file=sys.stderr,
            )
        if self.fallback != other.fallback:
            differ = True
            print(f"fallback: {int(self.fallback)} vs. {int(other.fallback)}", file=sys.stderr)
        if self.width != other.width:
            differ = True
            print(f"width: {self.width} vs. {other.width}", file=sys.stderr)
        if self.renditions != other.renditions:
            differ = True
            print("renditions differ", file=sys.stderr)
        if self.wrap != other.wrap:
            differ = True
            print(f"wrap: {int(self.wrap)} vs. {int(other.wrap)}", file=sys.stderr)
        return differ

    def __deepcopy__(self, memo: dict) -> Cell:
        clone = Cell.__new__(Cell)
        clone.contents = list(self.contents)
        clone.fallback = self.fallback
        clone.width = self.width
        clone.renditions = copy.copy(self.renditions)
        clone.wrap = self.wrap
        return clone


class Row:
    """One row of cells."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, background_color: int = 0) -> None:
        self.cells = [Cell(background_color) for _ in range(width)]

    def insert_cell(self, col: int, background_color: int) -> None:
        """Insert a blank cell at col, dropping the last cell."""
        self.cells.insert(col, Cell(background_color))
        self.cells.pop()

    def delete_cell(self, col: int, background_color: int) -> None:
        """Remove the cell at col, appending a blank cell at the end."""
        self.cells.append(Cell(background_color))
        del self.cells[col]

    def reset(self, background_color: int) -> None:
        """Blank every cell of the row."""
        for cell in self.cells:
            cell.reset(background_color)

    @property
    def wrap(self) -> bool:
        """Whether the row wraps onto the next one."""
        return self.cells[-1].wrap

    @wrap.setter
    def wrap(self, value: bool) -> None:
        self.cells[-1].wrap = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Row({''.join(c.debug_contents() for c in self.cells)!r})"

    def __deepcopy__(self, memo: dict) -> Row:
        clone = Row.__new__(Row)
        clone.cells = [copy.deepcopy(cell, memo) for cell in self.cells]
        return clone


@dataclass
class SavedCursor:
    """Cursor state stored by save-cursor."""

    cursor_col: int = 0
    cursor_row: int = 0
    renditions: Renditions = field(default_factory=Renditions)
    auto_wrap_mode: bool = True
    origin_mode: bool = False