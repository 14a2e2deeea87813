"""The terminal framebuffer: a grid of rows plus the drawing state."""

from __future__ import annotations

import copy

from vtframe.cells import Cell, Row
from vtframe.drawstate import DrawState


class Framebuffer:
    """Screen contents, window title, bell counter and drawing state."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"framebuffer size must be positive, got {width}x{height}")
        self.ds = DrawState(width, height)
        self._rows = [Row(width, 0) for _ in range(height)]
        self.icon_name = ""
        self.window_title = ""
        self._bell_count = 0

    def _newrow(self) -> Row:
        return Row(self.ds.width, self.ds.background_rendition)

    @property
    def bell_count(self) -> int:
        """How many times the bell has rung."""
        return self._bell_count

    def ring_bell(self) -> None:
        self._bell_count += 1

    def scroll(self, n: int) -> None:
        """Scroll the scrolling region up by n lines (down if n is negative)."""
        if n >= 0:
            for _ in range(n):
                self.delete_line(self.ds.scrolling_region_top_row)
                self.ds.move_row(-1, True)
        else:
            for _ in range(-n):
                self._rows.insert(self.ds.scrolling_region_top_row, self._newrow())
                del self._rows[self.ds.scrolling_region_bottom_row + 1]
                self.ds.move_row(1, True)

    def move_rows_autoscroll(self, rows: int) -> None:
        """Move the cursor by rows, scrolling when it leaves the scrolling region."""
        ds = self.ds
        top = ds.scrolling_region_top_row
        bottom = ds.scrolling_region_bottom_row
        if ds.cursor_row < top or ds.cursor_row > bottom:
            ds.move_row(rows, True)
            return
        target = ds.cursor_row + rows
        if target > bottom:
            self.scroll(target - bottom)
        elif target < top:
            self.scroll(target - top)
        ds.move_row(rows, True)

    def get_row(self, row: int = -1) -> Row:
        """The row at index row; -1 means the cursor row."""
        if row == -1:
            row = self.ds.cursor_row
        return self._rows[row]

    def get_cell(self, row: int = -1, col: int = -1) -> Cell:
        """The cell at (row, col); -1 means the cursor's row or column."""
        if row == -1:
            row = self.ds.cursor_row
        if col == -1:
            col = self.ds.cursor_col
        return self._rows[row].cells[col]

    def get_combining_cell(self) -> Cell | None:
        """The cell combining characters attach to, or None if off screen."""
        col = self.ds.combining_char_col
        row = self.ds.combining_char_row
        if col < 0 or row < 0 or col >= self.ds.width or row >= self.ds.height:
            return None
        return self._rows[row].cells[col]

    def apply_renditions_to_current_cell(self) -> None:
        self.get_cell().renditions = self.ds.renditions

    def insert_line(self, before_row: int) -> None:
        """Insert a blank line inside the scrolling region."""
        top = self.ds.scrolling_region_top_row
        bottom = self.ds.scrolling_region_bottom_row
        if before_row < top or before_row > bottom + 1:
            return
        self._rows.insert(before_row, self._newrow())
        del self._rows[bottom + 1]

    def delete_line(self, row: int) -> None:
        """Delete a line inside the scrolling region, pulling up the rest."""
        top = self.ds.scrolling_region_top_row
        bottom = self.ds.scrolling_region_bottom_row
        if row < top or row > bottom:
            return
        self._rows.insert(bottom + 1, self._newrow())
        del self._rows[row]

    def insert_cell(self, row: int, col: int) -> None:
        self._rows[row].insert_cell(col, self.ds.background_rendition)

    def delete_cell(self, row: int, col: int) -> None:
        self._rows[row].delete_cell(col, self.ds.background_rendition)

    def reset(self) -> None:
        """Full reset; the bell count and icon name survive."""
        width, height = self.ds.width, self.ds.height
        self.ds = DrawState(width, height)
        self._rows = [self._newrow() for _ in range(height)]
        self.window_title = ""

    def soft_reset(self) -> None:
        ds = self.ds
        ds.insert_mode = False
        ds.origin_mode = False
        ds.cursor_visible = True
        ds.application_mode_cursor_keys = False
        ds.set_scrolling_region(0, ds.height - 1)
        ds.add_rendition(0)
        ds.clear_saved_cursor()

    def prefix_window_title(self, s: str) -> None:
        """Prepend s to the window title, and to the icon name if they were equal."""
        if self.icon_name == self.window_title:
            self.icon_name = s + self.icon_name
        self.window_title = s + self.window_title

    def resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"framebuffer size must be positive, got {width}x{height}")
        if height < len(self._rows):
            del self._rows[height:]
        else:
            self._rows.extend(self._newrow() for _ in range(height - len(self._rows)))

        background = self.ds.background_rendition
        for row in self._rows:
            row.wrap = False
            if width < len(row.cells):
                del row.cells[width:]
            else:
                row.cells.extend(Cell(background) for _ in range(width - len(row.cells)))

        self.ds.resize(width, height)

    def reset_cell(self, cell: Cell) -> None:
        cell.reset(self.ds.background_rendition)

    def reset_row(self, row: Row) -> None:
        row.reset(self.ds.background_rendition)

    def posterize(self) -> None:
        """Reduce every cell's colours to the eight ANSI colours."""
        for row in self._rows:
            for cell in row.cells:
                cell.renditions.posterize()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Framebuffer):
            return NotImplemented
        return (
            self._rows == other._rows
            and self.window_title == other.window_title
            and self._bell_count == other._bell_count
            and self.ds == other.ds
        )

    def __deepcopy__(self, memo: dict) -> Framebuffer:
        clone = Framebuffer.__new__(Framebuffer)
        clone.ds = copy.deepcopy(self.ds, memo)
        clone._rows = [copy.deepcopy(row, memo) for row in self._rows]
        clone.icon_name = self.icon_name
        clone.window_title = self.window_title
        clone._bell_count = self._bell_count
        return clone