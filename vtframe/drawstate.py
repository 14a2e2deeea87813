"""Cursor, tab stops, margins and modes of the terminal."""

from __future__ import annotations

import copy

from vtframe.cells import Renditions, SavedCursor


class DrawState:
    """Drawing state: cursor position, scrolling region, tabs and modes."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._cursor_col = 0
        self._cursor_row = 0
        self._combining_char_col = 0
        self._combining_char_row = 0
        self._default_tabs = True
        self._tabs = [False] * width
        self._scrolling_region_top_row = 0
        self._scrolling_region_bottom_row = height - 1
        self._renditions = Renditions(0)
        self._save = SavedCursor()

        self.next_print_will_wrap = False
        self.origin_mode = False
        self.auto_wrap_mode = True
        self.insert_mode = False
        self.cursor_visible = True
        self.reverse_video = False
        self.application_mode_cursor_keys = False

        self._reinitialize_tabs(0)

    # read-only views
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cursor_col(self) -> int:
        return self._cursor_col

    @property
    def cursor_row(self) -> int:
        return self._cursor_row

    @property
    def combining_char_col(self) -> int:
        return self._combining_char_col

    @property
    def combining_char_row(self) -> int:
        return self._combining_char_row

    @property
    def scrolling_region_top_row(self) -> int:
        return self._scrolling_region_top_row

    @property
    def scrolling_region_bottom_row(self) -> int:
        return self._scrolling_region_bottom_row

    @property
    def renditions(self) -> Renditions:
        """A copy of the current rendition."""
        return copy.copy(self._renditions)

    @property
    def background_rendition(self) -> int:
        return self._renditions.background_color

    # internals
    def _reinitialize_tabs(self, start: int) -> None:
        for i in range(start, len(self._tabs)):
            self._tabs[i] = i % 8 == 0

    def _new_grapheme(self) -> None:
        self._combining_char_col = self._cursor_col
        self._combining_char_row = self._cursor_row

    def _snap_cursor_to_border(self) -> None:
        self._cursor_row = min(max(self._cursor_row, self.limit_top()), self.limit_bottom())
        self._cursor_col = min(max(self._cursor_col, 0), self._width - 1)

    # movement
    def move_row(self, n: int, relative: bool = False) -> None:
        """Move the cursor to row n, or by n rows if relative."""
        if relative:
            self._cursor_row += n
        else:
            self._cursor_row = n + self.limit_top()
        self._snap_cursor_to_border()
        self._new_grapheme()
        self.next_print_will_wrap = False

    def move_col(self, n: int, relative: bool = False, implicit: bool = False) -> None:
        """Move the cursor to column n, or by n columns if relative.

        An implicit move (after printing) sets the pending-wrap flag when
        it runs past the right edge.
        """
        if implicit:
            self._new_grapheme()
        if relative:
            self._cursor_col += n
        else:
            self._cursor_col = n
        if implicit:
            self.next_print_will_wrap = self._cursor_col >= self._width
        self._snap_cursor_to_border()
        if not implicit:
            self._new_grapheme()
            self.next_print_will_wrap = False

    # tabs
    def set_tab(self) -> None:
        self._tabs[self._cursor_col] = True

    def clear_tab(self, col: int) -> None:
        self._tabs[col] = False

    def clear_default_tabs(self) -> None:
        """Stop default tab stops from being laid out on resize."""
        self._default_tabs = False

    def get_next_tab(self) -> int | None:
        """Column of the next tab stop right of the cursor, or None."""
        return next(
            (i for i in range(self._cursor_col + 1, self._width) if self._tabs[i]),
            None,
        )

    # margins
    def set_scrolling_region(self, top: int, bottom: int) -> None:
        if self._height < 1:
            return
        top = max(top, 0)
        bottom = min(bottom, self._height - 1)
        bottom = max(bottom, top)
        self._scrolling_region_top_row = top
        self._scrolling_region_bottom_row = bottom
        if self.origin_mode:
            self._snap_cursor_to_border()
            self._new_grapheme()

    def limit_top(self) -> int:
        return self._scrolling_region_top_row if self.origin_mode else 0

    def limit_bottom(self) -> int:
        return self._scrolling_region_bottom_row if self.origin_mode else self._height - 1

    # renditions
    def set_foreground_color(self, x: int) -> None:
        self._renditions.set_foreground_color(x)

    def set_background_color(self, x: int) -> None:
        self._renditions.set_background_color(x)

    def add_rendition(self, x: int) -> None:
        self._renditions.set_rendition(x)

    # saved cursor
    def save_cursor(self) -> None:
        self._save = SavedCursor(
            cursor_col=self._cursor_col,
            cursor_row=self._cursor_row,
            renditions=copy.copy(self._renditions),
            auto_wrap_mode=self.auto_wrap_mode,
            origin_mode=self.origin_mode,
        )

    def restore_cursor(self) -> None:
        self._cursor_col = self._save.cursor_col
        self._cursor_row = self._save.cursor_row
        self._renditions = copy.copy(self._save.renditions)
        self.auto_wrap_mode = self._save.auto_wrap_mode
        self.origin_mode = self._save.origin_mode
        self._snap_cursor_to_border()  # a resize may have happened in between
        self._new_grapheme()

    def clear_saved_cursor(self) -> None:
        self._save = SavedCursor()

    def resize(self, width: int, height: int) -> None:
        if self._width != width or self._height != height:
            self._scrolling_region_top_row = 0
            self._scrolling_region_bottom_row = height - 1

        old_width = self._width
        if width < len(self._tabs):
            del self._tabs[width:]
        else:
            self._tabs.extend([False] * (width - len(self._tabs)))
        if self._default_tabs:
            self._reinitialize_tabs(old_width)

        self._width = width
        self._height = height
        self._snap_cursor_to_border()

        if self._combining_char_col >= width or self._combining_char_row >= height:
            self._combining_char_col = self._combining_char_row = -1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DrawState):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._cursor_col == other._cursor_col
            and self._cursor_row == other._cursor_row
            and self.cursor_visible == other.cursor_visible
            and self.reverse_video == other.reverse_video
            and self._renditions == other._renditions
        )

    def __deepcopy__(self, memo: dict) -> DrawState:
        clone = DrawState.__new__(DrawState)
        clone.__dict__.update(self.__dict__)
        clone._tabs = list(self._tabs)
        clone._renditions = copy.copy(self._renditions)
        clone._save = copy.deepcopy(self._save, memo)
        return clone