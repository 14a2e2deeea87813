"""Renders the difference between two framebuffers as ANSI/ECMA-48 output."""

from __future__ import annotations

import copy

from vtframe.cells import Renditions
from vtframe.framebuffer import Framebuffer
from vtframe.framestate import FrameState


def _initial_rendition() -> Renditions:
    return Renditions(0)


class Display:
    """Describes the capabilities of the terminal being drawn to."""

    def __init__(
        self,
        has_ech: bool = True,
        has_bce: bool = True,
        has_title: bool = True,
        posterize_colors: bool = False,
    ) -> None:
        self.has_ech = has_ech  # erase-character support
        self.has_bce = has_bce  # erases fill with the background colour
        self.has_title = has_title  # window title and icon name can be set
        self.posterize_colors = posterize_colors

    def downgrade(self, f: Framebuffer) -> None:
        """Reduce the framebuffer's colours if the terminal needs it."""
        if self.posterize_colors:
            f.posterize()

    def new_frame(self, initialized: bool, last: Framebuffer, f: Framebuffer) -> str:
        """Output that turns a screen showing `last` into one showing `f`."""
        frame = FrameState(last)
        lf = frame.last_frame
        width, height = f.ds.width, f.ds.height

        if f.bell_count != lf.bell_count:
            frame.append("\x07")

        if self.has_title and (
            not initialized
            or f.icon_name != lf.icon_name
            or f.window_title != lf.window_title
        ):
            if f.icon_name == f.window_title:
                frame.append(f"\033]0;{f.window_title}\007")
            else:
                frame.append(f"\033]1;{f.icon_name}\007")
                frame.append(f"\033]2;{f.window_title}\007")

        if not initialized or f.ds.reverse_video != lf.ds.reverse_video:
            frame.append(f"\033[?5{'h' if f.ds.reverse_video else 'l'}")

        if not initialized or width != lf.ds.width or height != lf.ds.height:
            frame.append(f"\033[1;{height}r")
            frame.append("\033[0m\033[H\033[2J")
            initialized = False
            frame.cursor_x = frame.cursor_y = 0
            frame.current_rendition = _initial_rendition()
        else:
            frame.cursor_x = lf.ds.cursor_col
            frame.cursor_y = lf.ds.cursor_row
            frame.current_rendition = lf.ds.renditions

        frame.y = 0
        if initialized:
            self._scroll_shortcut(frame, f)

        while frame.y < height:
            self._draw_row(initialized, frame, f)
            frame.y += 1

        if (
            not initialized
            or f.ds.cursor_row != frame.cursor_y
            or f.ds.cursor_col != frame.cursor_x
        ):
            frame.append(f"\033[{f.ds.cursor_row + 1};{f.ds.cursor_col + 1}H")
            frame.cursor_x = f.ds.cursor_col
            frame.cursor_y = f.ds.cursor_row

        if not initialized or f.ds.cursor_visible != lf.ds.cursor_visible:
            frame.append("\033[?25h" if f.ds.cursor_visible else "\033[?25l")

        if not initialized or f.ds.renditions != frame.current_rendition:
            frame.append(f.ds.renditions.sgr())
            frame.current_rendition = f.ds.renditions

        return frame.output

    def _scroll_shortcut(self, frame: FrameState, f: Framebuffer) -> None:
        """Detect a scroll of the screen and reproduce it with a newline burst."""
        height = f.ds.height
        lf = frame.last_frame
        first = f.get_row(0)
        lines_scrolled = next((r for r in range(height) if first == lf.get_row(r)), None)
        if lines_scrolled is None:
            return

        scroll_height = 1
        for region_height in range(1, height - lines_scrolled):
            if f.get_row(region_height) == lf.get_row(lines_scrolled + region_height):
                scroll_height = region_height + 1
            else:
                break

        frame.y = scroll_height
        if not lines_scrolled:
            return

        if frame.current_rendition != _initial_rendition():
            frame.append("\033[0m")
            frame.current_rendition = _initial_rendition()

        top = 0
        bottom = top + lines_scrolled + scroll_height - 1

        frame.append(f"\033[{top + 1};{bottom + 1}r")
        frame.append_silent_move(bottom, 0)
        frame.append("\n" * lines_scrolled)

        for i in range(top, bottom + 1):
            row = lf.get_row(i)
            if i + lines_scrolled <= bottom:
                row.cells = copy.deepcopy(lf.get_row(i + lines_scrolled).cells)
            else:
                row.reset(0)

        frame.append(f"\033[1;{height}r")
        frame.cursor_x = frame.cursor_y = -1

    def _draw_row(self, initialized: bool, frame: FrameState, f: Framebuffer) -> None:
        width, height = f.ds.width, f.ds.height
        lf = frame.last_frame

        last_x = 0
        frame.x = 0
        while frame.x < width:
            last_x = frame.x
            self._put_cell(initialized, frame, f)

        # Let the real cursor wrap where ours did, so word selection spans lines.
        if frame.y < height - 1 and f.get_row(frame.y).wrap:
            frame.x = last_x
            while frame.x < width:
                frame.force_next_put = True
                self._put_cell(initialized, frame, f)
            frame.cursor_x = 0
            frame.cursor_y += 1
            frame.force_next_put = True

        # Turn off wrap.
        if (
            frame.y < height - 1
            and not f.get_row(frame.y).wrap
            and (not initialized or lf.get_row(frame.y).wrap)
        ):
            frame.x = last_x
            if initialized:
                lf.reset_cell(lf.get_cell(frame.y, frame.x))
            frame.append(f"\033[{frame.y + 1};{frame.x + 1}H\033[K")
            frame.cursor_x = frame.x
            frame.force_next_put = True
            self._put_cell(initialized, frame, f)

    def _put_cell(self, initialized: bool, frame: FrameState, f: Framebuffer) -> None:
        cell = f.get_cell(frame.y, frame.x)
        width = f.ds.width

        if not frame.force_next_put and initialized and cell == frame.last_frame.get_cell(
            frame.y, frame.x
        ):
            frame.x += cell.width
            return

        if frame.x != frame.cursor_x or frame.y != frame.cursor_y:
            frame.append_silent_move(frame.y, frame.x)

        if frame.current_rendition != cell.renditions:
            frame.append(cell.renditions.sgr())
            frame.current_rendition = copy.copy(cell.renditions)

        if not cell.contents:
            clear_count = 0
            for col in range(frame.x, width):
                other = f.get_cell(frame.y, col)
                if cell.renditions == other.renditions and not other.contents:
                    clear_count += 1
                else:
                    break

            can_use_erase = self.has_bce or cell.renditions == _initial_rendition()

            if frame.force_next_put:
                frame.append(" ")
                frame.cursor_x += 1
                frame.x += 1
                frame.force_next_put = False
                return

            if frame.x + clear_count == width and can_use_erase:
                frame.append("\033[K")
                frame.x += clear_count
            elif self.has_ech and can_use_erase:
                frame.append("\033[X" if clear_count == 1 else f"\033[{clear_count}X")
                frame.x += clear_count
            else:
                # a space takes the background colour regardless of BCE
                frame.append(" ")
                frame.cursor_x += 1
                frame.x += 1
            return

        if cell.fallback:
            # a leading combining character is attached to a no-break space
            frame.append("\xa0")

        frame.append("".join(cell.contents))
        frame.x += cell.width
        frame.cursor_x += cell.width
        frame.force_next_put = False