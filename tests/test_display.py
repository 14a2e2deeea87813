import copy

from vtframe.display import Display
from vtframe.framebuffer import Framebuffer


def pair(width=4, height=3):
    fb = Framebuffer(width, height)
    return copy.deepcopy(fb), fb


def test_identical_frames_produce_nothing():
    last, f = pair()
    assert Display().new_frame(True, last, f) == ""


def test_new_frame_does_not_modify_last():
    last, f = pair()
    f.get_cell(0, 0).contents.append("A")
    f.ds.cursor_visible = False
    snapshot = copy.deepcopy(last)
    Display().new_frame(True, last, f)
    assert last == snapshot
    assert last.ds.cursor_visible


def test_bell():
    last, f = pair()
    f.ring_bell()
    assert Display().new_frame(True, last, f) == "\x07"


def test_combined_title():
    last, f = pair()
    f.window_title = "hi"
    f.icon_name = "hi"
    assert Display().new_frame(True, last, f) == "\033]0;hi\007"


def test_separate_icon_and_title():
    last, f = pair()
    f.icon_name = "a"
    f.window_title = "b"
    assert Display().new_frame(True, last, f) == "\033]1;a\007\033]2;b\007"


def test_title_suppressed_without_capability():
    last, f = pair()
    f.window_title = "b"
    assert Display(has_title=False).new_frame(True, last, f) == ""
    out = Display(has_title=False).new_frame(False, last, f)
    assert "\033]" not in out


def test_reverse_video_and_cursor_visibility():
    last, f = pair()
    f.ds.reverse_video = True
    assert Display().new_frame(True, last, f) == "\033[?5h"
    last, f = pair()
    f.ds.cursor_visible = False
    assert Display().new_frame(True, last, f) == "\033[?25l"


def test_uninitialized_frame_resets_screen():
    last, f = pair(4, 3)
    out = Display().new_frame(False, last, f)
    assert out.startswith("\033]0;\007")
    assert "\033[1;3r" in out
    assert "\033[0m\033[H\033[2J" in out
    assert out.endswith(f.ds.renditions.sgr())


def test_size_change_clears_screen():
    last = Framebuffer(4, 3)
    f = Framebuffer(5, 3)
    out = Display().new_frame(True, last, f)
    assert "\033[0m\033[H\033[2J" in out


def test_single_character_update():
    last, f = pair()
    f.get_cell(0, 0).contents.append("A")
    assert Display().new_frame(True, last, f) == "A\033[1;1H"


def test_scroll_uses_newline():
    last = Framebuffer(4, 4)
    last.get_cell(0, 0).contents.append("A")
    last.get_cell(1, 0).contents.append("B")
    f = copy.deepcopy(last)
    f.scroll(1)
    out = Display().new_frame(True, last, f)
    assert "\n" in out
    assert "B" not in out
    assert out.endswith("\033[?25h")


def test_erase_character_when_supported():
    last, f = pair()
    last.get_cell(0, 0).contents.append("x")
    last.get_cell(0, 1).contents.append("x")
    f.get_cell(0, 3).contents.append("z")
    with_ech = Display(has_ech=True).new_frame(True, last, f)
    without_ech = Display(has_ech=False).new_frame(True, last, f)
    assert "\033[3X" in with_ech
    assert "X" not in without_ech
    assert "z" in with_ech and "z" in without_ech


def test_wrapped_row_reprints_last_cell():
    last, f = pair(4, 2)
    for col, ch in enumerate("abcd"):
        f.get_cell(0, col).contents.append(ch)
    f.get_row(0).wrap = True
    out = Display().new_frame(False, last, f)
    assert "abcd" in out
    assert out.count("d") == 2


def test_fallback_cell_uses_no_break_space():
    last, f = pair()
    cell = f.get_cell(0, 0)
    cell.contents.append("\u0301")
    cell.fallback = True
    out = Display().new_frame(True, last, f)
    assert "\xa0\u0301" in out


def test_downgrade_posterizes_when_enabled():
    _, f = pair()
    f.get_cell(0, 0).renditions.set_foreground_color(200)
    Display(posterize_colors=True).downgrade(f)
    assert 30 <= f.get_cell(0, 0).renditions.foreground_color <= 37


def test_downgrade_leaves_colors_when_disabled():
    _, f = pair()
    f.get_cell(0, 0).renditions.set_foreground_color(200)
    before = f.get_cell(0, 0).renditions.foreground_color
    Display(posterize_colors=False).downgrade(f)
    assert f.get_cell(0, 0).renditions.foreground_color == before