import pytest

from vtframe.actions import Collect, Param
from vtframe.cells import Renditions
from vtframe.csi_control import (
    csi_cursormove,
    csi_da,
    csi_decrm,
    csi_decsm,
    csi_decstbm,
    csi_decstr,
    csi_dsr,
    csi_hpa,
    csi_rm,
    csi_sda,
    csi_sgr,
    csi_sm,
    csi_tbc,
    csi_vpa,
)
from vtframe.dispatcher import Dispatcher, get_global_dispatch_registry
from vtframe.framebuffer import Framebuffer


def make_dispatcher(params="", chars=""):
    dispatcher = Dispatcher()
    for ch in params:
        act = Param()
        act.char_present = True
        act.ch = ord(ch)
        dispatcher.newparamchar(act)
    for ch in chars:
        act = Collect()
        act.char_present = True
        act.ch = ord(ch)
        dispatcher.collect(act)
    return dispatcher


def test_cursor_down_and_right():
    fb = Framebuffer(10, 6)
    csi_cursormove(fb, make_dispatcher("2", "B"))
    csi_cursormove(fb, make_dispatcher("3", "C"))
    assert (fb.ds.cursor_row, fb.ds.cursor_col) == (2, 3)


def test_cursor_up_and_left_are_clamped():
    fb = Framebuffer(10, 6)
    fb.ds.move_row(1)
    fb.ds.move_col(1)
    csi_cursormove(fb, make_dispatcher("5", "A"))
    csi_cursormove(fb, make_dispatcher("5", "D"))
    assert (fb.ds.cursor_row, fb.ds.cursor_col) == (0, 0)


@pytest.mark.parametrize("final", ["H", "f"])
def test_cursor_position_is_one_based(final):
    fb = Framebuffer(10, 6)
    csi_cursormove(fb, make_dispatcher("3;4", final))
    assert (fb.ds.cursor_row, fb.ds.cursor_col) == (3 - 1, 4 - 1)


def test_cursor_position_default_is_home():
    fb = Framebuffer(10, 6)
    fb.ds.move_row(4)
    csi_cursormove(fb, make_dispatcher("", "H"))
    assert (fb.ds.cursor_row, fb.ds.cursor_col) == (0, 0)


def test_device_attributes():
    fb = Framebuffer(10, 6)
    dispatcher = make_dispatcher()
    csi_da(fb, dispatcher)
    assert dispatcher.terminal_to_host == "\033[?62c"
    csi_sda(fb, dispatcher)
    assert dispatcher.terminal_to_host == "\033[?62c\033[>1;10;0c"


def test_device_status_report():
    fb = Framebuffer(10, 6)
    dispatcher = make_dispatcher("5")
    csi_dsr(fb, dispatcher)
    assert dispatcher.terminal_to_host == "\033[0n"


def test_cursor_position_report_matches_cursor_move():
    fb = Framebuffer(10, 6)
    csi_cursormove(fb, make_dispatcher("2;7", "H"))
    dispatcher = make_dispatcher("6")
    csi_dsr(fb, dispatcher)
    assert dispatcher.terminal_to_host == "\033[2;7R"


@pytest.mark.parametrize(
    "param, attribute",
    [
        ("1", "application_mode_cursor_keys"),
        ("5", "reverse_video"),
        ("7", "auto_wrap_mode"),
        ("25", "cursor_visible"),
    ],
)
def test_dec_modes_round_trip(param, attribute):
    fb = Framebuffer(10, 6)
    csi_decrm(fb, make_dispatcher(param))
    assert getattr(fb.ds, attribute) is False
    csi_decsm(fb, make_dispatcher(param))
    assert getattr(fb.ds, attribute) is True


def test_dec_mode_several_params():
    fb = Framebuffer(10, 6)
    csi_decsm(fb, make_dispatcher("1;5"))
    assert fb.ds.application_mode_cursor_keys and fb.ds.reverse_video


def test_dec_mode_3_clears_screen_and_homes():
    fb = Framebuffer(10, 6)
    fb.get_cell(2, 2).contents.append("x")
    fb.ds.move_row(3)
    csi_decsm(fb, make_dispatcher("3"))
    assert fb.get_cell(2, 2).contents == []
    assert (fb.ds.cursor_row, fb.ds.cursor_col) == (0, 0)


def test_origin_mode_homes_cursor():
    fb = Framebuffer(10, 6)
    fb.ds.move_row(4)
    csi_decsm(fb, make_dispatcher("6"))
    assert fb.ds.origin_mode is True
    assert fb.ds.cursor_row == 0


def test_insert_mode():
    fb = Framebuffer(10, 6)
    csi_sm(fb, make_dispatcher("4"))
    assert fb.ds.insert_mode is True
    csi_rm(fb, make_dispatcher("4"))
    assert fb.ds.insert_mode is False


def test_scrolling_region_set_and_cursor_homed():
    fb = Framebuffer(10, 6)
    fb.ds.move_row(4)
    csi_decstbm(fb, make_dispatcher("2;4"))
    assert fb.ds.scrolling_region_top_row == 2 - 1
    assert fb.ds.scrolling_region_bottom_row == 4 - 1
    assert (fb.ds.cursor_row, fb.ds.cursor_col) == (0, 0)


def test_invalid_scrolling_region_is_ignored():
    fb = Framebuffer(10, 6)
    fb.ds.move_row(4)
    csi_decstbm(fb, make_dispatcher("4;2"))
    assert fb.ds.scrolling_region_top_row == 0
    assert fb.ds.scrolling_region_bottom_row == 6 - 1
    assert fb.ds.cursor_row == 4


def test_sgr_applies_renditions_in_order():
    fb = Framebuffer(10, 6)
    csi_sgr(fb, make_dispatcher("1;31"))
    expected = Renditions()
    expected.set_rendition(1)
    expected.set_rendition(31)
    assert fb.ds.renditions == expected
    csi_sgr(fb, make_dispatcher("0"))
    assert fb.ds.renditions == Renditions()


def test_sgr_256_colours_do_not_reset():
    fb = Framebuffer(10, 6)
    csi_sgr(fb, make_dispatcher("1"))
    csi_sgr(fb, make_dispatcher("38;5;100"))
    csi_sgr(fb, make_dispatcher("48;5;0"))
    expected = Renditions()
    expected.set_rendition(1)
    expected.set_foreground_color(100)
    expected.set_background_color(0)
    assert fb.ds.renditions == expected


def test_tbc_clears_all_tabs():
    fb = Framebuffer(20, 6)
    csi_tbc(fb, make_dispatcher("3"))
    assert fb.ds.get_next_tab() is None


def test_tbc_clears_tab_at_cursor():
    fb = Framebuffer(20, 6)
    fb.ds.move_col(8)
    csi_tbc(fb, make_dispatcher())
    fb.ds.move_col(0)
    assert fb.ds.get_next_tab() == 16


def test_vpa_and_hpa_are_one_based():
    fb = Framebuffer(10, 6)
    csi_vpa(fb, make_dispatcher("3"))
    csi_hpa(fb, make_dispatcher("5"))
    assert (fb.ds.cursor_row, fb.ds.cursor_col) == (3 - 1, 5 - 1)


def test_decstr_soft_resets():
    fb = Framebuffer(10, 6)
    fb.ds.insert_mode = True
    fb.ds.cursor_visible = False
    csi_decstr(fb, make_dispatcher("", "!"))
    assert fb.ds.insert_mode is False
    assert fb.ds.cursor_visible is True


def test_registration_and_wrap_flags():
    csi = get_global_dispatch_registry().csi
    assert csi["m"].function is csi_sgr
    assert csi["m"].clears_wrap_state is False
    assert csi["?h"].clears_wrap_state is False
    assert csi["`"].function is csi_hpa
    assert csi["r"].clears_wrap_state is True