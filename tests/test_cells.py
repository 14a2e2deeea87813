import copy

import pytest

from vtframe.cells import Cell, Renditions, Row, SavedCursor


def test_default_sgr_is_plain_reset():
    assert Renditions(0).sgr() == "\033[0m"


def test_sgr_bold_and_ansi_colors():
    r = Renditions(0)
    r.set_rendition(1)
    r.set_rendition(31)
    r.set_rendition(42)
    assert r.sgr() == "\033[0;1;31;42m"


def test_sgr_256_colors():
    r = Renditions(0)
    r.set_foreground_color(200)
    assert r.sgr() == "\033[0m\033[38;5;200m"


def test_sgr_background_256_round_trip():
    r = Renditions(0)
    r.set_background_color(100)
    assert r.sgr().endswith("\033[48;5;100m")


def test_set_rendition_zero_resets_everything():
    r = Renditions(44)
    for n in (1, 4, 5, 7, 8, 33):
        r.set_rendition(n)
    r.set_rendition(0)
    assert r == Renditions(0)


@pytest.mark.parametrize("on,off,attr", [(1, 22, "bold"), (4, 24, "underlined"),
                                         (5, 25, "blink"), (7, 27, "inverse"),
                                         (8, 28, "invisible")])
def test_toggle_attributes(on, off, attr):
    r = Renditions(0)
    r.set_rendition(on)
    assert getattr(r, attr) is True
    r.set_rendition(off)
    assert getattr(r, attr) is False


def test_default_color_codes_clear_colors():
    r = Renditions(0)
    r.set_rendition(35)
    r.set_rendition(45)
    r.set_rendition(39)
    r.set_rendition(49)
    assert r == Renditions(0)


def test_bright_colors_match_palette_entries():
    a = Renditions(0)
    a.set_rendition(91)
    a.set_rendition(102)
    b = Renditions(0)
    b.set_foreground_color(9)
    b.set_background_color(10)
    assert a == b


def test_out_of_range_palette_color_ignored():
    r = Renditions(0)
    r.set_foreground_color(256)
    r.set_background_color(-1)
    assert r == Renditions(0)


def test_posterize_keeps_system_colors():
    r = Renditions(0)
    r.set_rendition(35)
    r.set_rendition(46)
    before = copy.copy(r)
    r.posterize()
    assert r == before


@pytest.mark.parametrize("n", range(0, 256, 7))
def test_posterize_lands_in_ansi_range(n):
    r = Renditions(0)
    r.set_foreground_color(n)
    r.set_background_color(n)
    r.posterize()
    assert 30 <= r.foreground_color <= 37
    assert 40 <= r.background_color <= 47


def test_cell_reset():
    c = Cell(0)
    c.contents.append("x")
    c.width = 2
    c.fallback = True
    c.wrap = True
    c.reset(44)
    assert c == Cell(44)
    assert c.renditions.background_color == 44


def test_cell_blankness():
    c = Cell(0)
    assert c.is_blank()
    c.contents.append(" ")
    assert c.is_blank()
    c.contents[0] = "\xa0"
    assert c.is_blank()
    c.contents[0] = "a"
    assert not c.is_blank()


def test_contents_match_between_blank_kinds():
    a = Cell(0)
    b = Cell(0)
    b.contents.append(" ")
    assert a.contents_match(b)
    b.contents[0] = "z"
    assert not a.contents_match(b)


def test_debug_contents():
    c = Cell(0)
    assert c.debug_contents() == "_"
    c.contents.extend(["q", "\u0301"])
    assert c.debug_contents() == "q"


def test_compare_equal_cells_is_quiet(capsys):
    assert Cell(0).compare(Cell(0)) is False
    assert capsys.readouterr().err == ""


def test_compare_reports_differences(capsys):
    a = Cell(0)
    b = Cell(0)
    b.width = 2
    b.wrap = True
    assert a.compare(b) is True
    err = capsys.readouterr().err
    assert "width" in err
    assert "wrap" in err


def test_cell_deepcopy_is_independent():
    a = Cell(0)
    a.contents.append("k")
    b = copy.deepcopy(a)
    b.contents.append("m")
    b.renditions.bold = True
    assert a.contents == ["k"]
    assert not a.renditions.bold


def test_row_insert_cell_keeps_width():
    row = Row(5, 0)
    for i, cell in enumerate(row.cells):
        cell.contents.append(str(i))
    row.insert_cell(1, 41)
    assert len(row.cells) == 5
    assert row.cells[1] == Cell(41)
    assert [c.debug_contents() for c in row.cells] == ["0", "_", "1", "2", "3"]


def test_row_delete_cell_keeps_width():
    row = Row(4, 0)
    for i, cell in enumerate(row.cells):
        cell.contents.append(str(i))
    row.delete_cell(0, 43)
    assert len(row.cells) == 4
    assert [c.debug_contents() for c in row.cells] == ["1", "2", "3", "_"]
    assert row.cells[-1].renditions.background_color == 43


def test_row_reset_and_wrap():
    row = Row(3, 0)
    row.cells[0].contents.append("a")
    row.wrap = True
    assert row.wrap
    assert row.cells[-1].wrap
    row.reset(0)
    assert row == Row(3, 0)
    assert not row.wrap


def test_saved_cursor_defaults():
    s = SavedCursor()
    assert (s.cursor_col, s.cursor_row) == (0, 0)
    assert s.renditions == Renditions(0)
    assert s.auto_wrap_mode is True
    assert s.origin_mode is False