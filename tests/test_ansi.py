import pytest

from codepoint_kit.ansi import (
    Bg,
    Color,
    Fg,
    Sgr,
    Style,
    cursor_back,
    cursor_column,
    cursor_down,
    cursor_forward,
    cursor_position,
    cursor_up,
    sgr,
)


def test_style_reset():
    assert str(sgr(Style.RESET)) == "\033[0m"


def test_style_bold():
    assert str(sgr(Style.BOLD)) == "\033[1m"


def test_style_underline():
    assert str(sgr(Style.UNDERLINE)) == "\033[4m"


def test_style_in_fstring():
    assert f"{sgr(Style.BOLD)}" == "\033[1m"


def test_fg_red():
    assert str(Fg(Color.RED)) == "\033[31m"


def test_fg_bright_cyan():
    assert str(Fg.bright_color(Color.CYAN)) == "\033[96m"


def test_bg_green():
    assert str(Bg(Color.GREEN)) == "\033[42m"


def test_bg_bright_magenta():
    assert str(Bg.bright_color(Color.MAGENTA)) == "\033[105m"


def test_combined_sgr():
    value = sgr(Fg.bright_color(Color.BLACK), Style.UNDERLINE, Bg(Color.WHITE), Style.ITALIC)
    assert str(value) == "\033[90;4;47;3m"


def test_sgr_class_matches_function():
    assert Sgr(Style.BOLD, Fg(Color.RED)) == sgr(Style.BOLD, Fg(Color.RED))


def test_aliases_share_sequences():
    assert str(sgr(Style.NORMAL)) == "\033[0m"
    assert str(sgr(Style.STRIKE)) == str(sgr(Style.CROSSED_OUT)) == "\033[9m"


def test_indexed_colours():
    assert str(Fg.indexed(200)) == "\033[38;5;200m"
    assert str(Bg.indexed(0)) == "\033[48;5;0m"


def test_rgb_colours():
    assert str(Fg.rgb(1, 2, 255)) == "\033[38;2;1;2;255m"
    assert str(Bg.rgb(10, 20, 30)) == "\033[48;2;10;20;30m"


def test_bright_flag_equals_bright_constructor():
    assert Fg(Color.BLUE, True) == Fg.bright_color(Color.BLUE)
    assert Bg(Color.BLUE, True) == Bg.bright_color(Color.BLUE)


@pytest.mark.parametrize("bad", [-1, 256])
def test_out_of_range_colour(bad):
    with pytest.raises(ValueError):
        Fg.indexed(bad)
    with pytest.raises(ValueError):
        Bg.rgb(0, bad, 0)


def test_empty_sgr_rejected():
    with pytest.raises(ValueError):
        sgr()


def test_non_parameter_rejected():
    with pytest.raises(TypeError):
        sgr(Style.BOLD, "red")


def test_cursor_position():
    assert cursor_position(11, 1) == "\033[11;1H"


@pytest.mark.parametrize(
    "func, letter",
    [
        (cursor_up, "A"),
        (cursor_down, "B"),
        (cursor_forward, "C"),
        (cursor_back, "D"),
        (cursor_column, "G"),
    ],
)
def test_cursor_moves(func, letter):
    assert func(7) == f"\033[7{letter}"
    assert func(255) == f"\033[255{letter}"
    with pytest.raises(ValueError):
        func(256)