"""Tests for Output destinations."""

import sys

import pytest

import termenv
from termenv.core.color import ANSI256Color, ANSIColor, NoColor, RGBColor
from termenv.core.environ import ProcessEnviron
from termenv.core.profile import Profile
from termenv.output import (
    Output,
    default_output,
    reset_default_output,
    set_default_output,
)
from termenv.style import Style


class TestProfileResolution:
    def test_detected_at_construction(self, tty_stream, make_env) -> None:
        out = Output(tty_stream, environ=make_env(TERM="xterm-256color"))
        assert out.profile == Profile.ANSI256

    def test_explicit_profile_wins(self, pipe_stream, make_env) -> None:
        out = Output(pipe_stream, profile=Profile.TRUE_COLOR, environ=make_env())
        assert out.profile == Profile.TRUE_COLOR

    def test_pipe_is_ascii(self, pipe_stream, make_env) -> None:
        out = Output(pipe_stream, environ=make_env(TERM="xterm-kitty"))
        assert out.profile == Profile.ASCII

    def test_assume_tty(self, pipe_stream, make_env) -> None:
        out = Output(pipe_stream, environ=make_env(TERM="xterm-kitty"), assume_tty=True)
        assert out.is_tty() is True
        assert out.profile == Profile.TRUE_COLOR

    def test_no_color_env(self, tty_stream, make_env) -> None:
        out = Output(tty_stream, environ=make_env(TERM="xterm-256color", NO_COLOR="1"))
        assert out.env_no_color() is True
        assert out.env_color_profile() == Profile.ASCII
        # raw detection ignores NO_COLOR
        assert out.color_profile() == Profile.ANSI256

    def test_defaults_to_stdout(self, make_env) -> None:
        out = Output(environ=make_env(), profile=Profile.ANSI)
        assert out.stream is sys.stdout


class TestTerminalColors:
    """COLORFGBG parsing and the dark-background default."""

    def test_colorfgbg(self, tty_stream, make_env) -> None:
        out = Output(tty_stream, environ=make_env(COLORFGBG="15;0"))
        assert out.foreground_color() == ANSIColor(15)
        assert out.background_color() == ANSIColor(0)

    def test_colorfgbg_three_fields(self, tty_stream, make_env) -> None:
        out = Output(tty_stream, environ=make_env(COLORFGBG="7;default;4"))
        assert out.foreground_color() == ANSIColor(7)
        assert out.background_color() == ANSIColor(4)

    def test_colorfgbg_unparseable(self, tty_stream, make_env) -> None:
        out = Output(tty_stream, environ=make_env(COLORFGBG="default;0"))
        assert out.foreground_color() == NoColor()
        assert out.background_color() == ANSIColor(0)

    def test_colorfgbg_leading_integer(self, tty_stream, make_env) -> None:
        out = Output(tty_stream, environ=make_env(COLORFGBG=" 15;0x"))
        assert out.foreground_color() == ANSIColor(15)
        assert out.background_color() == ANSIColor(0)

    def test_colorfgbg_without_separator(self, tty_stream, make_env) -> None:
        out = Output(tty_stream, environ=make_env(COLORFGBG="15"))
        assert out.foreground_color() == NoColor()
        assert out.background_color() == NoColor()

    def test_not_a_tty(self, pipe_stream, make_env) -> None:
        out = Output(pipe_stream, environ=make_env(COLORFGBG="15;0"))
        assert out.foreground_color() == NoColor()
        assert out.background_color() == NoColor()

    @pytest.mark.parametrize(
        "colorfgbg, dark",
        [
            ("15;0", True),
            ("0;15", False),
            ("0;7", False),
            ("7;4", True),
        ],
    )
    def test_has_dark_background(self, tty_stream, make_env, colorfgbg: str, dark: bool) -> None:
        out = Output(tty_stream, environ=make_env(COLORFGBG=colorfgbg))
        assert out.has_dark_background() is dark

    def test_unknown_background_assumed_dark(self, tty_stream, pipe_stream, make_env) -> None:
        assert Output(tty_stream, environ=make_env()).has_dark_background() is True
        assert Output(pipe_stream, environ=make_env(COLORFGBG="0;15")).has_dark_background() is True

    def test_cache_keeps_first_value(self, tty_stream, monkeypatch) -> None:
        monkeypatch.delenv("CI", raising=False)
        monkeypatch.setenv("COLORFGBG", "15;0")
        out = Output(tty_stream, environ=ProcessEnviron(), cache=True)
        monkeypatch.setenv("COLORFGBG", "0;15")
        assert out.foreground_color() == ANSIColor(15)
        assert out.background_color() == ANSIColor(0)

    def test_no_cache_rereads(self, tty_stream, monkeypatch) -> None:
        monkeypatch.delenv("CI", raising=False)
        monkeypatch.setenv("COLORFGBG", "15;0")
        out = Output(tty_stream, environ=ProcessEnviron())
        monkeypatch.setenv("COLORFGBG", "0;15")
        assert out.background_color() == ANSIColor(15)


class TestColorFactory:
    def test_true_color(self, pipe_stream, make_env) -> None:
        out = Output(pipe_stream, profile=Profile.TRUE_COLOR, environ=make_env())
        assert out.color("#FF0000") == RGBColor("#FF0000")
        assert out.color("9") == ANSIColor(9)
        assert out.color("196") == ANSI256Color(196)

    def test_converted_to_profile(self, pipe_stream, make_env) -> None:
        out = Output(pipe_stream, profile=Profile.ANSI, environ=make_env())
        assert out.color("#ff0000") == ANSIColor(9)
        assert out.color("196") == ANSIColor(9)
        assert out.color("12") == ANSIColor(12)

    def test_ascii(self, pipe_stream, make_env) -> None:
        out = Output(pipe_stream, profile=Profile.ASCII, environ=make_env())
        assert out.color("#ff0000") == NoColor()

    @pytest.mark.parametrize("value", ["", "red", "NaN"])
    def test_unparseable(self, pipe_stream, make_env, value: str) -> None:
        out = Output(pipe_stream, profile=Profile.TRUE_COLOR, environ=make_env())
        assert out.color(value) is None

    def test_leading_integer(self, pipe_stream, make_env) -> None:
        out = Output(pipe_stream, profile=Profile.TRUE_COLOR, environ=make_env())
        assert out.color("1.5") == ANSIColor(1)
        assert out.color("1e3") == ANSIColor(1)
        assert out.color(" 196") == ANSI256Color(196)

    def test_string(self, pipe_stream, make_env) -> None:
        out = Output(pipe_stream, profile=Profile.ANSI256, environ=make_env())
        style = out.string("hello", "world")
        assert isinstance(style, Style)
        assert style.text == "hello world"
        assert style.profile == Profile.ANSI256


class TestControlSequences:
    """Output writes the templated sequences to its stream."""

    def test_write(self, tty_stream, make_env) -> None:
        out = Output(tty_stream, environ=make_env())
        assert out.write("abc") == 3
        assert tty_stream.getvalue() == "abc"

    def test_cursor_and_screen(self, tty_stream, make_env) -> None:
        out = Output(tty_stream, environ=make_env())
        out.move_cursor(3, 7)
        out.cursor_up(2)
        out.hide_cursor()
        out.clear_screen()
        assert tty_stream.getvalue() == "\x1b[3;7H\x1b[2A\x1b[?25l\x1b[2J\x1b[1;1H"

    def test_hyperlink_and_notify(self, tty_stream, make_env) -> None:
        out = Output(tty_stream, environ=make_env())
        out.hyperlink("https://example.com", "site")
        out.notify("Build", "done")
        assert tty_stream.getvalue() == (
            "\x1b]8;;https://example.com\x1b\\site\x1b]8;;\x1b\\"
            "\x1b]777;notify;Build;done\x1b\\"
        )

    def test_set_window_title(self, tty_stream, make_env) -> None:
        out = Output(tty_stream, environ=make_env())
        out.set_window_title("hi")
        assert tty_stream.getvalue() == "\x1b]2;hi\x07"


class TestDefaultOutput:
    def test_lazy_singleton(self) -> None:
        assert default_output() is default_output()

    def test_replace_and_reset(self, pipe_stream, make_env) -> None:
        custom = Output(pipe_stream, profile=Profile.TRUE_COLOR, environ=make_env())
        set_default_output(custom)
        assert default_output() is custom
        assert termenv.color("#ff0000") == RGBColor("#ff0000")
        assert termenv.string("x").bold().render() == "\x1b[1mx\x1b[0m"
        reset_default_output()
        assert default_output() is not custom

    def test_package_shortcuts(self, tty_stream, make_env) -> None:
        set_default_output(Output(tty_stream, environ=make_env(TERM="xterm", COLORFGBG="0;15")))
        assert termenv.color_profile() == Profile.ANSI
        assert termenv.env_color_profile() == Profile.ANSI
        assert termenv.env_no_color() is False
        assert termenv.foreground_color() == ANSIColor(0)
        assert termenv.background_color() == ANSIColor(15)
        assert termenv.has_dark_background() is False
