"""Tests for the Rich console factory and theme."""

from __future__ import annotations

from rich.text import Text

from tileplan.output.console import create_console, get_output, style_for_pattern


class TestConsole:
    def test_captures_output(self) -> None:
        console = create_console()
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_no_ansi_when_not_a_terminal(self) -> None:
        console = create_console()
        console.print(Text("OK", style="tp.ok"))
        assert "\x1b[" not in get_output(console)

    def test_theme_styles_resolve(self) -> None:
        console = create_console()
        for name in ("tp.ok", "tp.error", "tp.cut", "tp.full", "tp.money"):
            console.get_style(name)

    def test_fixed_width(self) -> None:
        assert create_console(width=80).width == 80


class TestPatternStyles:
    def test_known_patterns(self) -> None:
        assert style_for_pattern("grid") == "tp.pattern.grid"
        assert style_for_pattern("herringbone") == "tp.pattern.herringbone"

    def test_unknown_pattern_unstyled(self) -> None:
        assert style_for_pattern("zigzag") == ""
