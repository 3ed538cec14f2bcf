"""Tests for Rich Console factory and theme."""

from io import StringIO

from suffixctl.output.console import (
    SUFFIX_THEME,
    create_console,
    get_output,
    style_for_kind,
)


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestGetOutput:
    def test_extracts_printed_text(self) -> None:
        console = create_console(no_color=True)
        console.print("example.co.uk")
        assert "example.co.uk" in get_output(console)

    def test_empty_console(self) -> None:
        assert get_output(create_console()) == ""


class TestTheme:
    def test_component_styles_defined(self) -> None:
        for name in ("sfx.trd", "sfx.sld", "sfx.tld", "sfx.ok", "sfx.error"):
            assert name in SUFFIX_THEME.styles

    def test_style_for_kind(self) -> None:
        assert style_for_kind("normal") == "sfx.rule.normal"
        assert style_for_kind("wildcard") == "sfx.rule.wildcard"
        assert style_for_kind("exception") == "sfx.rule.exception"
        assert style_for_kind("unknown") == ""
