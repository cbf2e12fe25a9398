"""Unit tests for the console print helpers."""

import pytest
from pathproviso.core.verifier import PathVerdict
from pathproviso.utils.formatting import (
    print_error,
    print_info,
    print_success,
    print_verdict,
    print_warning,
)


class TestPrintHelpers:
    """Messages are printed as plain text, never parsed as markup."""

    def test_error_with_brackets(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A closing tag in the message is printed literally."""
        print_error("/tmp/a[/]b missing")

        assert "Error: /tmp/a[/]b missing" in capsys.readouterr().err

    def test_warning_with_brackets(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Style-like text in a warning is printed literally."""
        print_warning("[bold]x[/bold]")

        assert "Warning: [bold]x[/bold]" in capsys.readouterr().err

    def test_info_and_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Info and success go to stdout."""
        print_info("[info] note")
        print_success("done [/]")

        out = capsys.readouterr().out
        assert "[info] note" in out
        assert "done [/]" in out


class TestPrintVerdict:
    """Tests for print_verdict."""

    def test_success_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A passing path is printed with OK on stdout."""
        print_verdict(PathVerdict("/srv/[data]", "the filesystem object must exist", True))

        captured = capsys.readouterr()
        assert "OK /srv/[data]" in captured.out
        assert captured.err == ""

    def test_failure_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A failing path is printed with its error on stderr."""
        verdict = PathVerdict(
            "/x[/]",
            "the filesystem object must not exist",
            False,
            "/x[/] should not exist",
            "present_but_forbidden",
        )

        print_verdict(verdict)

        captured = capsys.readouterr()
        assert "FAIL /x[/] should not exist" in captured.err
        assert captured.out == ""
