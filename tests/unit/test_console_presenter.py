"""
Unit tests for the console presenter.
"""

import io

from extinit.presenters.console import ConsolePresenter


class TestConsolePresenter:
    def test_table_alignment(self):
        out = io.StringIO()
        presenter = ConsolePresenter(file=out)

        presenter.print_table(
            ["Extension", "Status"],
            [["org.example:api/1.0", "ok"], ["b", "failed"]],
        )

        assert out.getvalue().splitlines() == [
            "Extension            Status",
            "---------------------------",
            "org.example:api/1.0  ok",
            "b                    failed",
        ]

    def test_empty_table_prints_nothing(self):
        out = io.StringIO()

        ConsolePresenter(file=out).print_table(["Extension"], [])

        assert out.getvalue() == ""

    def test_short_rows(self):
        """Rows may have fewer cells than headers."""
        out = io.StringIO()

        ConsolePresenter(file=out).print_table(["A", "B"], [["x"]])

        assert out.getvalue().splitlines()[-1] == "x"

    def test_no_color_when_not_a_terminal(self):
        out = io.StringIO()

        ConsolePresenter(use_color=True, file=out).print_table(["A"], [["x"]])

        assert "\033[" not in out.getvalue()

    def test_errors_and_warnings_go_to_stderr(self, capsys):
        presenter = ConsolePresenter(use_color=False)

        presenter.print("listed")
        presenter.print_warning("dry run")
        presenter.print_error("a/1.0 failed")

        captured = capsys.readouterr()
        assert captured.out == "listed\n"
        assert captured.err == "Warning: dry run\nError: a/1.0 failed\n"
