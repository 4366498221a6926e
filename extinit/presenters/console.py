"""
Terminal presenter.

Plain text on stdout, failures and warnings on stderr, ANSI styling only
when the target stream is a terminal.
"""

import sys
from typing import TextIO

from ..core.interfaces.presenter import IPresenter

_BOLD = "1"
_RED = "91"
_YELLOW = "93"


class ConsolePresenter(IPresenter):
    """Writes command output to the console."""

    def __init__(self, use_color: bool = True, file: TextIO | None = None) -> None:
        """
        Args:
            use_color: Allow ANSI styling on terminals
            file: Stream for regular output; the current sys.stdout when None,
                looked up on every write so redirected streams are honored
        """
        self._use_color = use_color
        self._file = file

    @property
    def out(self) -> TextIO:
        return self._file or sys.stdout

    def _style(self, text: str, code: str, stream: TextIO) -> str:
        if self._use_color and stream.isatty():
            return f"\033[{code}m{text}\033[0m"
        return text

    def print(self, message: str) -> None:
        print(message, file=self.out)

    def print_warning(self, message: str) -> None:
        print(self._style(f"Warning: {message}", _YELLOW, sys.stderr), file=sys.stderr)

    def print_error(self, message: str) -> None:
        print(self._style(f"Error: {message}", _RED, sys.stderr), file=sys.stderr)

    def print_table(self, headers: list[str], rows: list[list[str]]) -> None:
        if not rows:
            return

        widths = [
            max([len(str(header)), *(len(str(row[i])) for row in rows if i < len(row))])
            for i, header in enumerate(headers)
        ]

        def render(cells: list[str]) -> str:
            padded = [
                str(cell).ljust(widths[i]) if i < len(widths) else str(cell)
                for i, cell in enumerate(cells)
            ]
            return "  ".join(padded).rstrip()

        header_line = render(headers)
        out = self.out
        print(self._style(header_line, _BOLD, out), file=out)
        print("-" * len(header_line), file=out)
        for row in rows:
            print(render(row), file=out)
