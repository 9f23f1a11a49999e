"""CLI console helpers built on Rich.

Two proxies are exported:

* ``output`` writes data (timestamps, version, help) to stdout.
* ``console`` writes diagnostics and errors to stderr.

A fresh :class:`rich.console.Console` is created per call so the
current ``sys.stdout`` / ``sys.stderr`` are always honoured.  Rich
drops colour automatically when the stream is not a terminal.
"""

from __future__ import annotations

from rich.console import Console


def get_rich_console(*, stderr: bool = False) -> Console:
    """Create a Rich console targeting stdout, or stderr when *stderr*."""
    return Console(stderr=stderr, highlight=False)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy over a Rich console."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, text: str = "", *, markup: bool = True) -> None:
        """Print *text* followed by a newline, never wrapping lines.

        Pass ``markup=False`` for text that must appear byte-for-byte.
        """
        get_rich_console(stderr=self._stderr).print(
            text,
            markup=markup,
            soft_wrap=True,
        )


output = _ConsoleProxy(stderr=False)
console = _ConsoleProxy(stderr=True)
