"""Text rendering for the three actions.

Pure presentation helpers: every function maps values to a string,
using Rich markup where styling applies.  Nothing is printed here; the
app module decides which console the text goes to.  Strings from
:func:`format_timestamp` and the quiet :func:`format_version` carry no
markup and are printed verbatim.
"""

from __future__ import annotations

from rich.markup import escape

from epoch_get.core.models import TimeUnit, Verbosity
from epoch_get.core.resolver import FLAG_GROUPS, FlagGroup
from epoch_get.version import __version__

PROGRAM_NAME: str = "epoch-get"

_VERBOSE_TEMPLATE: str = "The Unix Epoch, 1970-01-01 00:00:00 UTC was {value}{suffix} ago!"

_INDENT: str = "    "


def format_timestamp(value: int, unit: TimeUnit, verbosity: Verbosity) -> str:
    """Render an elapsed-time value.

    Quiet output is the bare decimal integer; verbose output is the
    fixed sentence with the unit suffix, e.g.
    ``The Unix Epoch, 1970-01-01 00:00:00 UTC was 1700000000 seconds ago!``
    """
    if verbosity is Verbosity.VERBOSE:
        return _VERBOSE_TEMPLATE.format(value=value, suffix=unit.suffix)
    return str(value)


def format_version(verbosity: Verbosity) -> str:
    """Render the version line.

    Quiet: ``1.0.0``.  Verbose: ``epoch-get version 1.0.0`` with markup.
    """
    if verbosity is Verbosity.VERBOSE:
        return f"[green]{PROGRAM_NAME}[/green] version [bold]{__version__}[/bold]"
    return __version__


def _format_option(group: FlagGroup) -> list[str]:
    """Render one ``OPTIONS:`` entry (flag line plus description lines)."""
    flags = f"{_INDENT}[green]{', '.join(group.flags)}[/green]"
    if group.default:
        flags += " - default"
    return [flags, *(f"{_INDENT * 2}{line}" for line in group.description)]


def format_help() -> str:
    """Render the full help document as Rich markup.

    Layout: verbose version line, ``USAGE:``, ``OPTIONS:`` with one
    blank-line separated entry per flag group.
    """
    lines: list[str] = [
        format_version(Verbosity.VERBOSE),
        "",
        "[yellow]USAGE:[/yellow]",
        f"{_INDENT}{PROGRAM_NAME} [bold]{escape('[OPTIONS]')}[/bold]",
        "",
        "[yellow]OPTIONS:[/yellow]",
    ]
    for group in FLAG_GROUPS:
        lines.extend(_format_option(group))
        lines.append("")
    return "\n".join(lines)
