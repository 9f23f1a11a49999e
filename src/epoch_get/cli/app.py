"""CLI application entry point and action dispatch for epoch-get.

This module is the **sole error boundary** for the application.  It
catches :class:`~epoch_get.exceptions.EpochGetError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a short
message on stderr via Rich and returns a well-defined exit code.

Architecture notes
------------------
* Argument handling is a permissive fold (see
  :mod:`epoch_get.core.resolver`) rather than :mod:`argparse`: unknown
  tokens are ignored and the last flag of each category wins.
* ``print()`` is not used; all text goes through the Rich proxies in
  :mod:`epoch_get.cli.console`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import sys

from epoch_get.cli import exit_codes
from epoch_get.cli.console import console, output
from epoch_get.cli.render import format_help, format_timestamp, format_version
from epoch_get.core.epoch_service import EpochService
from epoch_get.core.models import Action, Settings, TimeUnit, Verbosity
from epoch_get.core.protocols import ClockSource
from epoch_get.core.resolver import resolve_arguments
from epoch_get.exceptions import EpochGetError
from epoch_get.infra.system_clock import SystemClock


# ---------------------------------------------------------------------------
# Action handlers
# ---------------------------------------------------------------------------

def _handle_print(
    verbosity: Verbosity,
    unit: TimeUnit,
    clock: ClockSource | None = None,
) -> int:
    """Print the time since the epoch in *unit*.

    The clock is read before anything is written, so a clock failure
    leaves stdout empty.
    """
    service = EpochService(clock if clock is not None else SystemClock())
    value = service.elapsed(unit)
    output.print(format_timestamp(value, unit, verbosity), markup=False)
    return exit_codes.SUCCESS


def _handle_version(verbosity: Verbosity) -> int:
    """Print the bare version, or the program name and version when verbose."""
    output.print(
        format_version(verbosity),
        markup=verbosity is Verbosity.VERBOSE,
    )
    return exit_codes.SUCCESS


def _handle_help() -> int:
    """Print the usage document."""
    output.print(format_help())
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, clock: ClockSource | None = None) -> int:
    """Run the epoch-get CLI.

    Parameters
    ----------
    argv:
        Explicit argument list, without the program name.  When ``None``
        (default), ``sys.argv[1:]`` is used.
    clock:
        Clock to read for the print action.  Defaults to the system
        clock; tests pass a fixed one.

    Returns
    -------
    int
        OS process exit code.
    """
    args = sys.argv[1:] if argv is None else argv

    # Bare invocation skips resolution entirely.
    if not args:
        return _handle_print(Verbosity.QUIET, TimeUnit.SECONDS, clock)

    settings: Settings = resolve_arguments(args)

    if settings.action is Action.HELP:
        return _handle_help()
    if settings.action is Action.VERSION:
        return _handle_version(settings.verbosity)
    return _handle_print(settings.verbosity, settings.unit, clock)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except EpochGetError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
