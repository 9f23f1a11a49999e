"""Allow ``python -m epoch_get`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m epoch_get`` behaves identically to the ``epoch-get``
console script.
"""

from __future__ import annotations

from epoch_get.cli.app import cli

if __name__ == "__main__":
    cli()
