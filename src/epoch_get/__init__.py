"""epoch-get — print the current Unix epoch timestamp.

Seconds by default, or milliseconds, microseconds and nanoseconds on
request, tersely or as a full sentence.
"""

from epoch_get.version import __version__

__all__: list[str] = ["__version__"]
