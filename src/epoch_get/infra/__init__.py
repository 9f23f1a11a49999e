"""Infrastructure layer — operating-system integration.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* OS failures are re-raised as :class:`~epoch_get.exceptions.EpochGetError`
  subclasses.
"""

from epoch_get.infra.system_clock import SystemClock

__all__: list[str] = ["SystemClock"]
