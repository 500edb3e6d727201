"""Process CPU time measurement."""

from __future__ import annotations

import os


def cputime() -> float:
    """Return user plus system CPU seconds consumed by this process."""
    times = os.times()
    return times.user + times.system