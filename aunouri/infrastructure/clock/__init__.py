"""Clock adapters."""

from .system_clock import SystemClock, resolve_timezone

__all__ = ["SystemClock", "resolve_timezone"]
