"""
Result types for persistence and editor calls.

    result = save_page_layout("homepage", sections)
    if result.is_ok:
        layout = result.value
    else:
        messages.error(request, str(result.error))
"""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Ok:
    """Successful outcome carrying a value."""

    value: Any = None

    is_ok = True
    is_err = False

    def unwrap(self):
        return self.value

    def unwrap_or(self, default):
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the exception that describes it."""

    error: Exception

    is_ok = False
    is_err = True

    def unwrap(self):
        """Re-raise the contained error."""
        raise self.error

    def unwrap_or(self, default):
        return default
