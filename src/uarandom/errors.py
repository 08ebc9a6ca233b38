"""Exceptions raised by the user-agent catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uarandom.models import FilterSpec


class UserAgentError(Exception):
    """Base class for all catalog errors."""


class DataFormatError(UserAgentError):
    """Raised when the agent dataset is missing, unreadable or malformed."""


class FieldNotFoundError(UserAgentError):
    """Raised when a record does not define a field being enumerated."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Field name '{field_name}' not found, can't continue")
        self.field_name = field_name


class NoMatchError(UserAgentError):
    """Raised when a filter matches no user agents."""

    def __init__(self, filter_spec: FilterSpec) -> None:
        super().__init__(f"No user agents matched the filter: {filter_spec.active()}")
        self.filter_spec = filter_spec
