"""Pydantic models for agent records and filters."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Set
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator


class AgentField(StrEnum):
    AGENT_NAME = "agent_name"  # e.g. "Chrome", "Firefox"
    AGENT_TYPE = "agent_type"  # e.g. "Browser", "Crawler"
    DEVICE_TYPE = "device_type"  # e.g. "Desktop", "Mobile", "Tablet"
    OS_NAME = "os_name"  # e.g. "Windows 10", "Windows Phone OS"
    OS_TYPE = "os_type"  # e.g. "Windows", "Linux"


FILTER_FIELDS: tuple[str, ...] = tuple(f.value for f in AgentField)

FilterValue = str | tuple[str, ...]


class AgentRecord(BaseModel):
    """One entry of the agent dataset.

    Only ``agent_string`` is required. A descriptive field that is absent or
    null is treated as undefined for that record. Unknown dataset fields are
    kept as extras.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    agent_string: str
    agent_name: str | None = None
    agent_type: str | None = None
    device_type: str | None = None
    os_name: str | None = None
    os_type: str | None = None

    def get(self, field: str) -> object | None:
        """Return the value of a declared or extra field, None if undefined."""
        if field in type(self).model_fields:
            return getattr(self, field)
        return (self.model_extra or {}).get(field)


class FilterSpec(BaseModel):
    """Filter on the recognized agent fields.

    Each field holds a single expected value or a tuple of acceptable values.
    Empty values are dropped to None and unknown keys are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    agent_name: FilterValue | None = None
    agent_type: FilterValue | None = None
    device_type: FilterValue | None = None
    os_name: FilterValue | None = None
    os_type: FilterValue | None = None

    @field_validator(*FILTER_FIELDS, mode="before")
    @classmethod
    def coerce_filter_value(cls, value: object) -> FilterValue | None:
        return _coerce_value(value)

    def active(self) -> dict[str, FilterValue]:
        """Fields that carry a value, in AgentField order."""
        result: dict[str, FilterValue] = {}
        for name in FILTER_FIELDS:
            value = getattr(self, name)
            if value is not None:
                result[name] = value
        return result

    def is_empty(self) -> bool:
        return not self.active()


def _coerce_value(value: object) -> FilterValue | None:
    # Emptiness is checked without calling bool() on the value.
    if value is None:
        return None
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        return value or None
    if isinstance(value, (bool, int, float)):
        return str(value) if value != 0 else None
    if isinstance(value, Mapping):
        value = value.values()
    if isinstance(value, Iterable):
        members = [str(v) for v in value]
        if isinstance(value, Set):
            members.sort()
        return tuple(members) or None
    return str(value)
