"""Filter normalization and record matching."""

from __future__ import annotations

from collections.abc import Mapping

from uarandom.models import FILTER_FIELDS, AgentRecord, FilterSpec


def normalize_filter(raw: object) -> FilterSpec:
    """Build a FilterSpec from an arbitrary mapping.

    Keys outside the recognized field set and empty values are dropped.
    Anything that is not a mapping yields an empty filter.
    """
    if isinstance(raw, FilterSpec):
        return raw
    if not isinstance(raw, Mapping):
        return FilterSpec()
    return FilterSpec.model_validate({k: raw[k] for k in FILTER_FIELDS if k in raw})


def matches(record: AgentRecord, filter_spec: FilterSpec) -> bool:
    """True if the record satisfies every active field of the filter.

    Comparison is case-insensitive. A record that does not define a filtered
    field never matches.
    """
    for field, expected in filter_spec.active().items():
        value = record.get(field)
        if value is None:
            return False
        if not _in_filter(str(value), expected):
            return False
    return True


def _in_filter(value: str, expected: str | tuple[str, ...]) -> bool:
    if isinstance(expected, str):
        expected = (expected,)
    return value.lower() in {e.lower() for e in expected}
