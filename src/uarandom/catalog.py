"""AgentCatalog: load the bundled agent dataset and select user agents from it."""

from __future__ import annotations

import json
import logging
import secrets
import threading
from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from typing import cast

from pydantic import ValidationError

from uarandom.errors import DataFormatError, FieldNotFoundError, NoMatchError
from uarandom.filters import matches, normalize_filter
from uarandom.models import AgentField, AgentRecord, FilterSpec

logger = logging.getLogger(__name__)

DATASET_FILENAME = "agent_list.json"


class AgentCatalog:
    """Read-only view over an agent dataset, parsed on first use."""

    _default: AgentCatalog | None = None
    _default_lock = threading.Lock()

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._records: tuple[AgentRecord, ...] | None = None
        self._lock = threading.Lock()

    @classmethod
    def default(cls) -> AgentCatalog:
        """Process-wide catalog over the bundled dataset."""
        if cls._default is None:
            with cls._default_lock:
                if cls._default is None:
                    cls._default = cls()
        return cls._default

    @classmethod
    def from_json(cls, path: Path) -> AgentCatalog:
        """Catalog over an explicit dataset file."""
        return cls(path)

    @property
    def source(self) -> str:
        if self._path is not None:
            return str(self._path)
        return f"uarandom/{DATASET_FILENAME}"

    def load(self) -> tuple[AgentRecord, ...]:
        """Parse the dataset once; later calls return the cached records."""
        if self._records is None:
            with self._lock:
                if self._records is None:
                    records = self._parse(self._read())
                    logger.debug(f"Loaded {len(records)} user agents from {self.source}")
                    self._records = records
        return self._records

    def records(self) -> tuple[AgentRecord, ...]:
        return self.load()

    def __len__(self) -> int:
        return len(self.load())

    def select_agent_strings(
        self, filter_spec: FilterSpec | Mapping[str, object] | None = None
    ) -> list[str]:
        """Agent strings of all records matching the filter, in dataset order."""
        spec = normalize_filter(filter_spec)
        return [r.agent_string for r in self.load() if matches(r, spec)]

    def random(self, filter_by: FilterSpec | Mapping[str, object] | None = None) -> str:
        """Pick one matching agent string uniformly at random.

        Raises NoMatchError if the filter matches nothing.
        """
        spec = normalize_filter(filter_by)
        agents = self.select_agent_strings(spec)
        if not agents:
            raise NoMatchError(spec)
        return agents[secrets.randbelow(len(agents))]

    def distinct_field_values(self, field_name: str) -> list[object]:
        """Unique values of a field across all records, in first-seen order.

        Raises FieldNotFoundError if any record does not define the field.
        """
        records = self.load()
        for record in records:
            if record.get(field_name) is None:
                raise FieldNotFoundError(field_name)
        values: list[object] = []
        for record in records:
            value = record.get(field_name)
            if value not in values:
                values.append(value)
        return values

    def get_device_types(self) -> list[str]:
        """Hardware categories, such as "Desktop", "Tablet" or "Mobile"."""
        return self._string_values(AgentField.DEVICE_TYPE)

    def get_agent_types(self) -> list[str]:
        """Software categories, such as "Browser" or "Crawler"."""
        return self._string_values(AgentField.AGENT_TYPE)

    def get_agent_names(self) -> list[str]:
        """General agent identifiers, such as "Chrome" or "Firefox"."""
        return self._string_values(AgentField.AGENT_NAME)

    def get_os_types(self) -> list[str]:
        """Operating system families, such as "Windows" or "Linux"."""
        return self._string_values(AgentField.OS_TYPE)

    def get_os_names(self) -> list[str]:
        """Specific operating systems, such as "Windows Phone OS"."""
        return self._string_values(AgentField.OS_NAME)

    def _string_values(self, field: AgentField) -> list[str]:
        # Declared fields are validated as str on load.
        return cast(list[str], self.distinct_field_values(field))

    def _read(self) -> str:
        try:
            if self._path is not None:
                return self._path.read_text(encoding="utf-8")
            pkg = resources.files("uarandom")
            return pkg.joinpath(DATASET_FILENAME).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DataFormatError(f"Cannot read agent dataset {self.source}: {e}") from e

    def _parse(self, text: str) -> tuple[AgentRecord, ...]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DataFormatError(f"Agent dataset {self.source} is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise DataFormatError(f"Agent dataset {self.source} must be a JSON array")
        try:
            return tuple(AgentRecord.model_validate(entry) for entry in data)
        except ValidationError as e:
            raise DataFormatError(f"Invalid agent record in {self.source}: {e}") from e


def random(filter_by: FilterSpec | Mapping[str, object] | None = None) -> str:
    """Random user agent from the bundled dataset, optionally filtered."""
    return AgentCatalog.default().random(filter_by)


def get_device_types() -> list[str]:
    return AgentCatalog.default().get_device_types()


def get_agent_types() -> list[str]:
    return AgentCatalog.default().get_agent_types()


def get_agent_names() -> list[str]:
    return AgentCatalog.default().get_agent_names()


def get_os_types() -> list[str]:
    return AgentCatalog.default().get_os_types()


def get_os_names() -> list[str]:
    return AgentCatalog.default().get_os_names()
