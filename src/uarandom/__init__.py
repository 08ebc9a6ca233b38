"""uarandom: random user-agent strings from a bundled, filterable dataset."""

from importlib.metadata import PackageNotFoundError, version

from uarandom.catalog import (
    AgentCatalog,
    get_agent_names,
    get_agent_types,
    get_device_types,
    get_os_names,
    get_os_types,
    random,
)
from uarandom.errors import (
    DataFormatError,
    FieldNotFoundError,
    NoMatchError,
    UserAgentError,
)
from uarandom.filters import matches, normalize_filter
from uarandom.models import FILTER_FIELDS, AgentField, AgentRecord, FilterSpec

try:
    __version__ = version("uarandom")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "AgentCatalog",
    "AgentField",
    "AgentRecord",
    "DataFormatError",
    "FILTER_FIELDS",
    "FieldNotFoundError",
    "FilterSpec",
    "NoMatchError",
    "UserAgentError",
    "get_agent_names",
    "get_agent_types",
    "get_device_types",
    "get_os_names",
    "get_os_types",
    "matches",
    "normalize_filter",
    "random",
]
