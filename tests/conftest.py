"""Shared fixtures for uarandom tests."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest


def _make_agent(
    agent_string: str,
    *,
    agent_name: str = "Chrome",
    agent_type: str = "Browser",
    device_type: str = "Desktop",
    os_name: str = "Windows 10",
    os_type: str = "Windows",
) -> dict:
    """Build a dataset entry with every recognized field set."""
    return {
        "agent_string": agent_string,
        "agent_name": agent_name,
        "agent_type": agent_type,
        "device_type": device_type,
        "os_name": os_name,
        "os_type": os_type,
    }


SAMPLE_AGENTS: list[dict] = [
    _make_agent("chrome-win"),
    _make_agent("firefox-linux", agent_name="Firefox", os_name="Ubuntu", os_type="Linux"),
    _make_agent(
        "safari-iphone",
        agent_name="Safari",
        device_type="Mobile",
        os_name="iOS",
        os_type="iOS",
    ),
    _make_agent("chrome-mac", os_name="OS X", os_type="Macintosh"),
    _make_agent(
        "googlebot",
        agent_name="Googlebot",
        agent_type="Crawler",
        device_type="Server",
        os_name="unknown",
        os_type="unknown",
    ),
    _make_agent("chrome-linux", os_name="Linux", os_type="linux"),
]


def _write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def write_dataset(tmp_path: Path) -> Callable[[object], Path]:
    """Factory writing a dataset (any JSON value) to a temp file."""
    counter = iter(range(1000))

    def _write(data: object) -> Path:
        return _write_json(tmp_path / f"agents-{next(counter)}.json", data)

    return _write


@pytest.fixture
def sample_dataset(write_dataset) -> Path:
    """Six agents: four browsers on desktop, one mobile, one crawler."""
    return write_dataset(SAMPLE_AGENTS)
