"""
Pytest configuration and shared fixtures for the dockmem test suite.

This module provides common fixtures, fake collaborators and stats payload
builders for all test modules.
"""

import io
import json
import shutil
import sys
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dockmem.models.records import ContainerInfo  # noqa: E402
from dockmem.runtime.base import ContainerRuntime, SystemMemorySource  # noqa: E402
from dockmem.validation import DaemonConnectionError, StatsUnavailableError  # noqa: E402

MIB = 1024 * 1024
GIB = 1024 * MIB


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "e2e: mark test as an end-to-end test")


# ============================================================================
# Fake Collaborators
# ============================================================================


class TrackingStream(io.BytesIO):
    """A BytesIO that remembers whether it was closed."""

    was_closed = False

    def close(self):
        self.was_closed = True
        super().close()


class FakeRuntime(ContainerRuntime):
    """
    In-memory container runtime.

    `payloads` maps a container ID to the raw bytes returned by its stats
    stream, or to an exception raised when the stream is opened.
    """

    def __init__(
        self,
        containers: List[ContainerInfo],
        payloads: Dict[str, Any],
        list_error: Optional[Exception] = None,
    ):
        self.containers = containers
        self.payloads = payloads
        self.list_error = list_error
        self.opened_streams: Dict[str, TrackingStream] = {}
        self.closed = False

    def list_containers(self):
        if self.list_error is not None:
            raise self.list_error
        return list(self.containers)

    @contextmanager
    def open_stats(self, container_id):
        payload = self.payloads.get(container_id)
        if payload is None:
            raise StatsUnavailableError("no such container", container_id=container_id)
        if isinstance(payload, Exception):
            raise payload
        stream = TrackingStream(payload)
        self.opened_streams[container_id] = stream
        try:
            yield stream
        finally:
            stream.close()

    def close(self):
        self.closed = True


class FakeSystemMemory(SystemMemorySource):
    def __init__(self, total: Optional[int]):
        self.total = total

    def total_memory(self):
        return self.total


def stats_payload(usage: Optional[int] = None, cache: Optional[int] = None, **extra_stats) -> bytes:
    """Build the raw JSON bytes of a Docker stats document."""
    memory_stats: Dict[str, Any] = {}
    if usage is not None:
        memory_stats["usage"] = usage
    stats = dict(extra_stats)
    if cache is not None:
        stats["cache"] = cache
    if stats:
        memory_stats["stats"] = stats
    document = {
        "read": "2024-05-01T12:00:00.000000000Z",
        "memory_stats": memory_stats,
        "cpu_stats": {"cpu_usage": {"total_usage": 123456}},
    }
    return json.dumps(document).encode("utf-8")


def container_id(n: int) -> str:
    """A 64-character hex container ID whose short ID is recognisable."""
    return f"{n:012x}" + "f" * 52


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def make_payload():
    """Provide the stats payload builder."""
    return stats_payload


@pytest.fixture
def make_container_id():
    """Provide the container ID builder."""
    return container_id


@pytest.fixture
def fake_runtime_factory():
    """Factory for FakeRuntime instances."""
    return FakeRuntime


@pytest.fixture
def fake_system_memory_factory():
    """Factory for FakeSystemMemory instances."""
    return FakeSystemMemory


@pytest.fixture
def three_container_runtime():
    """Three containers using 500MiB, 200MiB and 500MiB (with cache subtracted)."""
    containers = [
        ContainerInfo(id=container_id(1), name="container1"),
        ContainerInfo(id=container_id(2), name="container2"),
        ContainerInfo(id=container_id(3), name="container3"),
    ]
    payloads = {
        container_id(1): stats_payload(usage=600 * MIB, cache=100 * MIB),
        container_id(2): stats_payload(usage=200 * MIB),
        container_id(3): stats_payload(usage=500 * MIB, cache=0),
    }
    return FakeRuntime(containers, payloads)


@pytest.fixture
def unreachable_runtime():
    """A runtime whose container listing fails."""
    return FakeRuntime([], {}, list_error=DaemonConnectionError("Could not list containers"))


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "runtime": {
            "base_url": "unix:///var/run/docker.sock",
            "timeout": 5.0,
        },
        "report": {
            "show_percentage": True,
            "column_padding": 2,
            "title": "Memory",
        },
        "logging": {
            "level": "debug",
        },
    }


@pytest.fixture
def config_file(temp_dir, sample_config_data):
    """Write the sample configuration to a temporary config.toml."""
    import toml

    path = temp_dir / "config.toml"
    with open(path, "w") as f:
        toml.dump(sample_config_data, f)
    return path


@pytest.fixture(autouse=True)
def clear_config_after_test():
    """Automatically reset the configuration singleton after each test."""
    yield

    from dockmem.config import reset_config_path

    reset_config_path()
