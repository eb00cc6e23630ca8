import pytest
from unittest.mock import MagicMock

from neo4j_testcontainers.core.constants import (
    LICENSE_ACCEPTANCE_FILE,
    PASSWORD_ENV,
    USER_ENV,
    VERSION_TAG_ENV,
)
from neo4j_testcontainers.core.image import IpFamily


class FakeContainerState:
    """Container state with fixed host ports per (container port, IP family)."""

    def __init__(self, ports):
        self.ports = ports
        self.calls = []

    def host_port(self, container_port, ip_family):
        self.calls.append((container_port, ip_family))
        return self.ports[(container_port, ip_family)]


@pytest.fixture(autouse=True)
def clean_neo4j_env(monkeypatch):
    """Keep CI overrides in the process environment out of every test."""
    for name in (VERSION_TAG_ENV, USER_ENV, PASSWORD_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def accept_license(workdir):
    """Write license acceptance lines into the working directory."""
    def _accept(*lines):
        (workdir / LICENSE_ACCEPTANCE_FILE).write_text("\n".join(lines) + "\n")
        return workdir / LICENSE_ACCEPTANCE_FILE
    return _accept


@pytest.fixture
def container_state():
    """Provides a fake engine state with distinct ports per family."""
    return FakeContainerState({
        (7687, IpFamily.IPV4): 32768,
        (7687, IpFamily.IPV6): 32769,
        (7474, IpFamily.IPV4): 32770,
        (7474, IpFamily.IPV6): 32771,
    })


@pytest.fixture
def mock_docker_client():
    """Provides a mocked Docker client."""
    mock_client = MagicMock()
    mock_client.ping.return_value = True
    return mock_client
