"""Neo4j Test Containers - Ephemeral Neo4j instances in Docker for tests."""

__version__ = "0.2.0"

from .core import (
    ContainerState,
    CustomPlugin,
    DockerContainerState,
    IpFamily,
    Neo4j,
    Neo4jContainer,
    Neo4jImage,
    Neo4jLabsPlugin,
)
from .exceptions import (
    ContainerAlreadyStartedError,
    ContainerNotStartedError,
    InvalidVersion,
    LicenseNotAccepted,
    Neo4jContainerError,
)

__all__ = [
    'Neo4j',
    'Neo4jImage',
    'Neo4jContainer',
    'DockerContainerState',
    'ContainerState',
    'IpFamily',
    'Neo4jLabsPlugin',
    'CustomPlugin',
    'Neo4jContainerError',
    'InvalidVersion',
    'LicenseNotAccepted',
    'ContainerNotStartedError',
    'ContainerAlreadyStartedError',
]
