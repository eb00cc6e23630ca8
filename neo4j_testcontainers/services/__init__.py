"""Service layer for abstracting Docker operations."""

from .docker_service import DockerService
from .exceptions import (
    DockerServiceError,
    ImageNotFoundError,
    ContainerNotFoundError,
    ContainerStartupTimeout,
)

__all__ = [
    "DockerService",
    "DockerServiceError",
    "ImageNotFoundError",
    "ContainerNotFoundError",
    "ContainerStartupTimeout",
]
