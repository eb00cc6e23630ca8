"""Custom exceptions for service layer."""

from ..exceptions import Neo4jContainerError


class DockerServiceError(Neo4jContainerError):
    """Exception raised for Docker service operations."""

    pass


class ImageNotFoundError(DockerServiceError):
    """Exception raised when a Docker image is not found."""

    pass


class ContainerNotFoundError(DockerServiceError):
    """Exception raised when a Docker container is not found."""

    pass


class ContainerStartupTimeout(DockerServiceError):
    """Exception raised when the container does not log its readiness markers in time."""

    pass
