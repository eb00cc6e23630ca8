"""Docker service for abstracting Docker operations."""

import logging
from typing import Any, Optional

import docker
import docker.errors
from docker.models.containers import Container

from .exceptions import (
    ContainerNotFoundError,
    DockerServiceError,
    ImageNotFoundError,
)

logger = logging.getLogger(__name__)


class DockerService:
    """Service for Docker operations with clean abstractions."""

    def __init__(self):
        """Initialize Docker service and test connection."""
        try:
            self.client = docker.from_env()
            self.client.ping()
        except docker.errors.DockerException as e:
            if "connection refused" in str(e).lower() or "cannot connect" in str(e).lower():
                raise DockerServiceError(
                    "Docker daemon is not running. Please start Docker Desktop or the Docker service."
                ) from e
            else:
                raise DockerServiceError(f"Failed to connect to Docker: {e}") from e

    def image_exists(self, image_name: str) -> bool:
        """Check if an image exists locally.

        Args:
            image_name: Name of the image, including tag

        Returns:
            True if image exists, False otherwise
        """
        try:
            self.client.images.get(image_name)
            return True
        except docker.errors.ImageNotFound:
            return False
        except docker.errors.APIError as e:
            logger.warning(f"Error checking image existence: {e}")
            return False

    def pull_image(self, repository: str, tag: str) -> None:
        """Pull an image from the registry.

        Args:
            repository: Image repository, e.g. ``neo4j``
            tag: Image tag, e.g. ``5-enterprise``

        Raises:
            ImageNotFoundError: If the image does not exist in the registry
            DockerServiceError: If the pull fails
        """
        logger.info(f"Pulling image {repository}:{tag}")
        try:
            self.client.images.pull(repository, tag=tag)
        except docker.errors.NotFound as e:
            raise ImageNotFoundError(f"Image '{repository}:{tag}' not found") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to pull image: {e}") from e

    def ensure_image(self, repository: str, tag: str) -> None:
        """Pull the image unless it is already present locally."""
        if not self.image_exists(f"{repository}:{tag}"):
            self.pull_image(repository, tag)

    def run_container(
        self,
        image: str,
        name: Optional[str] = None,
        environment: Optional[dict[str, str]] = None,
        ports: Optional[dict[str, Any]] = None,
        labels: Optional[dict[str, str]] = None,
        **kwargs,
    ) -> Container:
        """Run a detached container.

        Args:
            image: Image name with tag
            name: Container name
            environment: Environment variables
            ports: Port publishing, e.g. ``{"7687/tcp": None}`` for a random host port
            labels: Container labels
            **kwargs: Additional Docker run parameters

        Returns:
            Running container object

        Raises:
            ImageNotFoundError: If image not found
            DockerServiceError: If run fails
        """
        try:
            return self.client.containers.run(
                image=image,
                name=name,
                environment=environment,
                ports=ports,
                labels=labels,
                detach=True,
                **kwargs,
            )
        except docker.errors.ImageNotFound as e:
            raise ImageNotFoundError(f"Image '{image}' not found") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to run container: {e}") from e

    def reload_container(self, container: Container) -> Container:
        """Refresh container attributes such as status and port mappings.

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If the refresh fails
        """
        try:
            container.reload()
            return container
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError("Container not found") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to inspect container: {e}") from e

    def get_logs(self, container: Container, stderr: bool = True) -> str:
        """Return the output of a container.

        Args:
            container: Container object
            stderr: Include standard error alongside standard output

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If logs cannot be read
        """
        try:
            return container.logs(stdout=True, stderr=stderr).decode("utf-8", errors="replace")
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError("Container not found") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to read container logs: {e}") from e

    def stop_container(self, container: Container, timeout: int = 10) -> None:
        """Stop a running container.

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If stop fails
        """
        try:
            container.stop(timeout=timeout)
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError("Container not found") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to stop container: {e}") from e

    def remove_container(self, container: Container, force: bool = False) -> None:
        """Remove a container.

        Args:
            container: Container object
            force: Force remove even if running

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If removal fails
        """
        try:
            container.remove(force=force)
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError("Container not found") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to remove container: {e}") from e
