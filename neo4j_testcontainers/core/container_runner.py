"""Container running functionality."""

import logging
import time
import uuid
from typing import Any, Dict, List, Optional

from docker.models.containers import Container

from ..exceptions import ContainerAlreadyStartedError
from ..services.exceptions import ContainerStartupTimeout, DockerServiceError
from ..services.docker_service import DockerService
from .constants import (
    CONTAINER_LABEL,
    CONTAINER_PREFIX,
    LOG_POLL_INTERVAL,
    STARTUP_TIMEOUT,
    STOP_TIMEOUT,
)
from .image import IpFamily, Neo4jImage

logger = logging.getLogger(__name__)


class DockerContainerState:
    """Port mappings of a started container, as reported by Docker."""

    def __init__(self, ports: Dict[str, Optional[List[Dict[str, str]]]]):
        self._ports = ports

    @classmethod
    def from_container(cls, container: Container) -> "DockerContainerState":
        ports = container.attrs.get("NetworkSettings", {}).get("Ports") or {}
        return cls(ports)

    def host_port(self, container_port: int, ip_family: IpFamily) -> int:
        bindings = self._ports.get(f"{container_port}/tcp") or []
        if not bindings:
            raise DockerServiceError(f"Port {container_port}/tcp is not published")

        for binding in bindings:
            is_ipv6 = ":" in binding.get("HostIp", "")
            if is_ipv6 == (ip_family is IpFamily.IPV6):
                return int(binding["HostPort"])

        # Docker publishes a single binding when the daemon has IPv6 disabled
        logger.debug(f"No {ip_family.value} binding for {container_port}/tcp, using {bindings[0]}")
        return int(bindings[0]["HostPort"])


class Neo4jContainer:
    """Runs a Neo4jImage in Docker for the duration of a ``with`` block.

    Example:
        with Neo4jContainer(Neo4j.from_env().build()) as container:
            uri = container.image.bolt_uri_ipv4()
    """

    def __init__(
        self,
        image: Neo4jImage,
        docker_service: Optional[DockerService] = None,
        startup_timeout: float = STARTUP_TIMEOUT,
        poll_interval: float = LOG_POLL_INTERVAL,
    ):
        """Initialize container runner."""
        self.image = image
        self.docker_service = docker_service or DockerService()
        self.startup_timeout = startup_timeout
        self.poll_interval = poll_interval
        self.container: Optional[Container] = None

    def _get_container_config(self) -> Dict[str, Any]:
        """Get unified container configuration."""
        return {
            'image': f"{self.image.image_name}:{self.image.tag}",
            'name': f"{CONTAINER_PREFIX}-{uuid.uuid4().hex[:8]}",
            'environment': dict(self.image.env_vars()),
            'ports': {f"{port}/tcp": None for port in self.image.exposed_ports},
            'labels': {CONTAINER_LABEL: "true"},
        }

    def start(self) -> "Neo4jContainer":
        """Start the container and wait until Neo4j is ready.

        Raises:
            ContainerStartupTimeout: If the readiness markers do not appear in time
            DockerServiceError: If Docker fails to run the container
            ContainerAlreadyStartedError: If this runner or its image was already started
        """
        if self.container is not None or self.image.is_started:
            raise ContainerAlreadyStartedError(
                f"{self.image.image_name}:{self.image.tag} was already started; "
                "build a new image for another container"
            )

        self.docker_service.ensure_image(self.image.image_name, self.image.tag)

        config = self._get_container_config()
        self.container = self.docker_service.run_container(**config)
        logger.info(f"Started container {config['name']} from {config['image']}")

        try:
            self._wait_until_ready()
            self.docker_service.reload_container(self.container)
            self.image.on_started(DockerContainerState.from_container(self.container))
        except Exception:
            try:
                self.stop()
            except DockerServiceError as e:
                logger.warning(f"Failed to clean up container after failed start: {e}")
            raise

        return self

    def _wait_until_ready(self) -> None:
        markers = self.image.ready_markers
        deadline = time.monotonic() + self.startup_timeout

        while True:
            logs = self.docker_service.get_logs(self.container, stderr=False)
            if all(marker in logs for marker in markers):
                logger.info(f"Container {self.container.name} is ready")
                return

            self.docker_service.reload_container(self.container)
            if self.container.status == 'exited':
                raise DockerServiceError(
                    f"Container {self.container.name} exited before becoming ready:\n{logs}"
                )

            if time.monotonic() >= deadline:
                missing = [marker for marker in markers if marker not in logs]
                raise ContainerStartupTimeout(
                    f"Container {self.container.name} not ready after "
                    f"{self.startup_timeout}s, missing log lines: {missing}"
                )
            time.sleep(self.poll_interval)

    def stop(self) -> None:
        """Stop and remove the container, if one was started."""
        if self.container is None:
            return

        container, self.container = self.container, None
        try:
            self.docker_service.stop_container(container, timeout=STOP_TIMEOUT)
        except DockerServiceError as e:
            logger.warning(f"Failed to stop container {container.name}: {e}")
        self.docker_service.remove_container(container, force=True)
        logger.info(f"Removed container {container.name}")

    def __enter__(self) -> "Neo4jContainer":
        return self.start()

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.stop()
