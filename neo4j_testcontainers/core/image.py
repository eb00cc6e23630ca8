"""Runtime handle for a configured Neo4j image."""

import logging
import threading
from enum import Enum
from typing import Dict, Iterator, Optional, Protocol, Tuple

from ..exceptions import ContainerAlreadyStartedError, ContainerNotStartedError
from ..models.runtime import DerivedRuntimeConfig
from .constants import BOLT_PORT, HTTP_PORT, IMAGE_NAME, LOOPBACK_IPV4, LOOPBACK_IPV6

logger = logging.getLogger(__name__)


class IpFamily(str, Enum):
    """IP family of a host-side port mapping."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"

    @property
    def loopback(self) -> str:
        return LOOPBACK_IPV4 if self is IpFamily.IPV4 else LOOPBACK_IPV6


class ContainerState(Protocol):
    """Engine-reported state of a started container."""

    def host_port(self, container_port: int, ip_family: IpFamily) -> int:
        """Host port mapped to ``container_port`` for the given IP family."""
        ...


class Neo4jImage:
    """Immutable Neo4j image configuration plus the state of its container.

    The container engine reads ``image_name``, ``tag``, ``env_vars()``,
    ``exposed_ports`` and ``ready_markers`` to start the container, then
    calls ``on_started()`` once. Endpoint accessors are only valid after that.
    """

    def __init__(self, config: DerivedRuntimeConfig, image_name: str = IMAGE_NAME):
        self._config = config.model_copy(deep=True)
        self._image_name = image_name
        self._state: Optional[ContainerState] = None
        self._state_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Neo4jImage({self._image_name}:{self.tag}, started={self.is_started})"

    @property
    def config(self) -> DerivedRuntimeConfig:
        """Copy of the derived configuration; changes to it do not reach the container."""
        return self._config.model_copy(deep=True)

    @property
    def image_name(self) -> str:
        return self._image_name

    @property
    def tag(self) -> str:
        return self._config.version

    @property
    def ready_markers(self) -> Tuple[str, str]:
        return self._config.ready_markers

    @property
    def exposed_ports(self) -> Tuple[int, int]:
        return (BOLT_PORT, HTTP_PORT)

    def env_vars(self) -> Iterator[Tuple[str, str]]:
        return iter(sorted(self._config.environment.items()))

    @property
    def environment(self) -> Dict[str, str]:
        return dict(self._config.environment)

    def version(self) -> str:
        return self._config.version

    def user(self) -> Optional[str]:
        """Configured user, or None when authentication is disabled."""
        return self._config.auth.user if self._config.auth else None

    def password(self) -> Optional[str]:
        """Configured password, or None when authentication is disabled."""
        return self._config.auth.password if self._config.auth else None

    @property
    def is_started(self) -> bool:
        return self._state is not None

    def on_started(self, state: ContainerState) -> None:
        """Record the engine state of the started container.

        Raises:
            ContainerAlreadyStartedError: If state was already recorded
        """
        with self._state_lock:
            if self._state is not None:
                raise ContainerAlreadyStartedError(
                    f"Container state for {self._image_name}:{self.tag} was already set"
                )
            self._state = state
        logger.debug(f"Recorded container state for {self._image_name}:{self.tag}")

    def _require_state(self) -> ContainerState:
        state = self._state
        if state is None:
            raise ContainerNotStartedError(
                f"Container for {self._image_name}:{self.tag} has not been started; "
                "endpoints are only available after start"
            )
        return state

    def bolt_port(self, ip_family: IpFamily = IpFamily.IPV4) -> int:
        return self._require_state().host_port(BOLT_PORT, ip_family)

    def http_port(self, ip_family: IpFamily = IpFamily.IPV4) -> int:
        return self._require_state().host_port(HTTP_PORT, ip_family)

    def bolt_endpoint(self, ip_family: IpFamily = IpFamily.IPV4) -> str:
        """Bolt URI on the loopback address of ``ip_family``.

        Raises:
            ContainerNotStartedError: If the container has not been started
        """
        return f"bolt://{ip_family.loopback}:{self.bolt_port(ip_family)}"

    def http_endpoint(self, ip_family: IpFamily = IpFamily.IPV4) -> str:
        """HTTP URI on the loopback address of ``ip_family``.

        Raises:
            ContainerNotStartedError: If the container has not been started
        """
        return f"http://{ip_family.loopback}:{self.http_port(ip_family)}"

    def bolt_uri_ipv4(self) -> str:
        return self.bolt_endpoint(IpFamily.IPV4)

    def bolt_uri_ipv6(self) -> str:
        return self.bolt_endpoint(IpFamily.IPV6)

    def http_uri_ipv4(self) -> str:
        return self.http_endpoint(IpFamily.IPV4)

    def http_uri_ipv6(self) -> str:
        return self.http_endpoint(IpFamily.IPV6)
