"""Fluent builder for Neo4j test container configuration."""

import logging
import warnings
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, Union

from .constants import (
    DEFAULT_PASSWORD,
    DEFAULT_USER,
    DEFAULT_VERSION_TAG,
    IMAGE_NAME,
    PASSWORD_ENV,
    USER_ENV,
    VERSION_TAG_ENV,
)
from .deferred import UNSET, DefaultLiteral, DeferredValue, Explicit, FromEnvironment
from .derive import derive_runtime_config
from .image import Neo4jImage
from .license import check_license_accepted
from .plugins import CustomPlugin, PluginRef, as_plugin
from .version import validate_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Neo4j:
    """Neo4j container configuration.

    Every ``with_*`` method returns a new ``Neo4j`` and leaves the receiver
    untouched, so one configuration can serve as the base for several
    others. Values are resolved when ``build()`` is called.

    Example:
        image = Neo4j().with_password("Picard123").with_plugins([Neo4jLabsPlugin.APOC]).build()
    """

    version: DeferredValue = DefaultLiteral(DEFAULT_VERSION_TAG)
    user: DeferredValue = DefaultLiteral(DEFAULT_USER)
    password: DeferredValue = DefaultLiteral(DEFAULT_PASSWORD)
    enterprise: bool = False
    plugins: FrozenSet[PluginRef] = field(default_factory=frozenset)
    image_name: str = IMAGE_NAME

    @classmethod
    def from_env(cls) -> "Neo4j":
        """Create a configuration whose version, user and password can be
        overridden through NEO4J_VERSION_TAG, NEO4J_TEST_USER and NEO4J_TEST_PASS."""
        return cls(
            version=FromEnvironment(VERSION_TAG_ENV, DEFAULT_VERSION_TAG),
            user=FromEnvironment(USER_ENV, DEFAULT_USER),
            password=FromEnvironment(PASSWORD_ENV, DEFAULT_PASSWORD),
        )

    @classmethod
    def from_version(cls, version: str) -> "Neo4j":
        """Deprecated: use ``Neo4j.from_env().with_version(version)``."""
        warnings.warn(
            "Neo4j.from_version() is deprecated, use Neo4j.from_env().with_version() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return cls.from_env().with_version(version)

    @classmethod
    def from_auth_and_version(cls, version: str, user: str, password: str) -> "Neo4j":
        """Deprecated: use ``Neo4j.from_env().with_version().with_user().with_password()``."""
        warnings.warn(
            "Neo4j.from_auth_and_version() is deprecated, use "
            "Neo4j.from_env().with_version().with_user().with_password() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return cls.from_env().with_version(version).with_user(user).with_password(password)

    @staticmethod
    def uri_ipv4(container) -> str:
        """Deprecated: use ``container.image.bolt_uri_ipv4()``."""
        warnings.warn(
            "Neo4j.uri_ipv4() is deprecated, use container.image.bolt_uri_ipv4() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return container.image.bolt_uri_ipv4()

    @staticmethod
    def uri_ipv6(container) -> str:
        """Deprecated: use ``container.image.bolt_uri_ipv6()``."""
        warnings.warn(
            "Neo4j.uri_ipv6() is deprecated, use container.image.bolt_uri_ipv6() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return container.image.bolt_uri_ipv6()

    def with_version(self, version: str) -> "Neo4j":
        """Use the given image version.

        Raises:
            InvalidVersion: If the version is not MAJOR[.MINOR[.PATCH]]
        """
        return replace(self, version=Explicit(validate_version(version)))

    def with_user(self, user: str) -> "Neo4j":
        return replace(self, user=Explicit(user))

    def with_password(self, password: str) -> "Neo4j":
        return replace(self, password=Explicit(password))

    def without_authentication(self) -> "Neo4j":
        """Disable authentication until a user or password is set again."""
        return replace(self, user=UNSET, password=UNSET)

    def with_enterprise_edition(self) -> "Neo4j":
        """Use the Enterprise Edition image.

        Requires ``container-license-acceptance.txt`` in the working directory
        with a line ``neo4j:<version>-enterprise``.

        Raises:
            LicenseNotAccepted: If the acceptance file is missing or lacks the line
        """
        check_license_accepted(self.version.resolve(), self.image_name)
        return replace(self, enterprise=True)

    def with_plugins(
        self, plugins: Union[PluginRef, str, Iterable[Union[PluginRef, str]]]
    ) -> "Neo4j":
        """Add Neo4j Labs plugins. Repeated calls accumulate.

        A single plugin or plugin name is accepted as is, not as a sequence
        of characters.
        """
        if isinstance(plugins, (str, CustomPlugin)):
            plugins = [plugins]
        return replace(self, plugins=self.plugins | {as_plugin(p) for p in plugins})

    def with_neo4j_labs_plugin(self, *plugins: Union[PluginRef, str]) -> "Neo4j":
        return self.with_plugins(plugins)

    def build(self) -> Neo4jImage:
        """Finalize the configuration into a Neo4jImage.

        Raises:
            InvalidVersion: If an environment-sourced version is malformed
            LicenseNotAccepted: If the final version is not covered by the
                license acceptance file
        """
        config = derive_runtime_config(
            version=self.version,
            user=self.user,
            password=self.password,
            enterprise=self.enterprise,
            plugins=self.plugins,
            image_name=self.image_name,
        )
        logger.info(f"Built Neo4j image configuration {self.image_name}:{config.version}")
        return Neo4jImage(config, image_name=self.image_name)
