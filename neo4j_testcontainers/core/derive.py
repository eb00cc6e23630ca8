"""Derivation of the container environment from a Neo4j configuration."""

import logging
from typing import Dict, FrozenSet, Optional

from ..models.runtime import Auth, DerivedRuntimeConfig
from .constants import (
    AUTH_DISABLED_TOKEN,
    AUTH_ENV_KEY,
    ENTERPRISE_SUFFIX,
    IMAGE_NAME,
    LICENSE_ENV_KEY,
    LICENSE_ENV_VALUE,
    MIN_PASSWORD_LENGTH,
    PASSWORD_LENGTH_ENV_KEY,
    PLUGINS_ENV_KEY,
)
from .deferred import DeferredValue
from .license import check_license_accepted
from .plugins import PluginRef, format_plugins
from .version import validate_version

logger = logging.getLogger(__name__)


def resolve_auth(user: DeferredValue, password: DeferredValue) -> Optional[Auth]:
    """Resolve credentials; None when either side is unset."""
    resolved_user = user.resolve()
    resolved_password = password.resolve()
    if resolved_user is None or resolved_password is None:
        return None
    return Auth(user=resolved_user, password=resolved_password)


def auth_environment(auth: Optional[Auth]) -> Dict[str, str]:
    if auth is None:
        return {AUTH_ENV_KEY: AUTH_DISABLED_TOKEN}
    return {AUTH_ENV_KEY: f"{auth.user}/{auth.password}"}


def plugin_environment(plugins: FrozenSet[PluginRef]) -> Dict[str, str]:
    if not plugins:
        return {}
    return {PLUGINS_ENV_KEY: format_plugins(plugins)}


def password_policy_environment(auth: Optional[Auth]) -> Dict[str, str]:
    """Lower the server's password length floor for short passwords.

    Neo4j refuses to start when the configured password is shorter than
    its minimum, so the override is required, not cosmetic.
    """
    if auth is None or len(auth.password) >= MIN_PASSWORD_LENGTH:
        return {}
    return {PASSWORD_LENGTH_ENV_KEY: str(len(auth.password))}


def edition_environment(enterprise: bool) -> Dict[str, str]:
    if not enterprise:
        return {}
    return {LICENSE_ENV_KEY: LICENSE_ENV_VALUE}


def _merge(*parts: Dict[str, str]) -> Dict[str, str]:
    environment: Dict[str, str] = {}
    for part in parts:
        overlap = environment.keys() & part.keys()
        if overlap:
            raise ValueError(f"Conflicting environment keys: {sorted(overlap)}")
        environment.update(part)
    return environment


def derive_runtime_config(
    version: DeferredValue,
    user: DeferredValue,
    password: DeferredValue,
    enterprise: bool = False,
    plugins: FrozenSet[PluginRef] = frozenset(),
    image_name: str = IMAGE_NAME,
) -> DerivedRuntimeConfig:
    """Finalize configuration values into a DerivedRuntimeConfig.

    Version validation and the license check run before any environment
    entry is computed; they are the only ways this can fail.

    Args:
        version: Deferred version value
        user: Deferred user value
        password: Deferred password value
        enterprise: Whether the Enterprise Edition was requested
        plugins: Neo4j Labs plugins to install
        image_name: Image name, used for the license line

    Returns:
        Immutable derived configuration

    Raises:
        InvalidVersion: If the resolved version is malformed
        LicenseNotAccepted: If enterprise is requested without acceptance
    """
    resolved_version = validate_version(version.resolve())
    if enterprise:
        check_license_accepted(resolved_version, image_name)

    auth = resolve_auth(user, password)
    environment = _merge(
        auth_environment(auth),
        plugin_environment(plugins),
        password_policy_environment(auth),
        edition_environment(enterprise),
    )

    tag = resolved_version + ENTERPRISE_SUFFIX if enterprise else resolved_version
    logger.debug(f"Derived {image_name}:{tag} with environment keys {sorted(environment)}")

    return DerivedRuntimeConfig(
        version=tag,
        auth=auth,
        environment=environment,
        enterprise=enterprise,
    )
