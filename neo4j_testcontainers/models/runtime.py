"""Runtime configuration models."""

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import READY_MARKERS


class Auth(BaseModel):
    """Credentials the container was configured with."""

    model_config = ConfigDict(frozen=True)

    user: str
    password: str


class DerivedRuntimeConfig(BaseModel):
    """Immutable result of finalizing a Neo4j configuration."""

    model_config = ConfigDict(frozen=True)

    version: str
    auth: Optional[Auth] = None
    environment: Dict[str, str] = Field(default_factory=dict)
    ready_markers: Tuple[str, str] = READY_MARKERS
    enterprise: bool = False
