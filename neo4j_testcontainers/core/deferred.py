"""Configuration values resolved lazily at build time."""

import os
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class FromEnvironment:
    """Value read from a process environment variable, with a literal fallback."""

    variable: str
    fallback: str

    def resolve(self) -> Optional[str]:
        value = os.environ.get(self.variable)
        if value is None:
            return self.fallback
        return value


@dataclass(frozen=True)
class DefaultLiteral:
    """Built-in default that was never overridden."""

    literal: str

    def resolve(self) -> Optional[str]:
        return self.literal


@dataclass(frozen=True)
class Explicit:
    """Value set explicitly by the caller."""

    value: str

    def resolve(self) -> Optional[str]:
        return self.value


@dataclass(frozen=True)
class _Unset:
    """Disabled setting; resolves to absent."""

    def resolve(self) -> Optional[str]:
        return None

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()

DeferredValue = Union[FromEnvironment, DefaultLiteral, Explicit, _Unset]
