"""Environment variable sources."""

import os
from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class Environ(Protocol):
    """Protocol for reading environment variables."""

    def environ(self) -> list[str]:
        """Return all variables as "KEY=VALUE" strings."""
        ...

    def getenv(self, key: str) -> str:
        """Return the value of ``key``, or "" when unset."""
        ...


class ProcessEnviron:
    """Live view of the process environment."""

    def environ(self) -> list[str]:
        return [f"{key}={value}" for key, value in os.environ.items()]

    def getenv(self, key: str) -> str:
        return os.environ.get(key, "")


class MappingEnviron:
    """
    Fixed environment backed by a mapping.

    Useful for tests and for describing a remote destination whose
    environment differs from the current process.
    """

    def __init__(self, values: Mapping[str, str] | None = None, **kwargs: str):
        self._values = dict(values or {}, **kwargs)

    def environ(self) -> list[str]:
        return [f"{key}={value}" for key, value in self._values.items()]

    def getenv(self, key: str) -> str:
        return self._values.get(key, "")

    def __repr__(self) -> str:
        return f"MappingEnviron({self._values!r})"
