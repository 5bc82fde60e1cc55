"""Environment variable store with process environment import/export."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

logger = logging.getLogger(__name__)

_MISSING = object()


class EnvironmentVariableError(Exception):
    """Error while handling environment variables."""

    pass


class EnvironmentVariableNotSet(EnvironmentVariableError):
    """The requested variable is not set."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Environment variable '{name}' is not set")


class InvalidEnvironmentVariable(EnvironmentVariableError):
    """The variable name cannot be used in a process environment."""

    pass


def _validate_name(name: str) -> None:
    if not name or "=" in name or "\0" in name:
        raise InvalidEnvironmentVariable(f"Invalid environment variable name: {name!r}")


class Environment:
    """In-memory key-value store of environment variables.

    Variables can be imported from and exported to the process environment,
    but the store itself is independent of it.
    """

    def __init__(self, variables: dict[str, str] | None = None) -> None:
        """Initialize the store.

        Args:
            variables: Optional initial variables.
        """
        self._variables: dict[str, str] = {}
        for name, value in (variables or {}).items():
            self.add(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __len__(self) -> int:
        return len(self._variables)

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)

    def __repr__(self) -> str:
        return f"Environment({len(self._variables)} variables)"

    def add(self, name: str, value: str) -> None:
        """Set a variable, replacing any previous value.

        Raises:
            InvalidEnvironmentVariable: If the name is not usable.
        """
        _validate_name(name)
        self._variables[name] = value

    def get(self, name: str, default: object = _MISSING) -> str:
        """Get a variable's value.

        Args:
            name: Variable name.
            default: Value returned when the variable is not set.

        Returns:
            The stored value, or default.

        Raises:
            EnvironmentVariableNotSet: If unset and no default was given.
        """
        if name in self._variables:
            return self._variables[name]
        if default is _MISSING:
            raise EnvironmentVariableNotSet(name)
        return default  # type: ignore[return-value]

    def as_dict(self) -> dict[str, str]:
        """Get a copy of all variables."""
        return dict(self._variables)

    def add_from_process_environment(self, name: str) -> None:
        """Copy a variable from the process environment.

        Raises:
            EnvironmentVariableNotSet: If the process does not define it.
        """
        value = os.environ.get(name)
        if value is None:
            logger.warning("Environment variable '%s' could not be added because it was not set", name)
            raise EnvironmentVariableNotSet(name)
        self.add(name, value)

    def add_with_default(self, name: str, default: str) -> None:
        """Copy a variable from the process environment, or use a default."""
        try:
            self.add_from_process_environment(name)
        except EnvironmentVariableNotSet:
            self.add(name, default)

    def parse_whole_process_environment(self) -> None:
        """Copy every variable of the process environment."""
        for name, value in os.environ.items():
            self.add(name, value)

    @staticmethod
    def export_to_process_environment(name: str, value: str) -> None:
        """Set a variable in the process environment.

        Raises:
            InvalidEnvironmentVariable: If the name is not usable.
        """
        _validate_name(name)
        os.environ[name] = value

    def export_all(self) -> None:
        """Set every stored variable in the process environment."""
        for name, value in self._variables.items():
            self.export_to_process_environment(name, value)
