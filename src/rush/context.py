"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

Dependencies are typed using Protocols (abstract interfaces) rather than
concrete implementations, so a test double can replace the filesystem
backend without inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rush.config import RushConfig, load_config
from rush.environment import Environment
from rush.protocols import FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from rush.filesystem import RealFileSystem

    return RealFileSystem()


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for the services used by CLI commands.
    """

    config: RushConfig = field(default_factory=RushConfig)
    filesystem: FileSystem = field(default_factory=_default_filesystem)


def create_context(
    config_paths: list[Path] | None = None,
    environment: Environment | None = None,
) -> AppContext:
    """Factory for application dependencies.

    Use this in production code. For tests, construct AppContext directly
    with test doubles.

    Args:
        config_paths: Override config file locations (for testing).
        environment: Override environment variables (for testing).

    Returns:
        Configured AppContext.

    Raises:
        ConfigError: If the configuration is invalid.
    """
    from rush.filesystem import RealFileSystem

    return AppContext(
        config=load_config(config_paths, environment),
        filesystem=RealFileSystem(),
    )
