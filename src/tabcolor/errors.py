"""Exceptions raised by tabcolor."""

from pathlib import Path


class TabColorError(Exception):
    """Base class for all tabcolor errors."""


class ProfileNotFound(TabColorError):
    """The requested profile name is not in the configuration."""

    def __init__(self, name: str) -> None:
        super().__init__(f"profile {name!r} not found")
        self.name = name


class InvalidProfile(TabColorError):
    """The configuration entry for a profile cannot be read as a profile."""

    def __init__(self, name: str) -> None:
        super().__init__(f"profile {name!r} is not a valid profile")
        self.name = name


class ConfigError(TabColorError):
    """The configuration file could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"error parsing config file {path}: {reason}")
        self.path = path
        self.reason = reason


class ApplyError(TabColorError):
    """A color-application step failed."""
