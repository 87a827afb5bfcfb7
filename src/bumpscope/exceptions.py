"""Exception hierarchy for bumpscope."""

from __future__ import annotations


class BumpScopeError(Exception):
    """Base class for all bumpscope errors."""


class ConfigError(BumpScopeError):
    """Configuration could not be loaded."""


class ConfigNotFoundError(ConfigError):
    """No pyproject.toml could be located."""


class ConfigValidationError(ConfigError):
    """Configuration values are invalid."""


class GitError(BumpScopeError):
    """A git command failed.

    Attributes:
        stderr: Captured standard error of the failed command, if any
    """

    def __init__(self, message: str, stderr: str | None = None) -> None:
        super().__init__(message)
        self.stderr = stderr

    def __str__(self) -> str:
        base = super().__str__()
        if self.stderr:
            return f"{base}: {self.stderr.strip()}"
        return base
