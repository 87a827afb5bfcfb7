"""bumpscope - baseline tags, scoped commits and release rules for semver bumps."""

from __future__ import annotations

__version__ = "0.1.0"
