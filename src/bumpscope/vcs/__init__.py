"""Version control access for bumpscope."""

from __future__ import annotations

from bumpscope.vcs.git import GitRepository

__all__ = ["GitRepository"]
