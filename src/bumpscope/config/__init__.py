"""Configuration management for bumpscope."""

from __future__ import annotations

from bumpscope.config.loader import load_config
from bumpscope.config.models import BumpScopeConfig

__all__ = [
    "BumpScopeConfig",
    "load_config",
]
