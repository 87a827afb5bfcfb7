"""Pydantic models for the ``[tool.bumpscope]`` configuration table."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field


class BumpScopeConfig(BaseModel):
    """Top-level configuration.

    Example ``pyproject.toml``::

        [tool.bumpscope]
        tag_prefix = "v"
        custom_release_rules = "build:patch,chore:minor:Chores"
        scopes = ["api"]
    """

    model_config = ConfigDict(extra="forbid")

    tag_prefix: str = Field(default="v", description="Prefix of release tags")
    fetch_all_tags: bool = Field(
        default=False,
        description="Read every tag instead of the 100 most recent ones",
    )
    custom_release_rules: str = Field(
        default="",
        description="Comma separated type:release[:section] rules",
    )
    scopes: list[str] = Field(
        default_factory=list,
        description="Only consider commits with one of these scopes",
    )
    release_branches: list[str] = Field(
        default_factory=lambda: ["master", "main"],
        description="Branch patterns that produce stable releases",
    )
    pre_release_branches: list[str] = Field(
        default_factory=list,
        description="Branch patterns that produce prereleases",
    )
    append_to_pre_release_tag: str | None = Field(
        default=None,
        description="Prerelease identifier; defaults to the branch name",
    )

    @property
    def prefix_regex(self) -> re.Pattern[str]:
        """Pattern matching the tag prefix at the start of a tag name."""
        return re.compile(f"^{re.escape(self.tag_prefix)}")
