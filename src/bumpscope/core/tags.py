"""Tag validation, ordering and baseline selection.

Tag names are compared as semantic versions after the configured prefix
has been stripped with ``prefix_regex``. Tags that do not parse are
reported and ignored.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from semver import Version

from bumpscope.core.models import Tag, TagCommit
from bumpscope.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bumpscope.core.models import RepositoryHost

logger = get_logger(__name__)


def strip_prefix(name: str, prefix_regex: re.Pattern[str]) -> str:
    """Remove the first match of ``prefix_regex`` from a tag name."""
    return prefix_regex.sub("", name, count=1)


def parse_tag_version(name: str, prefix_regex: re.Pattern[str]) -> Version | None:
    """Parse the semantic version of a tag name.

    A single leading ``v`` left over after prefix stripping is accepted,
    as the semver grammar allows it.

    Returns:
        The parsed version, or None if the name is not valid semver
    """
    candidate = strip_prefix(name, prefix_regex).strip()
    if candidate.startswith("v"):
        candidate = candidate[1:]
    if not Version.is_valid(candidate):
        return None
    return Version.parse(candidate)


def _version_key(tag: Tag, prefix_regex: re.Pattern[str]) -> Version:
    version = parse_tag_version(tag.name, prefix_regex)
    if version is None:
        raise ValueError(f"{tag.name!r} is not a semver tag")
    return version


def sort_tags(tags: Sequence[Tag], prefix_regex: re.Pattern[str]) -> list[Tag]:
    """Sort valid tags by descending semver precedence.

    Only valid tags are accepted; filter with ``get_valid_tags`` first.
    Build metadata is ignored; tags of equal precedence keep their order.

    Raises:
        ValueError: If a tag name is not a semver version
    """
    return sorted(
        tags,
        key=lambda tag: _version_key(tag, prefix_regex),
        reverse=True,
    )


def get_valid_tags(
    host: RepositoryHost,
    prefix_regex: re.Pattern[str],
    should_fetch_all_tags: bool,
) -> list[Tag]:
    """Fetch tags from the host and keep the semver ones, newest first.

    Args:
        host: Tag source
        prefix_regex: Pattern removed from each name before parsing
        should_fetch_all_tags: Walk the full tag history instead of the
            most recent tags only

    Returns:
        Valid tags in descending semver order
    """
    tags = host.list_tags(should_fetch_all_tags)

    valid: list[Tag] = []
    for tag in tags:
        if parse_tag_version(tag.name, prefix_regex) is None:
            logger.debug("found invalid tag", tag=tag.name)
        else:
            valid.append(tag)

    valid_tags = sort_tags(valid, prefix_regex)
    for tag in valid_tags:
        logger.debug("found valid tag", tag=tag.name)

    return valid_tags


def _is_prerelease(tag: Tag, prefix_regex: re.Pattern[str]) -> bool:
    version = parse_tag_version(tag.name, prefix_regex)
    return version is not None and bool(version.prerelease)


def get_latest_tag(
    tags: Sequence[Tag],
    prefix_regex: re.Pattern[str],
    tag_prefix: str,
) -> Tag:
    """Return the newest stable tag.

    Falls back to a synthetic ``{tag_prefix}0.0.0`` tag pointing at
    ``HEAD`` when no stable tag exists, so callers always get a baseline.

    Args:
        tags: Tags in descending semver order (see :func:`get_valid_tags`)
        prefix_regex: Pattern removed from each name before parsing
        tag_prefix: Prefix used for the synthetic fallback tag
    """
    for tag in tags:
        if not _is_prerelease(tag, prefix_regex):
            return tag
    return Tag(name=f"{tag_prefix}0.0.0", commit=TagCommit(sha="HEAD"))


def get_latest_prerelease_tag(
    tags: Sequence[Tag],
    identifier: str,
    prefix_regex: re.Pattern[str],
) -> Tag | None:
    """Return the newest prerelease tag matching ``identifier``.

    ``identifier`` is searched as a regular expression in the stripped tag
    name, so ``beta`` also matches ``1.0.0-beta-extra.1``.

    Returns:
        The matching tag, or None. There is no synthetic fallback.
    """
    for tag in tags:
        if not _is_prerelease(tag, prefix_regex):
            continue
        if re.search(identifier, strip_prefix(tag.name, prefix_regex)):
            return tag
    return None
