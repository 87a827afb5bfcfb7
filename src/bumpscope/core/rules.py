"""Custom release rules and their merge with the built-in table.

Custom rules are written as ``type:release[:section]`` and separated by
commas, e.g. ``build:patch,chore:minor:Chores``.

The commit analyzer that consumes these rules evaluates custom rules
before its defaults and stops at the first match. A custom
``build:patch`` rule would therefore also match a breaking ``build``
commit and yield a patch release. Every accepted custom rule is expanded
into a breaking rule releasing ``major`` followed by the literal rule, so
breaking commits still produce a major release.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bumpscope.core.defaults import DEFAULT_CHANGELOG_RULES, DEFAULT_RELEASE_TYPES
from bumpscope.core.models import ReleaseRule
from bumpscope.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

logger = get_logger(__name__)

RELEASE_RULE_SEPARATOR = ","
RELEASE_TYPE_SEPARATOR = ":"


def _is_valid_custom_rule(
    custom_rule: str,
    defaults: Mapping[str, ReleaseRule],
    release_types: Sequence[str],
) -> bool:
    parts = custom_rule.split(RELEASE_TYPE_SEPARATOR)

    if len(parts) < 2:
        logger.warning("invalid custom release definition", rule=custom_rule)
        return False

    if len(parts) == 2:
        default_rule = defaults.get(parts[0].lower())
        logger.debug("custom release rule has no changelog section", rule=custom_rule)
        if default_rule is not None and default_rule.section:
            logger.debug("default section will be used", section=default_rule.section)
        else:
            logger.debug("commits matching this rule will not be in the changelog", rule=custom_rule)

    if parts[1] not in release_types:
        logger.warning("invalid release type", release=parts[1], rule=custom_rule)
        return False

    return True


def map_custom_release_rules(
    custom_release_types: str,
    *,
    defaults: Mapping[str, ReleaseRule] = DEFAULT_CHANGELOG_RULES,
    release_types: Sequence[str] = DEFAULT_RELEASE_TYPES,
) -> list[ReleaseRule]:
    """Parse and expand custom release rules.

    Invalid rules are reported and skipped; they never abort parsing.

    Args:
        custom_release_types: Comma separated ``type:release[:section]`` rules
        defaults: Rule table used to fill in a missing section
        release_types: Accepted release values

    Returns:
        Two rules per accepted custom rule, breaking/major first, in input order
    """
    expanded: list[ReleaseRule] = []

    for custom_rule in custom_release_types.split(RELEASE_RULE_SEPARATOR):
        if not _is_valid_custom_rule(custom_rule, defaults, release_types):
            continue

        commit_type, release, *rest = custom_rule.split(RELEASE_TYPE_SEPARATOR)
        default_rule = defaults.get(commit_type.lower())
        section = (rest[0] if rest else None) or (default_rule.section if default_rule else None)

        expanded.append(
            ReleaseRule(type=commit_type, release="major", section=section, breaking=True)
        )
        expanded.append(
            ReleaseRule(type=commit_type, release=release, section=section, breaking=False)
        )

    return expanded


def merge_with_default_changelog_rules(
    mapped_release_rules: Iterable[ReleaseRule] = (),
    *,
    defaults: Mapping[str, ReleaseRule] = DEFAULT_CHANGELOG_RULES,
) -> list[ReleaseRule]:
    """Overlay custom rules on the defaults and keep changelog rules only.

    Rules are keyed by their exact ``type``; a later rule replaces an
    earlier one, so for an expanded custom rule the literal (non-breaking)
    variant is the one that remains. Rules without a section are dropped.

    Returns:
        Default types first in table order, then new custom types in the
        order they were first seen
    """
    merged: dict[str, ReleaseRule] = dict(defaults)
    for rule in mapped_release_rules:
        merged[rule.type] = rule

    return [rule for rule in merged.values() if rule.section]
