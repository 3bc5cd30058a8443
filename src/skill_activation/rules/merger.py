"""Merge rule sets — ordered fold with whole-value override per skill name."""

from __future__ import annotations

from functools import reduce
from typing import Sequence

from skill_activation.config.defaults import DEFAULT_RULES_VERSION
from skill_activation.rules.models import RuleSet


def overlay(lower: RuleSet, higher: RuleSet) -> RuleSet:
    """Return a new RuleSet with *higher* laid over *lower*.

    A name present in both takes the entire SkillRule from *higher*; the
    name keeps its position from *lower*. ``version`` is taken from *higher*
    only when non-empty.
    """
    return RuleSet(
        version=higher.version or lower.version,
        skills={**lower.skills, **higher.skills},
    )


def merge_rule_sets(rule_sets: Sequence[RuleSet]) -> RuleSet:
    """Fold *rule_sets* (highest priority first) into the effective RuleSet."""
    if not rule_sets:
        return RuleSet(version=DEFAULT_RULES_VERSION)
    lowest_first = list(reversed(rule_sets))
    return reduce(overlay, lowest_first[1:], overlay(RuleSet(), lowest_first[0]))
