"""Trigger matching engine.

Every intent pattern is compiled before any prompt is evaluated, so a bad
pattern aborts the run before a partial result exists.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from skill_activation.errors import SkillActivationError
from skill_activation.matcher.models import MatchedSkill
from skill_activation.rules.models import RuleSet, SkillRule


class RegexError(SkillActivationError):
    """Raised when an ``intentPatterns`` entry is not a valid regular expression."""


CompiledPatterns = Dict[str, List[re.Pattern[str]]]


def compile_patterns(rule_set: RuleSet) -> CompiledPatterns:
    """Compile every skill's intent patterns (case-insensitive), keyed by skill name."""
    compiled: CompiledPatterns = {}
    for name, rule in rule_set.skills.items():
        if rule.triggers is None or not rule.triggers.intent_patterns:
            continue
        patterns: List[re.Pattern[str]] = []
        for source in rule.triggers.intent_patterns:
            try:
                patterns.append(re.compile(source, re.IGNORECASE))
            except re.error as exc:
                raise RegexError(
                    f"Invalid intent pattern for skill '{name}': {source!r} ({exc})"
                ) from exc
        compiled[name] = patterns
    return compiled


def _keyword_hit(prompt: str, rule: SkillRule) -> bool:
    assert rule.triggers is not None
    keywords = rule.triggers.keywords or ()
    return any(kw.lower() in prompt for kw in keywords)


def match_skills(
    rule_set: RuleSet,
    prompt: str,
    compiled: Optional[CompiledPatterns] = None,
) -> List[MatchedSkill]:
    """Return the skills whose triggers fire for *prompt*, in rule-set order.

    Keywords are checked first and short-circuit intent patterns. Each skill
    appears at most once.
    """
    if compiled is None:
        compiled = compile_patterns(rule_set)

    normalised = prompt.lower()
    matches: List[MatchedSkill] = []

    for name, rule in rule_set.skills.items():
        if rule.triggers is None:
            continue

        if _keyword_hit(normalised, rule):
            matches.append(MatchedSkill(name=name, match_type="keyword", rule=rule))
            continue

        if any(p.search(normalised) for p in compiled.get(name, ())):
            matches.append(MatchedSkill(name=name, match_type="intent", rule=rule))

    return matches
