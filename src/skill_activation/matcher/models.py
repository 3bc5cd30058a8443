"""Match result model."""

from __future__ import annotations

from dataclasses import dataclass

from skill_activation.config.schema import MatchType
from skill_activation.rules.models import SkillRule


@dataclass(frozen=True)
class MatchedSkill:
    """A skill whose triggers fired for the current prompt."""

    name: str
    match_type: MatchType
    rule: SkillRule

    @property
    def priority(self) -> str:
        return self.rule.priority
