"""Rule data model — immutable skill rules and rule sets.

Trigger patterns are stored as raw strings; compilation happens in the
matcher as a separate upfront step.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Literal, Optional, Tuple

from skill_activation.config.schema import Enforcement, Priority, SkillType

SourceOrigin = Literal["explicit", "project", "cwd", "home"]


@dataclass(frozen=True)
class PromptTriggers:
    """Keyword and intent-pattern triggers for one skill.

    ``None`` means the list was absent from the rule file. An absent list and
    an empty one behave the same: neither can match.
    """

    keywords: Optional[Tuple[str, ...]] = None
    intent_patterns: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class SkillRule:
    """Configuration of a single skill, as read from one rule source."""

    type: SkillType
    enforcement: Enforcement
    priority: Priority
    triggers: Optional[PromptTriggers] = None


@dataclass(frozen=True)
class RuleSet:
    """A version string plus an insertion-ordered mapping of skill name to rule."""

    version: str = ""
    skills: Dict[str, SkillRule] = field(default_factory=dict)


@dataclass(frozen=True)
class RuleSource:
    """A discovered rule file. Lower ``rank`` means higher priority."""

    path: Path
    rank: int
    origin: SourceOrigin
