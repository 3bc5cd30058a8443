"""Plain-text activation report.

The banner, labels and icons are consumed verbatim by the hook host, so the
text below must not change.
"""

from __future__ import annotations

from typing import Dict, List

from skill_activation.config.schema import PRIORITY_ORDER
from skill_activation.matcher.models import MatchedSkill

_RULE = "━" * 39

_TITLE = "\U0001f3af SKILL ACTIVATION CHECK"

_SECTION_LABEL = {
    "critical": "\u26a0\ufe0f CRITICAL SKILLS (REQUIRED):",
    "high": "\U0001f4da RECOMMENDED SKILLS:",
    "medium": "\U0001f4a1 SUGGESTED SKILLS:",
    "low": "\U0001f4cc OPTIONAL SKILLS:",
}

_ITEM_PREFIX = "  → "

_ACTION = "ACTION: Use Skill tool BEFORE responding"


def group_by_priority(matches: List[MatchedSkill]) -> Dict[str, List[MatchedSkill]]:
    """Partition *matches* into the four priority buckets, keeping match order."""
    buckets: Dict[str, List[MatchedSkill]] = {p: [] for p in PRIORITY_ORDER}
    for m in matches:
        buckets[m.priority].append(m)
    return buckets


def render(matches: List[MatchedSkill]) -> str:
    """Return the report text, or an empty string when nothing matched."""
    if not matches:
        return ""

    lines: List[str] = [_RULE, _TITLE, _RULE, ""]

    for priority, group in group_by_priority(matches).items():
        if not group:
            continue
        lines.append(_SECTION_LABEL[priority])
        lines.extend(f"{_ITEM_PREFIX}{m.name}" for m in group)
        lines.append("")

    lines.append(_ACTION)
    lines.append(_RULE)
    return "\n".join(lines) + "\n"
