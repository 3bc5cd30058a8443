"""Matcher — upfront pattern compilation and trigger evaluation."""

from skill_activation.matcher.engine import RegexError, compile_patterns, match_skills
from skill_activation.matcher.models import MatchedSkill

__all__ = ["MatchedSkill", "RegexError", "compile_patterns", "match_skills"]
