"""One activation pass: resolve → load → merge → match."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from skill_activation.config.schema import ActivationConfig
from skill_activation.matcher.engine import compile_patterns, match_skills
from skill_activation.matcher.models import MatchedSkill
from skill_activation.rules.discovery import FileSystem, discover_rule_files
from skill_activation.rules.loader import load_rule_sets
from skill_activation.rules.merger import merge_rule_sets
from skill_activation.rules.models import RuleSet, RuleSource


@dataclass
class ActivationResult:
    """Everything one invocation produced."""

    sources: List[RuleSource] = field(default_factory=list)
    rule_set: Optional[RuleSet] = None  # None when no rule source was found
    matches: List[MatchedSkill] = field(default_factory=list)

    @property
    def has_sources(self) -> bool:
        return bool(self.sources)


def run_activation(
    prompt: str,
    config: ActivationConfig,
    fs: FileSystem,
    explicit_path: Optional[str] = None,
) -> ActivationResult:
    """Run the full pipeline for *prompt*.

    Raises RuleParseError or RegexError; nothing is matched unless every rule
    file parsed and every pattern compiled.
    """
    sources = discover_rule_files(config, fs, explicit_path)
    if not sources:
        return ActivationResult()

    rule_set = merge_rule_sets(load_rule_sets(sources, fs))
    compiled = compile_patterns(rule_set)
    matches = match_skills(rule_set, prompt, compiled)

    return ActivationResult(sources=sources, rule_set=rule_set, matches=matches)
