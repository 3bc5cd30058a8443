"""Rule sources — models, discovery, loading, merging."""

from skill_activation.rules.discovery import FileSystem, LocalFileSystem, discover_rule_files
from skill_activation.rules.loader import RuleParseError, load_rule_set, load_rule_sets
from skill_activation.rules.merger import merge_rule_sets, overlay
from skill_activation.rules.models import PromptTriggers, RuleSet, RuleSource, SkillRule

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "PromptTriggers",
    "RuleParseError",
    "RuleSet",
    "RuleSource",
    "SkillRule",
    "discover_rule_files",
    "load_rule_set",
    "load_rule_sets",
    "merge_rule_sets",
    "overlay",
]
