"""Parse rule files (JSON, or YAML by suffix) into validated RuleSets."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from skill_activation.config.schema import ENFORCEMENTS, PRIORITY_ORDER, SKILL_TYPES
from skill_activation.errors import SkillActivationError
from skill_activation.rules.discovery import FileSystem
from skill_activation.rules.models import PromptTriggers, RuleSet, RuleSource, SkillRule

_YAML_SUFFIXES = (".yaml", ".yml")


class RuleParseError(SkillActivationError):
    """Raised when a rule file is unreadable, malformed, or has the wrong shape."""


def _parse_document(text: str, path: Path) -> Any:
    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            return yaml.safe_load(text)
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise RuleParseError(f"Failed to parse {path}: {exc}") from exc


def _string_list(value: Any, where: str) -> Optional[Tuple[str, ...]]:
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise RuleParseError(f"{where} must be an array of strings")
    return tuple(value)


def _enum_field(entry: Dict[str, Any], key: str, allowed: Tuple[str, ...], where: str) -> str:
    value = entry.get(key)
    if value not in allowed:
        raise RuleParseError(
            f"{where}.{key} must be one of {', '.join(allowed)} (got {value!r})"
        )
    return value


def _build_skill(entry: Any, where: str) -> SkillRule:
    if not isinstance(entry, dict):
        raise RuleParseError(f"{where} must be an object")

    triggers: Optional[PromptTriggers] = None
    raw_triggers = entry.get("promptTriggers")
    if raw_triggers is not None:
        if not isinstance(raw_triggers, dict):
            raise RuleParseError(f"{where}.promptTriggers must be an object")
        triggers = PromptTriggers(
            keywords=_string_list(
                raw_triggers.get("keywords"), f"{where}.promptTriggers.keywords"
            ),
            intent_patterns=_string_list(
                raw_triggers.get("intentPatterns"), f"{where}.promptTriggers.intentPatterns"
            ),
        )

    return SkillRule(
        type=_enum_field(entry, "type", SKILL_TYPES, where),  # type: ignore[arg-type]
        enforcement=_enum_field(entry, "enforcement", ENFORCEMENTS, where),  # type: ignore[arg-type]
        priority=_enum_field(entry, "priority", PRIORITY_ORDER, where),  # type: ignore[arg-type]
        triggers=triggers,
    )


def parse_rule_set(data: Any, path: Path) -> RuleSet:
    """Validate a decoded document against the RuleSet shape.

    Unknown keys (``description``, ``fileTriggers``, ...) are ignored.
    """
    if not isinstance(data, dict):
        raise RuleParseError(f"{path}: top level must be an object")

    version = data.get("version", "")
    if version is None:
        version = ""
    if not isinstance(version, str):
        raise RuleParseError(f"{path}: 'version' must be a string")

    raw_skills = data.get("skills")
    if not isinstance(raw_skills, dict):
        raise RuleParseError(f"{path}: 'skills' must be an object")

    skills: Dict[str, SkillRule] = {}
    for name, entry in raw_skills.items():
        skills[str(name)] = _build_skill(entry, f"{path}: skills.{name}")

    return RuleSet(version=version, skills=skills)


def load_rule_set(source: RuleSource, fs: FileSystem) -> RuleSet:
    """Read and parse one discovered rule file."""
    try:
        text = fs.read_text(source.path)
    except (OSError, UnicodeDecodeError) as exc:
        raise RuleParseError(f"Failed to read {source.path}: {exc}") from exc
    return parse_rule_set(_parse_document(text, source.path), source.path)


def load_rule_sets(sources: List[RuleSource], fs: FileSystem) -> List[RuleSet]:
    """Load every source in order. The first failure aborts the whole load."""
    return [load_rule_set(source, fs) for source in sources]
