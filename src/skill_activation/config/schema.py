"""Configuration schema — enums for rule fields and the discovery config."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional, Tuple

SkillType = Literal["guardrail", "domain"]
Enforcement = Literal["block", "suggest", "warn"]
Priority = Literal["critical", "high", "medium", "low"]
MatchType = Literal["keyword", "intent"]

SKILL_TYPES: Tuple[str, ...] = ("guardrail", "domain")
ENFORCEMENTS: Tuple[str, ...] = ("block", "suggest", "warn")

# Report order, most urgent first.
PRIORITY_ORDER: Tuple[str, ...] = ("critical", "high", "medium", "low")


@dataclass
class ActivationConfig:
    """Inputs for rule-file discovery."""

    cwd: Path
    rules_relpath: Path
    project_dir: Optional[Path] = None  # unset / empty CLAUDE_PROJECT_DIR → no candidate
    home: Optional[Path] = None
