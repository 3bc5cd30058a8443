"""Shared test fixtures — in-memory filesystem, sample rule sets, hook payloads."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from skill_activation.config.schema import ActivationConfig
from skill_activation.rules.models import PromptTriggers, SkillRule

RULES_RELPATH = Path(".claude/skills/skill-rules.json")


class MemoryFileSystem:
    """FileSystem backed by a dict of absolute path → text."""

    def __init__(self, files: Dict[str, str] | None = None) -> None:
        self.files: Dict[Path, str] = {Path(k): v for k, v in (files or {}).items()}
        self.reads: list[Path] = []

    def add(self, path: str | Path, content: Any) -> Path:
        if not isinstance(content, str):
            content = json.dumps(content)
        p = Path(path)
        self.files[p] = content
        return p

    def exists(self, path: Path) -> bool:
        return path in self.files

    def read_text(self, path: Path) -> str:
        self.reads.append(path)
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(str(path)) from None


def make_rule(
    priority: str = "medium",
    keywords: list[str] | None = None,
    intent_patterns: list[str] | None = None,
    type: str = "domain",
    enforcement: str = "suggest",
) -> SkillRule:
    """Build a SkillRule; no triggers at all when both lists are None."""
    triggers = None
    if keywords is not None or intent_patterns is not None:
        triggers = PromptTriggers(
            keywords=tuple(keywords) if keywords is not None else None,
            intent_patterns=tuple(intent_patterns) if intent_patterns is not None else None,
        )
    return SkillRule(type=type, enforcement=enforcement, priority=priority, triggers=triggers)  # type: ignore[arg-type]


@pytest.fixture
def memfs() -> MemoryFileSystem:
    return MemoryFileSystem()


@pytest.fixture
def activation_config() -> ActivationConfig:
    """Config with distinct project, cwd, and home directories."""
    return ActivationConfig(
        cwd=Path("/work/repo"),
        rules_relpath=RULES_RELPATH,
        project_dir=Path("/work/project"),
        home=Path("/home/dev"),
    )


@pytest.fixture
def refactor_rules() -> Dict[str, Any]:
    """A single high-priority skill triggered by the keyword 'refactor'."""
    return {
        "version": "1.0",
        "skills": {
            "s1": {
                "type": "domain",
                "enforcement": "suggest",
                "priority": "high",
                "promptTriggers": {"keywords": ["refactor"]},
            }
        },
    }


@pytest.fixture
def mixed_rules() -> Dict[str, Any]:
    """Skills across all priorities, declared low-to-critical."""
    return {
        "version": "2.0",
        "skills": {
            "docs-writer": {
                "type": "domain",
                "enforcement": "suggest",
                "priority": "low",
                "promptTriggers": {"keywords": ["readme"]},
            },
            "test-helper": {
                "type": "domain",
                "enforcement": "suggest",
                "priority": "medium",
                "promptTriggers": {"intentPatterns": ["(write|add).*tests?"]},
            },
            "backend-dev": {
                "type": "domain",
                "enforcement": "suggest",
                "priority": "high",
                "promptTriggers": {
                    "keywords": ["endpoint", "API"],
                    "intentPatterns": ["(create|add).*?(route|controller)"],
                },
            },
            "db-guard": {
                "type": "guardrail",
                "enforcement": "block",
                "priority": "critical",
                "promptTriggers": {"keywords": ["migration", "drop table"]},
            },
            "no-triggers": {
                "type": "domain",
                "enforcement": "warn",
                "priority": "critical",
            },
        },
    }


@pytest.fixture
def hook_payload():
    """Factory for a UserPromptSubmit stdin payload."""

    def _make(prompt: str) -> str:
        return json.dumps({
            "session_id": "abc123",
            "transcript_path": "/tmp/transcript.jsonl",
            "cwd": "/work/repo",
            "permission_mode": "default",
            "prompt": prompt,
        })

    return _make
