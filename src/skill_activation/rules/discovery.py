"""Rule-file discovery — ordered, deduplicated candidate locations.

Filesystem access goes through the small ``FileSystem`` protocol so that
resolution can be exercised without touching disk.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Protocol, Tuple

from skill_activation.config.schema import ActivationConfig
from skill_activation.rules.models import RuleSource, SourceOrigin


class FileSystem(Protocol):
    def exists(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str: ...


class LocalFileSystem:
    """The real filesystem."""

    def exists(self, path: Path) -> bool:
        return path.is_file() and os.access(path, os.R_OK)

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")


def _normalise(path: Path, cwd: Path) -> Path:
    """Absolute, lexically normalised form of *path* (symlinks untouched)."""
    if not path.is_absolute():
        path = cwd / path
    return Path(os.path.normpath(path))


def candidate_paths(
    config: ActivationConfig,
    explicit_path: Optional[str] = None,
) -> List[Tuple[SourceOrigin, Path]]:
    """Every candidate location in priority order, before existence checks."""
    candidates: List[Tuple[SourceOrigin, Path]] = []
    if explicit_path:
        candidates.append(("explicit", Path(explicit_path)))
    if config.project_dir is not None:
        candidates.append(("project", config.project_dir / config.rules_relpath))
    candidates.append(("cwd", config.cwd / config.rules_relpath))
    if config.home is not None:
        candidates.append(("home", config.home / config.rules_relpath))
    return candidates


def discover_rule_files(
    config: ActivationConfig,
    fs: FileSystem,
    explicit_path: Optional[str] = None,
) -> List[RuleSource]:
    """Return existing rule files, highest priority first, each path at most once."""
    sources: List[RuleSource] = []
    seen: set[Path] = set()

    for origin, raw in candidate_paths(config, explicit_path):
        path = _normalise(raw, config.cwd)
        if path in seen or not fs.exists(path):
            continue
        seen.add(path)
        sources.append(RuleSource(path=path, rank=len(sources), origin=origin))

    return sources
