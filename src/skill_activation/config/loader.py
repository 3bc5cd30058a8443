"""Build the discovery configuration from defaults and environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from skill_activation.config.defaults import (
    HOME_ENV,
    PROJECT_DIR_ENV,
    RULES_RELPATH,
    RULES_RELPATH_ENV,
)
from skill_activation.config.schema import ActivationConfig


def _merge_env_overrides(cfg: ActivationConfig, environ: Mapping[str, str]) -> None:
    """Apply environment variable overrides."""
    if val := environ.get(PROJECT_DIR_ENV):
        cfg.project_dir = Path(val)
    if val := environ.get(HOME_ENV):
        cfg.home = Path(val)
    if val := environ.get(RULES_RELPATH_ENV, "").strip():
        cfg.rules_relpath = Path(val)


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[Path] = None,
) -> ActivationConfig:
    """Return the ActivationConfig for this process (or for *environ* / *cwd*)."""
    if environ is None:
        environ = os.environ

    cfg = ActivationConfig(
        cwd=cwd or Path.cwd(),
        rules_relpath=Path(RULES_RELPATH),
    )
    _merge_env_overrides(cfg, environ)

    if cfg.home is None:
        try:
            cfg.home = Path.home()
        except RuntimeError:
            cfg.home = None  # no resolvable home directory: skip that candidate
    return cfg
