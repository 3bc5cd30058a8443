"""Configuration loading, schema, and defaults."""

from skill_activation.config.loader import load_config
from skill_activation.config.schema import (
    PRIORITY_ORDER,
    ActivationConfig,
    Enforcement,
    Priority,
    SkillType,
)

__all__ = [
    "PRIORITY_ORDER",
    "ActivationConfig",
    "Enforcement",
    "Priority",
    "SkillType",
    "load_config",
]
