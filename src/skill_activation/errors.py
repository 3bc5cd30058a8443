"""Base exception for every failure that aborts an invocation."""


class SkillActivationError(Exception):
    """Unrecoverable error for the current invocation (exit code 1)."""
