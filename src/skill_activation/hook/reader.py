"""Parse the JSON hook payload."""

from __future__ import annotations

import json

from skill_activation.errors import SkillActivationError
from skill_activation.hook.models import HookInput

_CONTEXT_FIELDS = ("session_id", "transcript_path", "cwd", "permission_mode")


class InputParseError(SkillActivationError):
    """Raised when stdin is not a JSON object with a string ``prompt``."""


def parse_hook_input(text: str) -> HookInput:
    """Parse *text* into a HookInput."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputParseError(f"Hook input is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise InputParseError("Hook input must be a JSON object")

    prompt = data.get("prompt")
    if prompt is None:
        raise InputParseError("Hook input is missing required field 'prompt'")
    if not isinstance(prompt, str):
        raise InputParseError("Hook input field 'prompt' must be a string")

    # Context fields are passed through untouched; non-string values are dropped.
    context = {k: data[k] for k in _CONTEXT_FIELDS if isinstance(data.get(k), str)}
    return HookInput(prompt=prompt, **context)
