"""Hook interface — stdin payload model and parser."""

from skill_activation.hook.models import HookInput
from skill_activation.hook.reader import InputParseError, parse_hook_input

__all__ = ["HookInput", "InputParseError", "parse_hook_input"]
