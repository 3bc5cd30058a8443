"""Data model for the hook payload read from stdin."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class HookInput:
    """The UserPromptSubmit payload. Only ``prompt`` is interpreted."""

    prompt: str
    session_id: Optional[str] = None
    transcript_path: Optional[str] = None
    cwd: Optional[str] = None
    permission_mode: Optional[str] = None
