"""Report rendering."""

from skill_activation.output.text_report import group_by_priority, render

__all__ = ["group_by_priority", "render"]
