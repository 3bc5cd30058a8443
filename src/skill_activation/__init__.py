"""skill-activation-prompt — suggest skills for a prompt from layered trigger rules."""

__version__ = "1.0.0"
