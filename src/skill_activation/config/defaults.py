"""Default values and the usage text."""

from skill_activation import __version__

TOOL_NAME = "skill-activation-prompt"

PROJECT_DIR_ENV = "CLAUDE_PROJECT_DIR"
HOME_ENV = "HOME"
RULES_RELPATH_ENV = "SKILL_RULES_RELPATH"

RULES_RELPATH = ".claude/skills/skill-rules.json"

# Version reported for a merge of zero rule sets.
DEFAULT_RULES_VERSION = "1.0"

USAGE = f"""\
{TOOL_NAME} v{__version__}

Usage: {TOOL_NAME} [OPTIONS] [skill-rules.json]

Reads hook input from stdin and checks for skill activation.
Loads and merges skill rules from multiple locations hierarchically.

Options:
  -h, --help          Show this help message and exit
  -V, --version       Show version and exit
  -v, --verbose       Print discovery diagnostics to stderr
  skill-rules.json    Optional explicit path to skill rules file (highest priority)

Search Order (highest to lowest priority):
  1. Explicit CLI argument path
  2. ${PROJECT_DIR_ENV}/{RULES_RELPATH}
  3. ./{RULES_RELPATH} (current directory)
  4. ~/{RULES_RELPATH} (home directory)

Skills from higher priority sources override those with the same name.
Skills unique to each source are merged together.

Examples:
  # Auto-discover from hierarchy
  {TOOL_NAME} < input.json

  # With explicit path (takes highest priority)
  {TOOL_NAME} /path/to/skill-rules.json < input.json
"""
