"""skill-activation-prompt CLI — typer entry point for the UserPromptSubmit hook."""

from __future__ import annotations

import sys
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from skill_activation import __version__
from skill_activation.config.defaults import TOOL_NAME, USAGE

app = typer.Typer(
    name=TOOL_NAME,
    help="Suggest skills for a prompt from layered skill-rules.json files.",
    add_completion=False,
)

console = Console(stderr=True)


def _help_callback(value: bool) -> None:
    if value:
        print(USAGE, end="")
        raise typer.Exit()


def _version_callback(value: bool) -> None:
    if value:
        print(f"{TOOL_NAME} {__version__}")
        raise typer.Exit()


def _fail(exc: Exception) -> NoReturn:
    console.print(
        f"[bold red]Error in {TOOL_NAME} hook:[/bold red] "
        f"{escape(type(exc).__name__)}: {escape(str(exc))}"
    )
    raise typer.Exit(code=1) from exc


@app.command(context_settings={"help_option_names": []})
def main(
    rules_path: Optional[str] = typer.Argument(
        None, metavar="[skill-rules.json]", help="Explicit rule file (highest priority)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print diagnostics to stderr"),
    help_: bool = typer.Option(
        False, "--help", "-h", callback=_help_callback,
        is_eager=True, help="Show this help message and exit",
    ),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Read the hook payload from stdin and report the skills it triggers."""
    from skill_activation.config.loader import load_config
    from skill_activation.hook.reader import InputParseError, parse_hook_input
    from skill_activation.matcher.engine import RegexError
    from skill_activation.output import text_report
    from skill_activation.pipeline import run_activation
    from skill_activation.rules.discovery import LocalFileSystem
    from skill_activation.rules.loader import RuleParseError

    if rules_path == "help":
        _help_callback(True)

    # --- Hook input ---
    try:
        hook_input = parse_hook_input(sys.stdin.read())
    except InputParseError as exc:
        _fail(exc)

    cfg = load_config()

    if verbose:
        console.print(f"[dim]Project dir: {escape(str(cfg.project_dir))}[/dim]")
        console.print(f"[dim]Working dir: {escape(str(cfg.cwd))}[/dim]")
        console.print(f"[dim]Home dir: {escape(str(cfg.home))}[/dim]")

    # --- Resolve, load, merge, match ---
    try:
        result = run_activation(hook_input.prompt, cfg, LocalFileSystem(), rules_path)
    except (RuleParseError, RegexError) as exc:
        _fail(exc)

    if not result.has_sources:
        if verbose:
            console.print("[dim]No skill rules found.[/dim]")
        raise typer.Exit(code=0)

    if verbose:
        for source in result.sources:
            console.print(f"[dim]Rules ({source.origin}): {escape(str(source.path))}[/dim]")
        assert result.rule_set is not None
        console.print(f"[dim]Skills loaded: {len(result.rule_set.skills)}[/dim]")
        console.print(f"[dim]Skills matched: {len(result.matches)}[/dim]")

    # --- Output ---
    report = text_report.render(result.matches)
    if report:
        print(report)

    raise typer.Exit(code=0)
