"""
Résumé viewer CLI

Commands:
    view     - Open a résumé in the interactive terminal viewer
    validate - Load a résumé (including section includes) and print a summary

Examples:\n

    resume-tui view                              # View $RESUME_PATH or the bundled sample

    resume-tui view data/resume.yaml             # View a specific file

    resume-tui view data/resume.yaml -l outs/logs  # Write a session log

    resume-tui validate data/resume.yaml         # Check a file without opening the viewer

    resume-tui view --hide "^Interests$"        # Leave a section out
"""

import os
import re
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from resume_tui.contexts.terminal.hooks import ErrorHooks
from resume_tui.contexts.terminal.lifecycle import VIEWPORT_HEIGHT, VIEWPORT_WIDTH, TerminalSession
from resume_tui.contexts.viewer.app import App
from resume_tui.contexts.viewer.exceptions import ResumeError
from resume_tui.contexts.viewer.resume_document import ResumeDocument
from resume_tui.runtime import run
from resume_tui.utils.logger import disable_logging, setup_logger

load_dotenv()
SAMPLE_RESUME = Path(__file__).parent / "data" / "sample_resume.yaml"
RESUME_PATH = Path(os.getenv("RESUME_PATH", str(SAMPLE_RESUME)))
LOGS_PATH = Path(os.getenv("LOGS_PATH")) if os.getenv("LOGS_PATH") else None
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
SECTION_BLACKLIST = [p.strip() for p in os.getenv("SECTION_BLACKLIST", "").split(",") if p.strip()]


def _check_patterns(patterns: Optional[List[str]]) -> Optional[List[str]]:
    """Reject --hide values that are not valid regular expressions."""
    for pattern in patterns or []:
        try:
            re.compile(pattern)
        except re.error as e:
            raise typer.BadParameter(f"Invalid section pattern {pattern!r}: {e}")
    return patterns


app = typer.Typer(
    help="Browse a résumé in the terminal",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("view")
def view_command(
    resume_path: Annotated[
        Optional[Path],
        typer.Argument(help="Resume YAML file (default: $RESUME_PATH or the bundled sample)"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", "-l", help="Write a session log to this directory (default: $LOGS_PATH)"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Minimum level written to the session log"),
    ] = LOG_LEVEL,
    hide: Annotated[
        Optional[List[str]],
        typer.Option(
            "--hide",
            help="Regex of section names to leave out; repeatable (default: $SECTION_BLACKLIST)",
            callback=_check_patterns,
        ),
    ] = None,
):
    """
    Open a résumé in the interactive viewer.

    Keys: arrows or h/j/k/l to move, Enter to open, q / Esc / Ctrl+C to quit.
    """
    resume_path = resume_path or RESUME_PATH
    log_dir = log_dir or LOGS_PATH

    if log_dir:
        setup_logger(
            context_name="viewer",
            log_dir=log_dir,
            extra_provenance={"Resume": resume_path, "Viewport": f"{VIEWPORT_WIDTH}x{VIEWPORT_HEIGHT}"},
            level=log_level,
        )
    else:
        disable_logging()

    # Content errors are reported before the terminal is touched
    try:
        document = ResumeDocument(resume_path, blacklist_patterns=hide or SECTION_BLACKLIST)
    except ResumeError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    session = TerminalSession()
    hooks = ErrorHooks(restore=session.release).install()
    try:
        exit_code = run(App(document), session, hooks)
    finally:
        hooks.uninstall()

    raise typer.Exit(code=exit_code)


@app.command("validate")
def validate_command(
    resume_path: Annotated[
        Optional[Path],
        typer.Argument(help="Resume YAML file (default: $RESUME_PATH or the bundled sample)"),
    ] = None,
    hide: Annotated[
        Optional[List[str]],
        typer.Option(
            "--hide",
            help="Regex of section names to leave out; repeatable (default: $SECTION_BLACKLIST)",
            callback=_check_patterns,
        ),
    ] = None,
):
    """
    Load a résumé, including included section files, and print its outline.

    Examples:\n

        $ resume-tui validate data/resume.yaml
    """
    resume_path = resume_path or RESUME_PATH
    disable_logging()

    typer.secho(f"\nValidating: {resume_path}", fg=typer.colors.BLUE, bold=True)
    typer.echo("")

    try:
        document = ResumeDocument(resume_path, blacklist_patterns=hide or SECTION_BLACKLIST)
        counts = [(section, len(section.load_entries())) for section in document.sections]
    except ResumeError as e:
        typer.secho(f"✗ {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(f"  Name: {document.name}")
    if document.brand:
        typer.echo(f"  Brand: {document.brand}")
    typer.echo("")

    width = max(len(section.name) for section, _ in counts)
    for section, count in counts:
        padding = " " * (width - len(section.name))
        typer.echo(f"  {section.name}{padding}  {count:>3} entries  ({section.section_type})")

    typer.echo("")
    typer.secho(f"✓ {len(counts)} sections loaded", fg=typer.colors.GREEN, bold=True)
    raise typer.Exit(code=0)


if __name__ == "__main__":
    app()
