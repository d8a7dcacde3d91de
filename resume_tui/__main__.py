"""Entrypoint for `python -m resume_tui`."""

from resume_tui.cli import app


if __name__ == "__main__":
    app()
