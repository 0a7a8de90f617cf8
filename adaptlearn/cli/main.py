"""
Typer CLI for the adaptive learning platform demo.

Usage:
    adaptlearn
    adaptlearn --assets-dir ./images
    adaptlearn --no-wait
    python -m adaptlearn
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from adaptlearn.config import get_settings
from adaptlearn.demo import run_demo

app = typer.Typer(
    help="Adaptive learning platform: learning styles, lessons and recommendations",
    no_args_is_help=False,
    add_completion=False,
)


def configure_logging(level: str) -> None:
    """Send loguru output to stderr at the configured level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )


@app.command()
def demo(
    assets_dir: Optional[Path] = typer.Option(
        None, "--assets-dir", help="Directory holding the lesson images"
    ),
    no_wait: bool = typer.Option(
        False, "--no-wait", help="Do not wait for Enter after showing an image"
    ),
) -> None:
    """Run the demonstration scenario."""
    settings = get_settings()
    overrides: dict = {}
    if assets_dir is not None:
        overrides["assets_dir"] = assets_dir
    if no_wait:
        overrides["wait_for_key"] = False
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(settings.log_level)
    raise typer.Exit(code=run_demo(settings))


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
