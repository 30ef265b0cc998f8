"""
Entry point for the VocabPop command-line application.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from vocabpop import APP_NAME
from vocabpop import logger as app_logger
from vocabpop_core.rotation_scheduler import build_sequence
from vocabpop_core.settings import DEFAULT_INTERVAL_MINUTES, NotifierSettings, default_vocab_dir
from vocabpop_core.vocab_loader import scan_vocab_directory

app = typer.Typer(
    name="vocabpop",
    help="Japanese vocabulary notifier: pops one word at a time on a timer.",
    add_completion=False,
)


def _load_entries(settings: NotifierSettings):
    logger = app_logger.get_logger()
    result = scan_vocab_directory(settings.directory)
    for path, error in result.errors:
        logger.warning("Skipping unreadable vocab file {}: {}", path, error)
    logger.info("Loaded {} entries from {}", len(result.entries), settings.directory)
    return result.entries


@app.command()
def run(
    directory: Optional[Path] = typer.Option(
        None,
        "--dir",
        "-d",
        help="Vocab directory (text files, one entry per line). Defaults to $VOCABPOP_VOCAB_DIR or ./vocab.",
    ),
    interval: int = typer.Option(
        DEFAULT_INTERVAL_MINUTES,
        "--interval",
        "-i",
        min=1,
        help="Interval in minutes between notifications.",
    ),
    force: bool = typer.Option(False, "--force", help="Show a single notification immediately and exit."),
    shuffle: bool = typer.Option(True, "--shuffle/--no-shuffle", help="Shuffle vocab entries."),
    tray: bool = typer.Option(True, "--tray/--no-tray", help="Use the system tray; --no-tray prints to the console."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to the console."),
) -> None:
    """Rotate vocabulary notifications until interrupted."""
    app_logger.configure(verbose=verbose, force=True)
    logger = app_logger.get_logger()

    settings = NotifierSettings(
        directory=directory or default_vocab_dir(),
        interval_minutes=interval,
        force=force,
        shuffle=shuffle,
        use_tray=tray,
    )
    entries = _load_entries(settings)
    if not entries:
        logger.error("No vocab entries found in {}.", settings.directory)
        typer.echo(
            f"No vocab entries found in {settings.directory}. Create text files under that directory.",
            err=True,
        )
        raise typer.Exit(code=1)

    sequence = build_sequence(entries, shuffle=settings.shuffle)

    if settings.use_tray:
        # Imported lazily so console runs never need a Qt platform plugin.
        from vocabpop_core.app import run_tray_app

        exit_code = run_tray_app(sequence, settings, sys.argv)
    else:
        from vocabpop_core.app import run_headless

        run_headless(sequence, settings)
        exit_code = 0

    if not settings.force:
        typer.echo(f"Exiting {APP_NAME}.")
    raise typer.Exit(code=exit_code)


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()
