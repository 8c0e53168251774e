"""Application entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import chess
import typer

from tuichess.core.board import BoardAdapter
from tuichess.core.enums import Side
from tuichess.game.controller import SelectionController
from tuichess.game.player import RandomOpponent
from tuichess.i18n import set_language
from tuichess.settings import AppSettings

_LOGGER = logging.getLogger(__name__)

cli = typer.Typer(
    add_completion=False,
    help="Play chess in the terminal against a random-move opponent.",
)


def configure_logging(settings: AppSettings) -> None:
    """Send logs to ``settings.log_file``; discard them otherwise.

    The terminal belongs to curses while the game runs, so nothing is
    written to stderr.

    Raises:
        OSError: If the log file cannot be opened. Existing handlers are
            left in place.
    """
    if settings.log_file:
        handler: logging.Handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    else:
        handler = logging.NullHandler()
    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(settings.log_level)


def build_controller(settings: AppSettings) -> SelectionController:
    """Create the controller for *settings*; raises ValueError on a bad FEN."""
    controller = SelectionController(
        BoardAdapter(settings.fen),
        RandomOpponent(seed=settings.seed),
        lock_on_game_over=settings.lock_on_game_over,
    )

    def _log_move(move: chess.Move, mover: Side, by_opponent: bool) -> None:
        who = "opponent" if by_opponent else "player"
        _LOGGER.info("%s (%s) played %s", who, mover, move.uci())

    controller.events.on_move.append(_log_move)
    return controller


def run(settings: AppSettings) -> int:
    """Start the configured front end and return its exit code."""
    controller = build_controller(settings)
    if settings.gui:
        from tuichess.ui.qt_window import run_gui

        return run_gui(controller, settings)

    from tuichess.ui.terminal import run_terminal

    return run_terminal(controller, settings)


@cli.command()
def play(
    fen: Optional[str] = typer.Option(None, "--fen", help="Start from this FEN position"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the opponent's moves"),
    theme: str = typer.Option("Classic", "--theme", help="Classic, Blue or Green"),
    language: str = typer.Option("English", "--language", help="English or Russian"),
    ascii_pieces: bool = typer.Option(False, "--ascii", help="Draw pieces as FEN letters"),
    lock: bool = typer.Option(
        True, "--lock/--no-lock", help="Refuse moves once the game is over"
    ),
    gui: bool = typer.Option(False, "--gui", help="Open a Qt window instead"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", dir_okay=False, help="Write logs here"
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Log verbosity"),
) -> None:
    """Play a game. Arrow keys move the cursor, Enter selects, q quits."""
    settings = AppSettings(
        language=language,
        log_file=str(log_file) if log_file else None,
        log_level=log_level,
        board_theme=theme,
        unicode_pieces=not ascii_pieces,
        fen=fen,
        seed=seed,
        lock_on_game_over=lock,
        gui=gui,
    ).normalize()
    try:
        configure_logging(settings)
    except OSError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-file") from exc
    set_language(settings.language)

    if fen is not None:
        try:
            chess.Board(fen)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--fen") from exc

    try:
        code = run(settings)
    except KeyboardInterrupt:
        code = 130
    except Exception as exc:
        _LOGGER.exception("tuichess stopped on an unexpected error")
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    raise typer.Exit(code)


def main() -> None:
    """Console-script entry point."""
    cli()


if __name__ == "__main__":
    main()
