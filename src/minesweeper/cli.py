"""
Terminal front-end for Minesweeper.

Usage:
    minesweeper [--difficulty {easy,medium,hard}] [--width W --height H --mines M]
                [--seed N] [--verbose]

Commands at the prompt:
    u X Y     uncover the cell in column X, row Y
    f X Y     toggle a flag
    n         new game with the current settings
    d NAME    new game at a difficulty (easy, medium, hard)
    s W H M   new game with a custom size
    q         quit
"""
import argparse
import logging
import random
import time
from typing import Callable, Iterable, Optional

from .config import DIFFICULTIES, BoardConfig
from .errors import MinesweeperError
from .session import GameSession, GameState

HELP = "Commands: u X Y | f X Y | n | d easy|medium|hard | s W H M | q"

STATUS_TEXT = {
    GameState.NOT_STARTED: "ready",
    GameState.PLAYING: "playing",
    GameState.WON: "you win!",
    GameState.LOST: "boom, you lose",
}


def status_line(session: GameSession) -> str:
    """Mine counter, timer and game state, as in the classic control bar."""
    return (
        f"Mines: {session.remaining_mines:03d}  "
        f"Time: {session.time:03d}  "
        f"[{STATUS_TEXT[session.state]}]"
    )


def show(session: GameSession, output: Callable[[str], None]) -> None:
    output(status_line(session))
    output(session.render())
    if session.error:
        output(f"Error: {session.error}")


def _coordinates(args: list) -> tuple:
    if len(args) != 2:
        raise ValueError("expected two coordinates: X Y")
    return int(args[0]), int(args[1])


def execute(session: GameSession, line: str) -> bool:
    """
    Apply one command to the session.

    Returns:
        False when the player asked to quit, True otherwise.

    Raises:
        ValueError: If the command is malformed.
    """
    parts = line.split()
    if not parts:
        return True
    command, args = parts[0].lower(), parts[1:]

    if command in ("q", "quit"):
        return False
    if command in ("u", "uncover"):
        x, y = _coordinates(args)
        _require_on_board(session, x, y)
        session.uncover(x, y)
    elif command in ("f", "flag"):
        x, y = _coordinates(args)
        _require_on_board(session, x, y)
        session.flag(x, y)
    elif command in ("n", "new"):
        session.reset()
    elif command in ("d", "difficulty"):
        if len(args) != 1:
            raise ValueError("expected a difficulty name")
        session.set_difficulty(args[0])
    elif command in ("s", "size"):
        if len(args) != 3:
            raise ValueError("expected width, height and mine count")
        width, height, mines = (int(value) for value in args)
        session.reset(width, height, mines)
    else:
        raise ValueError(f"unknown command {command!r}")
    return True


def _require_on_board(session: GameSession, x: int, y: int) -> None:
    if not (0 <= x < session.config.width and 0 <= y < session.config.height):
        raise ValueError(
            f"({x}, {y}) is outside the "
            f"{session.config.width}x{session.config.height} board"
        )


def play(
    session: GameSession,
    lines: Iterable[str],
    output: Callable[[str], None] = print,
    clock: Callable[[], float] = time.monotonic,
) -> None:
    """
    Run commands against the session until they run out or the player quits.

    Whole seconds elapsed between commands are fed to the session timer.
    """
    show(session, output)
    last = clock()
    for line in lines:
        now = clock()
        for _ in range(int(now - last)):
            session.tick()
        last += int(now - last)

        try:
            if not execute(session, line):
                break
        except ValueError as exc:
            output(f"Invalid command: {exc}")
            output(HELP)
            continue
        show(session, output)


def _prompt_lines() -> Iterable[str]:
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


def build_session(args: argparse.Namespace) -> GameSession:
    """Create a session from command-line options."""
    config = DIFFICULTIES[args.difficulty]
    config = BoardConfig(
        args.width if args.width is not None else config.width,
        args.height if args.height is not None else config.height,
        args.mines if args.mines is not None else config.num_mines,
    )
    rng = random.Random(args.seed) if args.seed is not None else random.Random()
    return GameSession(config, rng=rng)


def main(argv: Optional[list] = None) -> int:
    """Parse arguments and run an interactive game."""
    parser = argparse.ArgumentParser(description="Play Minesweeper in the terminal")
    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default="easy",
        help="Preset board size",
    )
    parser.add_argument("--width", type=int, default=None, help="Number of columns")
    parser.add_argument("--height", type=int, default=None, help="Number of rows")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines")
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for the per-game seed generator"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    try:
        session = build_session(args)
    except MinesweeperError as exc:
        print(f"Error: {exc}")
        return 1

    print(HELP)
    try:
        play(session, _prompt_lines())
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
    return 0
