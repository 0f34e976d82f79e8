import argparse
import sys
from typing import Callable, List, Optional

from loguru import logger

from .config import LOG_LEVELS, config
from .errors import QueueError
from .game import TetrisStack
from .render import MENU, PROMPT, render_queue, render_turn

PLAY, VIEW, EXIT = 1, 2, 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Tetris Stack upcoming-pieces queue",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=config.QUEUE_CAPACITY,
        help="Number of upcoming pieces kept in the queue",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.SEED,
        help="Seed for the piece generator (default: OS entropy)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=config.LOG_LEVEL,
        choices=LOG_LEVELS,
        help="Minimum level written to stderr",
    )
    args = parser.parse_args(argv)
    if args.capacity < 1:
        parser.error("--capacity must be at least 1")
    return args


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def run(
    game: TetrisStack,
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> int:
    """
    Drive the interactive menu until the user exits.

    Args:
        game: Session whose queue has already been filled
        read: Prompt-and-read function, ``input`` by default
        write: Line writer, ``print`` by default

    Returns:
        int: Process exit status
    """
    read = read or input
    write = write or print
    while True:
        write(MENU)
        try:
            raw = read(PROMPT)
        except EOFError:
            logger.info("Input closed; exiting")
            write("\nGoodbye from Tetris Stack. Thanks for playing!")
            return 0

        try:
            option = int(raw.strip())
        except ValueError:
            logger.debug(f"Discarded non-numeric input {raw!r}")
            write("\nPlease enter a number.")
            continue

        if option == PLAY:
            try:
                result = game.play_turn()
            except QueueError as e:
                logger.error(f"Turn protocol violated: {e}")
                write(f"Action not performed: {e}")
            else:
                write(render_turn(result))
            write(render_queue(game.view(), game.queue.capacity))
        elif option == VIEW:
            write(render_queue(game.view(), game.queue.capacity))
        elif option == EXIT:
            write("\nGoodbye from Tetris Stack. Thanks for playing!")
            return 0
        else:
            write("\nInvalid option. Please choose again.")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    game = TetrisStack.create(capacity=args.capacity, seed=args.seed)
    added = game.start()
    print(f"Initial queue filled with {len(added)} pieces.")
    print(render_queue(game.view(), game.queue.capacity))
    return run(game)


if __name__ == "__main__":
    sys.exit(main())
