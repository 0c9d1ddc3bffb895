"""
Console Wordle - Main Entry Point

This is the main entry point for the console game.
It loads the configuration, initializes the game loop and plays one game
on standard input/output.
"""

import argparse
import sys
from typing import List, Optional

from .config import get_config
from .models.errors import WordleError
from .services.game_service import initialize_game_loop
from .services.word_list_service import get_word_statistics
from .utils.game_logger import game_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="console-wordle",
        description="Guess the secret word with per-letter feedback."
    )
    parser.add_argument(
        "word_source",
        nargs="?",
        default=None,
        help="Word file to draw the secret from (default: configured WORD_SOURCE)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print statistics about the word source and exit",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to initialize services and play a game."""
    args = build_parser().parse_args(argv)
    app_config = get_config()
    game_logger.configure(app_config.LOG_DIR, app_config.LOG_LEVEL)

    word_source = args.word_source or app_config.WORD_SOURCE
    game_loop = initialize_game_loop(app_config)

    try:
        if args.stats:
            stats = get_word_statistics(game_loop.word_list.load(word_source))
            print(f"Words: {stats['total_words']}")
            print(f"Average vowels per word: {stats['avg_vowel_count']}")
            common = ', '.join(f"{letter}={count}" for letter, count in stats['most_common_letters'])
            print(f"Most common letters: {common}")
            return 0

        outcome = game_loop.run(word_source, sys.stdin, sys.stdout)
        game_logger.logger.info(f"Game finished: {outcome.value}")
        return 0

    except WordleError as e:
        game_logger.log_error(e, 'start_game')
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print()
        game_logger.logger.info("Game interrupted (KeyboardInterrupt)")
        return 130


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == '__main__':
    run()
