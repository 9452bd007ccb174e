"""Main entry point for ladderpy."""

import sys
import time

from loguru import logger

from ladderpy.cli import create_parser
from ladderpy.core import (
    EmptyDictionary,
    LadderError,
    build_index,
    find_ladder,
    is_valid_ladder,
    load_config,
)
from ladderpy.dictionary import load_dictionary
from ladderpy.output import format_ladder, write_ladder
from ladderpy.reports import create_report_directory, format_time, write_search_report
from ladderpy.utils.logging import setup_logger


def _print_startup_banner(verbose: bool) -> None:
    """Print startup banner if verbose."""
    if verbose:
        logger.info("=" * 60)
        logger.info("LadderPy - Word Ladder Finder")
        logger.info("=" * 60)
        logger.info("")


def _validate_config(config, parser) -> None:
    """Validate configuration settings."""
    if len(config.source) != len(config.target):
        parser.error(
            f"Length of source and target words must be the same "
            f"('{config.source}' has {len(config.source)}, "
            f"'{config.target}' has {len(config.target)})"
        )

    if config.debug_words and not config.debug:
        parser.error("--debug-words requires the --debug flag")


def _print_config_summary(config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Ladder: {config.source} -> {config.target}")
        logger.info(f"  Dictionary: {config.dictionary}")
        if config.dictionary == "file":
            logger.info(f"  Word list: {config.wordlist}")
        if config.top_n:
            logger.info(f"  Top N words: {config.top_n}")
        if config.exclude:
            logger.info(f"  Exclude file: {config.exclude}")
        logger.info(f"  Output format: {config.output_format}")
        logger.info(f"  Workers: {config.jobs}")
        logger.info("")


def _run_search(config) -> int:
    """Load the dictionary, search, and print the ladder.

    Returns:
        Process exit status
    """
    words = load_dictionary(config)

    logger.info("Building neighbor index...")
    try:
        index = build_index(words)
    except EmptyDictionary:
        logger.warning(f"  No words of length {len(config.source)} in the dictionary")
        logger.error(f"No path from {config.source} to {config.target}.")
        return 1
    logger.info(f"  Indexed {len(index)} words under {index.pattern_count} patterns")

    logger.info(f"Searching for a ladder from '{config.source}' to '{config.target}'...")
    start_time = time.time()
    result = find_ladder(
        index,
        config.source,
        config.target,
        jobs=config.jobs,
        debug_words=frozenset(config.debug_words),
        show_progress=config.verbose,
    )
    elapsed_time = time.time() - start_time
    logger.info(
        f"  Completed {len(result.rounds)} rounds, reserved {result.reserved_count} words "
        f"in {format_time(elapsed_time)}"
    )

    if config.reports:
        report_dir = create_report_directory(config.reports)
        report_path = write_search_report(result, report_dir, elapsed_time, len(index))
        logger.info(f"  Report written to {report_path}")

    if result.path is None:
        logger.error(f"No path from {config.source} to {config.target}.")
        return 1

    if config.verify and not is_valid_ladder(result.path, index):
        logger.error(f"Ladder failed verification: {' -> '.join(result.path)}")
        return 1

    write_ladder(format_ladder(result.path, config.output_format), config.output)
    return 0


def _run_with_error_handling(config) -> int:
    """Run the search with proper error handling."""
    try:
        status = _run_search(config)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Search interrupted by user")
        raise
    except FileNotFoundError as e:
        logger.error(f"Word list not found: {e.filename}")
        return 1
    except LadderError as e:
        logger.error(str(e))
        return 1

    if config.verbose:
        logger.info("")
        logger.info("=" * 60)
        if status == 0:
            logger.info("✓ Ladder found")
        else:
            logger.info("✗ No ladder")
        logger.info("=" * 60)
    return status


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    # Print startup banner
    _print_startup_banner(config.verbose)

    # Validate configuration
    _validate_config(config, parser)

    # Print configuration summary
    _print_config_summary(config)

    # Run search
    return _run_with_error_handling(config)


if __name__ == "__main__":
    sys.exit(main())
