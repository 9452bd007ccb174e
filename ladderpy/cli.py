"""Command-line interface."""

import argparse
from multiprocessing import cpu_count

from ladderpy.utils.constants import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="ladderpy",
        description="Find a shortest word ladder between two words of equal length",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Using the Unix words file
  %(prog)s dog cat

  # Using the english-words dictionary, with progress output
  %(prog)s lead gold --dictionary english-words -v

  # Using the 20000 most frequent English words, printed as YAML
  %(prog)s word test --dictionary wordfreq --top-n 20000 --format yaml

  # Using a JSON config (CLI args override JSON values)
  %(prog)s dog cat --config config.json

Example config.json:
{
  "wordlist": "/usr/share/dict/words",
  "exclude": "~/exclude.txt",
  "output_format": "lines",
  "reports": "./reports",
  "verbose": true,
  "jobs": 4
}

Exit status is 0 when a ladder is found and 1 when none exists.
        """,
    )

    parser.add_argument("source", help="First word of the ladder")
    parser.add_argument("target", help="Last word of the ladder")

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Dictionary
    parser.add_argument(
        "-w", "--wordlist", type=str, help=f"Word list file (default: {Constants.DEFAULT_WORDLIST})"
    )
    parser.add_argument(
        "--dictionary",
        choices=Constants.DICTIONARY_SOURCES,
        help="Dictionary source (default: file)",
    )
    parser.add_argument(
        "--top-n", type=int, help="Number of most frequent words for the wordfreq dictionary"
    )
    parser.add_argument("--exclude", type=str, help="File with words or wildcard patterns to drop")
    parser.add_argument(
        "--case-sensitive",
        dest="lowercase",
        action="store_false",
        default=None,
        help="Keep the case of words and endpoints",
    )

    # Output
    parser.add_argument(
        "-f",
        "--format",
        dest="output_format",
        choices=Constants.OUTPUT_FORMATS,
        help="Output format (default: path)",
    )
    parser.add_argument("-o", "--output", type=str, help="Write the ladder to this file")
    parser.add_argument(
        "--reports",
        type=str,
        help="Directory to generate search reports (creates timestamped subdirectories)",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        default=None,
        help="Check the ladder against the dictionary before printing",
    )

    # Flags
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=None, help="Verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", default=None, help="Log every search round"
    )
    parser.add_argument(
        "--debug-words",
        type=str,
        help="Comma-separated words to trace through the search (requires --debug)",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help=f"Number of parallel workers (default: 1, available: {cpu_count()})",
    )

    return parser
