"""Search report generation."""

from datetime import datetime
from pathlib import Path
from typing import TextIO

from ladderpy.core import LadderResult
from ladderpy.utils.constants import Constants


def format_time(seconds: float) -> str:
    """Format seconds into human-readable time."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, secs = divmod(seconds, 60)
    return f"{int(minutes)}m {secs:.1f}s"


def write_report_header(f: TextIO, title: str) -> None:
    """Write a standard report header with title and timestamp.

    Args:
        f: File object to write to
        title: Title of the report
    """
    f.write("=" * 80 + "\n")
    f.write(f"{title}\n")
    f.write("=" * 80 + "\n")
    f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")


def write_section_header(f: TextIO, title: str) -> None:
    """Write a section header with separator line."""
    if title:
        f.write(f"{title}\n")
    f.write("-" * 80 + "\n")


def create_report_directory(base_dir: str) -> Path:
    """Create a timestamped report directory under base_dir."""
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    report_dir = Path(base_dir) / f"ladder_{timestamp}"
    report_dir.mkdir(parents=True, exist_ok=True)
    return report_dir


def write_search_report(
    result: LadderResult,
    report_dir: Path,
    elapsed_time: float,
    dictionary_size: int,
) -> Path:
    """Write the search report for one run.

    Args:
        result: Outcome of the search
        report_dir: Directory to write into
        elapsed_time: Search time in seconds
        dictionary_size: Number of words in the index

    Returns:
        Path of the written report
    """
    report_path = report_dir / Constants.REPORT_FILENAME
    with open(report_path, "w", encoding="utf-8") as f:
        write_report_header(f, "WORD LADDER SEARCH REPORT")

        f.write(f"Source:          {result.source}\n")
        f.write(f"Target:          {result.target}\n")
        f.write(f"Dictionary size: {dictionary_size}\n")
        f.write(f"Reserved words:  {result.reserved_count}\n")
        f.write(f"Search time:     {format_time(elapsed_time)}\n\n")

        write_section_header(f, "RESULT")
        if result.path is not None:
            f.write(f"Found ladder with {result.depth} steps:\n")
            for position, word in enumerate(result.path):
                f.write(f"  {position:>3}. {word}\n")
        else:
            f.write(f"No path from {result.source} to {result.target}.\n")
        f.write("\n")

        write_section_header(f, "ROUNDS")
        f.write(f"{'Round':>6} {'Frontier':>10} {'Neighbors':>10} {'Reserved':>10}\n")
        for summary in result.rounds:
            f.write(
                f"{summary.depth:>6} {summary.frontier_size:>10} "
                f"{summary.candidates:>10} {summary.reserved:>10}\n"
            )

    return report_path
