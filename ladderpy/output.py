"""Ladder output formatting."""

import json
import os
import sys
from collections.abc import Sequence

import yaml

from ladderpy.utils.constants import Constants


def _ladder_document(path: Sequence[str]) -> dict:
    return {
        "source": path[0],
        "target": path[-1],
        "steps": len(path) - 1,
        "path": list(path),
    }


def format_ladder(path: Sequence[str], fmt: str = "path") -> str:
    """Format a ladder for output.

    Formats:
        path:  /dog/cog/cag/cat
        lines: one word per line
        json:  object with source, target, steps and path
        yaml:  the same object as YAML

    Args:
        path: Ladder from source to target (non-empty)
        fmt: Output format

    Returns:
        Formatted ladder (no trailing newline)

    Raises:
        ValueError: If the format is unknown
    """
    if fmt == "path":
        return Constants.PATH_SEPARATOR + Constants.PATH_SEPARATOR.join(path)
    if fmt == "lines":
        return "\n".join(path)
    if fmt == "json":
        return json.dumps(_ladder_document(path), indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(
            _ladder_document(path),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ).rstrip("\n")
    raise ValueError(f"Unknown output format: {fmt}")


def write_ladder(text: str, output: str | None = None) -> None:
    """Write formatted ladder text to a file, or to stdout if no file is given."""
    if not output:
        sys.stdout.write(text + "\n")
        return

    directory = os.path.dirname(output)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(output, "w", encoding="utf-8") as f:
        f.write(text + "\n")
