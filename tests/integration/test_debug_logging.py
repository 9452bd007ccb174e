"""Regression tests for debug logging during the search.

Verifies that per-round summaries and debug-word traces reach the loguru
sinks when debug logging is on, and stay out of them otherwise.
"""

import io
import subprocess
import sys
from pathlib import Path

import pytest
from loguru import logger

from ladderpy.core import build_index, find_ladder
from ladderpy.utils.logging import setup_logger

WORDS = {"dog", "dig", "dug", "dag", "dot", "cot", "cat", "cog", "cag"}


@pytest.fixture
def log_capture():
    """Capture DEBUG-level messages in a StringIO sink."""
    setup_logger(verbose=True, debug=True)
    capture = io.StringIO()
    handler_id = logger.add(capture, level="DEBUG", format="{message}")
    yield capture
    logger.remove(handler_id)
    logger.remove()


def test_logs_each_round(log_capture):
    """Every round is summarized at DEBUG level."""
    find_ladder(build_index(WORDS), "dog", "cat")
    log_text = log_capture.getvalue()
    assert "Round 1: expanded 1 words, examined 5 neighbors, reserved 5" in log_text
    assert "Round 3:" in log_text


def test_traces_debug_word_reservation(log_capture):
    """A traced word logs the frontier word that reserved it."""
    find_ladder(build_index(WORDS), "dog", "cat", debug_words=frozenset({"cag"}))
    log_text = log_capture.getvalue()
    assert "[DEBUG WORD: 'cag'] [Round 2] Reserved by 'cog'" in log_text, (
        f"Expected reservation trace for 'cag'. Captured messages:\n{log_text}"
    )


def test_traces_debug_word_skipped(log_capture):
    """A traced word logs when a later frontier word offers it again."""
    find_ladder(build_index(WORDS), "dog", "cat", debug_words=frozenset({"cag"}))
    log_text = log_capture.getvalue()
    assert (
        "[DEBUG WORD: 'cag'] [Round 2] Skipped as neighbor of 'dag' "
        "(already reserved by 'cog')"
    ) in log_text


def test_traces_source(log_capture):
    """A traced source word is logged as the search source."""
    find_ladder(build_index(WORDS), "dog", "cat", debug_words=frozenset({"dog"}))
    assert "[DEBUG WORD: 'dog'] [Round 0] Reserved as search source" in log_capture.getvalue()


def test_untraced_words_are_silent(log_capture):
    """Words outside debug_words produce no trace messages."""
    find_ladder(build_index(WORDS), "dog", "cat")
    assert "[DEBUG WORD:" not in log_capture.getvalue()


def test_warning_level_hides_rounds():
    """Without verbose or debug, round summaries are not emitted."""
    setup_logger(verbose=False, debug=False)
    capture = io.StringIO()
    handler_id = logger.add(capture, level="WARNING", format="{message}")
    try:
        find_ladder(build_index(WORDS), "dog", "cat")
        assert capture.getvalue() == ""
    finally:
        logger.remove(handler_id)
        logger.remove()


def test_library_use_is_silent_without_setup_logger():
    """Importing and searching without setup_logger writes nothing to stderr."""
    script = (
        "from ladderpy import build_index, find_ladder\n"
        f"words = {sorted(WORDS)!r}\n"
        "result = find_ladder(build_index(words), 'dog', 'cat', debug_words=frozenset({'cag'}))\n"
        "print('/'.join(result.path))\n"
    )
    completed = subprocess.run(
        [sys.executable, "-c", script],
        capture_output=True,
        text=True,
        check=True,
        cwd=Path(__file__).resolve().parents[2],
    )
    assert completed.stdout == "dog/cog/cag/cat\n"
    assert completed.stderr == ""
