"""
log.py.

Does: Lightweight debug logger controlled by COLOR_DESCRIBER_DEBUG_TOPICS
      (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used by palette loading,
         nearest-color search and the CLI.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "enable_all_topics"]

ENV_VAR = "COLOR_DESCRIBER_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable COLOR_DESCRIBER_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enable_all_topics() -> None:
    """Does: Switch every topic on for the rest of the process (CLI --debug)."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = {"all"}


def debug(
    msg: str,
    topic: str = "search",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via COLOR_DESCRIBER_DEBUG_TOPICS.
    """
    topic_key = topic.lower().strip()
    if "all" not in _DEBUG_TOPICS and topic_key not in _DEBUG_TOPICS:
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic_key}][{level.upper()}] {msg}", file=stream)
