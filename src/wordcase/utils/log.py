"""
log.py.

Does: Topic-filtered debug printer controlled by WORDCASE_DEBUG_TOPICS
      (comma-separated topic names, or 'all').
Returns: Timestamped lines on stderr. Used by the case converter and tests.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "is_enabled"]

ENV_VAR = "WORDCASE_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Re-read enabled topics from WORDCASE_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def is_enabled(topic: str) -> bool:
    topic_key = topic.lower().strip()
    return "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "token",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped line tagged with topic and level
    when the topic is enabled.
    """
    if not is_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
