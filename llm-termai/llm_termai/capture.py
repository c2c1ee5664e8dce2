"""Read the terminal transcript and command-history log from disk.

All file I/O happens here, once, before the transcript core runs.
"""
import logging
import time
from pathlib import Path
from typing import List

from .errors import LoggingNotActiveError
from .transcript import HistoryEntry

logger = logging.getLogger(__name__)


def read_transcript(path: Path, settle_delay: float = 0.0) -> str:
    """Read the raw transcript written by script(1).

    Args:
        path: Transcript log file
        settle_delay: Seconds to wait first, so the recorder can finish
            writing the keypress that launched us

    Returns:
        Transcript decoded as UTF-8; undecodable bytes are replaced

    Raises:
        LoggingNotActiveError: If the log file does not exist
    """
    if not path.is_file():
        raise LoggingNotActiveError()
    if settle_delay > 0:
        time.sleep(settle_delay)
    raw = path.read_text(encoding="utf-8", errors="replace")
    logger.debug("Read %d chars from %s", len(raw), path)
    return raw


def read_history(path: Path) -> List[HistoryEntry]:
    """Read the command-history log, one entry per non-empty line, oldest first.

    The DEBUG trap writes exactly one newline-terminated line per command, so
    only a newline separates entries; form feeds and other line-break
    characters stay inside the command text.

    A missing log yields no entries; the formatter then falls back to the
    prompt lines seen on screen.
    """
    if not path.is_file():
        logger.debug("History log %s not found", path)
        return []
    text = path.read_text(encoding="utf-8", errors="replace")
    return [line for line in text.split("\n") if line.strip()]
