"""Terminal context pipeline.

sanitize -> classify boundaries -> select trailing blocks -> format.
Pure functions over already-read input; no file I/O and no global config.
"""
import logging
from dataclasses import dataclass
from typing import List, Sequence

from .blocks import select_trailing_blocks
from .formatter import DEFAULT_INSTRUCTION, build_prompt, format_blocks
from .sanitizer import sanitize
from .transcript import HistoryEntry, Line, classify_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContextRequest:
    """What to extract: block count and the instruction for the model."""
    n: int = 1
    instruction: str = DEFAULT_INSTRUCTION

    def __post_init__(self):
        if self.n < 1:
            raise ValueError(f"Block count must be a positive integer, got {self.n}")


def extract_lines(raw: str) -> List[Line]:
    """Sanitize a raw transcript and classify its lines."""
    return classify_lines(sanitize(raw))


def collect_context(raw: str, history: Sequence[HistoryEntry], n: int) -> str:
    """Return labeled command/output segments for the last ``n`` blocks.

    Empty string when the transcript holds nothing worth sending.
    """
    lines = extract_lines(raw)
    selected = select_trailing_blocks(lines, n)
    logger.debug("Formatting %d lines with %d history entries", len(selected), len(history))
    return format_blocks(selected, history)


def build_context(raw: str, history: Sequence[HistoryEntry], request: ContextRequest) -> str:
    """Build the complete model prompt from a raw transcript.

    Args:
        raw: Raw terminal capture
        history: Command-history entries, oldest first
        request: Block count and instruction

    Returns:
        The instruction followed by the terminal context in a fenced block
    """
    return build_prompt(request.instruction, collect_context(raw, history, request.n))
