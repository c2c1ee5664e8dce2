"""Shell prompt boundary detection.

A boundary is a sanitized line where the shell printed a new prompt, i.e.
the start of a new command block. Detection is a structural heuristic for
prompts of the form ``user@host:path$ `` (or ``#`` for root); output that
happens to start with the same shape is classified as a boundary too.
"""
import re
from typing import Iterable, List, Tuple


class BoundaryDetector:
    """Detect prompt boundaries in sanitized terminal lines"""

    # user@host:path followed by $ or # and whitespace, anchored at line start.
    # A bare prompt at the very end of a transcript loses its trailing space
    # to the overall trim, so the terminator may also end the line.
    PROMPT_PATTERN = re.compile(r'^[A-Za-z0-9_-]+@[A-Za-z0-9._-]+:.*[$#](?:\s|$)')

    @classmethod
    def is_boundary(cls, line: str) -> bool:
        """Check if a single sanitized line starts a new command block"""
        return cls.PROMPT_PATTERN.match(line) is not None

    @classmethod
    def find_boundaries(cls, lines: Iterable[str]) -> List[Tuple[int, str]]:
        """
        Find all boundary lines.

        Args:
            lines: Sanitized lines in transcript order

        Returns:
            List of (line_number, line_content) tuples for boundary lines.
        """
        return [(i, line) for i, line in enumerate(lines) if cls.is_boundary(line)]


def is_boundary(line: str) -> bool:
    return BoundaryDetector.is_boundary(line)
