"""Data types shared by the block selector and the formatter."""
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .boundary import BoundaryDetector

# One line of the command-history log, as executed, oldest first
HistoryEntry = str


@dataclass(frozen=True)
class Line:
    """A sanitized transcript line."""
    text: str
    is_boundary: bool = False

    @classmethod
    def from_text(cls, text: str) -> "Line":
        return cls(text, BoundaryDetector.is_boundary(text))


@dataclass
class CommandBlock:
    """A prompt line plus the output lines printed until the next prompt.

    ``prompt`` is None only for the preamble: output captured before the
    first prompt in the transcript.
    """
    prompt: Optional[Line] = None
    output: List[Line] = field(default_factory=list)

    @property
    def is_preamble(self) -> bool:
        return self.prompt is None

    @property
    def is_bare(self) -> bool:
        """A prompt with nothing printed after it (shell waiting for input)."""
        return self.prompt is not None and not self.output

    def lines(self) -> List[Line]:
        if self.prompt is None:
            return list(self.output)
        return [self.prompt, *self.output]


@dataclass
class SelectionWindow:
    """The requested block count and the lines selected for it."""
    n: int
    lines: List[Line] = field(default_factory=list)

    @property
    def boundary_count(self) -> int:
        return sum(1 for line in self.lines if line.is_boundary)

    def texts(self) -> List[str]:
        return [line.text for line in self.lines]


def classify_lines(texts: Iterable[str]) -> List[Line]:
    """Wrap sanitized texts into Lines with their boundary flag."""
    return [Line.from_text(text) for text in texts]
