"""Reconstruct labeled command/output segments for the model.

Each prompt line is paired with its command text from the history log,
correlated by position from the end: the last prompt in the selection
belongs to the last history entry, the one before it to the entry before
that, and so on. No reconciliation is attempted when the two logs drift
apart; prompts without a usable history entry keep their raw screen text.
"""
import logging
from typing import List, Sequence

from .blocks import split_blocks
from .transcript import HistoryEntry, Line

logger = logging.getLogger(__name__)

COMMAND_LABEL = "TERMINAL_COMMAND:"
OUTPUT_LABEL = "TERMINAL_OUTPUT:"
DEFAULT_INSTRUCTION = "Explain this terminal output."


def resolve_command(prompt: Line, history: Sequence[HistoryEntry], prompts_counted: int) -> str:
    """Return the command text for a prompt line.

    Args:
        prompt: The boundary line as rendered on screen
        history: Command-history entries, oldest first
        prompts_counted: Position of this prompt counted from the end (1 = last)

    Returns:
        The trimmed history entry, or the raw prompt line when the entry is
        missing or blank
    """
    index = len(history) - prompts_counted
    if 0 <= index < len(history):
        command = history[index].strip()
        if command:
            return command
    logger.debug("No history entry for prompt %d from the end, using screen text", prompts_counted)
    return prompt.text


def _output_segment(lines: List[Line]) -> str:
    body = "\n".join(line.text for line in lines)
    return f"{OUTPUT_LABEL}\n{body}"


def format_blocks(selected: Sequence[Line], history: Sequence[HistoryEntry]) -> str:
    """Render selected lines as alternating command/output segments.

    Args:
        selected: Lines chosen by the block selector
        history: Command-history entries, oldest first

    Returns:
        Segments in transcript order joined by newlines, e.g.::

            TERMINAL_COMMAND: ls
            TERMINAL_OUTPUT:
            file.txt

        Empty string when nothing was selected.
    """
    blocks = split_blocks(selected)
    total_prompts = sum(1 for block in blocks if not block.is_preamble)

    segments: List[str] = []
    seen_prompts = 0
    for block in blocks:
        if block.prompt is not None:
            seen_prompts += 1
            command = resolve_command(block.prompt, history, total_prompts - seen_prompts + 1)
            segments.append(f"{COMMAND_LABEL} {command}")
        if block.output:
            segments.append(_output_segment(block.output))

    return "\n".join(segments)


def build_prompt(instruction: str, context: str) -> str:
    """Splice formatted terminal context into the instruction prompt."""
    return f"{instruction}\n\nTerminal context:\n```text\n{context}\n```"


def format_context(selected: Sequence[Line], history: Sequence[HistoryEntry], instruction: str) -> str:
    return build_prompt(instruction, format_blocks(selected, history))
