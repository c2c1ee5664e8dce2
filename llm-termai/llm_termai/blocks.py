"""Command block selection.

Groups classified lines into command blocks in one forward scan and keeps
the trailing ones. The last prompt of a capture is normally the shell
waiting for input after the most recent command (often the prompt the user
typed ``termai`` at); when nothing follows it, it is not a command block and
is left out.
"""
import logging
from typing import List, Sequence

from .transcript import CommandBlock, Line, SelectionWindow

logger = logging.getLogger(__name__)


def split_blocks(lines: Sequence[Line]) -> List[CommandBlock]:
    """Group lines into blocks, each opened by a boundary line.

    Lines before the first boundary form a leading preamble block.
    """
    blocks: List[CommandBlock] = []
    current = CommandBlock()

    for line in lines:
        if line.is_boundary:
            if current.prompt is not None or current.output:
                blocks.append(current)
            current = CommandBlock(prompt=line)
        else:
            current.output.append(line)

    if current.prompt is not None or current.output:
        blocks.append(current)
    return blocks


def select_trailing_blocks(lines: Sequence[Line], n: int) -> List[Line]:
    """Select the lines of the last ``n`` command blocks.

    Args:
        lines: Classified lines in transcript order
        n: Number of trailing command blocks to keep (>= 1)

    Returns:
        Lines of the selected blocks in transcript order, each block with its
        own prompt line. With fewer than ``n`` blocks available, everything
        (including the preamble) is returned.

    Raises:
        ValueError: If n is smaller than 1
    """
    if n < 1:
        raise ValueError(f"Block count must be a positive integer, got {n}")

    blocks = split_blocks(lines)
    if blocks and blocks[-1].is_bare:
        blocks = blocks[:-1]

    commands = [block for block in blocks if not block.is_preamble]
    if len(commands) >= n:
        blocks = commands[-n:]
    else:
        logger.debug("Only %d command blocks available, %d requested", len(commands), n)

    selected = [line for block in blocks for line in block.lines()]
    logger.debug("Selected %d of %d lines for %d blocks", len(selected), len(lines), n)
    return selected


def select_window(lines: Sequence[Line], n: int) -> SelectionWindow:
    return SelectionWindow(n=n, lines=select_trailing_blocks(lines, n))
