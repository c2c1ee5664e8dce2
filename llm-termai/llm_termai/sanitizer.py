"""Terminal transcript sanitizer.

Turns a raw pseudo-terminal capture (as written by ``script -f``) into
clean logical lines. Rendering side effects are resolved to their end state:

- CRLF becomes LF; a stray CR starts a new line instead of merging text
- NUL bytes are dropped
- OSC sequences (ESC ] ... BEL or ESC \\) are dropped (window titles)
- CSI sequences (ESC [ params final) are dropped, including the
  delete-character form ESC [ n P
- backspace / DEL erase the preceding character on the same line
- remaining bare ESC characters are dropped

Everything happens in a single left-to-right pass over the input. Malformed
sequences never raise: the ESC is dropped and the bytes that follow it are
kept as literal text.
"""
import logging
from enum import Enum
from typing import List

logger = logging.getLogger(__name__)

ESC = '\x1b'
BEL = '\x07'
NUL = '\x00'
ERASERS = frozenset('\x08\x7f')

# Noise written into the capture by the logging mechanism itself
QUERY_STATUS_PREFIX = '> Querying'
CAPTURE_BANNERS = ('Script started', 'Script done', '--- Log trimmed ---')


class ScanState(Enum):
    NORMAL = "normal"
    IN_CSI = "in_csi"
    IN_OSC = "in_osc"


class TranscriptSanitizer:
    """Explicit-state scanner for raw terminal captures."""

    # ECMA-48 byte classes for CSI sequences
    CSI_PARAMETER = ('\x30', '\x3f')     # 0-9 : ; < = > ?
    CSI_INTERMEDIATE = ('\x20', '\x2f')  # space ! " # ... /
    CSI_FINAL = ('\x40', '\x7e')         # @ A-Z [ \ ] ^ _ ` a-z { | } ~

    @staticmethod
    def _in_range(ch: str, byte_range) -> bool:
        return byte_range[0] <= ch <= byte_range[1]

    @classmethod
    def resolve(cls, raw: str) -> str:
        """Resolve control sequences and in-place edits of a raw capture.

        Args:
            raw: Captured terminal text (already decoded)

        Returns:
            Text containing only printable characters, tabs and LF line breaks

        Examples:
            >>> TranscriptSanitizer.resolve("abc\\x7f\\x7fd")
            'ad'
        """
        out: List[str] = []
        state = ScanState.NORMAL
        seq_start = 0
        csi_intermediate = False
        # An OSC opened before this index is known to have no terminator
        osc_dead_until = -1
        i = 0
        n = len(raw)

        while True:
            if i >= n:
                if state is ScanState.NORMAL:
                    break
                # Unterminated sequence at end of input
                if state is ScanState.IN_OSC:
                    osc_dead_until = n
                state = ScanState.NORMAL
                i = seq_start + 1
                continue

            ch = raw[i]
            if ch == NUL:
                i += 1
                continue

            if state is ScanState.NORMAL:
                nxt = raw[i + 1] if i + 1 < n else ''
                if ch == ESC:
                    if nxt == '[':
                        state = ScanState.IN_CSI
                        seq_start = i
                        csi_intermediate = False
                        i += 2
                    elif nxt == ']' and i >= osc_dead_until:
                        state = ScanState.IN_OSC
                        seq_start = i
                        i += 2
                    else:
                        i += 1
                    continue
                if ch == '\r':
                    if nxt != '\n':
                        out.append('\n')
                elif ch in ERASERS:
                    if out and out[-1] != '\n':
                        out.pop()
                else:
                    out.append(ch)
                i += 1

            elif state is ScanState.IN_CSI:
                if not csi_intermediate and cls._in_range(ch, cls.CSI_PARAMETER):
                    i += 1
                elif cls._in_range(ch, cls.CSI_INTERMEDIATE):
                    csi_intermediate = True
                    i += 1
                elif cls._in_range(ch, cls.CSI_FINAL):
                    state = ScanState.NORMAL
                    i += 1
                else:
                    # Malformed: drop the ESC, keep the rest as text
                    state = ScanState.NORMAL
                    i = seq_start + 1

            else:  # ScanState.IN_OSC
                if ch == BEL:
                    state = ScanState.NORMAL
                    i += 1
                elif ch == ESC and i + 1 < n and raw[i + 1] == '\\':
                    state = ScanState.NORMAL
                    i += 2
                elif ch == '\n':
                    osc_dead_until = i
                    state = ScanState.NORMAL
                    i = seq_start + 1
                else:
                    i += 1

        return ''.join(out)

    @staticmethod
    def is_noise(line: str) -> bool:
        """Check if a line is empty or was injected by the capture tooling."""
        stripped = line.strip()
        if not stripped:
            return True
        if stripped.startswith(QUERY_STATUS_PREFIX):
            return True
        return any(banner in stripped for banner in CAPTURE_BANNERS)


def sanitize(raw: str) -> List[str]:
    """Sanitize a raw terminal capture into logical lines.

    Leading/trailing whitespace is trimmed from the transcript as a whole,
    not per line, so indentation inside command output survives.

    Args:
        raw: Captured terminal text

    Returns:
        Non-empty, control-sequence-free lines in transcript order
    """
    text = TranscriptSanitizer.resolve(raw).strip()
    if not text:
        return []

    lines = [line for line in text.split('\n') if not TranscriptSanitizer.is_noise(line)]
    if lines:
        lines[0] = lines[0].lstrip()
        lines[-1] = lines[-1].rstrip()

    logger.debug("Sanitized %d raw chars into %d lines", len(raw), len(lines))
    return lines
