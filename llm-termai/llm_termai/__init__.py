"""
llm-termai - Explain recent terminal activity with an LLM.

A .bashrc hook records the terminal with script(1) and logs every executed
command. termai cleans that raw capture, cuts out the last N command blocks
and sends them, labeled, to a model through the llm library.

CLI Usage:
    termai           # Explain the last command and its output
    termai -n 3      # Explain the last 3 command blocks
    termai --setup   # Configure model and .bashrc logging

Library Usage:
    from llm_termai import build_context, ContextRequest

    prompt = build_context(raw_log, history_lines, ContextRequest(n=2))
"""

from .sanitizer import TranscriptSanitizer, sanitize
from .boundary import BoundaryDetector, is_boundary
from .transcript import CommandBlock, HistoryEntry, Line, SelectionWindow, classify_lines
from .blocks import select_trailing_blocks, select_window, split_blocks
from .formatter import (
    COMMAND_LABEL,
    OUTPUT_LABEL,
    build_prompt,
    format_blocks,
    format_context,
)
from .core import ContextRequest, build_context, collect_context, extract_lines
from .errors import (
    ErrorCode,
    TermaiError,
    LoggingNotActiveError,
    EmptyContextError,
    ModelError,
    ConfigError,
    SetupError,
)

__all__ = [
    # Sanitizer
    "TranscriptSanitizer",
    "sanitize",
    # Boundary detection
    "BoundaryDetector",
    "is_boundary",
    # Data types
    "CommandBlock",
    "HistoryEntry",
    "Line",
    "SelectionWindow",
    "classify_lines",
    # Block selection
    "select_trailing_blocks",
    "select_window",
    "split_blocks",
    # Formatting
    "COMMAND_LABEL",
    "OUTPUT_LABEL",
    "build_prompt",
    "format_blocks",
    "format_context",
    # Pipeline
    "ContextRequest",
    "build_context",
    "collect_context",
    "extract_lines",
    # Errors
    "ErrorCode",
    "TermaiError",
    "LoggingNotActiveError",
    "EmptyContextError",
    "ModelError",
    "ConfigError",
    "SetupError",
]

__version__ = "0.3.0"
