"""Shell instrumentation in ~/.bashrc.

Installs a marker-delimited block that records the terminal with
``script -q -a -f`` and appends every executed command to the history log.
"""
import logging
from pathlib import Path
from typing import List

from .errors import SetupError
from .templates import render

logger = logging.getLogger(__name__)

START_MARKER = '# --- TERMAI LOGGING START ---'
END_MARKER = '# --- TERMAI LOGGING END ---'


def default_bashrc_path() -> Path:
    return Path.home() / '.bashrc'


def render_logging_block(log_file: Path, history_file: Path, log_size_kb: int) -> str:
    """Render the .bashrc block for the given capture files."""
    return render(
        'bashrc.sh.j2',
        start_marker=START_MARKER,
        end_marker=END_MARKER,
        log_file=log_file,
        history_file=history_file,
        log_size_bytes=log_size_kb * 1024,
    )


def has_logging(bashrc: Path) -> bool:
    if not bashrc.is_file():
        return False
    return START_MARKER in bashrc.read_text(encoding='utf-8')


def _strip_block(lines: List[str]) -> List[str]:
    kept = []
    in_block = False
    for line in lines:
        if START_MARKER in line:
            in_block = True
            continue
        if in_block and END_MARKER in line:
            in_block = False
            continue
        if not in_block:
            kept.append(line)
    return kept


def remove_logging(bashrc: Path) -> bool:
    """Remove the termai block from a .bashrc.

    Returns:
        True if a block was found and removed
    """
    if not has_logging(bashrc):
        return False
    try:
        lines = bashrc.read_text(encoding='utf-8').split('\n')
        content = '\n'.join(_strip_block(lines)).rstrip('\n')
        bashrc.write_text(content + '\n' if content else '', encoding='utf-8')
    except OSError as e:
        raise SetupError(f"Cannot update {bashrc}: {e}") from e
    logger.debug("Removed logging block from %s", bashrc)
    return True


def install_logging(bashrc: Path, log_file: Path, history_file: Path, log_size_kb: int) -> None:
    """Install (or reinstall) the logging block at the end of a .bashrc.

    Raises:
        SetupError: If the file cannot be written
    """
    remove_logging(bashrc)
    block = render_logging_block(log_file, history_file, log_size_kb)
    try:
        with bashrc.open('a', encoding='utf-8') as f:
            f.write('\n' + block)
    except OSError as e:
        raise SetupError(f"Cannot update {bashrc}: {e}") from e
    logger.debug("Installed logging block in %s", bashrc)
