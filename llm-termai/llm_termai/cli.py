"""Command-line interface for termai.

Usage:
    termai                  # Explain the last command and its output
    termai -n 3             # Explain the last 3 command blocks
    termai -p "Why did this fail?"
    termai how do I undo a git commit   # Direct question, no terminal context
    termai --print          # Show the prompt that would be sent
    termai --setup          # Configure model and .bashrc logging
"""

import json
import logging
import sys
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape

from .backend import stream_response
from .bashrc import default_bashrc_path, has_logging, install_logging, remove_logging
from .capture import read_history, read_transcript
from .config import TermaiSettings, get_settings, save_settings
from .core import ContextRequest, collect_context
from .errors import EmptyContextError, TermaiError
from .formatter import build_prompt

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_terminal_prompt(settings: TermaiSettings, request: ContextRequest) -> str:
    """Read the capture files and build the prompt for the model.

    Raises:
        LoggingNotActiveError: If the transcript log does not exist
        EmptyContextError: If the transcript holds no command activity
    """
    raw = read_transcript(settings.log_file, settle_delay=settings.settle_delay)
    history = read_history(settings.history_file)
    context = collect_context(raw, history, request.n)
    if not context:
        raise EmptyContextError()
    return build_prompt(request.instruction, context)


def ask_model(prompt: str, model_id: Optional[str], err_console: Console) -> None:
    """Stream the model's answer to stdout."""
    # Status line starts with "> Querying" so the sanitizer drops it next time
    err_console.print(f"[dim]> Querying {escape(model_id or 'default model')}...[/]")
    for chunk in stream_response(prompt, model_id):
        click.echo(chunk, nl=False)
    click.echo()


def run_setup(settings: TermaiSettings, err_console: Console) -> None:
    """Interactive setup: default model, .bashrc logging, config file."""
    click.echo("--- termai Setup ('enter' to keep current value) ---")

    model = click.prompt("Default model (llm model id)", default=settings.default_model or "",
                         show_default=bool(settings.default_model))
    updates = {"default_model": model.strip() or None}

    bashrc = default_bashrc_path()
    installed = has_logging(bashrc)
    question = "Reload/redo .bashrc logging?" if installed else "Enable terminal logging in .bashrc?"

    if click.confirm(question, default=True):
        log_size = click.prompt("Trim log file when larger than (KB)", default=settings.log_size_max_kb,
                                type=click.IntRange(min=1))
        updates["log_size_max_kb"] = log_size
        install_logging(bashrc, settings.log_file, settings.history_file, log_size)
        err_console.print(f"[green]✓[/] Updated {escape(str(bashrc))}. Run now: source ~/.bashrc")
    elif not installed:
        err_console.print("[yellow]termai needs to log terminal output in order to work. "
                          "Run 'termai --setup' again to enable it.[/]")

    path = save_settings(updates)
    err_console.print(f"[green]✓[/] Settings saved to {escape(str(path))}")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument('query', nargs=-1)
@click.option('-n', 'blocks', type=click.IntRange(min=1), default=None,
              help='Number of command blocks to retrieve')
@click.option('-p', '--prompt', 'instruction', default=None,
              help='Custom instruction (default: "Explain this terminal output.")')
@click.option('-m', '--model', default=None,
              help='llm model to use (default: configured model)')
@click.option('--print', 'print_only', is_flag=True,
              help='Print the prompt instead of sending it')
@click.option('--setup', is_flag=True,
              help='Run interactive setup')
@click.option('--uninstall', is_flag=True,
              help='Remove terminal logging from .bashrc')
@click.option('--config', 'show_config', is_flag=True,
              help='Display current configuration')
@click.option('--debug', is_flag=True,
              help='Enable debug logging')
def main(
    query: Tuple[str, ...],
    blocks: Optional[int],
    instruction: Optional[str],
    model: Optional[str],
    print_only: bool,
    setup: bool,
    uninstall: bool,
    show_config: bool,
    debug: bool,
):
    """AI terminal assistant and output explainer."""
    err_console = Console(stderr=True)

    try:
        settings = get_settings()
        configure_logging("DEBUG" if debug else settings.log_level)

        if setup:
            run_setup(settings, err_console)
            return

        if uninstall:
            if remove_logging(default_bashrc_path()):
                err_console.print("[green]✓[/] termai logging section removed from .bashrc")
            else:
                err_console.print("[yellow]No termai logging section found in .bashrc[/]")
            return

        if show_config:
            click.echo(json.dumps(settings.model_dump(mode="json"), indent=2))
            return

        model_id = model or settings.default_model

        if query:
            prompt = ' '.join(query)
        else:
            request = ContextRequest(
                n=blocks or settings.default_blocks,
                instruction=instruction or settings.default_prompt,
            )
            prompt = build_terminal_prompt(settings, request)

        if print_only:
            click.echo(prompt)
            return

        ask_model(prompt, model_id, err_console)

    except TermaiError as e:
        logger.debug("Aborting: %s", e)
        err_console.print(f"[red]✗[/] {escape(e.message)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
