"""Model backend: stream a prompt through the llm library.

Model selection, API keys and providers (OpenAI, Ollama via llm-ollama,
...) are whatever the user configured for ``llm``.
"""
import logging
from typing import Iterator, Optional

import llm

from .errors import ModelError

logger = logging.getLogger(__name__)


def resolve_model(model_id: Optional[str] = None):
    """Get an llm model by id, or llm's default model.

    Raises:
        ModelError: If no model matches
    """
    try:
        return llm.get_model(model_id) if model_id else llm.get_model()
    except llm.UnknownModelError as e:
        raise ModelError(f"Unknown model: {model_id or 'default'} ({e})") from e


def stream_response(prompt: str, model_id: Optional[str] = None) -> Iterator[str]:
    """Send a prompt and yield the response text as it streams in.

    Args:
        prompt: Complete prompt text
        model_id: llm model id (None for the default model)

    Yields:
        Response text chunks

    Raises:
        ModelError: If the model is unknown or the backend call fails
    """
    model = resolve_model(model_id)
    logger.debug("Prompting %s with %d chars", model.model_id, len(prompt))
    try:
        response = model.prompt(prompt, stream=True)
        for chunk in response:
            yield chunk
    except Exception as e:
        raise ModelError(f"{model.model_id} failed: {e}") from e
