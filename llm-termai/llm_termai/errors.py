"""Error codes and exceptions for termai.

The transcript core never raises for malformed input; these are raised by
the outer layers (capture, config, backend, setup) and reported by the CLI.
"""


class ErrorCode:
    """Standard error codes reported by the CLI."""

    LOGGING_NOT_ACTIVE = "LOGGING_NOT_ACTIVE"  # Terminal log file missing
    EMPTY_CONTEXT = "EMPTY_CONTEXT"            # Nothing to explain in the log
    MODEL_ERROR = "MODEL_ERROR"                # LLM backend error
    CONFIG_ERROR = "CONFIG_ERROR"              # Unreadable/invalid config file
    SETUP_ERROR = "SETUP_ERROR"                # .bashrc instrumentation failed


class TermaiError(Exception):
    """Base exception for termai errors."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class LoggingNotActiveError(TermaiError):
    """Raised when the terminal transcript log does not exist."""

    def __init__(self, message: str = "Logging not active. Run: termai --setup"):
        super().__init__(ErrorCode.LOGGING_NOT_ACTIVE, message)


class EmptyContextError(TermaiError):
    """Raised when the transcript holds no command activity."""

    def __init__(self, message: str = "No terminal activity found in the log"):
        super().__init__(ErrorCode.EMPTY_CONTEXT, message)


class ModelError(TermaiError):
    """Raised when the LLM backend call fails."""

    def __init__(self, message: str):
        super().__init__(ErrorCode.MODEL_ERROR, message)


class ConfigError(TermaiError):
    """Raised when the configuration cannot be loaded or saved."""

    def __init__(self, message: str):
        super().__init__(ErrorCode.CONFIG_ERROR, message)


class SetupError(TermaiError):
    """Raised when shell instrumentation cannot be installed or removed."""

    def __init__(self, message: str):
        super().__init__(ErrorCode.SETUP_ERROR, message)
