"""
Error handling for the Tally CLI.

CLI errors carry a machine-readable code and an optional hint; compiler
errors are formatted through their own ``__str__``.
"""

from typing import Optional

from tally.errors import TallyError


class CLIError(Exception):
    """
    Base exception for CLI operations.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code
        hint: Optional suggestion for resolving the error
    """

    def __init__(self, message: str, *, code: str, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint

    def __str__(self) -> str:
        return self.message


class CLIInputError(CLIError):
    """
    The source program could not be read.

    Raised when:
    - The source file does not exist or is not readable
    - The source file is not valid UTF-8
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_INPUT_ERROR')
        super().__init__(message, **kwargs)


def format_cli_error(exc: BaseException) -> str:
    """Render an exception for stderr."""
    if isinstance(exc, CLIError):
        text = f"error[{exc.code}]: {exc.message}"
        if exc.hint:
            text += f"\n  hint: {exc.hint}"
        return text
    if isinstance(exc, TallyError):
        return f"error: {exc}"
    return f"error: {exc.__class__.__name__}: {exc}"


__all__ = ["CLIError", "CLIInputError", "format_cli_error"]
