"""Exceptions raised by the conversion engine"""


class ConversionError(ValueError):
    """Base class for documents the engine refuses to convert."""


class UnterminatedFenceError(ConversionError):
    """A start fence was found with no closing fence after it."""

    def __init__(self, line: int, language: str):
        self.line = line
        self.language = language
        super().__init__(
            f"Unterminated ```{language} fence opened at non-blank line {line + 1}"
        )
