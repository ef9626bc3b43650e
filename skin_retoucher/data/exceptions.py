# skin_retoucher/data/exceptions.py


class RetouchPromptError(Exception):
    """Base class for errors raised by the prompt-composition core."""


class IncompletePromptError(RetouchPromptError):
    """A draft prompt is missing required fields and cannot be sent."""

    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = list(missing_fields)
        super().__init__(
            f"Prompt is missing required fields: {', '.join(self.missing_fields)}"
        )


class UnknownStyleError(RetouchPromptError):
    """Raised for unregistered style ids when strict lookup is enabled."""

    def __init__(self, style: str) -> None:
        self.style = style
        super().__init__(f"Unknown retouch style: {style!r}")


class InvalidImageDataError(RetouchPromptError):
    """The uploaded image payload could not be decoded."""


class PromptLibraryError(RetouchPromptError):
    """A prompt library asset could not be read or parsed."""
