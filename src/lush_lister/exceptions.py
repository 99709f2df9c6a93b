"""Errors raised by the listing tools.

Each maps to a single user-visible message; none of them leave partial output
behind.
"""


class LushError(Exception):
    """Base class for user-facing failures."""


class EmptyExportError(LushError):
    def __init__(self, message: str = "Scroll is empty!") -> None:
        super().__init__(message)


class BatchError(LushError):
    """Raised when a rename batch is missing its SKU or its files."""


class ConfirmationRequired(LushError):
    def __init__(self, what: str = "list") -> None:
        super().__init__(f"Clearing the {what} requires explicit confirmation")


class IdentificationError(LushError):
    """The image-identification service failed or returned garbage."""
