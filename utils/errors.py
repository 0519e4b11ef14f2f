"""
Errors raised while building, encoding or decoding notification models.

None of these are caught inside the models: every failure surfaces to the
caller as a terminal failure of the in-progress construct / decode / parse.
"""

from typing import Optional


class NotificationModelError(Exception):
    """Base class for all notification model errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidArgumentError(NotificationModelError):
    """A field value failed validation (e.g. a malformed email address)."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_ARGUMENT")


class MissingFieldError(NotificationModelError):
    """A required field was absent from a structured document."""

    def __init__(self, tag: str):
        super().__init__(f"{tag} field absent", code="MISSING_FIELD")
        self.tag = tag


class MalformedDocumentError(NotificationModelError):
    """The document did not have the expected token structure."""

    def __init__(self, message: str):
        super().__init__(message, code="MALFORMED_DOCUMENT")


class DecodeError(NotificationModelError):
    """Binary input was truncated or corrupt."""

    def __init__(self, message: str):
        super().__init__(message, code="DECODE_ERROR")
