"""Exceptions raised by the code generator."""


class CodegenError(Exception):
    """Base class for errors reported to the user."""


class ConfigurationError(CodegenError):
    """Raised for invalid configuration or an unsupported output file."""


class DocumentError(CodegenError):
    """Raised when a schema or document file cannot be loaded."""

    def __init__(self, message: str, location: str | None = None):
        self.message = message
        self.location = location
        if location:
            message = f"{location}: {message}"
        super().__init__(message)
