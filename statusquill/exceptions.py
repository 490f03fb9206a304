"""Custom exceptions for StatusQuill."""

from typing import Optional


class StatusQuillError(Exception):
    """Base exception for StatusQuill errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class StyleError(StatusQuillError):
    """Exception raised when a line style is out of range."""

    pass


class ConfigurationError(StatusQuillError):
    """Exception raised for invalid report options."""

    pass


class LayoutError(StatusQuillError):
    """Exception raised when paginated layout fails validation."""

    pass


class CompilationError(StatusQuillError):
    """Exception raised during PDF compilation or xref inspection."""

    pass
