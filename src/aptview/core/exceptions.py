"""Custom exceptions for aptview"""

from typing import Optional


class AptViewError(Exception):
    """Base exception for aptview"""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class CommandError(AptViewError):
    """List command could not produce text output"""

    pass


class SchemaError(AptViewError):
    """Column schema misconfiguration"""

    pass


class ConfigError(AptViewError):
    """Configuration file related errors"""

    pass
