"""
Exception types for Simple Checkers.

Every error raised by the engine derives from CheckersError, so a driver
can catch one type, re-prompt, and carry on with an unchanged board.
"""

from typing import Any, Optional


class CheckersError(Exception):
    """
    Base exception for the checkers engine.

    Attributes:
        message: Human-readable description.
        error_code: Short machine-readable code.
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class OutOfBoundsError(CheckersError):
    """Raised when coordinates fall outside the 8x8 grid."""

    def __init__(self, position: Any):
        super().__init__(f"Position out of bounds: {position}", "OUT_OF_BOUNDS")
        self.position = position


class IllegalMoveError(CheckersError):
    """Raised when an action fails a legality precondition."""

    def __init__(self, action: Any, reason: str = ""):
        message = f"Illegal move: {action!r}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "ILLEGAL_MOVE")
        self.action = action
        self.reason = reason


class NotationError(CheckersError):
    """Raised when human input cannot be parsed."""

    def __init__(self, text: str, reason: str = ""):
        message = f"Cannot parse {text!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message, "NOTATION_ERROR")
        self.text = text
        self.reason = reason


class ConfigurationError(CheckersError):
    """Raised when a configuration value is invalid."""

    def __init__(self, config_name: str, reason: str = ""):
        message = f"Configuration error - {config_name}"
        if reason:
            message += f": {reason}"
        super().__init__(message, "CONFIG_ERROR")
        self.config_name = config_name
        self.reason = reason
