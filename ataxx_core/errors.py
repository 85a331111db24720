from __future__ import annotations


class AtaxxError(Exception):
    """Base class for errors raised by the rules core."""


class ParseError(AtaxxError, ValueError):
    """Raised when a serialized board or a move string is malformed."""

    def __init__(self, message: str, text: str = '') -> None:
        super().__init__(message)
        self.text = text


class ContractViolation(AtaxxError, ValueError):
    """Raised when a caller breaks a documented precondition (bad square, bad coordinate)."""
