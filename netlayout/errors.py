"""Exceptions raised by the package."""

from __future__ import annotations


class CopasiError(Exception):
    """General error carrying a message describing what went wrong."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnresolvedReferenceError(CopasiError):
    """Raised when an identifier in a layout refers to nothing known."""

    def __init__(self, reference_id: str) -> None:
        super().__init__(f'Unresolved reference to id "{reference_id}".')
        self.reference_id = reference_id