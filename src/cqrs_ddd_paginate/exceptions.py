"""
Paginate exception hierarchy.

Per-request input is never an error: malformed or disallowed filter, sort
and search tokens are dropped. Only endpoint misconfiguration and executor
failures surface as exceptions. All of them provide ``to_dict()`` for
API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class PaginateError(Exception):
    """Root exception for the paginate package."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ConfigurationError(PaginateError):
    """The endpoint configuration cannot serve any request.

    Carries ``status_code = 503`` so an HTTP layer can report it as a
    service-unavailable failure.
    """

    status_code = 503

    def __init__(self, message: str, option: str | None = None) -> None:
        self.message = message
        self.option = option
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CONFIGURATION_ERROR",
            "message": self.message,
            "option": self.option,
        }


class ExecutorError(PaginateError):
    """A query plan could not be translated by an executor backend."""

    def __init__(self, message: str, column: str | None = None) -> None:
        self.message = message
        self.column = column
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "EXECUTOR_ERROR",
            "message": self.message,
            "column": self.column,
        }
