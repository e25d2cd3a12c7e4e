# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Any

from pydantic import BaseModel


class ApiFieldError(BaseModel):
    """A per-field error as reported by a backend API."""

    field: str | None = None
    code: str | None = None
    message: str


class ApiException(Exception):
    """A failed call to a backend API.

    `status_code` is None when no response was received at all (connection
    errors, timeouts).
    """

    def __init__(
        self,
        status_code: int | None,
        message: str,
        errors: list[ApiFieldError] | None = None,
        body: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.errors = errors or []
        self.body = body

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(status_code={self.status_code!r}, "
            f"message={self.message!r})"
        )


class NapiException(ApiException):
    """Error from the network API."""


class DirectoryException(ApiException):
    """Error from the directory service."""
