# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Self

from pydantic import BaseModel

from netservicelayer.exceptions.constants import (
    INTERNAL_ERROR_CODE,
    INVALID_ARGUMENT_CODE,
    INVALID_ARGUMENT_VIOLATION_TYPE,
    NOT_AUTHORIZED_CODE,
    NOT_IMPLEMENTED_CODE,
    RESOURCE_NOT_FOUND_CODE,
    UNAUTHORIZED_CODE,
)


class BaseExceptionDetail(BaseModel):
    type: str
    message: str
    field: str | None = None


class BaseException(Exception):
    """Base class for all the errors that can reach an API caller.

    `message` is what the caller sees. The original error, when there is one,
    is chained as `__cause__` and only ever logged.
    """

    code: str = INTERNAL_ERROR_CODE

    def __init__(
        self, message: str, details: list[BaseExceptionDetail] | None = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidArgumentException(BaseException):
    code = INVALID_ARGUMENT_CODE

    @classmethod
    def build_for_field(cls, field: str, message: str) -> Self:
        return cls(
            f'property "{field}": {message}',
            details=[
                BaseExceptionDetail(
                    type=INVALID_ARGUMENT_VIOLATION_TYPE,
                    field=field,
                    message=message,
                )
            ],
        )


class NotFoundException(BaseException):
    code = RESOURCE_NOT_FOUND_CODE


class InternalException(BaseException):
    code = INTERNAL_ERROR_CODE


class NotImplementedException(BaseException):
    code = NOT_IMPLEMENTED_CODE


class UnauthorizedException(BaseException):
    code = UNAUTHORIZED_CODE


class ForbiddenException(BaseException):
    code = NOT_AUTHORIZED_CODE
