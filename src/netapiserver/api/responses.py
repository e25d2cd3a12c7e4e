# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from netservicelayer.exceptions.catalog import BaseException
from netservicelayer.exceptions.constants import INTERNAL_ERROR_CODE


class ErrorBodyResponse(BaseModel):
    code: str
    message: str


class ErrorResponse(JSONResponse):
    def __init__(self, status_code: int, code: str, message: str):
        super().__init__(
            status_code=status_code,
            content=ErrorBodyResponse(code=code, message=message).model_dump(),
        )

    @classmethod
    def from_exception(cls, status_code: int, exc: BaseException):
        return cls(status_code, exc.code, exc.message)


class InternalServerErrorResponse(ErrorResponse):
    def __init__(self):
        super().__init__(500, INTERNAL_ERROR_CODE, "Internal Server Error")
