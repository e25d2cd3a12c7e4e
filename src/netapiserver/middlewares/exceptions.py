# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Awaitable, Callable

from fastapi.exceptions import RequestValidationError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
import structlog

from netapiserver.api.responses import (
    ErrorResponse,
    InternalServerErrorResponse,
)
from netservicelayer.exceptions.catalog import (
    ForbiddenException,
    InternalException,
    InvalidArgumentException,
    NotFoundException,
    NotImplementedException,
    UnauthorizedException,
)
from netservicelayer.exceptions.constants import INVALID_ARGUMENT_CODE

logger = structlog.getLogger(__name__)


class ExceptionHandlers:
    @classmethod
    async def validation_exception_handler(
        cls, request: Request, exc: RequestValidationError
    ):
        """
        FastAPI only validates path parameters types here, the request
        parameters are validated by the services. Report the first failure
        the same way.
        """
        err = exc.errors()[0]
        field = str(err["loc"][-1]) if err.get("loc") else None
        message = (
            f'property "{field}": {err["msg"]}' if field else err["msg"]
        )
        return ErrorResponse(409, INVALID_ARGUMENT_CODE, message)


class ExceptionMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except InvalidArgumentException as e:
            logger.debug(e, cause=repr(e.__cause__))
            return ErrorResponse.from_exception(409, e)
        except NotFoundException as e:
            logger.debug(e, cause=repr(e.__cause__))
            return ErrorResponse.from_exception(404, e)
        except UnauthorizedException as e:
            logger.debug(e)
            return ErrorResponse.from_exception(401, e)
        except ForbiddenException as e:
            logger.debug(e)
            return ErrorResponse.from_exception(403, e)
        except NotImplementedException as e:
            logger.debug(e)
            return ErrorResponse.from_exception(501, e)
        except InternalException as e:
            logger.error(e, cause=repr(e.__cause__))
            return ErrorResponse.from_exception(500, e)
        except Exception as e:
            logger.exception(e)
            return InternalServerErrorResponse()
