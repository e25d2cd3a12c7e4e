# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

import json
from typing import Any

from fastapi import Request

from netservicelayer.exceptions.catalog import (
    BaseExceptionDetail,
    ForbiddenException,
    InvalidArgumentException,
    NotImplementedException,
    UnauthorizedException,
)
from netservicelayer.exceptions.constants import (
    FABRICS_DISABLED_VIOLATION_TYPE,
)
from netservicelayer.models.accounts import Account


async def ensure_fabrics_enabled(request: Request) -> None:
    """Fail if fabrics are not enabled in this datacenter."""
    if not request.app.state.config.fabrics_enabled:
        raise NotImplementedException(
            "fabrics not enabled for this datacenter",
            details=[
                BaseExceptionDetail(
                    type=FABRICS_DISABLED_VIOLATION_TYPE,
                    message="fabrics not enabled for this datacenter",
                )
            ],
        )


async def current_account(request: Request, account: str) -> Account:
    """Dependency to return the account the request is scoped to.

    The account is resolved by the authentication layer in front of us and
    must be the one named in the path.
    """
    authenticated = getattr(request.state, "account", None)
    if authenticated is None:
        raise UnauthorizedException("You must make authenticated requests")
    if not authenticated.matches(account):
        raise ForbiddenException(
            f"{authenticated.login} is not allowed to access {account}"
        )
    return authenticated


async def request_params(request: Request) -> dict[str, Any]:
    """Dependency returning the request parameters.

    Body, query string and path parameters are merged in a single mapping,
    path parameters taking precedence over the query string, which takes
    precedence over the body.
    """
    params: dict[str, Any] = {}
    body = await request.body()
    if body:
        try:
            data = json.loads(body)
        except ValueError as e:
            raise InvalidArgumentException(
                f"Invalid JSON body: {e}"
            ) from e
        if not isinstance(data, dict):
            raise InvalidArgumentException("The body must be a JSON object")
        params.update(data)
    params.update(request.query_params)
    params.update(request.path_params)
    return params
