#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).

import asyncio
from typing import Any
from urllib.parse import urljoin

from aiohttp import ClientError, ClientSession, ClientTimeout
from pydantic import ValidationError
import structlog

from netservicelayer.apiclient.exceptions import ApiException, ApiFieldError

logger = structlog.getLogger()


class APIClient:
    """Minimal JSON client for the backend APIs.

    Non-2xx responses and transport failures are raised as `exception_class`,
    carrying the status code and any per-field errors from the body. No
    retries are made.
    """

    exception_class: type[ApiException] = ApiException

    def __init__(self, base_url: str, timeout: float = 30):
        self.base_url = base_url.rstrip("/") + "/"
        self._timeout = ClientTimeout(total=timeout)
        self._session: ClientSession | None = None

    @property
    def session(self) -> ClientSession:
        # Created lazily so that it's bound to the running event loop.
        if self._session is None or self._session.closed:
            self._session = ClientSession(
                timeout=self._timeout,
                headers={"accept": "application/json"},
            )
        return self._session

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        url = urljoin(self.base_url, path.lstrip("/"))
        try:
            async with self.session.request(
                method, url, params=params, json=json, headers=headers
            ) as response:
                if response.status == 204:
                    return None
                body = await self._read_body(response)
                if response.status >= 400:
                    raise self._build_exception(response.status, body)
                return body
        except (ClientError, asyncio.TimeoutError) as e:
            logger.warning(
                "Request failed", method=method, url=url, error=repr(e)
            )
            raise self.exception_class(
                None, f"{method} {url} failed: {e!r}"
            ) from e

    async def get(self, path: str, **kwargs) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs) -> Any:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs) -> Any:
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs) -> Any:
        return await self.request("DELETE", path, **kwargs)

    async def close(self):
        if self._session is not None:
            await self._session.close()

    @staticmethod
    async def _read_body(response) -> Any:
        try:
            return await response.json(content_type=None)
        except ValueError:
            return {"message": await response.text()}

    def _build_exception(self, status: int, body: Any) -> ApiException:
        message = f"HTTP {status}"
        errors: list[ApiFieldError] = []
        if isinstance(body, dict):
            # Some servers return "Message" while other "message"
            message = body.get("message") or body.get("Message") or message
            try:
                errors = [
                    ApiFieldError.model_validate(e)
                    for e in body.get("errors") or []
                ]
            except ValidationError:
                logger.warning("Unexpected errors in response", body=body)
        return self.exception_class(status, message, errors=errors, body=body)
