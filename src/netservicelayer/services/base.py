#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).

from abc import ABC
from contextlib import contextmanager
from typing import Iterator

from netservicelayer.apiclient.exceptions import NapiException
from netservicelayer.apiclient.napi import NapiClient
from netservicelayer.context import Context
from netservicelayer.translators import translate_napi_error


@contextmanager
def napi_errors() -> Iterator[None]:
    """Translate network API errors raised in the block."""
    try:
        yield
    except NapiException as e:
        raise translate_napi_error(e) from e


class Service(ABC):  # noqa: B024
    """Base class for services.

    Services are built for a single request and hold no state of their own
    besides what they are given.
    """

    def __init__(self, context: Context, napi: NapiClient):
        self.context = context
        self.napi = napi

    def request_headers(self) -> dict[str, str]:
        return self.context.request_headers()
