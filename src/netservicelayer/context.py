#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).

import time
from uuid import uuid4


class Context:
    """Per-request context.

    The context_id doubles as the request correlation id: it's taken from the
    inbound `x-request-id` header when present and forwarded to every backend
    call made while serving the request.
    """

    def __init__(self, context_id: str | None = None):
        self.context_id = context_id or self._generate_context_id()
        self._start_timestamp = time.time()

    def get_elapsed_time_seconds(self) -> float:
        return time.time() - self._start_timestamp

    def request_headers(self) -> dict[str, str]:
        """Headers to attach to requests made to other APIs."""
        return {"x-request-id": self.context_id}

    def _generate_context_id(self) -> str:
        return str(uuid4())
