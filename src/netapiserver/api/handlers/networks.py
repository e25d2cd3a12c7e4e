# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Any

from fastapi import Depends, Request

from netapiserver.api.base import Handler, handler
from netapiserver.api.handlers.constants import NETWORK_PATH, NETWORKS_PATH
from netapiserver.api.dependencies import current_account
from netapiserver.middlewares.services import services
from netservicelayer.models.accounts import Account
from netservicelayer.models.networks import Network
from netservicelayer.services import ServiceCollection

TAGS = ["Networks"]


class NetworksHandler(Handler):
    """Networks API handler."""

    @handler(
        path=NETWORKS_PATH,
        methods=["GET", "HEAD"],
        tags=TAGS,
        response_model=list[Network],
        response_model_exclude_unset=True,
        status_code=200,
    )
    async def list_networks(
        self,
        request: Request,
        account: Account = Depends(current_account),
        services: ServiceCollection = Depends(services),  # noqa: B008
    ) -> Any:
        return await services.networks.list(
            account, dict(request.query_params)
        )

    @handler(
        path=NETWORK_PATH,
        methods=["GET", "HEAD"],
        tags=TAGS,
        response_model=Network,
        response_model_exclude_unset=True,
        status_code=200,
    )
    async def get_network(
        self,
        network: str,
        account: Account = Depends(current_account),
        services: ServiceCollection = Depends(services),  # noqa: B008
    ) -> Any:
        return await services.networks.get(account, network)
