# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Any

from fastapi import Depends, Response

from netapiserver.api.base import Handler, handler
from netapiserver.api.dependencies import (
    current_account,
    ensure_fabrics_enabled,
    request_params,
)
from netapiserver.api.handlers.constants import (
    FABRIC_NETWORK_PATH,
    FABRIC_NETWORKS_PATH,
    FABRICS_OPENAPI_EXTRA,
)
from netapiserver.middlewares.services import services
from netservicelayer.models.accounts import Account
from netservicelayer.models.networks import Network
from netservicelayer.services import ServiceCollection

TAGS = ["Fabric networks"]


class FabricNetworksHandler(Handler):
    """Fabric networks API handler."""

    @handler(
        path=FABRIC_NETWORKS_PATH,
        methods=["GET", "HEAD"],
        tags=TAGS,
        response_model=list[Network],
        response_model_exclude_unset=True,
        status_code=200,
        dependencies=[Depends(ensure_fabrics_enabled)],
        openapi_extra=FABRICS_OPENAPI_EXTRA,
    )
    async def list_fabric_networks(
        self,
        account: Account = Depends(current_account),
        params: dict = Depends(request_params),
        services: ServiceCollection = Depends(services),  # noqa: B008
    ) -> Any:
        return await services.fabric_networks.list(account, params)

    @handler(
        path=FABRIC_NETWORKS_PATH,
        methods=["POST"],
        tags=TAGS,
        response_model=Network,
        response_model_exclude_unset=True,
        status_code=201,
        dependencies=[Depends(ensure_fabrics_enabled)],
        openapi_extra=FABRICS_OPENAPI_EXTRA,
    )
    async def create_fabric_network(
        self,
        account: Account = Depends(current_account),
        params: dict = Depends(request_params),
        services: ServiceCollection = Depends(services),  # noqa: B008
    ) -> Any:
        return await services.fabric_networks.create(account, params)

    @handler(
        path=FABRIC_NETWORK_PATH,
        methods=["GET", "HEAD"],
        tags=TAGS,
        response_model=Network,
        response_model_exclude_unset=True,
        status_code=200,
        dependencies=[Depends(ensure_fabrics_enabled)],
        openapi_extra=FABRICS_OPENAPI_EXTRA,
    )
    async def get_fabric_network(
        self,
        account: Account = Depends(current_account),
        params: dict = Depends(request_params),
        services: ServiceCollection = Depends(services),  # noqa: B008
    ) -> Any:
        return await services.fabric_networks.get(account, params)

    @handler(
        path=FABRIC_NETWORK_PATH,
        methods=["PUT"],
        tags=TAGS,
        response_model=Network,
        response_model_exclude_unset=True,
        status_code=202,
        dependencies=[Depends(ensure_fabrics_enabled)],
        openapi_extra=FABRICS_OPENAPI_EXTRA,
    )
    async def update_fabric_network(
        self,
        account: Account = Depends(current_account),
        params: dict = Depends(request_params),
        services: ServiceCollection = Depends(services),  # noqa: B008
    ) -> Any:
        return await services.fabric_networks.update(account, params)

    @handler(
        path=FABRIC_NETWORK_PATH,
        methods=["DELETE"],
        tags=TAGS,
        status_code=204,
        response_class=Response,
        dependencies=[Depends(ensure_fabrics_enabled)],
        openapi_extra=FABRICS_OPENAPI_EXTRA,
    )
    async def delete_fabric_network(
        self,
        account: Account = Depends(current_account),
        params: dict = Depends(request_params),
        services: ServiceCollection = Depends(services),  # noqa: B008
    ) -> Response:
        await services.fabric_networks.delete(account, params)
        return Response(status_code=204)
