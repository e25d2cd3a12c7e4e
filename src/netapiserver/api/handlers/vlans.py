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
    FABRICS_OPENAPI_EXTRA,
    VLAN_PATH,
    VLANS_PATH,
)
from netapiserver.middlewares.services import services
from netservicelayer.models.accounts import Account
from netservicelayer.models.vlans import FabricVlan
from netservicelayer.services import ServiceCollection

TAGS = ["Fabric VLANs"]


class VlansHandler(Handler):
    """Fabric VLANs API handler."""

    @handler(
        path=VLANS_PATH,
        methods=["GET", "HEAD"],
        tags=TAGS,
        response_model=list[FabricVlan],
        response_model_exclude_unset=True,
        status_code=200,
        dependencies=[Depends(ensure_fabrics_enabled)],
        openapi_extra=FABRICS_OPENAPI_EXTRA,
    )
    async def list_fabric_vlans(
        self,
        account: Account = Depends(current_account),
        services: ServiceCollection = Depends(services),  # noqa: B008
    ) -> Any:
        return await services.vlans.list(account)

    @handler(
        path=VLANS_PATH,
        methods=["POST"],
        tags=TAGS,
        response_model=FabricVlan,
        response_model_exclude_unset=True,
        status_code=201,
        dependencies=[Depends(ensure_fabrics_enabled)],
        openapi_extra=FABRICS_OPENAPI_EXTRA,
    )
    async def create_fabric_vlan(
        self,
        account: Account = Depends(current_account),
        params: dict = Depends(request_params),
        services: ServiceCollection = Depends(services),  # noqa: B008
    ) -> Any:
        return await services.vlans.create(account, params)

    @handler(
        path=VLAN_PATH,
        methods=["GET", "HEAD"],
        tags=TAGS,
        response_model=FabricVlan,
        response_model_exclude_unset=True,
        status_code=200,
        dependencies=[Depends(ensure_fabrics_enabled)],
        openapi_extra=FABRICS_OPENAPI_EXTRA,
    )
    async def get_fabric_vlan(
        self,
        account: Account = Depends(current_account),
        params: dict = Depends(request_params),
        services: ServiceCollection = Depends(services),  # noqa: B008
    ) -> Any:
        return await services.vlans.get(account, params)

    @handler(
        path=VLAN_PATH,
        methods=["PUT"],
        tags=TAGS,
        response_model=FabricVlan,
        response_model_exclude_unset=True,
        status_code=202,
        dependencies=[Depends(ensure_fabrics_enabled)],
        openapi_extra=FABRICS_OPENAPI_EXTRA,
    )
    async def update_fabric_vlan(
        self,
        account: Account = Depends(current_account),
        params: dict = Depends(request_params),
        services: ServiceCollection = Depends(services),  # noqa: B008
    ) -> Any:
        return await services.vlans.update(account, params)

    @handler(
        path=VLAN_PATH,
        methods=["DELETE"],
        tags=TAGS,
        status_code=204,
        response_class=Response,
        dependencies=[Depends(ensure_fabrics_enabled)],
        openapi_extra=FABRICS_OPENAPI_EXTRA,
    )
    async def delete_fabric_vlan(
        self,
        account: Account = Depends(current_account),
        params: dict = Depends(request_params),
        services: ServiceCollection = Depends(services),  # noqa: B008
    ) -> Response:
        await services.vlans.delete(account, params)
        return Response(status_code=204)
