#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Any, Mapping

import structlog

from netservicelayer.fields import project_fields, ResourceKind
from netservicelayer.models.accounts import Account
from netservicelayer.models.vlans import FabricVlan
from netservicelayer.schemas import (
    CreateFabricVLAN,
    DeleteFabricVLAN,
    GetFabricVLAN,
    UpdateFabricVLAN,
    validate,
)
from netservicelayer.services.base import napi_errors, Service

logger = structlog.getLogger()


class VlansService(Service):
    async def list(self, account: Account) -> list[FabricVlan]:
        with napi_errors():
            vlans = await self.napi.list_fabric_vlans(
                account.uuid,
                {"fields": project_fields(ResourceKind.VLAN)},
                headers=self.request_headers(),
            )
        logger.debug(
            "ListFabricVLANs done", vlans=vlans, account=account.login
        )
        return [FabricVlan.from_napi(vlan) for vlan in vlans]

    async def create(
        self, account: Account, params: Mapping[str, Any]
    ) -> FabricVlan:
        params = validate(CreateFabricVLAN, params)
        params["fields"] = project_fields(ResourceKind.VLAN)
        with napi_errors():
            vlan = await self.napi.create_fabric_vlan(
                account.uuid, params, headers=self.request_headers()
            )
        return FabricVlan.from_napi(vlan)

    async def get(
        self, account: Account, params: Mapping[str, Any]
    ) -> FabricVlan:
        params = validate(GetFabricVLAN, params)
        with napi_errors():
            vlan = await self.napi.get_fabric_vlan(
                account.uuid,
                params["vlan_id"],
                {"fields": project_fields(ResourceKind.VLAN)},
                headers=self.request_headers(),
            )
        return FabricVlan.from_napi(vlan)

    async def update(
        self, account: Account, params: Mapping[str, Any]
    ) -> FabricVlan:
        params = validate(UpdateFabricVLAN, params)
        vlan_id = params.pop("vlan_id")
        params["fields"] = project_fields(ResourceKind.VLAN)
        with napi_errors():
            vlan = await self.napi.update_fabric_vlan(
                account.uuid, vlan_id, params, headers=self.request_headers()
            )
        return FabricVlan.from_napi(vlan)

    async def delete(self, account: Account, params: Mapping[str, Any]):
        params = validate(DeleteFabricVLAN, params)
        with napi_errors():
            await self.napi.delete_fabric_vlan(
                account.uuid,
                params["vlan_id"],
                headers=self.request_headers(),
            )
