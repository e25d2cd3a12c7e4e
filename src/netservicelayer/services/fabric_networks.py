#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Any, Mapping

import structlog

from netservicelayer.apiclient.directory import DirectoryClient
from netservicelayer.apiclient.exceptions import DirectoryException
from netservicelayer.apiclient.napi import NapiClient
from netservicelayer.constants import MAX_RESOLVERS
from netservicelayer.context import Context
from netservicelayer.exceptions.catalog import (
    BaseExceptionDetail,
    InternalException,
    InvalidArgumentException,
)
from netservicelayer.exceptions.constants import (
    CANNOT_DELETE_DEFAULT_NETWORK_VIOLATION_TYPE,
    MISSING_DEFAULT_NETWORK_VIOLATION_TYPE,
    TOO_MANY_RESOLVERS_VIOLATION_TYPE,
)
from netservicelayer.fields import project_fields, ResourceKind
from netservicelayer.models.accounts import Account
from netservicelayer.models.networks import Network
from netservicelayer.schemas import (
    CreateFabricNetwork,
    DeleteFabricNetwork,
    GetFabricNetwork,
    ListFabricNetworks,
    UpdateFabricNetwork,
    validate,
)
from netservicelayer.services.base import napi_errors, Service
from netservicelayer.translators import translate_network

logger = structlog.getLogger()


def check_resolvers(params: Mapping[str, Any]) -> None:
    resolvers = params.get("resolvers")
    if resolvers and len(resolvers) > MAX_RESOLVERS:
        raise InvalidArgumentException(
            f'property "resolvers": maximum of {MAX_RESOLVERS} resolvers',
            details=[
                BaseExceptionDetail(
                    type=TOO_MANY_RESOLVERS_VIOLATION_TYPE,
                    field="resolvers",
                    message=f"maximum of {MAX_RESOLVERS} resolvers",
                )
            ],
        )


class FabricNetworksService(Service):
    def __init__(
        self,
        context: Context,
        napi: NapiClient,
        directory: DirectoryClient,
        datacenter_name: str,
    ):
        super().__init__(context, napi)
        self.directory = directory
        self.datacenter_name = datacenter_name

    async def list(
        self, account: Account, params: Mapping[str, Any]
    ) -> list[Network]:
        params = validate(ListFabricNetworks, params)
        with napi_errors():
            networks = await self.napi.list_fabric_networks(
                account.uuid,
                params["vlan_id"],
                headers=self.request_headers(),
            )
        logger.debug(
            "ListFabricNetworks done",
            networks=networks,
            account=account.login,
        )
        return [translate_network(network) for network in networks]

    async def create(
        self, account: Account, params: Mapping[str, Any]
    ) -> Network:
        params = validate(CreateFabricNetwork, params)
        check_resolvers(params)

        vlan_id = params.pop("vlan_id")
        params["fields"] = project_fields(ResourceKind.FABRIC_NETWORK)
        with napi_errors():
            network = await self.napi.create_fabric_network(
                account.uuid, vlan_id, params, headers=self.request_headers()
            )
        return translate_network(network)

    async def get(
        self, account: Account, params: Mapping[str, Any]
    ) -> Network:
        params = validate(GetFabricNetwork, params)
        with napi_errors():
            network = await self.napi.get_fabric_network(
                account.uuid,
                params["vlan_id"],
                params["id"],
                {"fields": project_fields(ResourceKind.FABRIC_NETWORK)},
                headers=self.request_headers(),
            )
        return translate_network(network)

    async def update(
        self, account: Account, params: Mapping[str, Any]
    ) -> Network:
        params = validate(UpdateFabricNetwork, params)
        check_resolvers(params)

        vlan_id = params.pop("vlan_id")
        network_id = params.pop("id")
        # Read-only, always the same for fabric networks.
        params.pop("fabric", None)
        params.pop("public", None)
        params["fields"] = project_fields(ResourceKind.FABRIC_NETWORK)
        with napi_errors():
            network = await self.napi.update_fabric_network(
                account.uuid,
                vlan_id,
                network_id,
                params,
                headers=self.request_headers(),
            )
        return translate_network(network)

    async def delete(self, account: Account, params: Mapping[str, Any]):
        params = validate(DeleteFabricNetwork, params)
        await self.ensure_not_default_network(account, params["id"])
        with napi_errors():
            await self.napi.delete_fabric_network(
                account.uuid,
                params["vlan_id"],
                params["id"],
                headers=self.request_headers(),
            )

    async def ensure_not_default_network(
        self, account: Account, network_id: str
    ) -> None:
        """Refuse to go on if `network_id` is the default fabric network of
        the account in this datacenter."""
        try:
            default_network = await self.directory.get_default_fabric_network(
                account, self.datacenter_name, headers=self.request_headers()
            )
        except DirectoryException as e:
            raise InternalException(
                "Could not find default fabric network for user"
            ) from e

        if not default_network:
            raise InternalException(
                "Could not find default fabric network for user",
                details=[
                    BaseExceptionDetail(
                        type=MISSING_DEFAULT_NETWORK_VIOLATION_TYPE,
                        message=f"No default network for {account.login} in {self.datacenter_name}",
                    )
                ],
            )

        logger.info(
            "Deleting default network?",
            network_to_delete=network_id,
            default_network=default_network,
        )
        if network_id == default_network:
            raise InvalidArgumentException(
                "cannot delete default network",
                details=[
                    BaseExceptionDetail(
                        type=CANNOT_DELETE_DEFAULT_NETWORK_VIOLATION_TYPE,
                        field="id",
                        message=f"The network {network_id} is the default network and can't be deleted.",
                    )
                ],
            )
