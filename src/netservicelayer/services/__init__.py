# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from netservicelayer.apiclient.directory import DirectoryClient
from netservicelayer.apiclient.napi import NapiClient
from netservicelayer.context import Context
from netservicelayer.services.fabric_networks import FabricNetworksService
from netservicelayer.services.networks import NetworksService
from netservicelayer.services.vlans import VlansService


class BackendClients:
    """The long lived clients to the backend APIs, shared by all requests."""

    def __init__(self, napi: NapiClient, directory: DirectoryClient):
        self.napi = napi
        self.directory = directory

    async def close(self):
        await self.napi.close()
        await self.directory.close()


class ServiceCollection:
    """Provide all the services for a request."""

    vlans: VlansService
    fabric_networks: FabricNetworksService
    networks: NetworksService

    @classmethod
    def produce(
        cls,
        context: Context,
        clients: BackendClients,
        datacenter_name: str,
    ) -> "ServiceCollection":
        services = cls()
        services.vlans = VlansService(context=context, napi=clients.napi)
        services.fabric_networks = FabricNetworksService(
            context=context,
            napi=clients.napi,
            directory=clients.directory,
            datacenter_name=datacenter_name,
        )
        services.networks = NetworksService(
            context=context, napi=clients.napi
        )
        return services
