# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

import pytest

from netservicelayer.apiclient.exceptions import NapiException
from netservicelayer.exceptions.catalog import (
    InvalidArgumentException,
    NotFoundException,
)
from netservicelayer.services.networks import NetworksService

EXTERNAL = {"uuid": "E", "name": "external", "nic_tag": "external"}
INTERNAL = {"uuid": "I", "name": "internal", "nic_tag": "internal"}
POOL = {
    "uuid": "P",
    "name": "public-pool",
    "networks": ["E"],
    "nic_tag": "external",
}


@pytest.fixture
def networks_service(context, napi) -> NetworksService:
    return NetworksService(context=context, napi=napi)


@pytest.fixture
def backend(napi, make_fabric_network):
    fabric = make_fabric_network()
    napi.list_network_pools.return_value = [POOL]
    napi.list_networks.return_value = [EXTERNAL, INTERNAL, fabric]
    return fabric


@pytest.mark.asyncio
class TestNetworksService:
    async def test_list(
        self, networks_service, napi, account, context, backend
    ):
        networks = await networks_service.list(account)

        assert [n.id for n in networks] == ["P", "I", backend["uuid"]]
        assert [n.public for n in networks] == [True, False, False]
        headers = {"x-request-id": context.context_id}
        napi.list_network_pools.assert_called_once_with(
            {"provisionable_by": account.uuid}, headers=headers
        )
        napi.list_networks.assert_called_once_with(
            {"provisionable_by": account.uuid}, headers=headers
        )

    async def test_list_fabrics_only(self, networks_service, account, backend):
        networks = await networks_service.list(account, {"fabric": "true"})
        assert [n.id for n in networks] == [backend["uuid"]]

    async def test_list_invalid_params(self, networks_service, napi, account):
        with pytest.raises(InvalidArgumentException):
            await networks_service.list(account, {"fabric": "maybe"})
        napi.list_networks.assert_not_called()

    async def test_list_ignores_other_params(
        self, networks_service, account, backend
    ):
        networks = await networks_service.list(
            account, {"limit": "10", "public": "true"}
        )
        assert len(networks) == 3

    async def test_list_backend_error(self, networks_service, napi, account):
        napi.list_network_pools.return_value = []
        napi.list_networks.side_effect = NapiException(500, "boom")
        with pytest.raises(InvalidArgumentException) as exc_info:
            await networks_service.list(account)
        assert exc_info.value.message == "boom"

    async def test_get(self, networks_service, account, backend):
        network = await networks_service.get(account, "I")
        assert network.to_response() == {
            "id": "I",
            "name": "internal",
            "public": False,
        }

    async def test_get_pooled_network(self, networks_service, account, backend):
        # Only hidden from listings
        network = await networks_service.get(account, "E")
        assert network.public is True

    async def test_get_pool(self, networks_service, account, backend):
        network = await networks_service.get(account, "P")
        assert network.name == "public-pool"

    async def test_get_not_found(self, networks_service, account, backend):
        with pytest.raises(NotFoundException) as exc_info:
            await networks_service.get(account, "X")
        assert exc_info.value.message == "X not found"
