#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Any

from netservicelayer.apiclient.client import APIClient
from netservicelayer.apiclient.exceptions import NapiException


def _query(params: dict[str, Any] | None) -> dict[str, str] | None:
    """Turn params into query string arguments.

    Lists (e.g. `fields`) are sent comma separated, booleans lowercased.
    """
    if not params:
        return None
    query = {}
    for key, value in params.items():
        if isinstance(value, (list, tuple)):
            value = ",".join(str(v) for v in value)
        elif isinstance(value, bool):
            value = str(value).lower()
        query[key] = str(value)
    return query


class NapiClient(APIClient):
    """Client for the network API, the system of record for networks,
    network pools, fabric VLANs and fabric networks."""

    exception_class = NapiException

    # Fabric VLANs

    async def list_fabric_vlans(
        self,
        owner_uuid: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        return await self.get(
            f"/fabrics/{owner_uuid}/vlans",
            params=_query(params),
            headers=headers,
        )

    async def create_fabric_vlan(
        self,
        owner_uuid: str,
        params: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        return await self.post(
            f"/fabrics/{owner_uuid}/vlans", json=params, headers=headers
        )

    async def get_fabric_vlan(
        self,
        owner_uuid: str,
        vlan_id: int,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        return await self.get(
            f"/fabrics/{owner_uuid}/vlans/{vlan_id}",
            params=_query(params),
            headers=headers,
        )

    async def update_fabric_vlan(
        self,
        owner_uuid: str,
        vlan_id: int,
        params: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        return await self.put(
            f"/fabrics/{owner_uuid}/vlans/{vlan_id}",
            json=params,
            headers=headers,
        )

    async def delete_fabric_vlan(
        self,
        owner_uuid: str,
        vlan_id: int,
        headers: dict[str, str] | None = None,
    ) -> None:
        await self.delete(
            f"/fabrics/{owner_uuid}/vlans/{vlan_id}", headers=headers
        )

    # Fabric networks

    async def list_fabric_networks(
        self,
        owner_uuid: str,
        vlan_id: int,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        return await self.get(
            f"/fabrics/{owner_uuid}/vlans/{vlan_id}/networks",
            params=_query(params),
            headers=headers,
        )

    async def create_fabric_network(
        self,
        owner_uuid: str,
        vlan_id: int,
        params: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        return await self.post(
            f"/fabrics/{owner_uuid}/vlans/{vlan_id}/networks",
            json=params,
            headers=headers,
        )

    async def get_fabric_network(
        self,
        owner_uuid: str,
        vlan_id: int,
        network_uuid: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        return await self.get(
            f"/fabrics/{owner_uuid}/vlans/{vlan_id}/networks/{network_uuid}",
            params=_query(params),
            headers=headers,
        )

    async def update_fabric_network(
        self,
        owner_uuid: str,
        vlan_id: int,
        network_uuid: str,
        params: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        return await self.put(
            f"/fabrics/{owner_uuid}/vlans/{vlan_id}/networks/{network_uuid}",
            json=params,
            headers=headers,
        )

    async def delete_fabric_network(
        self,
        owner_uuid: str,
        vlan_id: int,
        network_uuid: str,
        headers: dict[str, str] | None = None,
    ) -> None:
        await self.delete(
            f"/fabrics/{owner_uuid}/vlans/{vlan_id}/networks/{network_uuid}",
            headers=headers,
        )

    # Networks and network pools

    async def list_networks(
        self,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        return await self.get(
            "/networks", params=_query(params), headers=headers
        )

    async def list_network_pools(
        self,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        return await self.get(
            "/network_pools", params=_query(params), headers=headers
        )
