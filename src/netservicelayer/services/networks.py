#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).

import asyncio
from typing import Any, Mapping

import structlog

from netservicelayer.exceptions.catalog import (
    BaseExceptionDetail,
    NotFoundException,
)
from netservicelayer.exceptions.constants import (
    UNEXISTING_RESOURCE_VIOLATION_TYPE,
)
from netservicelayer.models.accounts import Account
from netservicelayer.models.networks import Network
from netservicelayer.schemas import ListNetworks, validate
from netservicelayer.services.base import napi_errors, Service
from netservicelayer.translators import dedupe_networks, translate_network

logger = structlog.getLogger()


class NetworksService(Service):
    """Read-only access to the networks and network pools an account can
    provision on."""

    async def _get_provisionable(
        self, account: Account
    ) -> list[Mapping[str, Any]]:
        params = {"provisionable_by": account.uuid}
        headers = self.request_headers()
        with napi_errors():
            pools, networks = await asyncio.gather(
                self.napi.list_network_pools(params, headers=headers),
                self.napi.list_networks(params, headers=headers),
            )
        return [*pools, *networks]

    async def list(
        self, account: Account, params: Mapping[str, Any] | None = None
    ) -> list[Network]:
        params = validate(ListNetworks, params or {})
        records = dedupe_networks(
            await self._get_provisionable(account),
            fabrics_only=bool(params.get("fabric")),
        )
        networks = [translate_network(record) for record in records]
        logger.debug(
            "ListNetworks done",
            networks=[n.id for n in networks],
            account=account.login,
        )
        return networks

    async def get(self, account: Account, network_id: str) -> Network:
        for record in await self._get_provisionable(account):
            if record.get("uuid") == network_id:
                network = translate_network(record)
                logger.debug(
                    "GetNetwork", network=network.id, account=account.login
                )
                return network
        raise NotFoundException(
            f"{network_id} not found",
            details=[
                BaseExceptionDetail(
                    type=UNEXISTING_RESOURCE_VIOLATION_TYPE,
                    field="network",
                    message=f"{network_id} not found",
                )
            ],
        )
