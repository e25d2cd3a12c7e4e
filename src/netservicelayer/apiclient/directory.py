#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).

from netservicelayer.apiclient.client import APIClient
from netservicelayer.apiclient.exceptions import DirectoryException
from netservicelayer.models.accounts import Account, DcLocalConfig


class DirectoryClient(APIClient):
    """Client for the directory service holding accounts and their
    per-datacenter configuration."""

    exception_class = DirectoryException

    async def get_dc_local_config(
        self,
        account_uuid: str,
        datacenter: str,
        headers: dict[str, str] | None = None,
    ) -> DcLocalConfig | None:
        """Return the account configuration for `datacenter`, or None if the
        account has none there."""
        try:
            body = await self.get(
                f"/accounts/{account_uuid}/dclocalconfig/{datacenter}",
                headers=headers,
            )
        except DirectoryException as e:
            if e.status_code == 404:
                return None
            raise
        if not body:
            return None
        return DcLocalConfig(
            default_network=body.get("defaultnetwork"),
            default_fabric_setup=str(body.get("defaultfabricsetup", ""))
            .lower()
            .strip()
            == "true",
        )

    async def get_default_fabric_network(
        self,
        account: Account,
        datacenter: str,
        headers: dict[str, str] | None = None,
    ) -> str | None:
        """Return the uuid of the default fabric network of `account` in
        `datacenter`, or None when none is designated."""
        config = await self.get_dc_local_config(
            account.uuid, datacenter, headers=headers
        )
        if config is None:
            return None
        return config.default_network
