# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from pydantic import BaseModel, ConfigDict


class Account(BaseModel):
    """The tenant a request is scoped to, as resolved by authentication."""

    model_config = ConfigDict(frozen=True)

    uuid: str
    login: str

    def matches(self, identifier: str) -> bool:
        return identifier in (self.login, self.uuid)


class DcLocalConfig(BaseModel):
    """Per-datacenter settings of an account held by the directory service."""

    default_network: str | None = None
    default_fabric_setup: bool = False
