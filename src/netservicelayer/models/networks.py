# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Any, Optional

from pydantic import BaseModel


class Network(BaseModel):
    """A network, network pool or fabric network as seen by a tenant.

    Only `id`, `name` and `public` are always set. Serialize with
    `exclude_unset=True` so that absent attributes stay absent.
    """

    id: str
    name: Optional[str] = None
    public: bool
    description: Optional[str] = None

    # Fabric networks only
    fabric: Optional[bool] = None
    gateway: Optional[str] = None
    internet_nat: Optional[bool] = None
    provision_end_ip: Optional[str] = None
    provision_start_ip: Optional[str] = None
    resolvers: Optional[list[str]] = None
    routes: Optional[dict[str, Any]] = None
    subnet: Optional[str] = None
    vlan_id: Optional[int] = None

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
