# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Any, Mapping, Optional

from pydantic import BaseModel

from netservicelayer.fields import project_record, ResourceKind


class FabricVlan(BaseModel):
    vlan_id: int
    name: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_napi(cls, record: Mapping[str, Any]) -> "FabricVlan":
        return cls(**project_record(record, ResourceKind.VLAN))

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
