# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from netservicelayer.schemas.base import IP_FIELDS, Schema, validate
from netservicelayer.schemas.fabrics import (
    CreateFabricNetwork,
    CreateFabricVLAN,
    DeleteFabricNetwork,
    DeleteFabricVLAN,
    GetFabricNetwork,
    GetFabricVLAN,
    ListFabricNetworks,
    ListNetworks,
    UpdateFabricNetwork,
    UpdateFabricVLAN,
)

__all__ = [
    "CreateFabricNetwork",
    "CreateFabricVLAN",
    "DeleteFabricNetwork",
    "DeleteFabricVLAN",
    "GetFabricNetwork",
    "GetFabricVLAN",
    "IP_FIELDS",
    "ListFabricNetworks",
    "ListNetworks",
    "Schema",
    "UpdateFabricNetwork",
    "UpdateFabricVLAN",
    "validate",
]
