# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Annotated, Optional

from pydantic import ConfigDict, Field, StrictBool, StringConstraints

from netservicelayer.constants import MAX_VLAN_ID
from netservicelayer.schemas.base import (
    IPv4Address,
    IPv4Subnet,
    Schema,
    UUID,
)

VlanID = Annotated[int, Field(ge=0, le=MAX_VLAN_ID)]
Name = Annotated[str, StringConstraints(min_length=1, max_length=64)]
Description = Annotated[str, StringConstraints(max_length=255)]
# destination (address or subnet) -> gateway
Routes = dict[
    Annotated[
        str,
        StringConstraints(
            pattern=r"^[0-9]{1,3}(\.[0-9]{1,3}){3}(/[0-9]{1,2})?$"
        ),
    ],
    IPv4Address,
]


# VLANs


class CreateFabricVLAN(Schema):
    vlan_id: VlanID
    name: Name
    description: Optional[Description] = None


class UpdateFabricVLAN(Schema):
    vlan_id: VlanID
    name: Optional[Name] = None
    description: Optional[Description] = None


class GetFabricVLAN(Schema):
    vlan_id: VlanID


class DeleteFabricVLAN(Schema):
    vlan_id: VlanID


# Fabric networks


class ListFabricNetworks(Schema):
    vlan_id: VlanID


class CreateFabricNetwork(Schema):
    vlan_id: VlanID
    name: Name
    description: Optional[Description] = None
    subnet: IPv4Subnet
    provision_start_ip: IPv4Address
    provision_end_ip: IPv4Address
    gateway: Optional[IPv4Address] = None
    # The length is capped by the service, with its own error message.
    resolvers: Optional[list[IPv4Address]] = None
    routes: Optional[Routes] = None
    internet_nat: Optional[StrictBool] = None


class GetFabricNetwork(Schema):
    vlan_id: VlanID
    id: UUID


class UpdateFabricNetwork(Schema):
    """Accepts everything a fabric network is returned with, so that a
    fetched network can be sent back as is."""

    vlan_id: VlanID
    id: UUID
    name: Optional[Name] = None
    description: Optional[Description] = None
    subnet: Optional[IPv4Subnet] = None
    provision_start_ip: Optional[IPv4Address] = None
    provision_end_ip: Optional[IPv4Address] = None
    gateway: Optional[IPv4Address] = None
    resolvers: Optional[list[IPv4Address]] = None
    routes: Optional[Routes] = None
    internet_nat: Optional[StrictBool] = None
    fabric: Optional[StrictBool] = None
    public: Optional[StrictBool] = None


class DeleteFabricNetwork(Schema):
    vlan_id: VlanID
    id: UUID


# Networks


class ListNetworks(Schema):
    # Taken from the query string, other query parameters are ignored.
    model_config = ConfigDict(extra="ignore")

    fabric: Optional[bool] = None
