# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Fields exposed for each kind of fabric resource.

The same lists are sent to the network API as the `fields` parameter, so that
only these are fetched, and used to filter what it returns.
"""

from enum import StrEnum
from typing import Any, Mapping


class ResourceKind(StrEnum):
    VLAN = "vlan"
    FABRIC_NETWORK = "fabric_network"


FABRIC_VLAN_FIELDS = ("description", "name", "vlan_id")
FABRIC_NETWORK_FIELDS = (
    "description",
    "fabric",
    "gateway",
    "internet_nat",
    "name",
    "provision_end_ip",
    "provision_start_ip",
    "resolvers",
    "routes",
    "subnet",
    "uuid",
    "vlan_id",
)

_FIELDS = {
    ResourceKind.VLAN: FABRIC_VLAN_FIELDS,
    ResourceKind.FABRIC_NETWORK: FABRIC_NETWORK_FIELDS,
}


def project_fields(kind: ResourceKind) -> list[str]:
    return list(_FIELDS[kind])


def project_record(
    record: Mapping[str, Any], kind: ResourceKind
) -> dict[str, Any]:
    """Drop everything from `record` that is not in the allow-list."""
    return {field: record[field] for field in _FIELDS[kind] if field in record}
