# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from unittest.mock import Mock

import pytest

from netservicelayer.apiclient.directory import DirectoryClient
from netservicelayer.apiclient.napi import NapiClient
from netservicelayer.context import Context
from netservicelayer.models.accounts import Account

ACCOUNT_UUID = "3bd54ac4-4a9b-11ee-9b4c-00163e3d2a01"
DEFAULT_NETWORK_UUID = "7f4f3c0e-5b0d-4a43-9a6e-2c1d6d2b9a10"
OTHER_NETWORK_UUID = "a9a7c6f2-0e3b-4c57-bb8e-77fa6b4a3d21"


def _make_fabric_network(**kwargs) -> dict:
    network = {
        "uuid": OTHER_NETWORK_UUID,
        "name": "web",
        "description": "Web tier",
        "fabric": True,
        "vlan_id": 2,
        "subnet": "192.168.128.0/22",
        "provision_start_ip": "192.168.128.5",
        "provision_end_ip": "192.168.131.250",
        "gateway": "192.168.128.1",
        "resolvers": ["8.8.8.8", "8.8.4.4"],
        "routes": {"10.10.0.0/16": "192.168.128.2"},
        "internet_nat": True,
        # Not exposed
        "mtu": 8500,
        "nic_tag": "sdc_overlay",
        "owner_uuids": [ACCOUNT_UUID],
        "vnet_id": 4321,
    }
    network.update(kwargs)
    return network


@pytest.fixture
def make_fabric_network():
    """Factory of fabric networks as returned by the network API."""
    return _make_fabric_network


@pytest.fixture
def account() -> Account:
    return Account(uuid=ACCOUNT_UUID, login="alice")


@pytest.fixture
def context() -> Context:
    return Context("c0ffee00-0000-4000-8000-000000000001")


@pytest.fixture
def napi() -> Mock:
    return Mock(NapiClient)


@pytest.fixture
def directory() -> Mock:
    directory = Mock(DirectoryClient)
    directory.get_default_fabric_network.return_value = DEFAULT_NETWORK_UUID
    return directory


@pytest.fixture
def default_network_uuid() -> str:
    return DEFAULT_NETWORK_UUID


@pytest.fixture
def other_network_uuid() -> str:
    return OTHER_NETWORK_UUID
