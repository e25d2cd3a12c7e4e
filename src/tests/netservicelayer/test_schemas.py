# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from pydantic import ValidationError
import pytest

from netservicelayer.exceptions.catalog import InvalidArgumentException
from netservicelayer.fields import FABRIC_NETWORK_FIELDS
from netservicelayer.schemas import (
    CreateFabricNetwork,
    CreateFabricVLAN,
    DeleteFabricNetwork,
    GetFabricVLAN,
    ListNetworks,
    UpdateFabricNetwork,
    UpdateFabricVLAN,
    validate,
)
from netservicelayer.translators import translate_network

NETWORK_UUID = "a9a7c6f2-0e3b-4c57-bb8e-77fa6b4a3d21"


def create_network_params(**kwargs) -> dict:
    params = {
        "account": "alice",
        "vlan_id": "2",
        "name": "web",
        "subnet": "10.0.0.0/24",
        "provision_start_ip": "10.0.0.5",
        "provision_end_ip": "10.0.0.250",
        "gateway": "10.0.0.1",
        "resolvers": ["8.8.8.8", "8.8.4.4"],
    }
    params.update(kwargs)
    return params


class TestValidate:
    def test_coerces_vlan_id(self):
        params = validate(GetFabricVLAN, {"vlan_id": "42"})
        assert params == {"vlan_id": 42}

    def test_strips_account(self):
        params = validate(
            CreateFabricVLAN, {"account": "alice", "vlan_id": 4, "name": "x"}
        )
        assert params == {"vlan_id": 4, "name": "x"}

    def test_does_not_modify_params(self):
        raw = create_network_params()
        original = {**raw, "resolvers": list(raw["resolvers"])}
        validate(CreateFabricNetwork, raw)
        assert raw == original

    def test_returns_only_given_fields(self):
        params = validate(UpdateFabricVLAN, {"vlan_id": "3", "name": "new"})
        assert params == {"vlan_id": 3, "name": "new"}

    def test_create_fabric_network(self):
        params = validate(
            CreateFabricNetwork,
            create_network_params(
                routes={"10.1.0.0/16": "10.0.0.2"}, internet_nat=False
            ),
        )
        assert params == {
            "vlan_id": 2,
            "name": "web",
            "subnet": "10.0.0.0/24",
            "provision_start_ip": "10.0.0.5",
            "provision_end_ip": "10.0.0.250",
            "gateway": "10.0.0.1",
            "resolvers": ["8.8.8.8", "8.8.4.4"],
            "routes": {"10.1.0.0/16": "10.0.0.2"},
            "internet_nat": False,
        }

    def test_query_string_boolean(self):
        assert validate(ListNetworks, {"fabric": "true"}) == {"fabric": True}

    @pytest.mark.parametrize(
        "field", ["gateway", "provision_start_ip", "provision_end_ip"]
    )
    def test_invalid_ip_field(self, field):
        with pytest.raises(InvalidArgumentException) as exc_info:
            validate(
                CreateFabricNetwork, create_network_params(**{field: "10.0.0"})
            )
        assert (
            exc_info.value.message
            == f'property "{field}": must be an IPv4 address'
        )
        assert exc_info.value.details[0].field == field
        assert exc_info.value.details[0].message == "must be an IPv4 address"
        assert isinstance(exc_info.value.__cause__, ValidationError)

    @pytest.mark.parametrize("index", [0, 1, 2, 3])
    def test_invalid_resolver(self, index):
        resolvers = ["8.8.8.8", "8.8.4.4", "1.1.1.1", "9.9.9.9"]
        resolvers[index] = "256.1.1.1"
        with pytest.raises(InvalidArgumentException) as exc_info:
            validate(
                CreateFabricNetwork,
                create_network_params(resolvers=resolvers),
            )
        assert (
            exc_info.value.message
            == f'property "resolvers[{index}]": must be an IPv4 address'
        )

    def test_invalid_resolver_past_the_limit_is_not_rewritten(self):
        resolvers = ["8.8.8.8", "8.8.4.4", "1.1.1.1", "9.9.9.9", "nope"]
        with pytest.raises(InvalidArgumentException) as exc_info:
            validate(
                CreateFabricNetwork,
                create_network_params(resolvers=resolvers),
            )
        assert exc_info.value.message.startswith('property "resolvers[4]": ')
        assert "must be an IPv4 address" not in exc_info.value.message

    def test_ip_field_of_wrong_type_is_not_rewritten(self):
        with pytest.raises(InvalidArgumentException) as exc_info:
            validate(CreateFabricNetwork, create_network_params(gateway=10))
        assert exc_info.value.message.startswith('property "gateway": ')
        assert "must be an IPv4 address" not in exc_info.value.message

    def test_invalid_subnet_is_not_rewritten(self):
        with pytest.raises(InvalidArgumentException) as exc_info:
            validate(
                CreateFabricNetwork, create_network_params(subnet="10.0.0.0")
            )
        assert exc_info.value.message.startswith('property "subnet": ')
        assert "must be an IPv4 address" not in exc_info.value.message

    def test_missing_field(self):
        params = create_network_params()
        del params["name"]
        with pytest.raises(InvalidArgumentException) as exc_info:
            validate(CreateFabricNetwork, params)
        assert exc_info.value.message.startswith('property "name": ')

    def test_unknown_field(self):
        with pytest.raises(InvalidArgumentException) as exc_info:
            validate(GetFabricVLAN, {"vlan_id": 1, "foo": "bar"})
        assert exc_info.value.message.startswith('property "foo": ')

    @pytest.mark.parametrize("vlan_id", ["abc", -1, 4096])
    def test_invalid_vlan_id(self, vlan_id):
        with pytest.raises(InvalidArgumentException) as exc_info:
            validate(GetFabricVLAN, {"vlan_id": vlan_id})
        assert exc_info.value.message.startswith('property "vlan_id": ')

    def test_invalid_network_id(self):
        with pytest.raises(InvalidArgumentException) as exc_info:
            validate(DeleteFabricNetwork, {"vlan_id": 2, "id": "not-a-uuid"})
        assert exc_info.value.message.startswith('property "id": ')

    @pytest.mark.parametrize(
        "schema,params,field",
        [
            (CreateFabricVLAN, {"vlan_id": 4, "name": None}, "name"),
            (UpdateFabricVLAN, {"vlan_id": 4, "name": None}, "name"),
            (
                UpdateFabricVLAN,
                {"vlan_id": 4, "description": None},
                "description",
            ),
            (
                CreateFabricNetwork,
                create_network_params(gateway=None),
                "gateway",
            ),
            (
                CreateFabricNetwork,
                create_network_params(resolvers=None),
                "resolvers",
            ),
            (GetFabricVLAN, {"vlan_id": None}, "vlan_id"),
        ],
    )
    def test_null(self, schema, params, field):
        with pytest.raises(InvalidArgumentException) as exc_info:
            validate(schema, params)
        assert (
            exc_info.value.message == f'property "{field}": must not be null'
        )
        assert exc_info.value.details[0].field == field

    @pytest.mark.parametrize("value", ["yes", "true", 1])
    def test_body_boolean_is_strict(self, value):
        with pytest.raises(InvalidArgumentException) as exc_info:
            validate(
                CreateFabricNetwork, create_network_params(internet_nat=value)
            )
        assert exc_info.value.message.startswith('property "internet_nat": ')

    def test_query_string_ignores_other_parameters(self):
        assert validate(ListNetworks, {"fabric": "1", "limit": "10"}) == {
            "fabric": True
        }

    def test_query_string_null(self):
        with pytest.raises(InvalidArgumentException):
            validate(ListNetworks, {"fabric": None})


class TestUpdateFabricNetwork:
    def test_accepts_translated_network(self, make_fabric_network):
        network = translate_network(make_fabric_network()).to_response()
        params = {
            field: network[field]
            for field in FABRIC_NETWORK_FIELDS
            if field in network
        }
        params["id"] = network["id"]

        assert validate(UpdateFabricNetwork, params) == params

    def test_accepts_minimal_translated_network(self, make_fabric_network):
        record = make_fabric_network()
        for field in ("description", "gateway", "resolvers", "routes"):
            del record[field]
        network = translate_network(record).to_response()
        params = {
            field: network[field]
            for field in FABRIC_NETWORK_FIELDS
            if field in network
        }
        params["id"] = network["id"]

        validate(UpdateFabricNetwork, params)

    def test_accepts_whole_translated_network(self, make_fabric_network):
        network = translate_network(make_fabric_network()).to_response()
        params = {**network, "account": "alice", "vlan_id": "2"}

        validated = validate(UpdateFabricNetwork, params)

        assert validated["public"] is False
        assert validated["fabric"] is True
        assert validated["id"] == network["id"]

    @pytest.mark.parametrize("field", ["fabric", "public", "internet_nat"])
    def test_rejects_non_boolean_flags(self, field, other_network_uuid):
        with pytest.raises(InvalidArgumentException) as exc_info:
            validate(
                UpdateFabricNetwork,
                {"vlan_id": 2, "id": other_network_uuid, field: "true"},
            )
        assert exc_info.value.message.startswith(f'property "{field}": ')
