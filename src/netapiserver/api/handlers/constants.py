# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

# API versions the fabric endpoints are served for.
FABRICS_API_VERSIONS = ["7.3.0", "8.0.0"]
FABRICS_OPENAPI_EXTRA = {"x-api-versions": FABRICS_API_VERSIONS}

VLANS_PATH = "/{account}/fabrics/default/vlans"
VLAN_PATH = VLANS_PATH + "/{vlan_id}"
FABRIC_NETWORKS_PATH = VLAN_PATH + "/networks"
FABRIC_NETWORK_PATH = FABRIC_NETWORKS_PATH + "/{id}"
NETWORKS_PATH = "/{account}/networks"
NETWORK_PATH = NETWORKS_PATH + "/{network}"
