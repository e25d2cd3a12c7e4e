# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

# NIC tag of the networks reachable from the internet. Non-fabric networks
# carrying it are reported as public.
EXTERNAL_NIC_TAG = "external"

MAX_RESOLVERS = 4
MAX_VLAN_ID = 4095
