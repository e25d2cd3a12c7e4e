# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from netapiserver.api.base import API
from netapiserver.api.handlers.fabric_networks import FabricNetworksHandler
from netapiserver.api.handlers.networks import NetworksHandler
from netapiserver.api.handlers.vlans import VlansHandler

APIv1 = API(
    prefix="",
    handlers=[
        VlansHandler(),
        FabricNetworksHandler(),
        NetworksHandler(),
    ],
)
