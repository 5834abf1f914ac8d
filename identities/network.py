#
# Python-identities -- Substrate and Ethereum Identity Derivation Path Management
#
# Copyright (c) 2022, Dominion Research & Development Corp.
#
# Python-identities is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.  It is also available under alternative (eg. Commercial) licenses, at
# your option.  See the LICENSE file at the top of the source tree.
#
# Python-identities is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
#
from __future__		import annotations

import logging

from typing		import List

from .defaults		import ETHEREUM_DEFAULT
from .path		import path_parser
from .types		import Identity, MalformedPathError, NetworkKey, NetworkProtocol
from .util		import commas, uniq

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )

# Substrate NetworkKeys by their path ID, eg. 'kusama' --> NetworkKey.KUSAMA
PATH_ID_NETWORKS		= {
    network.path_id: network
    for network in NetworkKey
    if network.protocol is NetworkProtocol.SUBSTRATE
}


def network_key_by_path( path: str ) -> NetworkKey:
    """Resolve the NetworkKey of the account derived at path.  The empty (root) path has no network, a
    legacy flat index is an Ethereum account, and otherwise the first junction name is looked up
    (case-sensitively) amongst the known Substrate networks.  Anything else (including malformed
    paths, which must still be displayable) is UNKNOWN.

    """
    try:
        parsed			= path_parser( path )
    except MalformedPathError as exc:
        log.debug( f"Unknown network for malformed path: {exc}" )
        return NetworkKey.UNKNOWN
    if parsed.kind == 'root':
        return NetworkKey.UNKNOWN
    if parsed.kind == 'legacy':
        return NetworkKey[ETHEREUM_DEFAULT]
    return PATH_ID_NETWORKS.get( parsed.network.name, NetworkKey.UNKNOWN )


def existed_network_keys( identity: Identity ) -> List[NetworkKey]:
    """The distinct NetworkKeys of all the identity's accounts, in order of first appearance."""
    return list( uniq( map( network_key_by_path, identity.meta.keys() )))


def network_by_name( name: str ) -> NetworkKey:
    """Find a NetworkKey by its member name (eg. 'KUSAMA'), its path ID (eg. 'kusama'), or its key (eg. an
    Ethereum chain ID '1', or a Substrate genesis hash).

    """
    if name in PATH_ID_NETWORKS:
        return PATH_ID_NETWORKS[name]
    for network in NetworkKey:
        if name.upper() == network.name or name.lower() == network.key.lower():
            return network
    raise ValueError( f"{name} is not a known network; specify one of {commas( n.name for n in NetworkKey )}" )
