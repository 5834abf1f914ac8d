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

from collections	import namedtuple
from enum		import Enum

from .defaults		import ETHEREUM_NETWORKS, SUBSTRATE_NETWORKS, UNKNOWN_NETWORK

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= (
    "NetworkProtocol", "NetworkKey",
    "Segment", "ParsedPath", "AccountMeta", "Identity", "PathGroup",
    "MalformedPathError", "SerializationError", "InconsistentIndexError",
)

log				= logging.getLogger( __package__ )


class MalformedPathError( ValueError ):
    """A derivation path violates the //hard and /soft junction grammar."""


class SerializationError( ValueError ):
    """The value supplied to (de)serialization is not shaped as a list of identities."""


class InconsistentIndexError( ValueError ):
    """An identity's addresses and meta indexes disagree on an address/path pairing."""


class NetworkProtocol( Enum ):
    ETHEREUM			= 'ethereum'
    SUBSTRATE			= 'substrate'
    UNKNOWN			= 'unknown'


class NetworkKey( Enum ):
    """Every network an account may belong to; the value is the network's key (the Ethereum chain ID,
    or the Substrate genesis hash).  Look up a member by its key w/ eg. NetworkKey( '1' ).

    """
    FRONTIER			= ETHEREUM_NETWORKS['FRONTIER']['key']
    ROPSTEN			= ETHEREUM_NETWORKS['ROPSTEN']['key']
    RINKEBY			= ETHEREUM_NETWORKS['RINKEBY']['key']
    GOERLI			= ETHEREUM_NETWORKS['GOERLI']['key']
    KOVAN			= ETHEREUM_NETWORKS['KOVAN']['key']
    CLASSIC			= ETHEREUM_NETWORKS['CLASSIC']['key']
    KUSAMA			= SUBSTRATE_NETWORKS['KUSAMA']['key']
    POLKADOT			= SUBSTRATE_NETWORKS['POLKADOT']['key']
    WESTEND			= SUBSTRATE_NETWORKS['WESTEND']['key']
    UNKNOWN			= UNKNOWN_NETWORK['key']

    @property
    def protocol( self ) -> NetworkProtocol:
        if self.name in ETHEREUM_NETWORKS:
            return NetworkProtocol.ETHEREUM
        if self.name in SUBSTRATE_NETWORKS:
            return NetworkProtocol.SUBSTRATE
        return NetworkProtocol.UNKNOWN

    @property
    def key( self ) -> str:
        return self.value

    @property
    def details( self ) -> dict:
        return {
            NetworkProtocol.ETHEREUM:	ETHEREUM_NETWORKS,
            NetworkProtocol.SUBSTRATE:	SUBSTRATE_NETWORKS,
        }.get( self.protocol, dict( UNKNOWN=UNKNOWN_NETWORK ))[self.name]

    @property
    def title( self ) -> str:
        return self.details['title']

    @property
    def path_id( self ):
        """The first junction name of paths derived on this Substrate network (or None)."""
        return self.details.get( 'path_id' )

    def __str__( self ):
        return self.name


class Segment( namedtuple( 'Segment', ('junction', 'name') )):
    """One //hard or /soft junction of a derivation path."""
    __slots__			= ()

    @property
    def hard( self ) -> bool:
        return self.junction == '//'

    def __str__( self ):
        return f"{self.junction}{self.name}"


# The single parse of a derivation path; kind is one of:
#
#     'root'         -- the empty path; the seed's root account
#     'legacy'       -- a flat Ethereum account index; no leading '/'
#     'hierarchical' -- network is the first Segment, segments the rest
#
ParsedPath			= namedtuple( 'ParsedPath', ('kind', 'index', 'network', 'segments') )

AccountMeta			= namedtuple( 'AccountMeta', ('address', 'name', 'created_at', 'updated_at') )

# An identity's addresses (address -> path) and meta (path -> AccountMeta) are two insertion
# ordered dicts indexing the same derived accounts.
Identity			= namedtuple( 'Identity', ('name', 'encrypted_seed', 'derivation_password', 'addresses', 'meta') )

PathGroup			= namedtuple( 'PathGroup', ('title', 'paths') )
