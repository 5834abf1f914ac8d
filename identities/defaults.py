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

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

#
# Substrate Derivation Paths
#
# A path is a sequence of junctions, each either hard "//name" or soft "/name":
#
#    //<network>//<category>/<index>
#
# The first junction names the network (eg. //kusama), the remainder the account within that
# network.  An empty path is the root account of the seed; a path w/ no leading '/' is a legacy
# flat Ethereum account index (eg. "1").
#
PATH_HARD			= '//'
PATH_SOFT			= '/'
PATH_JUNCTION			= r"(?P<junction>//|/)(?P<name>[^/]*)"
PATH_SEGMENT			= r"[\w.-]+"    # Legal junction names: word characters, '.' and '-'

# Ethereum networks, by EIP-155 chain ID.  A legacy flat path always resolves to FRONTIER.
ETHEREUM_NETWORKS		= dict(
    FRONTIER	= dict( key='1',  title='Ethereum' ),				# noqa: E241
    ROPSTEN	= dict( key='3',  title='Ropsten Testnet' ),			# noqa: E241
    RINKEBY	= dict( key='4',  title='Rinkeby Testnet' ),			# noqa: E241
    GOERLI	= dict( key='5',  title='Goerli Testnet' ),			# noqa: E241
    KOVAN	= dict( key='42', title='Kovan Testnet' ),
    CLASSIC	= dict( key='61', title='Ethereum Classic' ),
)
ETHEREUM_DEFAULT		= 'FRONTIER'

# Substrate networks, by genesis hash.  The path_id is the first junction name of every account
# derived for that network (case-sensitive).
SUBSTRATE_NETWORKS		= dict(
    KUSAMA	= dict(
        key	= '0xb0a8d493285c2df73290dfb7e61f870f17b41801197a149ca93654499ea3dafe',
        path_id	= 'kusama',
        title	= 'Kusama',
    ),
    POLKADOT	= dict(
        key	= '0x91b171bb158e2d3848fa23a9f1c25182fb8e20313b2c1eb49219da7a70ce90c3',
        path_id	= 'polkadot',
        title	= 'Polkadot',
    ),
    WESTEND	= dict(
        key	= '0xe143f23803ac50e8f6f8e62695d1ce9e4e1d68aa36c1cd2cfd15340213f3423e',
        path_id	= 'westend',
        title	= 'Westend',
    ),
)

UNKNOWN_NETWORK			= dict( key='unknown', title='Unknown network' )

# Serialized identities are persisted as compact UTF-8 JSON text
JSON_SEPARATORS			= (',', ':')
JSON_ENCODING			= 'UTF-8'

# CLI output
TABLE_FORMAT			= 'orgtbl'
