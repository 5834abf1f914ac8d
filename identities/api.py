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

from typing		import Iterator, List

from .codec		import (  # noqa: F401
    serialize_identities, deserialize_identities, dumps_identities, loads_identities,
)
from .group		import group_paths  # noqa: F401
from .network		import network_key_by_path, existed_network_keys  # noqa: F401
from .path		import path_segment_name
from .types		import Identity, InconsistentIndexError

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )


def path_name( path: str, identity: Identity ) -> str:
    """The display name of the identity's account at path: its stored name, unless that is exactly
    empty, in which case the name is derived from the path itself.

    """
    meta			= identity.meta.get( path )
    if meta is not None and meta.name != '':
        return meta.name
    return path_segment_name( path )


def identity_paths( identity: Identity ) -> List[str]:
    return list( identity.meta.keys() )


def identity_inconsistencies( identity: Identity ) -> Iterator[str]:
    """Describe each disagreement between the identity's addresses and meta indexes."""
    for address,path in identity.addresses.items():
        meta			= identity.meta.get( path )
        if meta is None:
            yield f"address {address} path {path!r} has no meta"
        elif meta.address != address:
            yield f"address {address} path {path!r} meta is for address {meta.address}"
    for path,meta in identity.meta.items():
        if meta.address not in identity.addresses:
            yield f"path {path!r} meta address {meta.address} has no address entry"


def identity_consistency( identity: Identity ) -> Identity:
    """Confirm that the identity's addresses and meta index the same accounts, raising an
    InconsistentIndexError if not.  Nothing is repaired; that is the caller's decision.

    """
    problems			= list( identity_inconsistencies( identity ))
    if problems:
        raise InconsistentIndexError( f"Identity {identity.name!r} indexes disagree: {'; '.join( problems )}" )
    return identity
