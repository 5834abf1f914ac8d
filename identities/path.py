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
import re

from typing		import Optional, Tuple

from .defaults		import PATH_HARD, PATH_SOFT, PATH_JUNCTION, PATH_SEGMENT, SUBSTRATE_NETWORKS
from .types		import MalformedPathError, ParsedPath, Segment

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )

junction_re			= re.compile( PATH_JUNCTION )
segment_re			= re.compile( PATH_SEGMENT )

# The first junction names of all known Substrate network paths, eg. 'kusama'
network_path_ids		= frozenset( n['path_id'] for n in SUBSTRATE_NETWORKS.values() )


def path_parser(
    path: str,
) -> ParsedPath:
    """Parse a derivation path into its ParsedPath, or raise a MalformedPathError:

        >>> path_parser( "" )
        ParsedPath(kind='root', index=None, network=None, segments=())
        >>> path_parser( "1" )
        ParsedPath(kind='legacy', index='1', network=None, segments=())
        >>> path_parser( "//kusama/softKey1" )
        ParsedPath(kind='hierarchical', index=None, network=Segment(junction='//', name='kusama'), segments=(Segment(junction='/', name='softKey1'),))

    Every junction must be exactly one or two slashes followed by a non-empty name, so eg. a
    trailing '/', or a run of three slashes are rejected.  The network need not be known.

    """
    if not isinstance( path, str ):
        raise MalformedPathError( f"Derivation path must be a str, not {type( path ).__name__}: {path!r}" )
    if not path:
        return ParsedPath( 'root', None, None, () )
    if not path.startswith( PATH_SOFT ):
        return ParsedPath( 'legacy', path, None, () )

    segments			= []
    offset			= 0
    while offset < len( path ):
        junction,name		= junction_re.match( path, offset ).group( 'junction', 'name' )
        if not segment_re.fullmatch( name ):
            raise MalformedPathError(
                f"Invalid {'hard' if junction == PATH_HARD else 'soft'} junction {junction}{name!r}"
                f" at offset {offset} of derivation path {path!r}"
            )
        segments.append( Segment( junction, name ))
        offset		       += len( junction ) + len( name )

    network,*rest		= segments
    return ParsedPath( 'hierarchical', None, network, tuple( rest ))


def path_validate( path: str ) -> bool:
    try:
        path_parser( path )
    except MalformedPathError as exc:
        log.info( f"Invalid derivation path: {exc}" )
        return False
    return True


def path_segment_name( path: str ) -> str:
    """The display name of a path, less any known network prefix and leading slashes:

        >>> path_segment_name( "//kusama//funding/1" )
        'funding/1'
        >>> path_segment_name( "//kusama" )
        ''
        >>> path_segment_name( "//custom" )
        'custom'

    A legacy Ethereum index has no network prefix to strip, and is returned unchanged; its display
    name (if any) is held in the identity's metadata.  A malformed path is simply stripped of its
    leading slashes, so that it can still be displayed.

    """
    try:
        parsed			= path_parser( path )
    except MalformedPathError as exc:
        log.debug( f"Naming malformed path by its text: {exc}" )
        return str( path ).lstrip( PATH_SOFT )
    if parsed.kind == 'root':
        return ''
    if parsed.kind == 'legacy':
        return parsed.index
    if parsed.network.name in network_path_ids:
        return ''.join( map( str, parsed.segments )).lstrip( PATH_SOFT )
    return path.lstrip( PATH_SOFT )


def path_is_root( path: str ) -> bool:
    """True iff nothing remains of the path after removing its known network prefix, ie. the seed's root
    account "", or a network's root account, eg. "//kusama".

    """
    try:
        parsed			= path_parser( path )
    except MalformedPathError as exc:
        log.debug( f"Malformed path is not a root path: {exc}" )
        return False
    if parsed.kind == 'hierarchical':
        return parsed.network.name in network_path_ids and not parsed.segments
    return parsed.kind == 'root'


def path_category( path: str ) -> Optional[Tuple[str, str]]:
    """Return the (key, title) of the display category containing path, or None for root paths.

    Within a known network, the category is the first junction below the network, eg. all of
    "//kusama//funding", "//kusama//funding/1" and "//kusama//funding/2//x" share the key
    "//kusama//funding" and are titled "//funding".  Any other path is a category of its own, titled
    by its segment name.

    """
    if path_is_root( path ):
        return None
    try:
        parsed			= path_parser( path )
    except MalformedPathError:
        return path, path_segment_name( path )
    if parsed.kind == 'hierarchical' and parsed.network.name in network_path_ids:
        category		= parsed.segments[0]
        return f"{parsed.network}{category}", str( category )
    return path, path_segment_name( path )
