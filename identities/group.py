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

from typing		import List, Sequence

from .path		import path_category
from .types		import PathGroup

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )


def group_paths( paths: Sequence[str] ) -> List[PathGroup]:
    """Cluster paths into display PathGroups by their category, eg:

        //kusama//default    -->  //default  [//kusama//default]
        //kusama//funding/1  -->  //funding  [//kusama//funding/1, //kusama//funding/2]
        //kusama/softKey1    -->  /softKey1  [//kusama/softKey1]
        //kusama//funding/2
        //kusama             -->  (none; a root path)
        //custom            -->  custom     [//custom]

    Member paths retain their relative order.  Groups with fewer members are listed first;
    otherwise, groups are in the order their category first appeared.

    """
    groups			= {}
    for path in paths:
        category		= path_category( path )
        if category is None:
            log.debug( f"Omitting root path {path!r} from groups" )
            continue
        key,title		= category
        if key not in groups:
            groups[key]		= PathGroup( title, [] )
        groups[key].paths.append( path )

    # sorted is stable; groups of equal size remain in order of first appearance
    return sorted( groups.values(), key=lambda group: len( group.paths ))
