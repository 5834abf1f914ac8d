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
from .api		import (  # noqa: F401
    path_name, identity_paths, identity_consistency, identity_inconsistencies,
    serialize_identities, deserialize_identities, dumps_identities, loads_identities,
    group_paths, network_key_by_path, existed_network_keys,
)
from .network		import network_by_name  # noqa: F401
from .path		import (  # noqa: F401
    path_parser, path_validate, path_segment_name, path_is_root, path_category,
)
from .types		import *  # noqa: F401,F403
from .version		import __version__  # noqa: F401
