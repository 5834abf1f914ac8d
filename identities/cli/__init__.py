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

from __future__          import annotations

import click
import json
import logging

import tabulate

from ..api		import (
    path_name, identity_paths, identity_inconsistencies,
    loads_identities, group_paths, network_key_by_path, existed_network_keys,
)
from ..network		import network_by_name
from ..path		import path_segment_name, path_is_root
from ..types		import SerializationError
from ..util		import log_cfg, log_level
from ..defaults		import TABLE_FORMAT

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

"""
Provide basic CLI access to a signer application's persisted identities.

Output generally defaults to JSON.  Use -v for more details, and --no-json to emit tables instead.
"""

log				= logging.getLogger( __package__ )


@click.group()
@click.option('-v', '--verbose', count=True)
@click.option('-q', '--quiet', count=True)
@click.option( '--json/--no-json', default=True, help="Output JSON (the default)")
def cli( verbose, quiet, json ):
    cli.verbosity		= verbose - quiet
    log_cfg['level']		= log_level( cli.verbosity )
    logging.basicConfig( **log_cfg )
    if verbose or quiet:
        logging.getLogger().setLevel( log_cfg['level'] )
    cli.json			= json
cli.verbosity			= 0  # noqa: E305
cli.json			= False


def identities_load( file, name=None ):
    """Load the identities from the (binary) file, optionally only those with the given name."""
    try:
        identities		= loads_identities( file.read() )
    except SerializationError as exc:
        raise click.ClickException( f"Failed to load identities from {file.name}: {exc}" ) from exc
    log.info( f"Loaded {len( identities )} identities from {file.name}" )
    if name is not None:
        identities		= [ i for i in identities if i.name == name ]
        if not identities:
            raise click.ClickException( f"No identity named {name!r} in {file.name}" )
    return identities


def output( records, headers ):
    """Emit the records (a list of tuples) as JSON objects, or a table."""
    if cli.json:
        click.echo( json.dumps( [ dict( zip( headers, r )) for r in records ], indent=4 ))
    else:
        click.echo( tabulate.tabulate( records, headers=headers, tablefmt=TABLE_FORMAT ))


@click.command()
@click.argument( "file", type=click.File( 'rb' ))
@click.option( "--identity", help="Only the identity with this name (default: all)" )
def networks( file, identity ):
    """The distinct networks of each identity's accounts."""
    output( [
        (i.name, [ n.name for n in existed_network_keys( i ) ])
        for i in identities_load( file, identity )
    ], headers=('identity', 'networks') )


@click.command()
@click.argument( "file", type=click.File( 'rb' ))
@click.option( "--identity", help="Only the identity with this name (default: all)" )
def names( file, identity ):
    """The display name and network of each identity's accounts."""
    records			= []
    for i in identities_load( file, identity ):
        for path in identity_paths( i ):
            record		= (i.name, path, path_name( path, i ), network_key_by_path( path ).name)
            if cli.verbosity > 0:
                record	       += ( i.meta[path].address, )
            records.append( record )
    headers			= ('identity', 'path', 'name', 'network')
    if cli.verbosity > 0:
        headers		       += ( 'address', )
    output( records, headers=headers )


@click.command()
@click.argument( "file", type=click.File( 'rb' ))
@click.option( "--identity", help="Only the identity with this name (default: all)" )
@click.option( "--network", help="Only accounts on this network, eg. kusama, POLKADOT (default: all)" )
def groups( file, identity, network ):
    """Each identity's accounts, grouped for display."""
    try:
        only			= network_by_name( network ) if network else None
    except ValueError as exc:
        raise click.BadParameter( str( exc ), param_hint="--network" ) from exc
    records			= []
    for i in identities_load( file, identity ):
        paths			= [
            path for path in identity_paths( i )
            if only is None or network_key_by_path( path ) is only
        ]
        for group in group_paths( paths ):
            records.append( (i.name, group.title, group.paths) )
    output( records, headers=('identity', 'title', 'paths') )


@click.command()
@click.argument( "paths", nargs=-1 )
def resolve( paths ):
    """The network and segment name of each derivation path."""
    output( [
        (path, network_key_by_path( path ).name, path_segment_name( path ), path_is_root( path ))
        for path in paths
    ], headers=('path', 'network', 'name', 'root') )


@click.command()
@click.argument( "file", type=click.File( 'rb' ))
def check( file ):
    """Confirm each identity's addresses and meta agree; exits w/ status 1 if any do not."""
    records			= [
        (i.name, problem)
        for i in identities_load( file )
        for problem in identity_inconsistencies( i )
    ]
    for name,problem in records:
        log.warning( f"Identity {name!r}: {problem}" )
    output( records, headers=('identity', 'problem') )
    if records:
        raise SystemExit( 1 )


cli.add_command( networks )
cli.add_command( names )
cli.add_command( groups )
cli.add_command( resolve )
cli.add_command( check )
