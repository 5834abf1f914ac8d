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

import json
import logging

from typing		import Any, Dict, List, Sequence, Union

from .defaults		import JSON_ENCODING, JSON_SEPARATORS
from .types		import AccountMeta, Identity, SerializationError
from .util		import is_listlike, is_mapping

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

"""
Identities are persisted as JSON, which has no keyed-map type that preserves insertion order for
arbitrary string keys.  So, the addresses and meta indexes are carried as lists of [key, value]
pairs, and rebuilt into dicts (in the same order) when loaded.  The serialized field names are those
used by the signer application's own store (eg. "encryptedSeed").
"""

log				= logging.getLogger( __package__ )

# (<Identity field>, <serialized name>)
IDENTITY_FIELDS			= (
    ('name',			'name'),
    ('encrypted_seed',		'encryptedSeed'),
    ('derivation_password',	'derivationPassword'),
)
INDEX_FIELDS			= ('addresses', 'meta')

META_FIELDS			= (
    ('address',			'address'),
    ('name',			'name'),
    ('created_at',		'createdAt'),
    ('updated_at',		'updatedAt'),
)


def meta_serializer( meta: AccountMeta, path: str ) -> Dict[str, Any]:
    try:
        return {
            serialized: getattr( meta, field )
            for field,serialized in META_FIELDS
        }
    except AttributeError as exc:
        raise SerializationError( f"Account meta for path {path!r} is not an AccountMeta: {meta!r}" ) from exc


def meta_deserializer( record: Dict[str, Any], path: str ) -> AccountMeta:
    if not is_mapping( record ):
        raise SerializationError( f"Account meta for path {path!r} must be a mapping, not {type( record ).__name__}" )
    missing			= [ serialized for _,serialized in META_FIELDS if serialized not in record ]
    if missing:
        raise SerializationError( f"Account meta for path {path!r} is missing: {', '.join( missing )}" )
    unrecognized		= [ str( k ) for k in record.keys() if k not in dict( META_FIELDS ).values() ]
    if unrecognized:
        raise SerializationError( f"Account meta for path {path!r} has unrecognized: {', '.join( unrecognized )}" )
    return AccountMeta( **{
        field: record[serialized]
        for field,serialized in META_FIELDS
    } )


def index_serializer( identity: Identity, field: str ) -> List[list]:
    """Convert one of the identity's addresses or meta dicts into an ordered list of [key, value] pairs."""
    index			= getattr( identity, field, None )
    if not is_mapping( index ):
        raise SerializationError(
            f"Identity {getattr( identity, 'name', None )!r} {field} must be a mapping, not {type( index ).__name__}"
        )
    if field == 'meta':
        return [ [path, meta_serializer( meta, path )] for path,meta in index.items() ]
    return [ [key, value] for key,value in index.items() ]


def index_deserializer( record: Dict[str, Any], field: str ) -> dict:
    """Rebuild an identity's addresses or meta dict from its list of [key, value] pairs, preserving order.
    A key may appear only once; a duplicate would silently discard an account.

    """
    pairs			= record.get( field )
    if not is_listlike( pairs ):
        raise SerializationError(
            f"Identity {record.get( 'name' )!r} {field} must be a list of [key, value] pairs, not {type( pairs ).__name__}"
        )
    index			= {}
    for pair in pairs:
        if not is_listlike( pair ) or len( pair ) != 2:
            raise SerializationError( f"Identity {record.get( 'name' )!r} {field} entry is not a [key, value] pair: {pair!r}" )
        key,value		= pair
        if not isinstance( key, str ) or ( field == 'addresses' and not isinstance( value, str )):
            raise SerializationError( f"Identity {record.get( 'name' )!r} {field} entry must be keyed by str paths and addresses: {pair!r}" )
        if key in index:
            raise SerializationError( f"Identity {record.get( 'name' )!r} {field} contains duplicate key {key!r}" )
        index[key]		= meta_deserializer( value, key ) if field == 'meta' else value
    return index


def identity_serializer( identity: Identity ) -> Dict[str, Any]:
    missing			= [ field for field,_ in IDENTITY_FIELDS if not hasattr( identity, field ) ]
    if missing:
        raise SerializationError( f"Identity {identity!r} is missing: {', '.join( missing )}" )
    serialized			= {
        serialized: getattr( identity, field )
        for field,serialized in IDENTITY_FIELDS
    }
    for field in INDEX_FIELDS:
        serialized[field]	= index_serializer( identity, field )
    return serialized


def identity_deserializer( record: Dict[str, Any] ) -> Identity:
    if not is_mapping( record ):
        raise SerializationError( f"Serialized identity must be a mapping, not {type( record ).__name__}" )
    missing			= [
        serialized
        for serialized in [ s for _,s in IDENTITY_FIELDS ] + list( INDEX_FIELDS )
        if serialized not in record
    ]
    if missing:
        raise SerializationError( f"Serialized identity {record.get( 'name' )!r} is missing: {', '.join( missing )}" )
    unrecognized		= [
        str( k ) for k in record.keys()
        if k not in [ s for _,s in IDENTITY_FIELDS ] + list( INDEX_FIELDS )
    ]
    if unrecognized:
        raise SerializationError( f"Serialized identity {record.get( 'name' )!r} has unrecognized: {', '.join( unrecognized )}" )
    return Identity(
        addresses		= index_deserializer( record, 'addresses' ),
        meta			= index_deserializer( record, 'meta' ),
        **{
            field: record[serialized]
            for field,serialized in IDENTITY_FIELDS
        }
    )


def serialize_identities( identities: Sequence[Identity] ) -> List[Dict[str, Any]]:
    """Convert the identities into a plain JSON-compatible list, w/ each identity's addresses and meta
    dicts as ordered lists of [key, value] pairs.  Any identity lacking a mapping for its addresses or
    meta raises a SerializationError; nothing is returned for a partially serializable list.

    Any disagreement between an identity's addresses and meta is preserved as-is.

    """
    if not is_listlike( identities ):
        raise SerializationError( f"Identities must be a sequence, not {type( identities ).__name__}" )
    try:
        return [ identity_serializer( identity ) for identity in identities ]
    except SerializationError as exc:
        log.warning( f"Failed to serialize {len( identities )} identities: {exc}" )
        raise


def deserialize_identities( value: Union[List[Dict[str, Any]], str, bytes] ) -> List[Identity]:
    """The inverse of serialize_identities; also accepts the serialized value's JSON text (bytes must be
    UTF-8).

    """
    if isinstance( value, bytes ):
        try:
            value		= value.decode( JSON_ENCODING )
        except UnicodeDecodeError as exc:
            raise SerializationError( f"Serialized identities are not {JSON_ENCODING} text: {exc}" ) from exc
    if isinstance( value, str ):
        try:
            value		= json.loads( value )
        except ValueError as exc:
            raise SerializationError( f"Serialized identities are not valid JSON: {exc}" ) from exc
    if not is_listlike( value ):
        raise SerializationError( f"Serialized identities must be a list, not {type( value ).__name__}" )
    try:
        return [ identity_deserializer( record ) for record in value ]
    except SerializationError as exc:
        log.warning( f"Failed to deserialize {len( value )} identities: {exc}" )
        raise


def dumps_identities( identities: Sequence[Identity] ) -> str:
    """Serialize the identities to compact JSON text, for storage as UTF-8."""
    return json.dumps( serialize_identities( identities ), separators=JSON_SEPARATORS, ensure_ascii=False )


def loads_identities( text: Union[str, bytes] ) -> List[Identity]:
    """Load identities from the JSON text produced by dumps_identities."""
    if not isinstance( text, (str, bytes) ):
        raise SerializationError( f"Serialized identities must be JSON text, not {type( text ).__name__}" )
    return deserialize_identities( text )
