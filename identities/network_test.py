import logging

import pytest

from .fixtures_test	import IDENTITIES, identity_fixture, ACCOUNTS
from .network		import network_key_by_path, existed_network_keys, network_by_name
from .types		import NetworkKey, NetworkProtocol

log				= logging.getLogger( 'network_test' )


def test_network_key_by_path():
    assert network_key_by_path( '' ) is NetworkKey.UNKNOWN
    assert network_key_by_path( '//kusama' ) is NetworkKey.KUSAMA
    assert network_key_by_path( '//kusama//derived//anything' ) is NetworkKey.KUSAMA
    assert network_key_by_path( '1' ) is NetworkKey.FRONTIER
    assert network_key_by_path( '//anything/could/be' ) is NetworkKey.UNKNOWN
    assert network_key_by_path( '//polkadot//default' ) is NetworkKey.POLKADOT
    assert network_key_by_path( '//westend/1' ) is NetworkKey.WESTEND
    assert network_key_by_path( '//Kusama' ) is NetworkKey.UNKNOWN
    # Malformed paths are UNKNOWN, not errors
    assert network_key_by_path( '//kusama///x' ) is NetworkKey.UNKNOWN
    assert network_key_by_path( None ) is NetworkKey.UNKNOWN


def test_network_key():
    assert NetworkKey.FRONTIER.protocol is NetworkProtocol.ETHEREUM
    assert NetworkKey.FRONTIER.key == '1'
    assert NetworkKey( '1' ) is NetworkKey.FRONTIER
    assert NetworkKey.KUSAMA.protocol is NetworkProtocol.SUBSTRATE
    assert NetworkKey.KUSAMA.path_id == 'kusama'
    assert NetworkKey.KUSAMA.title == 'Kusama'
    assert NetworkKey( NetworkKey.KUSAMA.key ) is NetworkKey.KUSAMA
    assert NetworkKey.UNKNOWN.protocol is NetworkProtocol.UNKNOWN
    assert NetworkKey.UNKNOWN.key == 'unknown'
    assert NetworkKey.UNKNOWN.path_id is None
    assert str( NetworkKey.POLKADOT ) == 'POLKADOT'
    for network in NetworkKey:
        assert network.title


def test_existed_network_keys():
    assert existed_network_keys( IDENTITIES[0] ) == [
        NetworkKey.KUSAMA,
        NetworkKey.POLKADOT,
        NetworkKey.FRONTIER,
        NetworkKey.UNKNOWN,
    ]
    # First occurrence order, de-duplicated by network (not path)
    identity			= identity_fixture(
        'mixed', 'zzzz',
        paths		= [ '1', '//kusama', '//kusama//staking/1', '//custom' ],
        accounts	= ACCOUNTS[:4],
    )
    assert existed_network_keys( identity ) == [
        NetworkKey.FRONTIER,
        NetworkKey.KUSAMA,
        NetworkKey.UNKNOWN,
    ]
    assert existed_network_keys( identity_fixture( 'empty', '', paths=[], accounts=[] )) == []


def test_network_by_name():
    assert network_by_name( 'kusama' ) is NetworkKey.KUSAMA
    assert network_by_name( 'POLKADOT' ) is NetworkKey.POLKADOT
    assert network_by_name( 'frontier' ) is NetworkKey.FRONTIER
    assert network_by_name( '61' ) is NetworkKey.CLASSIC
    assert network_by_name( NetworkKey.WESTEND.key.upper() ) is NetworkKey.WESTEND
    with pytest.raises( ValueError ) as excinfo:
        network_by_name( 'dogecoin' )
    assert 'KUSAMA' in str( excinfo.value )
