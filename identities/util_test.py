import logging

from collections	import OrderedDict

from .types		import AccountMeta
from .util		import log_level, is_mapping, is_listlike, commas, uniq

log				= logging.getLogger( 'util_test' )


def test_log_level():
    assert log_level( 0 ) == logging.WARNING
    assert log_level( 1 ) == logging.INFO
    assert log_level( 2 ) == logging.DEBUG
    assert log_level( 5 ) == logging.DEBUG
    assert log_level( -1 ) == logging.ERROR
    assert log_level( -9 ) == logging.FATAL


def test_is_mapping_listlike():
    assert is_mapping( {} )
    assert is_mapping( OrderedDict() )
    assert not is_mapping( [] )
    assert not is_mapping( AccountMeta( 'a', '', 0, 0 ))
    assert is_listlike( [] )
    assert is_listlike( (1, 2) )
    assert not is_listlike( {} )
    assert not is_listlike( 'abc' )
    assert not is_listlike( b'abc' )
    assert not is_listlike( list )
    assert not is_listlike( None )


def test_commas():
    assert commas( [] ) == ''
    assert commas( [ 'a' ] ) == 'a'
    assert commas( [ 'a', 'b', 'c' ] ) == 'a, b, c'
    assert commas( n for n in ( 1, 2 )) == '1, 2'


def test_uniq():
    assert list( uniq( [ 9, 0, 2, 1, 0 ] )) == [ 9, 0, 2, 1 ]
    assert list( uniq( [ "Foo", "foo", "Foo" ] )) == [ "Foo", "foo" ]
