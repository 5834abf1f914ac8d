import logging

from .fixtures_test	import PATHS, KUSAMA_PATHS
from .group		import group_paths
from .types		import PathGroup

log				= logging.getLogger( 'group_test' )


def test_group_paths_kusama():
    groups			= group_paths( KUSAMA_PATHS )
    assert groups == [
        PathGroup( '//default',	[ '//kusama//default' ] ),
        PathGroup( '/softKey1',	[ '//kusama/softKey1' ] ),
        PathGroup( '//staking',	[ '//kusama//staking/1' ] ),
        PathGroup( '//funding',	[ '//kusama//funding/1', '//kusama//funding/2' ] ),
    ]
    assert [ g.title for g in groups ] == [ '//default', '/softKey1', '//staking', '//funding' ]
    # Deterministic, and never mutates its input
    assert group_paths( KUSAMA_PATHS ) == groups
    assert KUSAMA_PATHS[-1] == '//kusama' and len( KUSAMA_PATHS ) == 6


def test_group_paths_unknown():
    assert group_paths( [ '//polkadot//default', '', '//custom' ] ) == [
        PathGroup( '//default',	[ '//polkadot//default' ] ),
        PathGroup( 'custom',	[ '//custom' ] ),
    ]


def test_group_paths_all():
    groups			= group_paths( PATHS )
    for group in groups:
        log.info( f"{group.title:12}: {', '.join( group.paths )}" )
    assert groups == [
        PathGroup( '//default',	[ '//kusama//default' ] ),
        PathGroup( '/softKey1',	[ '//kusama/softKey1' ] ),
        PathGroup( '//staking',	[ '//kusama//staking/1' ] ),
        PathGroup( '//default',	[ '//polkadot//default' ] ),
        PathGroup( '1',		[ '1' ] ),
        PathGroup( 'custom',	[ '//custom' ] ),
        PathGroup( '//funding',	[ '//kusama//funding/1', '//kusama//funding/2' ] ),
    ]


def test_group_paths_categories():
    paths			= [
        '//kusama//funding/3',
        '//kusama//funding',
        '//kusama//savings/1',
        '//kusama//funding/1//x',
        '//kusama//savings/2',
        '//kusama//funding/2',
        '//kusama/soft/1',
        '//kusama/soft/2',
        '//kusama//soft',
        '//kusama///broken',
    ]
    assert group_paths( paths ) == [
        PathGroup( '//soft',	[ '//kusama//soft' ] ),
        PathGroup( 'kusama///broken', [ '//kusama///broken' ] ),
        PathGroup( '//savings',	[ '//kusama//savings/1', '//kusama//savings/2' ] ),
        PathGroup( '/soft',	[ '//kusama/soft/1', '//kusama/soft/2' ] ),
        PathGroup( '//funding',	[ '//kusama//funding/3', '//kusama//funding', '//kusama//funding/1//x', '//kusama//funding/2' ] ),
    ]
    assert group_paths( [] ) == []
    assert group_paths( [ '', '//kusama', '//polkadot' ] ) == []
