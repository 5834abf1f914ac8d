"""
Identities shared by the tests: one seed w/ Kusama, Polkadot, legacy Ethereum and custom path
accounts.
"""
from .types		import AccountMeta, Identity


PATHS				= [
    '//kusama//default',
    '//kusama//funding/1',
    '//kusama/softKey1',
    '//kusama//funding/2',
    '//kusama//staking/1',
    '//polkadot//default',
    '1',
    '//kusama',
    '',
    '//custom',
]
KUSAMA_PATHS			= [
    '//kusama//default',
    '//kusama//funding/1',
    '//kusama/softKey1',
    '//kusama//funding/2',
    '//kusama//staking/1',
    '//kusama',
]

# (address, name, createdAt, updatedAt), for each of PATHS
ACCOUNTS			= [
    ('addressDefault',		'',			1571068850409, 1571078850509),
    ('address1',		'funding account1',	1571068850409, 1571078850509),
    ('address3',		'',			1573142786972, 1573142786972),
    ('address2',		'',			1571068850409, 1571078850509),
    ('address4',		'',			1571068850409, 1571078850509),
    ('address5',		'PolkadotFirst',	1573142786972, 1573142786972),
    ('address6',		'Eth account',		1573142786972, 1573142786972),
    ('addressKusamaRoot',	'',			1573142786972, 1573142786972),
    ('addressRoot',		'',			1573142786972, 1573142786972),
    ('addressCustom',		'custom Path',		1571068850409, 1571068850409),
]

# The expected display name of each of PATHS
PATH_NAMES			= [
    'default',
    'funding account1',
    'softKey1',
    'funding/2',
    'staking/1',
    'PolkadotFirst',
    'Eth account',
    '',
    '',
    'custom Path',
]


def identity_fixture( name, encrypted_seed, paths=None, accounts=None ):
    paths			= PATHS if paths is None else paths
    accounts			= ACCOUNTS if accounts is None else accounts
    return Identity(
        name			= name,
        encrypted_seed		= encrypted_seed,
        derivation_password	= '',
        addresses		= {
            acct[0]: path
            for path,acct in zip( paths, accounts )
        },
        meta			= {
            path: AccountMeta( *acct )
            for path,acct in zip( paths, accounts )
        },
    )


IDENTITIES			= [
    identity_fixture( 'identity1', 'yyyy' ),
    identity_fixture( 'identity2', 'xxxx' ),
]
