import os

from setuptools import setup

# 
# All platforms
# 
HERE				= os.path.dirname( os.path.abspath( __file__ ))


def requirements( filename ):
    """Remove whitespace, elide blank lines and comments"""
    return list(
        ''.join( r.split() )
        for r in open( os.path.join( HERE, filename )).readlines()
        if r.strip() and not r.strip().startswith( '#' )
    )


install_requires		= requirements( "requirements.txt" )
tests_require			= requirements( "requirements-tests.txt" )
extras_require			= {}

# Since setuptools has retired tests_require, provide it as an option: pip install python-identities[tests]
extras_require['tests']		= tests_require

# Must work if setup.py is run in the source distribution context, or from
# within the packaged distribution directory.
__version__			= None
try:
    exec( open( os.path.join( HERE, 'identities/version.py' ), 'r' ).read() )
except FileNotFoundError:
    exec( open( os.path.join( HERE, 'version.py' ), 'r' ).read() )

console_scripts			= [
    'identities-cli	= identities.cli:cli',
]

entry_points			= {
    'console_scripts': 		console_scripts,
}

package_dir			= {
    "identities":		"./identities",
    "identities.cli":		"./identities/cli",
}

long_description_content_type	= 'text/markdown'
long_description		= """\
A signer application holds one or more *identities*, each backed by an encrypted seed, from
which many blockchain accounts are derived via Substrate-style `//hard` and `/soft` junction
derivation paths (plus the legacy flat Ethereum account index convention).

The python-identities project provides the pure, deterministic core of managing those accounts:

- The derivation path grammar, and the resolution of each path to its network
  (eg. `//kusama//funding/1` is a Kusama account, `1` a legacy Ethereum account),
- Lossless, order-preserving serialization of identities to and from JSON, and
- Grouping of an identity's paths into display categories (eg. `//funding`).

No signing, seed generation, secure storage or QR decoding is performed.

    $ python3 -m pip install python-identities
    $ identities-cli --no-json groups --network kusama identities.json
    | identity   | title     | paths                                            |
    |------------+-----------+--------------------------------------------------|
    | identity1  | //default | ['//kusama//default']                            |
    | identity1  | /softKey1 | ['//kusama/softKey1']                            |
    | identity1  | //staking | ['//kusama//staking/1']                          |
    | identity1  | //funding | ['//kusama//funding/1', '//kusama//funding/2']   |

"""

classifiers			= [
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "License :: Other/Proprietary License",
    "Programming Language :: Python :: 3",
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Environment :: Console",
    "Topic :: Security :: Cryptography",
    "Topic :: Office/Business :: Financial",
]

setup(
    name			= "python-identities",
    version			= __version__,
    install_requires		= install_requires,
    extras_require		= extras_require,
    packages			= list( package_dir.keys() ),
    package_dir			= package_dir,
    include_package_data	= True,
    zip_safe			= True,
    entry_points		= entry_points,
    author			= "Perry Kundert",
    author_email		= "perry@dominionrnd.com",
    description			= "Substrate and Ethereum identity derivation path parsing, network resolution, grouping and serialization",
    long_description		= long_description,
    long_description_content_type = long_description_content_type,
    license			= "Dual License; GPLv3 and Proprietary",
    keywords			= "Substrate Polkadot Kusama Ethereum derivation path identity wallet",
    classifiers			= classifiers,
    python_requires		= ">=3.9",
)
