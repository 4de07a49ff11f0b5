from setuptools import setup

exec(open("Nmc/version.py").read())

setup(
    name         = "Nmc",
    version      = __version__,
    install_requires = ["pycryptodome"],
    extras_require   = {"test": ["pytest"]},
    packages     = ["Nmc"],
    python_requires  = ">=3.8",
    author       = "Abe developers",
    url          = "https://github.com/bitcoin-abe/bitcoin-abe",
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Security :: Cryptography',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    description  = "Nmc: parse Namecoin name operations out of output scripts.",
    long_description = """Nmc recognises the name operations (name_new,
name_firstupdate, name_update) that Namecoin places in front of ordinary
payment scripts, and returns their arguments.  It works on decoded scripts,
lists of (opcode, data) pairs as produced by a script tokenizer, and can
classify the payment script that follows the name operation.""",
    )
