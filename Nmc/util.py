# Copyright(C) 2011,2012,2013,2014 by Abe developers.
# Copyright (c) 2010 Gavin Andresen

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public
# License along with this program.  If not, see
# <http://www.gnu.org/licenses/agpl.html>.


"""Misc util routines"""

from typing import Optional, Union
from Crypto.Hash import SHA256, RIPEMD160
from Nmc.constants import ARG_ENCODING


# This function comes from bitcointools, bct-LICENSE.txt.
def short_hex(_bytes: Union[bytes, bytearray]) -> str:
    """Returns the truncated hexadecimal string of a binary input"""
    _hex = bytes(_bytes).hex()
    if len(_hex) < 11:
        return _hex
    return _hex[0:4] + "..." + _hex[-4:]


def push_to_str(data: Optional[bytes], encoding: str = ARG_ENCODING) -> str:
    """Convert pushed script data into an argument string.

    A missing push (``None``) is the empty string.
    """
    if data is None:
        return ""
    return bytes(data).decode(encoding, "surrogateescape")


def str_to_push(arg: str, encoding: str = ARG_ENCODING) -> bytes:
    """Inverse of push_to_str"""
    return arg.encode(encoding, "surrogateescape")


def hash_160(data: Union[bytes, bytearray, memoryview, None]) -> bytes:
    """Conduct the Double hash of the data using SHA256 first and then RIPEMD160"""
    return RIPEMD160.new(SHA256.new(data).digest()).digest()


def name_commitment(salt: str, name: str, encoding: str = ARG_ENCODING) -> str:
    """The hash a name_new commits to, as an argument string.

    A name_firstupdate reveals ``salt`` and ``name``; the matching name_new
    carries hash160(salt + name).
    """
    digest = hash_160(str_to_push(salt, encoding) + str_to_push(name, encoding))
    return push_to_str(digest, encoding)
