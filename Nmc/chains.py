# Copyright(C) 2014 by Abe developers.

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
"""
Output script classification for Bitcoin and for Namecoin, whose output scripts
may start with a name operation.
"""
import logging
from typing import List, Optional, Tuple, Union
from Nmc.constants import (
    MAX_MULTISIG_KEYS,
    MAX_PUSHDATA_OPCODE,
    PUBKEY_HASH_LENGTH,
)
from Nmc.exceptions import NameScriptError
from Nmc.namescript import NameScript, parse_name_script
from Nmc.typing import DecodedScript, ScriptMultisig, opcodes

# Template to match a pubkey hash ("Bitcoin address transaction") in
# txout_scriptPubKey.  OP_PUSHDATA4 matches any data push.
SCRIPT_ADDRESS_TEMPLATE = [
    opcodes.OP_DUP,
    opcodes.OP_HASH160,
    opcodes.OP_PUSHDATA4,
    opcodes.OP_EQUALVERIFY,
    opcodes.OP_CHECKSIG,
]

# Template to match a pubkey ("IP address transaction") in txout_scriptPubKey.
SCRIPT_PUBKEY_TEMPLATE = [opcodes.OP_PUSHDATA4, opcodes.OP_CHECKSIG]

# Template to match a BIP16 pay-to-script-hash (P2SH) output script.
SCRIPT_P2SH_TEMPLATE = [opcodes.OP_HASH160, PUBKEY_HASH_LENGTH, opcodes.OP_EQUAL]

# Template to match a script that can never be redeemed, used in Namecoin.
SCRIPT_BURN_TEMPLATE = [opcodes.OP_RETURN]

SCRIPT_TYPE_UNKNOWN = 1
SCRIPT_TYPE_PUBKEY = 2
SCRIPT_TYPE_ADDRESS = 3
SCRIPT_TYPE_BURN = 4
SCRIPT_TYPE_MULTISIG = 5
SCRIPT_TYPE_P2SH = 6

ScriptData = Union[bytes, ScriptMultisig, DecodedScript, None]


def match_decoded(decoded: DecodedScript, to_match: List[int]) -> bool:
    """Match the decoded OP codes to a match pattern

    Args:
        decoded (DecodedScript): Decoded OP codes in script
        to_match (List[int]): Pattern to match the OP Codes to for specific transactions

    Returns:
        bool: True if every opcode matches its template entry
    """
    if len(decoded) != len(to_match):
        return False
    for i, value in enumerate(decoded):
        if to_match[i] == opcodes.OP_PUSHDATA4 and value[0] <= MAX_PUSHDATA_OPCODE:
            # Opcodes below OP_PUSHDATA4 all just push data onto stack, and are equivalent.
            continue
        if to_match[i] != value[0]:
            return False
    return True


class BaseChain:
    """The basic bitcoin based blockchain output script policy"""

    def __init__(self):
        self.log = logging.getLogger(__name__)

    def parse_decoded_txout_script(self, decoded: DecodedScript) -> Tuple[int, ScriptData]:
        """
        Return TYPE, DATA where the format of DATA depends on TYPE.

        * SCRIPT_TYPE_UNKNOWN  - DATA is the decoded script
        * SCRIPT_TYPE_PUBKEY   - DATA is the binary public key
        * SCRIPT_TYPE_ADDRESS  - DATA is the binary public key hash
        * SCRIPT_TYPE_BURN     - DATA is None
        * SCRIPT_TYPE_MULTISIG - DATA is {"m":m, "pubkeys":list_of_pubkeys}
        * SCRIPT_TYPE_P2SH     - DATA is the binary script hash
        """
        if match_decoded(decoded, SCRIPT_ADDRESS_TEMPLATE):
            pubkey_hash = decoded[2][1]
            if pubkey_hash is not None and len(pubkey_hash) == PUBKEY_HASH_LENGTH:
                return SCRIPT_TYPE_ADDRESS, pubkey_hash

        elif match_decoded(decoded, SCRIPT_PUBKEY_TEMPLATE):
            pubkey = decoded[0][1]
            if pubkey is not None:
                return SCRIPT_TYPE_PUBKEY, pubkey

        elif match_decoded(decoded, SCRIPT_P2SH_TEMPLATE):
            script_hash = decoded[1][1]
            if script_hash is not None and len(script_hash) == PUBKEY_HASH_LENGTH:
                return SCRIPT_TYPE_P2SH, script_hash

        elif match_decoded(decoded, SCRIPT_BURN_TEMPLATE):
            return SCRIPT_TYPE_BURN, None

        elif len(decoded) >= 4 and decoded[-1][0] == opcodes.OP_CHECKMULTISIG:
            # cf. bitcoin/src/script.cpp:Solver
            n_sig = decoded[-2][0] + 1 - opcodes.OP_1
            m_sig = decoded[0][0] + 1 - opcodes.OP_1
            if (
                1 <= m_sig <= n_sig <= MAX_MULTISIG_KEYS
                and len(decoded) == 3 + n_sig
                and all(
                    decoded[i][0] <= MAX_PUSHDATA_OPCODE for i in range(1, 1 + n_sig)
                )
            ):
                return SCRIPT_TYPE_MULTISIG, {
                    "m": m_sig,
                    "pubkeys": [decoded[i][1] or b"" for i in range(1, 1 + n_sig)],
                }

        return SCRIPT_TYPE_UNKNOWN, decoded


class Namecoin(BaseChain):
    """
    Namecoin represents name operations in transaction output scripts.
    """

    # How many stack items each delimiter removes.
    _drops = {opcodes.OP_NOP: 0, opcodes.OP_DROP: 1, opcodes.OP_2DROP: 2}

    def parse_decoded_txout_script(self, decoded: DecodedScript) -> Tuple[int, ScriptData]:
        start = 0
        pushed = 0

        # Skip the name operation by tracking what the drops remove.
        for i, (opcode, _) in enumerate(decoded):
            if (
                opcode <= MAX_PUSHDATA_OPCODE
                or opcode == opcodes.OP_1NEGATE
                or opcodes.OP_1 <= opcode <= opcodes.OP_16
            ):
                pushed += 1
            elif opcode in self._drops:
                to_drop = self._drops[opcode]
                if pushed < to_drop:
                    break
                pushed -= to_drop
                start = i + 1
            else:
                return BaseChain.parse_decoded_txout_script(self, decoded[start:])

        return SCRIPT_TYPE_UNKNOWN, decoded

    def parse_name_txout(
        self, decoded: DecodedScript
    ) -> Tuple[Optional[NameScript], int, ScriptData]:
        """Return the name operation, if any, and the payment script's TYPE, DATA"""
        try:
            name_script: Optional[NameScript] = parse_name_script(decoded)
        except NameScriptError as error:
            self.log.debug("txout carries no name operation: %s", error)
            name_script = None
        script_type, data = self.parse_decoded_txout_script(decoded)
        return name_script, script_type, data
