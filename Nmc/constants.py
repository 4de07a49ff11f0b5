"""Constants used by multiple files """
from typing import Dict, Tuple
from Nmc.typing import name_ops, opcodes

# Push data is turned into argument strings byte for byte.
ARG_ENCODING = "latin-1"

# Highest opcode that only pushes data.
MAX_PUSHDATA_OPCODE = opcodes.OP_PUSHDATA4

# Opcodes that may separate name arguments from the payment script.
DROP_OPCODES: Tuple[int, ...] = (opcodes.OP_DROP, opcodes.OP_2DROP, opcodes.OP_NOP)

NAME_OP_ARITY: Dict[int, int] = {
    name_ops.NAME_NEW: 1,
    name_ops.NAME_FIRSTUPDATE: 3,
    name_ops.NAME_UPDATE: 2,
}

PUBKEY_HASH_LENGTH = 20
MAX_MULTISIG_KEYS = 3
