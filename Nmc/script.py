"""Two-part script container"""

from typing import Optional, Tuple
from Nmc.constants import MAX_PUSHDATA_OPCODE
from Nmc.typing import DecodedOp, DecodedScript, opcodes
from Nmc.util import short_hex


def script_GetOpName(opcode: int) -> str:  # pylint: disable=invalid-name
    """Get the OP_CODE name without its OP_ prefix"""
    name = opcodes.whatis(opcode, "InvalidOp_" + str(opcode))
    return name.replace("OP_", "")


def decode_ops(decoded: DecodedScript) -> str:
    """Render decoded instructions the way decode_script renders raw ones"""
    result = []
    for opcode, vch in decoded:
        if opcode <= MAX_PUSHDATA_OPCODE and vch is not None:
            result.append(f"{opcode}:{short_hex(vch)}")
        else:
            result.append(script_GetOpName(opcode))
    return " ".join(result)


class Script:
    """A decoded script pair: the unlocking half and the locking half.

    Only the locking half (``pubkey_ops``) can carry a name operation.
    """

    __slots__ = ("sig_ops", "pubkey_ops")

    def __init__(
        self,
        sig_ops: Optional[DecodedScript] = None,
        pubkey_ops: Optional[DecodedScript] = None,
    ):
        self.sig_ops: Tuple[DecodedOp, ...] = tuple(sig_ops or ())
        self.pubkey_ops: Tuple[DecodedOp, ...] = tuple(pubkey_ops or ())

    @classmethod
    def from_decoded(cls, decoded: DecodedScript) -> "Script":
        """Wrap a decoded scriptPubKey"""
        return cls(pubkey_ops=decoded)

    def __len__(self) -> int:
        return len(self.pubkey_ops)

    def __eq__(self, other):
        if not isinstance(other, Script):
            return NotImplemented
        return self.sig_ops == other.sig_ops and self.pubkey_ops == other.pubkey_ops

    def __hash__(self):
        return hash((self.sig_ops, self.pubkey_ops))

    def __repr__(self) -> str:
        return f"Script({decode_ops(self.pubkey_ops)!r})"
