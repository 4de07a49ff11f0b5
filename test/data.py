"""Decoded Namecoin output scripts to be used in the unit tests."""

from typing import List
from Nmc.typing import DecodedOp, name_ops, opcodes
from Nmc.util import name_commitment, push_to_str, str_to_push


def push(data: bytes) -> DecodedOp:
    """The decoded form of the shortest push of data"""
    if len(data) == 0:
        return (opcodes.OP_0, data)
    if len(data) < opcodes.OP_PUSHDATA1:
        return (len(data), data)
    if len(data) <= 0xFF:
        return (opcodes.OP_PUSHDATA1, data)
    return (opcodes.OP_PUSHDATA2, data)


def op(opcode: int) -> DecodedOp:
    """The decoded form of an opcode that pushes nothing"""
    return (opcode, None)


PUBKEY_HASH = bytes.fromhex("5cc87f4a3fdfe3a2346b6953267ca867282630d3")
SCRIPT_HASH = bytes.fromhex("748284390f9e263a4b766a75d0633c50426eb875")
# pylint: disable=line-too-long
PUBKEY = bytes.fromhex(
    "04678afdb0fe5548271967f1a67130b7105cd6a828e03909a67962e0ea1f61deb649f6bc3f4cef38c4f35504e51ec112de5c384df7ba0b8d578a4c702b6bf11d5f"
)

NAME = b"d/example"
SALT = bytes.fromhex("a1b2c3d4e5f60718")
VALUE = b'{"ip":"192.0.2.1"}'
NEW_VALUE = b'{"ip":"192.0.2.2"}'
NAME_HASH = name_commitment(push_to_str(SALT), push_to_str(NAME))

P2PKH: List[DecodedOp] = [
    op(opcodes.OP_DUP),
    op(opcodes.OP_HASH160),
    push(PUBKEY_HASH),
    op(opcodes.OP_EQUALVERIFY),
    op(opcodes.OP_CHECKSIG),
]

P2SH: List[DecodedOp] = [
    op(opcodes.OP_HASH160),
    push(SCRIPT_HASH),
    op(opcodes.OP_EQUAL),
]

P2PK: List[DecodedOp] = [push(PUBKEY), op(opcodes.OP_CHECKSIG)]

NAME_NEW_SCRIPT: List[DecodedOp] = [
    op(name_ops.NAME_NEW),
    push(str_to_push(NAME_HASH)),
    op(opcodes.OP_2DROP),
] + P2PKH

NAME_FIRSTUPDATE_SCRIPT: List[DecodedOp] = [
    op(name_ops.NAME_FIRSTUPDATE),
    push(NAME),
    push(SALT),
    push(VALUE),
    op(opcodes.OP_2DROP),
    op(opcodes.OP_2DROP),
] + P2PKH

NAME_UPDATE_SCRIPT: List[DecodedOp] = [
    op(name_ops.NAME_UPDATE),
    push(NAME),
    push(NEW_VALUE),
    op(opcodes.OP_2DROP),
    op(opcodes.OP_DROP),
] + P2PKH
