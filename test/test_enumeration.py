"""test_enumeration.py: test the opcode and name op tables"""

import pytest
from Nmc.enumeration import Enumeration
from Nmc.exceptions import EnumException
from Nmc.typing import name_ops, opcodes


def test_opcode_values() -> None:
    """test_opcode_values"""
    assert opcodes.OP_0 == 0x00
    assert opcodes.OP_PUSHDATA4 == 0x4E
    assert opcodes.OP_1 == 0x51
    assert opcodes.OP_16 == 0x60
    assert opcodes.OP_NOP == 0x61
    assert opcodes.OP_2DROP == 0x6D
    assert opcodes.OP_DROP == 0x75
    assert opcodes.OP_DUP == 0x76
    assert opcodes.OP_CHECKSIG == 0xAC
    assert opcodes.OP_INVALIDOPCODE == 0xFF


def test_name_op_values() -> None:
    """Name ops reuse OP_1, OP_2 and OP_3"""
    assert name_ops.NAME_NEW == opcodes.OP_1
    assert name_ops.NAME_FIRSTUPDATE == opcodes.OP_2
    assert name_ops.NAME_UPDATE == opcodes.OP_3
    assert len(name_ops) == 3
    assert dict(name_ops) == {
        "NAME_NEW": 0x51,
        "NAME_FIRSTUPDATE": 0x52,
        "NAME_UPDATE": 0x53,
    }


def test_whatis() -> None:
    """test_whatis"""
    assert opcodes.whatis(0x75) == "OP_DROP"
    assert name_ops.whatis(0x52) == "NAME_FIRSTUPDATE"
    assert opcodes.whatis(0xFE, "unknown") == "unknown"
    with pytest.raises(KeyError):
        opcodes.whatis(0xFE)


def test_contains() -> None:
    """test_contains"""
    assert opcodes.OP_DROP in opcodes
    assert 0xFE not in opcodes
    assert opcodes.OP_DROP not in name_ops


def test_unknown_attribute() -> None:
    """test_unknown_attribute"""
    with pytest.raises(AttributeError):
        opcodes.OP_NAME_NEW  # pylint: disable=pointless-statement


def test_not_unique() -> None:
    """test_not_unique"""
    with pytest.raises(EnumException):
        Enumeration("Dup", ["A", "A"])
    with pytest.raises(EnumException):
        Enumeration("Dup", [("A", 1), ("B", 1)])
