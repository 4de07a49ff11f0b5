"""test_script.py: test the decoded script container"""

from Nmc.script import Script, decode_ops, script_GetOpName
from Nmc.typing import opcodes
from .data import P2PKH, push


def test_script_GetOpName() -> None:  # pylint: disable=invalid-name
    """test_script_GetOpName"""
    assert script_GetOpName(opcodes.OP_2DROP) == "2DROP"
    assert script_GetOpName(0xBA) == "InvalidOp_186"


def test_decode_ops() -> None:
    """test_decode_ops"""
    assert decode_ops(P2PKH) == "DUP HASH160 20:5cc8...30d3 EQUALVERIFY CHECKSIG"
    assert decode_ops([push(b"\x01")]) == "1:01"


def test_script() -> None:
    """test_script"""
    script = Script.from_decoded(P2PKH)
    assert len(script) == 5
    assert script.sig_ops == ()
    assert script.pubkey_ops == tuple(P2PKH)
    assert script == Script(pubkey_ops=P2PKH)
    assert script != Script(sig_ops=[push(b"sig")], pubkey_ops=P2PKH)
    assert hash(script) == hash(Script(pubkey_ops=P2PKH))
    assert repr(script) == "Script('DUP HASH160 20:5cc8...30d3 EQUALVERIFY CHECKSIG')"
