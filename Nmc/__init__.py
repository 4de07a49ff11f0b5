"""Namecoin name operations in transaction output scripts."""
from Nmc.exceptions import (
    NameScriptError,
    EmptyScript,
    OpcodeOutOfRange,
    NoDropDelimiter,
    WrongArgCount,
    UnknownOp,
    NameOpMismatch,
)
from Nmc.namescript import NameScript, parse_name_script, is_name_script
from Nmc.script import Script
from Nmc.typing import name_ops, opcodes
from Nmc.version import __version__

__all__ = [
    "NameScript",
    "Script",
    "parse_name_script",
    "is_name_script",
    "name_ops",
    "opcodes",
    "NameScriptError",
    "EmptyScript",
    "OpcodeOutOfRange",
    "NoDropDelimiter",
    "WrongArgCount",
    "UnknownOp",
    "NameOpMismatch",
    "__version__",
]
