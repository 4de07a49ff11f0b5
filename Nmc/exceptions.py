"""Specific Exceptions used in Nmc."""
from typing import Optional


class EnumException(Exception):
    """C-like Enumeration Exception"""


class NameScriptError(ValueError):
    """The script is not a syntactically valid name script."""

    message = "pk script is not a valid name script"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class EmptyScript(NameScriptError):
    """The script has no instructions."""

    message = "pk script contains no opcodes and thus cannot be a valid name script"


class OpcodeOutOfRange(NameScriptError):
    """An argument position holds something other than a data push."""

    message = (
        "pk script is not a valid name script because it contains an "
        "out-of-range opcode"
    )

    def __init__(self, opcode: int, position: int):
        self.opcode = opcode
        self.position = position
        super().__init__(f"{self.message} ({opcode:#04x} at {position})")


class NoDropDelimiter(NameScriptError):
    """No DROP/2DROP/NOP run separates the arguments from the payment script."""

    message = (
        "pk script is not a valid name script because it does not contain a "
        "DROP/2DROP/NOP delimiter"
    )


class WrongArgCount(NameScriptError):
    """Known name operation with the wrong number of arguments."""

    message = (
        "pk script is not a valid name script because it does not have the "
        "correct number of arguments for the given op type"
    )

    def __init__(self, name_op: int, count: int, expected: int):
        self.name_op = name_op
        self.count = count
        self.expected = expected
        super().__init__(f"{self.message} (got {count}, expected {expected})")


class UnknownOp(NameScriptError):
    """The leading opcode is not a name operation."""

    message = (
        "pk script is not a valid name script because it has an unknown name "
        "op type"
    )

    def __init__(self, name_op: int):
        self.name_op = name_op
        super().__init__(f"{self.message} ({name_op:#04x})")


class NameOpMismatch(AssertionError):
    """A NameScript accessor was called for the wrong kind of name operation.

    This is a caller bug, not bad input, so it is not a NameScriptError.
    """
