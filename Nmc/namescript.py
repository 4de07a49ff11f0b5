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
Namecoin name operations carried in transaction output scripts.

A name script is the name operation opcode, its arguments as data pushes, a
run of DROP/2DROP/NOP opcodes, and then an ordinary payment script:

    NAME_NEW <hash> 2DROP <payment>
    NAME_FIRSTUPDATE <name> <rand> <value> 2DROP 2DROP <payment>
    NAME_UPDATE <name> <value> 2DROP DROP <payment>
"""

import logging
from typing import Sequence, Tuple, Union
from Nmc.constants import ARG_ENCODING, DROP_OPCODES, MAX_PUSHDATA_OPCODE, NAME_OP_ARITY
from Nmc.exceptions import (
    EmptyScript,
    NameOpMismatch,
    NameScriptError,
    NoDropDelimiter,
    OpcodeOutOfRange,
    UnknownOp,
    WrongArgCount,
)
from Nmc.script import Script
from Nmc.typing import DecodedScript, name_ops
from Nmc.util import name_commitment, push_to_str, str_to_push

log = logging.getLogger(__name__)


class NameScript:
    """A parsed name operation: its op type, source script and arguments.

    Instances come from parse_name_script() and are never modified.
    """

    __slots__ = ("_op", "_script", "_args", "_encoding")

    def __init__(
        self,
        op: int,
        script: Script,
        args: Sequence[str],
        encoding: str = ARG_ENCODING,
    ):
        if op not in NAME_OP_ARITY:
            raise UnknownOp(op)
        if len(args) != NAME_OP_ARITY[op]:
            raise WrongArgCount(op, len(args), NAME_OP_ARITY[op])
        self._op = op
        self._script = script
        self._args: Tuple[str, ...] = tuple(args)
        self._encoding = encoding

    def __setattr__(self, attr, value):
        if hasattr(self, attr):
            raise AttributeError(f"NameScript.{attr} is read-only")
        super().__setattr__(attr, value)

    @property
    def op(self) -> int:
        """The name operation opcode"""
        return self._op

    @property
    def script(self) -> Script:
        """The script this name operation was parsed from"""
        return self._script

    @property
    def args(self) -> Tuple[str, ...]:
        """The name operation arguments"""
        return self._args

    @property
    def is_any_update(self) -> bool:
        """True for name_firstupdate and name_update"""
        return self._op in (name_ops.NAME_FIRSTUPDATE, name_ops.NAME_UPDATE)

    @property
    def name(self) -> str:
        """The name being registered or updated"""
        if not self.is_any_update:
            raise NameOpMismatch("name requested from a non-update name script")
        return self._args[0]

    @property
    def value(self) -> str:
        """The value assigned to the name"""
        if self._op == name_ops.NAME_FIRSTUPDATE:
            return self._args[2]
        if self._op == name_ops.NAME_UPDATE:
            return self._args[1]
        raise NameOpMismatch("value requested from a non-update name script")

    @property
    def salt(self) -> str:
        """The random value revealed by name_firstupdate"""
        if self._op != name_ops.NAME_FIRSTUPDATE:
            raise NameOpMismatch("salt requested from a non-firstupdate name script")
        return self._args[1]

    @property
    def name_hash(self) -> str:
        """The hash committed to by name_new"""
        if self._op != name_ops.NAME_NEW:
            raise NameOpMismatch("name hash requested from a non-new name script")
        return self._args[0]

    def matches_commitment(self, name_new: "NameScript") -> bool:
        """Whether this name_firstupdate reveals what name_new committed to"""
        commitment = name_commitment(self.salt, self.name, self._encoding)
        # Compare the hash bytes; name_new may use another encoding.
        return str_to_push(commitment, self._encoding) == str_to_push(
            name_new.name_hash, name_new._encoding  # pylint: disable=protected-access
        )

    def __eq__(self, other):
        if not isinstance(other, NameScript):
            return NotImplemented
        return self._op == other._op and self._args == other._args

    def __hash__(self):
        return hash((self._op, self._args))

    def __repr__(self) -> str:
        return f"NameScript({name_ops.whatis(self._op)}, {list(self._args)!r})"


def parse_name_script(
    script: Union[Script, DecodedScript], encoding: str = ARG_ENCODING
) -> NameScript:
    """Parse the name operation out of a script.

    ``script`` is a Script or a bare decoded scriptPubKey.  Raises a
    NameScriptError subclass if it is not a syntactically valid name script.
    """
    if not isinstance(script, Script):
        script = Script.from_decoded(script)
    decoded = script.pubkey_ops

    if len(decoded) == 0:
        raise EmptyScript()

    name_op = decoded[0][0]
    args = []

    i = 1
    while i < len(decoded):
        opcode, data = decoded[i]
        if opcode in DROP_OPCODES:
            break
        if not 0 <= opcode <= MAX_PUSHDATA_OPCODE:
            raise OpcodeOutOfRange(opcode, i)
        args.append(push_to_str(data, encoding))
        i += 1

    while i < len(decoded) and decoded[i][0] in DROP_OPCODES:
        i += 1

    # The delimiter run must be followed by the payment script.
    if i >= len(decoded):
        raise NoDropDelimiter()

    # Unknown ops and wrong argument counts are rejected by NameScript.
    return NameScript(name_op, script, args, encoding)


def is_name_script(script: Union[Script, DecodedScript]) -> bool:
    """Determines whether a script contains a syntactically valid name script"""
    try:
        parse_name_script(script)
    except NameScriptError as error:
        log.debug("not a name script: %s", error)
        return False
    return True
