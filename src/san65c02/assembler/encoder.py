"""
Common Encoder
==============

The routine every mnemonic ends up in. Given an opcode it appends the
opcode byte to the output sink, works out the instruction length and, for
two- and three-byte instructions, takes the operand from the operand
source and appends its low byte (and high byte) in little-endian order.

Encoding Rules
--------------
    length 1:  [opcode]                 operand source untouched
    length 2:  [opcode, lo]             one cell consumed
    length 3:  [opcode, lo, hi]         one cell consumed

The opcode byte is emitted before the operand is checked, so an
instruction that is missing its operand leaves its opcode byte behind.
There is no rollback.

Absolute JMP ($4C)
------------------
``jmp`` never goes through the generic path. It is compiled by
``compile_jump``, which emits the same three bytes but also reports the
jump to an optional hook, ``jump_hook(address, target)``. Flow analysis
(for example "this word contains a jump and must not be inlined") hangs
off that hook.

Checked and Unchecked Modes
---------------------------
Unchecked mode (the default) trusts the caller: opcodes are masked to
8 bits and operands to 8 or 16 bits, and the only error is underflow.
Checked mode rejects opcodes outside 0..255 and operands that do not fit
the instruction.
"""

import logging
from typing import Callable, Optional

from san65c02.assembler.lengths import LENGTHS
from san65c02.assembler.operands import OperandSource
from san65c02.assembler.output import OutputSink
from san65c02.cpu import JMP_ABSOLUTE
from san65c02.errors import InvalidOpcodeError, OperandRangeError

logger = logging.getLogger(__name__)

# Called with (address of the JMP instruction, jump target)
JumpHook = Callable[[int, int], None]

# Accepted operand ranges in checked mode, by instruction length
_OPERAND_RANGES: dict[int, tuple[int, int]] = {
    2: (-0x80, 0xFF),
    3: (-0x8000, 0xFFFF),
}


class Encoder:
    """
    Encodes single 65C02 instructions into an output sink.

    Attributes:
        operands: Where operand cells come from
        sink: Where bytes go
        jump_hook: Called after every absolute JMP is compiled
        checked: Validate opcodes and operand ranges
    """

    def __init__(
        self,
        operands: OperandSource,
        sink: OutputSink,
        jump_hook: Optional[JumpHook] = None,
        checked: bool = False,
    ):
        self.operands = operands
        self.sink = sink
        self.jump_hook = jump_hook
        self.checked = checked

    def encode(self, opcode: int) -> None:
        """
        Compile one instruction.

        Raises:
            StackUnderflowError: Instruction needs an operand and none is
                available (the opcode byte has already been emitted)
            InvalidOpcodeError: Checked mode, opcode outside 0..255
            OperandRangeError: Checked mode, operand too wide
        """
        if self.checked:
            if not isinstance(opcode, int) or not 0 <= opcode <= 0xFF:
                raise InvalidOpcodeError(opcode)
        else:
            opcode &= 0xFF

        if opcode == JMP_ABSOLUTE:
            self.compile_jump()
            return

        self.sink.emit(opcode)
        length = LENGTHS[opcode]
        if length == 1:
            logger.debug(f"${opcode:02X}")
            return

        value = self.operands.peek()
        if self.checked:
            self._check_operand(opcode, value, length)

        self.sink.emit(value & 0xFF)
        if length == 3:
            self.sink.emit((value >> 8) & 0xFF)
        self.operands.drop()

        logger.debug(f"${opcode:02X} operand ${value & 0xFFFF:04X} ({length} bytes)")

    def compile_jump(self) -> None:
        """
        Compile ``JMP target`` with the target taken from the operand source.

        The operand is checked before anything is emitted, so a missing
        target leaves the output untouched.
        """
        target = self.operands.peek()
        if self.checked:
            self._check_operand(JMP_ABSOLUTE, target, 3)

        address = self.sink.here()
        self.sink.emit(JMP_ABSOLUTE)
        self.sink.emit(target & 0xFF)
        self.sink.emit((target >> 8) & 0xFF)
        self.operands.drop()

        logger.debug(f"JMP ${target & 0xFFFF:04X} at ${address:04X}")
        if self.jump_hook is not None:
            self.jump_hook(address, target & 0xFFFF)

    def _check_operand(self, opcode: int, value: int, length: int) -> None:
        low, high = _OPERAND_RANGES[length]
        if not low <= value <= high:
            raise OperandRangeError(opcode, value, length)
