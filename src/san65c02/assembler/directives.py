"""
Pseudo-instructions and Directives
==================================

Words in the assembler wordlist that are not 65C02 mnemonics.

    push-a   Compile code that pushes the accumulator onto the Forth data
             stack as a cell (high byte zero).
    -->      "Arrow": mark the current compile position by pushing it as
             an operand. Used as an anonymous backward label.
    <b       Back branch: turn the address left by ``-->`` into a branch
             displacement for the branch instruction that follows.
    <j       Back jump: does nothing. Documents that the following JMP or
             JSR uses the address left by ``-->`` as is.

A backward loop in SAN:

    -->              ; mark loop start
       dex
       <b bne        ; branch back to the mark
"""

import logging

from san65c02.assembler.operands import OperandSource
from san65c02.assembler.output import OutputSink
from san65c02.errors import BranchRangeError

logger = logging.getLogger(__name__)

# dex / dex / sta 0,x / stz 1,x
PUSH_A_CODE: bytes = bytes((0xCA, 0xCA, 0x95, 0x00, 0x74, 0x01))

# Size of the branch instruction the displacement is relative to
BRANCH_SIZE = 2


def push_a(sink: OutputSink) -> None:
    """Compile the push-accumulator sequence."""
    sink.emit_bytes(PUSH_A_CODE)


def arrow(operands: OperandSource, sink: OutputSink) -> None:
    """Push the current compile position."""
    operands.push(sink.here())


def back_jump() -> None:
    """No-op marker before an absolute JMP/JSR."""


def back_branch(operands: OperandSource, sink: OutputSink, checked: bool = False) -> int:
    """
    Replace a marked address with the displacement to branch back to it.

    Replaces the address L left by ``-->`` with ``L - here - 2``. The
    branch instruction compiled next stores the low byte, which is the
    two's complement form of the displacement.

    Raises:
        StackUnderflowError: No address on the operand source
        BranchRangeError: Checked mode, displacement outside -128..127
            (L stays on the operand source)
    """
    target = operands.peek()
    offset = target - sink.here() - BRANCH_SIZE
    if checked and not -128 <= offset <= 127:
        raise BranchRangeError(offset)
    operands.drop()

    logger.debug(f"<b ${target & 0xFFFF:04X} -> offset {offset}")
    operands.push(offset)
    return offset
