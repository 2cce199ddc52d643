"""
65C02 SAN Assembler
===================

The encoding core of the assembler and its SAN source front-end.

Main Components
---------------
- **op_length / LENGTHS**: Closed-form instruction length resolver
- **DispatchTable**: 256 entry points, opcode recovered from entry address
- **Encoder**: The common routine that compiles one instruction
- **AssemblerWordlist**: Mnemonic words and the opcode -> name resolver
- **directives**: push-a, arrow (``-->``), back-branch (``<b``),
  back-jump (``<j``)
- **OperandStack / OperandQueue**: Operand sources
- **CodeBuffer / StreamSink**: Output sinks
- **AssemblySession**: Everything above wired together for one assembly
- **SanAssembler**: Reads SAN source text into a session

Assembly Process
----------------
1. A number pushes an operand onto the operand source.
2. A mnemonic calls its dispatch entry, which recovers the opcode and
   hands it to the encoder.
3. The encoder emits the opcode byte, looks up the instruction length and
   emits the operand's low (and high) byte, consuming the operand.

Example Usage
-------------
>>> from san65c02.assembler import assemble
>>> assemble('''
...     $00 ldx.#
...     -->  inx
...          <b bne
...     rts
... ''').hex()
'a200e8d0fd60'
"""

from san65c02.assembler.lengths import op_length, LENGTHS
from san65c02.assembler.operands import OperandSource, OperandStack, OperandQueue
from san65c02.assembler.output import OutputSink, CodeBuffer, StreamSink
from san65c02.assembler.encoder import Encoder, JumpHook
from san65c02.assembler.dispatch import (
    DispatchTable,
    DispatchEntry,
    slot_for_opcode,
    opcode_for_slot,
)
from san65c02.assembler.wordlist import AssemblerWordlist, Word
from san65c02.assembler.directives import (
    PUSH_A_CODE,
    push_a,
    arrow,
    back_jump,
    back_branch,
)
from san65c02.assembler.session import AssemblySession
from san65c02.assembler.san import (
    SanAssembler,
    Token,
    tokenize,
    parse_number,
    assemble,
    assemble_file,
)

__all__ = [
    # Length resolver
    "op_length",
    "LENGTHS",
    # Operand sources
    "OperandSource",
    "OperandStack",
    "OperandQueue",
    # Output sinks
    "OutputSink",
    "CodeBuffer",
    "StreamSink",
    # Encoder and dispatch
    "Encoder",
    "JumpHook",
    "DispatchTable",
    "DispatchEntry",
    "slot_for_opcode",
    "opcode_for_slot",
    # Wordlist
    "AssemblerWordlist",
    "Word",
    # Directives
    "PUSH_A_CODE",
    "push_a",
    "arrow",
    "back_jump",
    "back_branch",
    # Session and front-end
    "AssemblySession",
    "SanAssembler",
    "Token",
    "tokenize",
    "parse_number",
    "assemble",
    "assemble_file",
]
