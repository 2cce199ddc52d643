"""
Assembly Session
================

One assembly session: the operand source, the output sink, the encoder,
the dispatch table and the assembler wordlist, wired together.

The session is what a host (the SAN front-end, the CLI or Python code)
talks to. It is single-threaded and not reentrant; use one session per
piece of code being assembled.

Example
-------
>>> session = AssemblySession(origin=0x1000)
>>> session.push(0x1234)
>>> session.invoke("lda")
>>> session.invoke("rts")
>>> session.code.hex()
'ad341260'
"""

import logging
from typing import Callable, Optional

from san65c02.assembler import directives
from san65c02.assembler.dispatch import DispatchTable
from san65c02.assembler.encoder import Encoder, JumpHook
from san65c02.assembler.operands import OperandSource, OperandStack
from san65c02.assembler.output import CodeBuffer, OutputSink
from san65c02.assembler.wordlist import AssemblerWordlist, Word
from san65c02.config import AssemblerConfig
from san65c02.errors import InvalidOpcodeError, UnknownWordError

logger = logging.getLogger(__name__)


class AssemblySession:
    """
    An assembly session.

    Args:
        origin: Address of the first byte (ignored when ``sink`` is given)
        table_base: Address of the dispatch table
        checked: Validate opcodes, operands and branch distances
        operands: Operand source (default: a fresh OperandStack)
        sink: Output sink (default: a CodeBuffer at ``origin``)
        jump_hook: Called with (address, target) after each absolute JMP

    Attributes:
        jumps: (address, target) of every absolute JMP compiled so far
    """

    def __init__(
        self,
        origin: int = 0,
        table_base: int = 0,
        checked: bool = False,
        operands: Optional[OperandSource] = None,
        sink: Optional[OutputSink] = None,
        jump_hook: Optional[JumpHook] = None,
    ):
        self.operands = operands if operands is not None else OperandStack()
        self.sink = sink if sink is not None else CodeBuffer(origin)
        self.checked = checked
        self.jumps: list[tuple[int, int]] = []
        self._jump_hook = jump_hook

        self.encoder = Encoder(
            self.operands,
            self.sink,
            jump_hook=self._on_jump,
            checked=checked,
        )
        self.table = DispatchTable(self.encoder, table_base=table_base)
        self.wordlist = AssemblerWordlist(self.table)
        logger.debug(
            f"Session: origin ${self.sink.here():04X}, table ${self.table.table_base:04X}, "
            f"checked={checked}"
        )

        self._directives: dict[str, Callable[[], None]] = {
            "push-a": lambda: directives.push_a(self.sink),
            "-->": lambda: directives.arrow(self.operands, self.sink),
            "<j": directives.back_jump,
            "<b": lambda: directives.back_branch(self.operands, self.sink, self.checked),
        }

    @classmethod
    def from_config(cls, config: AssemblerConfig, **kwargs) -> "AssemblySession":
        return cls(
            origin=config.origin,
            table_base=config.table_base,
            checked=config.checked,
            **kwargs,
        )

    # -------------------------------------------------------------------------
    # Word Access
    # -------------------------------------------------------------------------

    def word(self, name: str) -> Callable[[], None]:
        """
        Return the callable for a mnemonic or directive.

        Raises:
            UnknownWordError: No word with that name
        """
        key = name.lower()
        if key in self._directives:
            return self._directives[key]
        word = self.wordlist.lookup(key)
        if word is None:
            raise UnknownWordError(name)
        return self.table.entry((word.xt + 2) & 0xFF)

    def invoke(self, name: str) -> None:
        """Run a mnemonic or directive by name."""
        self.word(name)()

    def has_word(self, name: str) -> bool:
        key = name.lower()
        return key in self._directives or key in self.wordlist

    def word_names(self) -> list[str]:
        """All mnemonic and directive names."""
        return self.wordlist.names() + list(self._directives)

    # -------------------------------------------------------------------------
    # Encoding
    # -------------------------------------------------------------------------

    def push(self, value: int) -> None:
        """Supply an operand for the next instruction."""
        self.operands.push(value)

    def emit(self, opcode: int, operand: Optional[int] = None) -> None:
        """
        Compile one instruction by opcode, optionally pushing its operand first.

        An operand passed for a one-byte instruction stays on the operand
        source, exactly as if it had been pushed separately.
        """
        if self.checked and not (isinstance(opcode, int) and 0 <= opcode <= 0xFF):
            raise InvalidOpcodeError(opcode)
        if operand is not None:
            self.push(operand)
        self.table[opcode]()

    def find_word(self, opcode: int) -> Optional[Word]:
        return self.wordlist.find_word(opcode)

    def find_name(self, opcode: int) -> Optional[str]:
        """SAN mnemonic that compiles ``opcode``, or None."""
        return self.wordlist.find_name(opcode)

    def here(self) -> int:
        return self.sink.here()

    @property
    def depth(self) -> int:
        """Number of operands waiting on the operand source."""
        return self.operands.depth

    @property
    def code(self) -> bytes:
        """
        Bytes compiled so far.

        Only available for in-memory sinks; a StreamSink has already
        written its bytes out.
        """
        if not isinstance(self.sink, CodeBuffer):
            raise TypeError("compiled code is only kept by CodeBuffer sinks")
        return self.sink.code

    def _on_jump(self, address: int, target: int) -> None:
        self.jumps.append((address, target))
        if self._jump_hook is not None:
            self._jump_hook(address, target)
