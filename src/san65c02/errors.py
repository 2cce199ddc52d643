"""
san65c02 Error Hierarchy
========================

This module defines the exception hierarchy for the whole package.
All exceptions inherit from SanError, allowing callers to catch every
encoder-related error with a single except clause.

Exception Hierarchy
-------------------
SanError (base)
└── AssemblerError (assembly-related)
    ├── StackUnderflowError - operand required but operand source empty
    ├── InvalidOpcodeError - opcode outside 0..255 (checked mode)
    ├── OperandRangeError - operand does not fit the instruction (checked mode)
    ├── BranchRangeError - back-branch displacement too far (checked mode)
    ├── UnknownWordError - SAN source names a word that does not exist
    └── DuplicateWordError - a word name is defined twice

The unchecked encoder raises only StackUnderflowError. The other errors
belong to checked mode and to the SAN front-end.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class SanError(Exception):
    """
    Base exception for all san65c02 errors.

        try:
            assemble_file("program.san")
        except SanError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A location in SAN source text, used for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(SanError):
    """
    Base exception for all assembler-related errors.

    Errors raised by the encoder itself carry no location. The SAN
    front-end attaches one with ``with_location()`` before re-raising, so
    the same exception object reaches the user with file/line context.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def with_location(
        self,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ) -> "AssemblerError":
        """Attach a source location (and line text) and refresh the message."""
        self.location = location
        self.source_line = source_line
        self.args = (self._format_message(),)
        return self

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            prog.san:3:7: error: operand stack underflow
                $10 lda.# sta.z
                          ^
            hint: push the operand before the mnemonic
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class StackUnderflowError(AssemblerError):
    """
    Operand stack underflow.

    Raised when an instruction needs an operand (length 2 or 3) or a
    directive needs an address, but the operand source holds fewer cells
    than required. Bytes already emitted (the opcode byte of a generic
    instruction) stay in the output; nothing is rolled back.
    """

    def __init__(
        self,
        required: int = 1,
        available: int = 0,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.required = required
        self.available = available
        super().__init__(
            f"operand stack underflow (need {required}, have {available})",
            location=location,
            hint="in SAN the operand comes before the mnemonic, e.g. '$10 lda.#'",
            source_line=source_line,
        )


class InvalidOpcodeError(AssemblerError):
    """
    Opcode outside the 0..255 range.

    Only raised in checked mode; the unchecked encoder trusts its callers.
    """

    def __init__(self, opcode: int, location: Optional[SourceLocation] = None):
        self.opcode = opcode
        super().__init__(
            f"invalid opcode {opcode!r} (must be 0..255)",
            location=location,
        )


class OperandRangeError(AssemblerError):
    """
    Operand value does not fit the instruction.

    Two-byte instructions accept -128..255, three-byte instructions
    accept -32768..65535. Only raised in checked mode; unchecked mode
    keeps the low 8 or 16 bits of the value.
    """

    def __init__(
        self,
        opcode: int,
        value: int,
        length: int,
        location: Optional[SourceLocation] = None,
    ):
        self.opcode = opcode
        self.value = value
        self.length = length
        kind = "byte" if length == 2 else "word"
        super().__init__(
            f"operand {value} does not fit in a {kind} for opcode ${opcode:02X}",
            location=location,
        )


class BranchRangeError(AssemblerError):
    """
    Back-branch displacement is out of range.

    65C02 branch instructions use a signed 8-bit displacement measured
    from the byte after the branch, limiting the reach to -128..+127.
    When this happens, use a JMP with the back-jump directive instead:

        -->  ...  <j jmp
    """

    def __init__(self, offset: int, location: Optional[SourceLocation] = None):
        self.offset = offset
        super().__init__(
            f"back-branch target is out of range (offset: {offset})",
            location=location,
            hint="range is -128 to +127; consider '<j jmp' instead",
        )


class UnknownWordError(AssemblerError):
    """
    SAN source names a word that is neither a mnemonic nor a directive.

    The front-end suggests similarly-named words to help catch typos
    (for example ``lda#`` instead of ``lda.#``).
    """

    def __init__(
        self,
        word: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        similar_words: Optional[list[str]] = None,
    ):
        self.word = word
        self.similar_words = similar_words or []

        hint = None
        if self.similar_words:
            suggestions = ", ".join(f"'{w}'" for w in self.similar_words[:3])
            hint = f"did you mean {suggestions}?"

        super().__init__(
            f"unknown word '{word}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class DuplicateWordError(AssemblerError):
    """
    Word name defined more than once in the assembler wordlist.

    Every name maps to exactly one opcode, so an alias must use a new name.
    """

    def __init__(self, word: str, opcode: int, location: Optional[SourceLocation] = None):
        self.word = word
        self.opcode = opcode
        super().__init__(
            f"duplicate word '{word}'",
            location=location,
            hint=f"'{word}' already compiles opcode ${opcode:02X}",
        )
