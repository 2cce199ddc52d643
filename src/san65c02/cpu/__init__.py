"""
san65c02 CPU Package
====================

CPU architecture definitions shared by the encoder, the reverse name
resolver and the test suite.

Modules:
    w65c02: The complete WDC 65C02 opcode map with SAN mnemonics,
            addressing modes and instruction sizes.

The opcode map is the reference the closed-form length resolver is
checked against; the assembler never reads sizes from it on the hot path.

Usage:
    from san65c02.cpu import (
        AddressingMode,
        InstructionInfo,
        OPCODE_TABLE,
        get_instruction_info,
    )
"""

# =============================================================================
# Public API Exports
# =============================================================================

from san65c02.cpu.w65c02 import (
    # Core types
    AddressingMode,
    InstructionInfo,
    # Master instruction database
    OPCODE_TABLE,
    RESERVED_OPCODES,
    # Derived tables
    OPCODE_NAMES,
    INSTRUCTION_SIZES,
    SAN_MNEMONICS,
    JMP_ABSOLUTE,
    # Lookup functions
    get_instruction_info,
    is_reserved_opcode,
    instruction_size,
)

__all__ = [
    # Core types
    "AddressingMode",
    "InstructionInfo",
    # Master instruction database
    "OPCODE_TABLE",
    "RESERVED_OPCODES",
    # Derived tables
    "OPCODE_NAMES",
    "INSTRUCTION_SIZES",
    "SAN_MNEMONICS",
    "JMP_ABSOLUTE",
    # Lookup functions
    "get_instruction_info",
    "is_reserved_opcode",
    "instruction_size",
]
