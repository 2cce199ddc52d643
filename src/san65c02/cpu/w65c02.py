"""
WDC 65C02 Instruction Set Definition
====================================

This module defines the complete 65C02 opcode map: every documented
instruction with its SAN mnemonic, traditional mnemonic, addressing mode
and size, plus the sizes of the reserved opcodes (which execute as NOPs
of a fixed length on the 65C02).

The 65C02 is little-endian: a 16-bit operand is stored low byte first.

Simpler Assembler Notation (SAN)
--------------------------------
SAN moves the addressing mode out of the operand and into the mnemonic,
as a suffix after a dot. The operand itself is always a plain number:

    ======================  ========  ==============  ===========
    Mode                    Suffix    Traditional     SAN
    ======================  ========  ==============  ===========
    Implied                 (none)    INX             inx
    Accumulator             .a        ASL A           asl.a
    Immediate               .#        LDA #$10        $10 lda.#
    Zero page               .z        LDA $10         $10 lda.z
    Zero page,X             .zx       LDA $10,X       $10 lda.zx
    Zero page,Y             .zy       LDX $10,Y       $10 ldx.zy
    (Zero page)             .zi       LDA ($10)       $10 lda.zi
    (Zero page,X)           .zxi      LDA ($10,X)     $10 lda.zxi
    (Zero page),Y           .ziy      LDA ($10),Y     $10 lda.ziy
    Absolute                (none)    LDA $1234       $1234 lda
    Absolute,X              .x        LDA $1234,X     $1234 lda.x
    Absolute,Y              .y        LDA $1234,Y     $1234 lda.y
    (Absolute)              .i        JMP ($1234)     $1234 jmp.i
    (Absolute,X)            .xi       JMP ($1234,X)   $1234 jmp.xi
    Relative                (none)    BNE label       offset bne
    ======================  ========  ==============  ===========

The Rockwell/WDC bit instructions take a zero-page address in the low
byte of the operand; BBRn/BBSn take the branch displacement in the high
byte (``offset*256 + zp bbr3``).

Reference
---------
- WDC W65C02S datasheet, table 5-4 "Opcode Matrix"
- SAN: https://github.com/scotws/SAN
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Addressing Mode Enumeration
# =============================================================================

class AddressingMode(Enum):
    """
    65C02 addressing modes.

    Each mode determines the SAN mnemonic suffix and the total instruction
    size in bytes (opcode included).
    """
    IMPLIED = "implied"
    ACCUMULATOR = "accumulator"
    INTERRUPT = "interrupt"                 # BRK: opcode + signature byte
    IMMEDIATE = "immediate"
    ZERO_PAGE = "zero page"
    ZERO_PAGE_X = "zero page,x"
    ZERO_PAGE_Y = "zero page,y"
    ZERO_PAGE_INDIRECT = "(zero page)"
    ZERO_PAGE_X_INDIRECT = "(zero page,x)"
    ZERO_PAGE_INDIRECT_Y = "(zero page),y"
    RELATIVE = "relative"
    ZERO_PAGE_RELATIVE = "zero page,relative"  # BBRn/BBSn
    ABSOLUTE = "absolute"
    ABSOLUTE_X = "absolute,x"
    ABSOLUTE_Y = "absolute,y"
    ABSOLUTE_INDIRECT = "(absolute)"
    ABSOLUTE_X_INDIRECT = "(absolute,x)"

    @property
    def suffix(self) -> str:
        """SAN mnemonic suffix for this mode."""
        return _MODE_SUFFIXES.get(self, "")

    @property
    def size(self) -> int:
        """Total instruction size in bytes."""
        return _MODE_SIZES[self]

    def __str__(self) -> str:
        return self.value


_MODE_SUFFIXES: dict[AddressingMode, str] = {
    AddressingMode.ACCUMULATOR: ".a",
    AddressingMode.IMMEDIATE: ".#",
    AddressingMode.ZERO_PAGE: ".z",
    AddressingMode.ZERO_PAGE_X: ".zx",
    AddressingMode.ZERO_PAGE_Y: ".zy",
    AddressingMode.ZERO_PAGE_INDIRECT: ".zi",
    AddressingMode.ZERO_PAGE_X_INDIRECT: ".zxi",
    AddressingMode.ZERO_PAGE_INDIRECT_Y: ".ziy",
    AddressingMode.ABSOLUTE_X: ".x",
    AddressingMode.ABSOLUTE_Y: ".y",
    AddressingMode.ABSOLUTE_INDIRECT: ".i",
    AddressingMode.ABSOLUTE_X_INDIRECT: ".xi",
}

_MODE_SIZES: dict[AddressingMode, int] = {
    AddressingMode.IMPLIED: 1,
    AddressingMode.ACCUMULATOR: 1,
    AddressingMode.INTERRUPT: 2,
    AddressingMode.IMMEDIATE: 2,
    AddressingMode.ZERO_PAGE: 2,
    AddressingMode.ZERO_PAGE_X: 2,
    AddressingMode.ZERO_PAGE_Y: 2,
    AddressingMode.ZERO_PAGE_INDIRECT: 2,
    AddressingMode.ZERO_PAGE_X_INDIRECT: 2,
    AddressingMode.ZERO_PAGE_INDIRECT_Y: 2,
    AddressingMode.RELATIVE: 2,
    AddressingMode.ZERO_PAGE_RELATIVE: 3,
    AddressingMode.ABSOLUTE: 3,
    AddressingMode.ABSOLUTE_X: 3,
    AddressingMode.ABSOLUTE_Y: 3,
    AddressingMode.ABSOLUTE_INDIRECT: 3,
    AddressingMode.ABSOLUTE_X_INDIRECT: 3,
}


# =============================================================================
# Instruction Information
# =============================================================================

@dataclass(frozen=True)
class InstructionInfo:
    """
    Information about a specific instruction encoding.

    Attributes:
        opcode: The opcode byte
        mnemonic: Traditional (MOS/WDC) mnemonic, e.g. "LDA"
        mode: The addressing mode
    """
    opcode: int
    mnemonic: str
    mode: AddressingMode

    @property
    def size(self) -> int:
        return self.mode.size

    def __repr__(self) -> str:
        return f"InstructionInfo(opcode=${self.opcode:02X}, {self.mnemonic}, {self.mode})"


M = AddressingMode


# =============================================================================
# Opcode Table
# =============================================================================
# Key: SAN mnemonic
# Value: InstructionInfo(opcode, traditional mnemonic, addressing mode)
#
# Ordered by opcode, row by row of the WDC opcode matrix.
# =============================================================================

OPCODE_TABLE: dict[str, InstructionInfo] = {
    # -------------------------------------------------------------------------
    # $0x
    # -------------------------------------------------------------------------
    "brk": InstructionInfo(0x00, "BRK", M.INTERRUPT),
    "ora.zxi": InstructionInfo(0x01, "ORA", M.ZERO_PAGE_X_INDIRECT),
    "tsb.z": InstructionInfo(0x04, "TSB", M.ZERO_PAGE),
    "ora.z": InstructionInfo(0x05, "ORA", M.ZERO_PAGE),
    "asl.z": InstructionInfo(0x06, "ASL", M.ZERO_PAGE),
    "rmb0": InstructionInfo(0x07, "RMB0", M.ZERO_PAGE),
    "php": InstructionInfo(0x08, "PHP", M.IMPLIED),
    "ora.#": InstructionInfo(0x09, "ORA", M.IMMEDIATE),
    "asl.a": InstructionInfo(0x0A, "ASL", M.ACCUMULATOR),
    "tsb": InstructionInfo(0x0C, "TSB", M.ABSOLUTE),
    "ora": InstructionInfo(0x0D, "ORA", M.ABSOLUTE),
    "asl": InstructionInfo(0x0E, "ASL", M.ABSOLUTE),
    "bbr0": InstructionInfo(0x0F, "BBR0", M.ZERO_PAGE_RELATIVE),

    # -------------------------------------------------------------------------
    # $1x
    # -------------------------------------------------------------------------
    "bpl": InstructionInfo(0x10, "BPL", M.RELATIVE),
    "ora.ziy": InstructionInfo(0x11, "ORA", M.ZERO_PAGE_INDIRECT_Y),
    "ora.zi": InstructionInfo(0x12, "ORA", M.ZERO_PAGE_INDIRECT),
    "trb.z": InstructionInfo(0x14, "TRB", M.ZERO_PAGE),
    "ora.zx": InstructionInfo(0x15, "ORA", M.ZERO_PAGE_X),
    "asl.zx": InstructionInfo(0x16, "ASL", M.ZERO_PAGE_X),
    "rmb1": InstructionInfo(0x17, "RMB1", M.ZERO_PAGE),
    "clc": InstructionInfo(0x18, "CLC", M.IMPLIED),
    "ora.y": InstructionInfo(0x19, "ORA", M.ABSOLUTE_Y),
    "inc.a": InstructionInfo(0x1A, "INC", M.ACCUMULATOR),
    "trb": InstructionInfo(0x1C, "TRB", M.ABSOLUTE),
    "ora.x": InstructionInfo(0x1D, "ORA", M.ABSOLUTE_X),
    "asl.x": InstructionInfo(0x1E, "ASL", M.ABSOLUTE_X),
    "bbr1": InstructionInfo(0x1F, "BBR1", M.ZERO_PAGE_RELATIVE),

    # -------------------------------------------------------------------------
    # $2x
    # -------------------------------------------------------------------------
    "jsr": InstructionInfo(0x20, "JSR", M.ABSOLUTE),
    "and.zxi": InstructionInfo(0x21, "AND", M.ZERO_PAGE_X_INDIRECT),
    "bit.z": InstructionInfo(0x24, "BIT", M.ZERO_PAGE),
    "and.z": InstructionInfo(0x25, "AND", M.ZERO_PAGE),
    "rol.z": InstructionInfo(0x26, "ROL", M.ZERO_PAGE),
    "rmb2": InstructionInfo(0x27, "RMB2", M.ZERO_PAGE),
    "plp": InstructionInfo(0x28, "PLP", M.IMPLIED),
    "and.#": InstructionInfo(0x29, "AND", M.IMMEDIATE),
    "rol.a": InstructionInfo(0x2A, "ROL", M.ACCUMULATOR),
    "bit": InstructionInfo(0x2C, "BIT", M.ABSOLUTE),
    "and": InstructionInfo(0x2D, "AND", M.ABSOLUTE),
    "rol": InstructionInfo(0x2E, "ROL", M.ABSOLUTE),
    "bbr2": InstructionInfo(0x2F, "BBR2", M.ZERO_PAGE_RELATIVE),

    # -------------------------------------------------------------------------
    # $3x
    # -------------------------------------------------------------------------
    "bmi": InstructionInfo(0x30, "BMI", M.RELATIVE),
    "and.ziy": InstructionInfo(0x31, "AND", M.ZERO_PAGE_INDIRECT_Y),
    "and.zi": InstructionInfo(0x32, "AND", M.ZERO_PAGE_INDIRECT),
    "bit.zx": InstructionInfo(0x34, "BIT", M.ZERO_PAGE_X),
    "and.zx": InstructionInfo(0x35, "AND", M.ZERO_PAGE_X),
    "rol.zx": InstructionInfo(0x36, "ROL", M.ZERO_PAGE_X),
    "rmb3": InstructionInfo(0x37, "RMB3", M.ZERO_PAGE),
    "sec": InstructionInfo(0x38, "SEC", M.IMPLIED),
    "and.y": InstructionInfo(0x39, "AND", M.ABSOLUTE_Y),
    "dec.a": InstructionInfo(0x3A, "DEC", M.ACCUMULATOR),
    "bit.x": InstructionInfo(0x3C, "BIT", M.ABSOLUTE_X),
    "and.x": InstructionInfo(0x3D, "AND", M.ABSOLUTE_X),
    "rol.x": InstructionInfo(0x3E, "ROL", M.ABSOLUTE_X),
    "bbr3": InstructionInfo(0x3F, "BBR3", M.ZERO_PAGE_RELATIVE),

    # -------------------------------------------------------------------------
    # $4x
    # -------------------------------------------------------------------------
    "rti": InstructionInfo(0x40, "RTI", M.IMPLIED),
    "eor.zxi": InstructionInfo(0x41, "EOR", M.ZERO_PAGE_X_INDIRECT),
    "eor.z": InstructionInfo(0x45, "EOR", M.ZERO_PAGE),
    "lsr.z": InstructionInfo(0x46, "LSR", M.ZERO_PAGE),
    "rmb4": InstructionInfo(0x47, "RMB4", M.ZERO_PAGE),
    "pha": InstructionInfo(0x48, "PHA", M.IMPLIED),
    "eor.#": InstructionInfo(0x49, "EOR", M.IMMEDIATE),
    "lsr.a": InstructionInfo(0x4A, "LSR", M.ACCUMULATOR),
    "jmp": InstructionInfo(0x4C, "JMP", M.ABSOLUTE),
    "eor": InstructionInfo(0x4D, "EOR", M.ABSOLUTE),
    "lsr": InstructionInfo(0x4E, "LSR", M.ABSOLUTE),
    "bbr4": InstructionInfo(0x4F, "BBR4", M.ZERO_PAGE_RELATIVE),

    # -------------------------------------------------------------------------
    # $5x
    # -------------------------------------------------------------------------
    "bvc": InstructionInfo(0x50, "BVC", M.RELATIVE),
    "eor.ziy": InstructionInfo(0x51, "EOR", M.ZERO_PAGE_INDIRECT_Y),
    "eor.zi": InstructionInfo(0x52, "EOR", M.ZERO_PAGE_INDIRECT),
    "eor.zx": InstructionInfo(0x55, "EOR", M.ZERO_PAGE_X),
    "lsr.zx": InstructionInfo(0x56, "LSR", M.ZERO_PAGE_X),
    "rmb5": InstructionInfo(0x57, "RMB5", M.ZERO_PAGE),
    "cli": InstructionInfo(0x58, "CLI", M.IMPLIED),
    "eor.y": InstructionInfo(0x59, "EOR", M.ABSOLUTE_Y),
    "phy": InstructionInfo(0x5A, "PHY", M.IMPLIED),
    "eor.x": InstructionInfo(0x5D, "EOR", M.ABSOLUTE_X),
    "lsr.x": InstructionInfo(0x5E, "LSR", M.ABSOLUTE_X),
    "bbr5": InstructionInfo(0x5F, "BBR5", M.ZERO_PAGE_RELATIVE),

    # -------------------------------------------------------------------------
    # $6x
    # -------------------------------------------------------------------------
    "rts": InstructionInfo(0x60, "RTS", M.IMPLIED),
    "adc.zxi": InstructionInfo(0x61, "ADC", M.ZERO_PAGE_X_INDIRECT),
    "stz.z": InstructionInfo(0x64, "STZ", M.ZERO_PAGE),
    "adc.z": InstructionInfo(0x65, "ADC", M.ZERO_PAGE),
    "ror.z": InstructionInfo(0x66, "ROR", M.ZERO_PAGE),
    "rmb6": InstructionInfo(0x67, "RMB6", M.ZERO_PAGE),
    "pla": InstructionInfo(0x68, "PLA", M.IMPLIED),
    "adc.#": InstructionInfo(0x69, "ADC", M.IMMEDIATE),
    "ror.a": InstructionInfo(0x6A, "ROR", M.ACCUMULATOR),
    "jmp.i": InstructionInfo(0x6C, "JMP", M.ABSOLUTE_INDIRECT),
    "adc": InstructionInfo(0x6D, "ADC", M.ABSOLUTE),
    "ror": InstructionInfo(0x6E, "ROR", M.ABSOLUTE),
    "bbr6": InstructionInfo(0x6F, "BBR6", M.ZERO_PAGE_RELATIVE),

    # -------------------------------------------------------------------------
    # $7x
    # -------------------------------------------------------------------------
    "bvs": InstructionInfo(0x70, "BVS", M.RELATIVE),
    "adc.ziy": InstructionInfo(0x71, "ADC", M.ZERO_PAGE_INDIRECT_Y),
    "adc.zi": InstructionInfo(0x72, "ADC", M.ZERO_PAGE_INDIRECT),
    "stz.zx": InstructionInfo(0x74, "STZ", M.ZERO_PAGE_X),
    "adc.zx": InstructionInfo(0x75, "ADC", M.ZERO_PAGE_X),
    "ror.zx": InstructionInfo(0x76, "ROR", M.ZERO_PAGE_X),
    "rmb7": InstructionInfo(0x77, "RMB7", M.ZERO_PAGE),
    "sei": InstructionInfo(0x78, "SEI", M.IMPLIED),
    "adc.y": InstructionInfo(0x79, "ADC", M.ABSOLUTE_Y),
    "ply": InstructionInfo(0x7A, "PLY", M.IMPLIED),
    "jmp.xi": InstructionInfo(0x7C, "JMP", M.ABSOLUTE_X_INDIRECT),
    "adc.x": InstructionInfo(0x7D, "ADC", M.ABSOLUTE_X),
    "ror.x": InstructionInfo(0x7E, "ROR", M.ABSOLUTE_X),
    "bbr7": InstructionInfo(0x7F, "BBR7", M.ZERO_PAGE_RELATIVE),

    # -------------------------------------------------------------------------
    # $8x
    # -------------------------------------------------------------------------
    "bra": InstructionInfo(0x80, "BRA", M.RELATIVE),
    "sta.zxi": InstructionInfo(0x81, "STA", M.ZERO_PAGE_X_INDIRECT),
    "sty.z": InstructionInfo(0x84, "STY", M.ZERO_PAGE),
    "sta.z": InstructionInfo(0x85, "STA", M.ZERO_PAGE),
    "stx.z": InstructionInfo(0x86, "STX", M.ZERO_PAGE),
    "smb0": InstructionInfo(0x87, "SMB0", M.ZERO_PAGE),
    "dey": InstructionInfo(0x88, "DEY", M.IMPLIED),
    "bit.#": InstructionInfo(0x89, "BIT", M.IMMEDIATE),
    "txa": InstructionInfo(0x8A, "TXA", M.IMPLIED),
    "sty": InstructionInfo(0x8C, "STY", M.ABSOLUTE),
    "sta": InstructionInfo(0x8D, "STA", M.ABSOLUTE),
    "stx": InstructionInfo(0x8E, "STX", M.ABSOLUTE),
    "bbs0": InstructionInfo(0x8F, "BBS0", M.ZERO_PAGE_RELATIVE),

    # -------------------------------------------------------------------------
    # $9x
    # -------------------------------------------------------------------------
    "bcc": InstructionInfo(0x90, "BCC", M.RELATIVE),
    "sta.ziy": InstructionInfo(0x91, "STA", M.ZERO_PAGE_INDIRECT_Y),
    "sta.zi": InstructionInfo(0x92, "STA", M.ZERO_PAGE_INDIRECT),
    "sty.zx": InstructionInfo(0x94, "STY", M.ZERO_PAGE_X),
    "sta.zx": InstructionInfo(0x95, "STA", M.ZERO_PAGE_X),
    "stx.zy": InstructionInfo(0x96, "STX", M.ZERO_PAGE_Y),
    "smb1": InstructionInfo(0x97, "SMB1", M.ZERO_PAGE),
    "tya": InstructionInfo(0x98, "TYA", M.IMPLIED),
    "sta.y": InstructionInfo(0x99, "STA", M.ABSOLUTE_Y),
    "txs": InstructionInfo(0x9A, "TXS", M.IMPLIED),
    "stz": InstructionInfo(0x9C, "STZ", M.ABSOLUTE),
    "sta.x": InstructionInfo(0x9D, "STA", M.ABSOLUTE_X),
    "stz.x": InstructionInfo(0x9E, "STZ", M.ABSOLUTE_X),
    "bbs1": InstructionInfo(0x9F, "BBS1", M.ZERO_PAGE_RELATIVE),

    # -------------------------------------------------------------------------
    # $Ax
    # -------------------------------------------------------------------------
    "ldy.#": InstructionInfo(0xA0, "LDY", M.IMMEDIATE),
    "lda.zxi": InstructionInfo(0xA1, "LDA", M.ZERO_PAGE_X_INDIRECT),
    "ldx.#": InstructionInfo(0xA2, "LDX", M.IMMEDIATE),
    "ldy.z": InstructionInfo(0xA4, "LDY", M.ZERO_PAGE),
    "lda.z": InstructionInfo(0xA5, "LDA", M.ZERO_PAGE),
    "ldx.z": InstructionInfo(0xA6, "LDX", M.ZERO_PAGE),
    "smb2": InstructionInfo(0xA7, "SMB2", M.ZERO_PAGE),
    "tay": InstructionInfo(0xA8, "TAY", M.IMPLIED),
    "lda.#": InstructionInfo(0xA9, "LDA", M.IMMEDIATE),
    "tax": InstructionInfo(0xAA, "TAX", M.IMPLIED),
    "ldy": InstructionInfo(0xAC, "LDY", M.ABSOLUTE),
    "lda": InstructionInfo(0xAD, "LDA", M.ABSOLUTE),
    "ldx": InstructionInfo(0xAE, "LDX", M.ABSOLUTE),
    "bbs2": InstructionInfo(0xAF, "BBS2", M.ZERO_PAGE_RELATIVE),

    # -------------------------------------------------------------------------
    # $Bx
    # -------------------------------------------------------------------------
    "bcs": InstructionInfo(0xB0, "BCS", M.RELATIVE),
    "lda.ziy": InstructionInfo(0xB1, "LDA", M.ZERO_PAGE_INDIRECT_Y),
    "lda.zi": InstructionInfo(0xB2, "LDA", M.ZERO_PAGE_INDIRECT),
    "ldy.zx": InstructionInfo(0xB4, "LDY", M.ZERO_PAGE_X),
    "lda.zx": InstructionInfo(0xB5, "LDA", M.ZERO_PAGE_X),
    "ldx.zy": InstructionInfo(0xB6, "LDX", M.ZERO_PAGE_Y),
    "smb3": InstructionInfo(0xB7, "SMB3", M.ZERO_PAGE),
    "clv": InstructionInfo(0xB8, "CLV", M.IMPLIED),
    "lda.y": InstructionInfo(0xB9, "LDA", M.ABSOLUTE_Y),
    "tsx": InstructionInfo(0xBA, "TSX", M.IMPLIED),
    "ldy.x": InstructionInfo(0xBC, "LDY", M.ABSOLUTE_X),
    "lda.x": InstructionInfo(0xBD, "LDA", M.ABSOLUTE_X),
    "ldx.y": InstructionInfo(0xBE, "LDX", M.ABSOLUTE_Y),
    "bbs3": InstructionInfo(0xBF, "BBS3", M.ZERO_PAGE_RELATIVE),

    # -------------------------------------------------------------------------
    # $Cx
    # -------------------------------------------------------------------------
    "cpy.#": InstructionInfo(0xC0, "CPY", M.IMMEDIATE),
    "cmp.zxi": InstructionInfo(0xC1, "CMP", M.ZERO_PAGE_X_INDIRECT),
    "cpy.z": InstructionInfo(0xC4, "CPY", M.ZERO_PAGE),
    "cmp.z": InstructionInfo(0xC5, "CMP", M.ZERO_PAGE),
    "dec.z": InstructionInfo(0xC6, "DEC", M.ZERO_PAGE),
    "smb4": InstructionInfo(0xC7, "SMB4", M.ZERO_PAGE),
    "iny": InstructionInfo(0xC8, "INY", M.IMPLIED),
    "cmp.#": InstructionInfo(0xC9, "CMP", M.IMMEDIATE),
    "dex": InstructionInfo(0xCA, "DEX", M.IMPLIED),
    "wai": InstructionInfo(0xCB, "WAI", M.IMPLIED),
    "cpy": InstructionInfo(0xCC, "CPY", M.ABSOLUTE),
    "cmp": InstructionInfo(0xCD, "CMP", M.ABSOLUTE),
    "dec": InstructionInfo(0xCE, "DEC", M.ABSOLUTE),
    "bbs4": InstructionInfo(0xCF, "BBS4", M.ZERO_PAGE_RELATIVE),

    # -------------------------------------------------------------------------
    # $Dx
    # -------------------------------------------------------------------------
    "bne": InstructionInfo(0xD0, "BNE", M.RELATIVE),
    "cmp.ziy": InstructionInfo(0xD1, "CMP", M.ZERO_PAGE_INDIRECT_Y),
    "cmp.zi": InstructionInfo(0xD2, "CMP", M.ZERO_PAGE_INDIRECT),
    "cmp.zx": InstructionInfo(0xD5, "CMP", M.ZERO_PAGE_X),
    "dec.zx": InstructionInfo(0xD6, "DEC", M.ZERO_PAGE_X),
    "smb5": InstructionInfo(0xD7, "SMB5", M.ZERO_PAGE),
    "cld": InstructionInfo(0xD8, "CLD", M.IMPLIED),
    "cmp.y": InstructionInfo(0xD9, "CMP", M.ABSOLUTE_Y),
    "phx": InstructionInfo(0xDA, "PHX", M.IMPLIED),
    "stp": InstructionInfo(0xDB, "STP", M.IMPLIED),
    "cmp.x": InstructionInfo(0xDD, "CMP", M.ABSOLUTE_X),
    "dec.x": InstructionInfo(0xDE, "DEC", M.ABSOLUTE_X),
    "bbs5": InstructionInfo(0xDF, "BBS5", M.ZERO_PAGE_RELATIVE),

    # -------------------------------------------------------------------------
    # $Ex
    # -------------------------------------------------------------------------
    "cpx.#": InstructionInfo(0xE0, "CPX", M.IMMEDIATE),
    "sbc.zxi": InstructionInfo(0xE1, "SBC", M.ZERO_PAGE_X_INDIRECT),
    "cpx.z": InstructionInfo(0xE4, "CPX", M.ZERO_PAGE),
    "sbc.z": InstructionInfo(0xE5, "SBC", M.ZERO_PAGE),
    "inc.z": InstructionInfo(0xE6, "INC", M.ZERO_PAGE),
    "smb6": InstructionInfo(0xE7, "SMB6", M.ZERO_PAGE),
    "inx": InstructionInfo(0xE8, "INX", M.IMPLIED),
    "sbc.#": InstructionInfo(0xE9, "SBC", M.IMMEDIATE),
    "nop": InstructionInfo(0xEA, "NOP", M.IMPLIED),
    "cpx": InstructionInfo(0xEC, "CPX", M.ABSOLUTE),
    "sbc": InstructionInfo(0xED, "SBC", M.ABSOLUTE),
    "inc": InstructionInfo(0xEE, "INC", M.ABSOLUTE),
    "bbs6": InstructionInfo(0xEF, "BBS6", M.ZERO_PAGE_RELATIVE),

    # -------------------------------------------------------------------------
    # $Fx
    # -------------------------------------------------------------------------
    "beq": InstructionInfo(0xF0, "BEQ", M.RELATIVE),
    "sbc.ziy": InstructionInfo(0xF1, "SBC", M.ZERO_PAGE_INDIRECT_Y),
    "sbc.zi": InstructionInfo(0xF2, "SBC", M.ZERO_PAGE_INDIRECT),
    "sbc.zx": InstructionInfo(0xF5, "SBC", M.ZERO_PAGE_X),
    "inc.zx": InstructionInfo(0xF6, "INC", M.ZERO_PAGE_X),
    "smb7": InstructionInfo(0xF7, "SMB7", M.ZERO_PAGE),
    "sed": InstructionInfo(0xF8, "SED", M.IMPLIED),
    "sbc.y": InstructionInfo(0xF9, "SBC", M.ABSOLUTE_Y),
    "plx": InstructionInfo(0xFA, "PLX", M.IMPLIED),
    "sbc.x": InstructionInfo(0xFD, "SBC", M.ABSOLUTE_X),
    "inc.x": InstructionInfo(0xFE, "INC", M.ABSOLUTE_X),
    "bbs7": InstructionInfo(0xFF, "BBS7", M.ZERO_PAGE_RELATIVE),
}


# =============================================================================
# Reserved Opcodes
# =============================================================================
# On the 65C02 every undefined opcode is a NOP of fixed size. Assemblers
# never generate them, but the encoder must still know their length.
#
# - $x3 and $xB (except WAI/STP): 1 byte
# - $02, $22, $42, $62, $82, $C2, $E2: 2 bytes (immediate operand)
# - $44, $54, $D4, $F4: 2 bytes (zero page operand)
# - $5C, $DC, $FC: 3 bytes (absolute operand)
# =============================================================================

RESERVED_OPCODES: dict[int, int] = {
    **{(row << 4) | 0x3: 1 for row in range(16)},
    **{(row << 4) | 0xB: 1 for row in range(16) if row not in (0xC, 0xD)},
    **{op: 2 for op in (0x02, 0x22, 0x42, 0x62, 0x82, 0xC2, 0xE2)},
    **{op: 2 for op in (0x44, 0x54, 0xD4, 0xF4)},
    **{op: 3 for op in (0x5C, 0xDC, 0xFC)},
}


# =============================================================================
# Derived Tables
# =============================================================================

# Opcode -> SAN mnemonic (documented opcodes only)
OPCODE_NAMES: dict[int, str] = {
    info.opcode: name for name, info in OPCODE_TABLE.items()
}

# Instruction size for every opcode 0..255, documented or not
INSTRUCTION_SIZES: tuple[int, ...] = tuple(
    OPCODE_TABLE[OPCODE_NAMES[op]].size if op in OPCODE_NAMES
    else RESERVED_OPCODES[op]
    for op in range(256)
)

# All SAN mnemonics, alphabetically (the order the assembler wordlist
# defines them in)
SAN_MNEMONICS: tuple[str, ...] = tuple(sorted(OPCODE_TABLE))

# The only opcode the encoder routes through the jump hook
JMP_ABSOLUTE = 0x4C


# =============================================================================
# Lookup Functions
# =============================================================================

def get_instruction_info(name: str) -> Optional[InstructionInfo]:
    """
    Look up instruction information by SAN mnemonic.

    Args:
        name: SAN mnemonic, e.g. "lda.#" (case-insensitive)

    Returns:
        InstructionInfo if found, None otherwise
    """
    return OPCODE_TABLE.get(name.lower())


def is_reserved_opcode(opcode: int) -> bool:
    """Check if an opcode has no documented instruction."""
    return opcode in RESERVED_OPCODES


def instruction_size(opcode: int) -> int:
    """Reference size of any opcode, looked up in the opcode map."""
    return INSTRUCTION_SIZES[opcode]
