"""
Unit Tests for the Instruction Length Resolver
==============================================

The closed-form resolver is checked against the full 65C02 opcode map,
which lists every documented instruction with its addressing mode and
every reserved opcode with its NOP size.
"""

import pytest

from san65c02.assembler.lengths import LENGTHS, op_length
from san65c02.cpu import (
    INSTRUCTION_SIZES,
    OPCODE_NAMES,
    OPCODE_TABLE,
    RESERVED_OPCODES,
    AddressingMode,
    get_instruction_info,
    instruction_size,
)


# =============================================================================
# Opcode Map Sanity
# =============================================================================

class TestOpcodeMap:
    """The reference table itself must cover every opcode exactly once."""

    def test_documented_opcodes_are_unique(self):
        """No two SAN mnemonics share an opcode."""
        opcodes = [info.opcode for info in OPCODE_TABLE.values()]
        assert len(opcodes) == len(set(opcodes))

    def test_documented_and_reserved_are_disjoint(self):
        assert not set(OPCODE_NAMES) & set(RESERVED_OPCODES)

    def test_every_opcode_is_covered(self):
        """Documented + reserved opcodes make up all 256 values."""
        assert set(OPCODE_NAMES) | set(RESERVED_OPCODES) == set(range(256))
        assert len(OPCODE_TABLE) == 212
        assert len(RESERVED_OPCODES) == 44

    def test_mode_suffixes_match_names(self):
        """SAN names end in their addressing mode's suffix."""
        for name, info in OPCODE_TABLE.items():
            if name[:3] in ("rmb", "smb"):
                # Bit number instead of a mode suffix
                continue
            suffix = info.mode.suffix
            if suffix:
                assert name.endswith(suffix), name
            else:
                assert "." not in name, name

    def test_lookup_is_case_insensitive(self):
        assert get_instruction_info("LDA.#").opcode == 0xA9
        assert get_instruction_info("nope") is None

    def test_brk_carries_signature_byte(self):
        info = get_instruction_info("brk")
        assert info.mode is AddressingMode.INTERRUPT
        assert info.size == 2

    def test_bit_branch_instructions_are_three_bytes(self):
        for n in range(8):
            assert get_instruction_info(f"bbr{n}").size == 3
            assert get_instruction_info(f"bbs{n}").size == 3
            assert get_instruction_info(f"rmb{n}").size == 2
            assert get_instruction_info(f"smb{n}").size == 2


# =============================================================================
# Closed-form Resolver
# =============================================================================

class TestOpLength:
    """op_length() must reproduce the opcode map exactly."""

    @pytest.mark.parametrize("opcode", range(256))
    def test_matches_opcode_map(self, opcode):
        assert op_length(opcode) == INSTRUCTION_SIZES[opcode]

    def test_precomputed_table(self):
        assert LENGTHS == INSTRUCTION_SIZES
        assert len(LENGTHS) == 256

    def test_range_and_determinism(self):
        for opcode in range(256):
            first = op_length(opcode)
            assert first in (1, 2, 3)
            assert op_length(opcode) == first

    def test_column_x0_exceptions(self):
        """$x0 is two bytes except JSR (3), RTI (1) and RTS (1)."""
        assert op_length(0x00) == 2   # BRK
        assert op_length(0x20) == 3   # JSR
        assert op_length(0x40) == 1   # RTI
        assert op_length(0x60) == 1   # RTS
        for opcode in (0x10, 0x30, 0x50, 0x70, 0x80, 0x90, 0xA0, 0xB0,
                       0xC0, 0xD0, 0xE0, 0xF0):
            assert op_length(opcode) == 2

    def test_column_x9_uses_bit_4(self):
        assert op_length(0x09) == 2   # ORA #
        assert op_length(0x19) == 3   # ORA abs,Y
        assert op_length(0x89) == 2   # BIT #
        assert op_length(0x99) == 3   # STA abs,Y
        assert op_length(0xA9) == 2   # LDA #
        assert op_length(0xB9) == 3   # LDA abs,Y

    def test_regular_columns(self):
        assert op_length(0xE8) == 1   # INX
        assert op_length(0x1A) == 1   # INC A
        assert op_length(0xCB) == 1   # WAI
        assert op_length(0xA5) == 2   # LDA zp
        assert op_length(0xAD) == 3   # LDA abs
        assert op_length(0x7C) == 3   # JMP (abs,X)
        assert op_length(0x0F) == 3   # BBR0

    def test_reserved_nops(self):
        assert op_length(0x03) == 1
        assert op_length(0x02) == 2
        assert op_length(0x44) == 2
        assert op_length(0x5C) == 3
        assert instruction_size(0xFC) == 3

    def test_only_low_byte_is_examined(self):
        assert op_length(0x1AD) == op_length(0xAD)
