"""
Unit Tests for the Assembler Wordlist
=====================================

Tests for the linked mnemonic wordlist and the opcode -> mnemonic
reverse resolver.
"""

import pytest

from san65c02.assembler import (
    AssemblerWordlist,
    CodeBuffer,
    DispatchTable,
    Encoder,
    OperandStack,
)
from san65c02.cpu import OPCODE_NAMES, OPCODE_TABLE, SAN_MNEMONICS, is_reserved_opcode
from san65c02.errors import DuplicateWordError


def make_wordlist(table_base: int = 0, names=SAN_MNEMONICS) -> AssemblerWordlist:
    table = DispatchTable(Encoder(OperandStack(), CodeBuffer()), table_base=table_base)
    return AssemblerWordlist(table, names)


class TestWordlistStructure:
    """Tests for the linked list itself."""

    def setup_method(self):
        self.words = make_wordlist()

    def test_contains_every_mnemonic(self):
        assert len(self.words) == len(OPCODE_TABLE)
        assert "lda.#" in self.words
        assert "LDA.#" in self.words

    def test_walk_runs_last_to_first(self):
        walked = [word.name for word in self.words]
        assert walked == list(reversed(SAN_MNEMONICS))
        assert walked[0] == self.words.last.name
        assert walked[-1] == self.words.first.name

    def test_first_word_has_no_link(self):
        assert self.words.first.link is None

    def test_xt_encodes_opcode(self):
        for name, info in OPCODE_TABLE.items():
            word = self.words.lookup(name)
            assert word.xt & 0xFF == (info.opcode - 2) & 0xFF
            assert word.opcode == info.opcode


class TestReverseResolver:
    """Tests for find_word() / find_name()."""

    @pytest.mark.parametrize("table_base", [0x0000, 0x1234, 0xFFFF])
    def test_every_mnemonic_resolves(self, table_base):
        words = make_wordlist(table_base)
        for name, info in OPCODE_TABLE.items():
            assert words.find_name(info.opcode) == name
            assert words.find_word(info.opcode) is words.lookup(name)

    def test_reserved_opcodes_resolve_to_none(self):
        words = make_wordlist()
        for opcode in filter(is_reserved_opcode, range(256)):
            assert words.find_word(opcode) is None
            assert words.find_name(opcode) is None

    def test_known_names(self):
        words = make_wordlist()
        assert words.find_name(0xA9) == "lda.#"
        assert words.find_name(0xAD) == "lda"
        assert words.find_name(0x4C) == "jmp"
        assert words.find_name(0x00) == "brk"

    def test_duplicate_opcode_prefers_last_defined(self):
        """With two words for one opcode, the walk meets the later one first."""
        table = DispatchTable(Encoder(OperandStack(), CodeBuffer()))
        words = AssemblerWordlist(table, ("inx", "lda.#"))
        words.define("lda.imm", 0xA9)
        assert words.find_name(0xA9) == "lda.imm"

    def test_redefining_a_name_is_rejected(self):
        table = DispatchTable(Encoder(OperandStack(), CodeBuffer()))
        words = AssemblerWordlist(table, ("lda.#", "nop"))
        with pytest.raises(DuplicateWordError) as excinfo:
            words.define("LDA.#", 0xEA)
        assert excinfo.value.opcode == 0xA9
        assert len(words) == 2
        assert [w.name for w in words] == ["nop", "lda.#"]
        assert words.find_name(0xA9) == "lda.#"
        assert words.find_name(0xEA) == "nop"
        assert words.lookup("lda.#").opcode == 0xA9

    def test_partial_wordlist(self):
        words = make_wordlist(names=("inx", "rts"))
        assert words.find_name(0xE8) == "inx"
        assert words.find_name(0x60) == "rts"
        assert words.find_name(0xA9) is None
        assert len(OPCODE_NAMES) > len(words)
