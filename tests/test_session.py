"""
Unit Tests for the Assembly Session
===================================

The session wires operand source, sink, encoder, dispatch table and
wordlist together; these tests drive it the way a host program would.
"""

import io

import pytest

from san65c02.assembler import AssemblySession, OperandQueue, StreamSink
from san65c02.config import AssemblerConfig
from san65c02.errors import (
    InvalidOpcodeError,
    StackUnderflowError,
    UnknownWordError,
)


class TestInvokeByName:
    """Tests for running words by name."""

    def setup_method(self):
        self.session = AssemblySession(origin=0x1000)

    def test_immediate(self):
        self.session.push(0x42)
        self.session.invoke("lda.#")
        assert self.session.code == bytes([0xA9, 0x42])
        assert self.session.depth == 0

    def test_names_are_case_insensitive(self):
        self.session.invoke("INX")
        assert self.session.code == bytes([0xE8])

    def test_word_returns_callable(self):
        rts = self.session.word("rts")
        rts()
        rts()
        assert self.session.code == bytes([0x60, 0x60])

    def test_unknown_word(self):
        with pytest.raises(UnknownWordError):
            self.session.invoke("lda#")

    def test_word_names_include_directives(self):
        names = self.session.word_names()
        assert "lda.#" in names
        for directive in ("push-a", "-->", "<b", "<j"):
            assert directive in names
            assert self.session.has_word(directive)

    def test_jumps_are_recorded(self):
        hooked = []
        session = AssemblySession(origin=0x0800, jump_hook=lambda a, t: hooked.append((a, t)))
        session.invoke("nop")
        session.push(0x0800)
        session.invoke("jmp")
        assert session.jumps == [(0x0801, 0x0800)]
        assert hooked == session.jumps


class TestEmitByOpcode:
    """Tests for session.emit()."""

    def setup_method(self):
        self.session = AssemblySession()

    def test_emit_with_operand(self):
        self.session.emit(0xAD, 0x1234)
        assert self.session.code == bytes([0xAD, 0x34, 0x12])

    def test_emit_without_operand(self):
        self.session.emit(0xEA)
        assert self.session.code == bytes([0xEA])

    def test_operand_for_one_byte_instruction_stays(self):
        self.session.emit(0xEA, 0x99)
        assert self.session.depth == 1

    def test_underflow_keeps_opcode_byte(self):
        with pytest.raises(StackUnderflowError):
            self.session.emit(0xA9)
        assert self.session.code == bytes([0xA9])

    def test_reserved_opcodes_still_encode(self):
        self.session.emit(0x5C, 0x1234)
        assert self.session.code == bytes([0x5C, 0x34, 0x12])
        assert self.session.find_name(0x5C) is None

    def test_checked_rejects_bad_opcode(self):
        session = AssemblySession(checked=True)
        with pytest.raises(InvalidOpcodeError):
            session.emit(0x100)


class TestDirectivesInSession:
    """Directives share the session's operand source and sink."""

    def test_backward_loop(self):
        session = AssemblySession(origin=0x0200)
        session.push(0x05)
        session.invoke("ldx.#")
        session.invoke("-->")
        session.invoke("dex")
        session.invoke("<b")
        session.invoke("bne")
        assert session.code == bytes([0xA2, 0x05, 0xCA, 0xD0, 0xFD])

    def test_back_jump(self):
        session = AssemblySession(origin=0x0200)
        session.invoke("-->")
        session.invoke("nop")
        session.invoke("<j")
        session.invoke("jmp")
        assert session.code == bytes([0xEA, 0x4C, 0x00, 0x02])
        assert session.jumps == [(0x0201, 0x0200)]

    def test_push_a(self):
        session = AssemblySession()
        session.invoke("push-a")
        assert session.code == bytes([0xCA, 0xCA, 0x95, 0x00, 0x74, 0x01])


class TestSessionConfiguration:
    """Tests for alternate sources, sinks and configuration."""

    def test_from_config(self):
        config = AssemblerConfig(origin=0x0800, table_base=0x9000, checked=True)
        session = AssemblySession.from_config(config)
        assert session.here() == 0x0800
        assert session.table.table_base == 0x9000
        assert session.checked

    def test_table_base_does_not_change_output(self):
        a = AssemblySession(table_base=0x0000)
        b = AssemblySession(table_base=0x8765)
        for session in (a, b):
            session.emit(0xAD, 0x1234)
            session.emit(0x9A)
        assert a.code == b.code

    def test_operand_queue(self):
        session = AssemblySession(operands=OperandQueue([0x01, 0x0300]))
        session.invoke("lda.#")
        session.invoke("sta")
        assert session.code == bytes([0xA9, 0x01, 0x8D, 0x00, 0x03])

    def test_stream_sink(self):
        stream = io.BytesIO()
        session = AssemblySession(sink=StreamSink(stream, origin=0x0400))
        session.emit(0xA9, 0x7F)
        assert stream.getvalue() == bytes([0xA9, 0x7F])
        assert session.here() == 0x0402
        with pytest.raises(TypeError):
            session.code
