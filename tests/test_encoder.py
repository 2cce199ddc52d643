"""
Unit Tests for the Common Encoder
=================================

Covers byte output and operand consumption for one-, two- and
three-byte instructions, underflow behaviour, the absolute JMP path and
checked mode.
"""

import io

import pytest

from san65c02.assembler import (
    CodeBuffer,
    Encoder,
    OperandQueue,
    OperandStack,
    StreamSink,
)
from san65c02.errors import (
    InvalidOpcodeError,
    OperandRangeError,
    StackUnderflowError,
)


# =============================================================================
# Generic Encoding
# =============================================================================

class TestEncoding:
    """Tests for the generic encoding path."""

    def setup_method(self):
        self.stack = OperandStack()
        self.buffer = CodeBuffer(origin=0x0800)
        self.encoder = Encoder(self.stack, self.buffer)

    def test_one_byte_leaves_stack_alone(self):
        self.stack.push(0x1234)
        self.encoder.encode(0xE8)   # INX
        assert self.buffer.code == bytes([0xE8])
        assert self.stack.to_list() == [0x1234]

    def test_lda_immediate(self):
        """$42 lda.# -> A9 42, stack empty."""
        self.stack.push(0x0042)
        self.encoder.encode(0xA9)
        assert self.buffer.code == bytes([0xA9, 0x42])
        assert self.stack.depth == 0

    def test_lda_absolute_little_endian(self):
        """$1234 lda -> AD 34 12, stack empty."""
        self.stack.push(0x1234)
        self.encoder.encode(0xAD)
        assert self.buffer.code == bytes([0xAD, 0x34, 0x12])
        assert self.stack.depth == 0

    def test_two_byte_uses_low_byte_only(self):
        self.stack.push(0xBEEF)
        self.encoder.encode(0x85)   # STA zp
        assert self.buffer.code == bytes([0x85, 0xEF])

    def test_consumes_exactly_one_cell(self):
        self.stack.push(0x1111)
        self.stack.push(0x2222)
        self.encoder.encode(0x8D)   # STA abs
        assert self.buffer.code == bytes([0x8D, 0x22, 0x22])
        assert self.stack.to_list() == [0x1111]

    def test_negative_operand_is_twos_complement(self):
        self.stack.push(-3)
        self.encoder.encode(0xD0)   # BNE
        assert self.buffer.code == bytes([0xD0, 0xFD])

    def test_compile_position_advances(self):
        self.stack.push(0x2000)
        self.encoder.encode(0x20)   # JSR
        self.encoder.encode(0x60)   # RTS
        assert self.buffer.here() == 0x0804

    def test_operand_queue_source(self):
        queue = OperandQueue([0x10, 0x2000])
        encoder = Encoder(queue, self.buffer)
        encoder.encode(0xA2)        # LDX #
        encoder.encode(0x8E)        # STX abs
        assert self.buffer.code == bytes([0xA2, 0x10, 0x8E, 0x00, 0x20])
        assert queue.depth == 0

    def test_stream_sink(self):
        stream = io.BytesIO()
        encoder = Encoder(self.stack, StreamSink(stream, origin=0x0800))
        self.stack.push(0x0300)
        encoder.encode(0xAD)
        assert stream.getvalue() == bytes([0xAD, 0x00, 0x03])


# =============================================================================
# Underflow
# =============================================================================

class TestUnderflow:
    """A missing operand is an error, and nothing is rolled back."""

    def setup_method(self):
        self.stack = OperandStack()
        self.buffer = CodeBuffer()
        self.encoder = Encoder(self.stack, self.buffer)

    @pytest.mark.parametrize("opcode", [0xA9, 0xAD, 0x20, 0xD0, 0x00])
    def test_opcode_byte_stays(self, opcode):
        with pytest.raises(StackUnderflowError):
            self.encoder.encode(opcode)
        assert self.buffer.code == bytes([opcode])

    def test_one_byte_never_underflows(self):
        self.encoder.encode(0x60)
        assert self.buffer.code == bytes([0x60])

    def test_error_details(self):
        with pytest.raises(StackUnderflowError) as excinfo:
            self.encoder.encode(0xA9)
        assert excinfo.value.required == 1
        assert excinfo.value.available == 0
        assert "underflow" in str(excinfo.value)


# =============================================================================
# Absolute Jump
# =============================================================================

class TestAbsoluteJump:
    """Opcode $4C goes through the jump path and its hook."""

    def setup_method(self):
        self.stack = OperandStack()
        self.buffer = CodeBuffer(origin=0x1000)
        self.jumps: list[tuple[int, int]] = []
        self.encoder = Encoder(
            self.stack, self.buffer,
            jump_hook=lambda address, target: self.jumps.append((address, target)),
        )

    def test_jump_bytes_and_hook(self):
        self.stack.push(0xC000)
        self.encoder.encode(0x4C)
        assert self.buffer.code == bytes([0x4C, 0x00, 0xC0])
        assert self.jumps == [(0x1000, 0xC000)]
        assert self.stack.depth == 0

    def test_generic_path_not_taken(self, monkeypatch):
        calls = []
        monkeypatch.setattr(self.encoder, "compile_jump", lambda: calls.append(True))
        self.stack.push(0xC000)
        self.encoder.encode(0x4C)
        assert calls == [True]
        assert self.buffer.code == b""

    def test_other_three_byte_instructions_skip_hook(self):
        self.stack.push(0xC000)
        self.encoder.encode(0x20)   # JSR
        self.stack.push(0xC000)
        self.encoder.encode(0x6C)   # JMP (abs)
        assert self.jumps == []

    def test_underflow_emits_nothing(self):
        with pytest.raises(StackUnderflowError):
            self.encoder.encode(0x4C)
        assert self.buffer.code == b""
        assert self.jumps == []

    def test_no_hook(self):
        encoder = Encoder(self.stack, self.buffer)
        self.stack.push(0x1234)
        encoder.encode(0x4C)
        assert self.buffer.code == bytes([0x4C, 0x34, 0x12])


# =============================================================================
# Checked Mode
# =============================================================================

class TestCheckedMode:
    """Checked mode validates what unchecked mode trusts."""

    def setup_method(self):
        self.stack = OperandStack()
        self.buffer = CodeBuffer()
        self.encoder = Encoder(self.stack, self.buffer, checked=True)

    @pytest.mark.parametrize("opcode", [-1, 256, 0x1A9])
    def test_invalid_opcode(self, opcode):
        with pytest.raises(InvalidOpcodeError):
            self.encoder.encode(opcode)
        assert self.buffer.code == b""

    def test_unchecked_masks_opcode(self):
        encoder = Encoder(self.stack, self.buffer)
        encoder.encode(0x1E8)
        assert self.buffer.code == bytes([0xE8])

    @pytest.mark.parametrize("value", [0, 0xFF, -128])
    def test_byte_operand_in_range(self, value):
        self.stack.push(value)
        self.encoder.encode(0xA9)
        assert self.buffer.code == bytes([0xA9, value & 0xFF])

    @pytest.mark.parametrize("value", [0x100, -129])
    def test_byte_operand_out_of_range(self, value):
        self.stack.push(value)
        with pytest.raises(OperandRangeError):
            self.encoder.encode(0xA9)
        # Opcode byte already emitted, operand left in place
        assert self.buffer.code == bytes([0xA9])
        assert self.stack.to_list() == [value]

    def test_word_operand_out_of_range(self):
        self.stack.push(0x10000)
        with pytest.raises(OperandRangeError):
            self.encoder.encode(0xAD)

    def test_jump_target_out_of_range(self):
        self.stack.push(0x10000)
        with pytest.raises(OperandRangeError):
            self.encoder.encode(0x4C)
        assert self.buffer.code == b""
