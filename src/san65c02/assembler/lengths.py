"""
Instruction Length Resolver
===========================

Derives the length of any 65C02 instruction (1, 2 or 3 bytes) from the
bit pattern of its opcode, without a 256-entry table.

The opcode's low nibble decides the length for 14 of the 16 columns of
the opcode matrix. The two irregular columns are resolved with extra
bit tests on the full opcode:

    Column $x0: 2 bytes, except
        $20 JSR  -> 3
        $40 RTI  -> 1
        $60 RTS  -> 1
        ($00 BRK counts as 2: it is followed by a signature byte)

    Column $x9: 3 bytes when bit 4 is set (abs,Y), else 2 (immediate)

``LENGTHS`` is the resolver applied once to every opcode at import time;
the encoder indexes it instead of calling the function per instruction.
"""

# Column lengths; 0 marks the two columns that need bit tests
_NIBBLE_LENGTHS: tuple[int, ...] = (
    0, 2, 2, 1, 2, 2, 2, 2,
    1, 0, 1, 1, 3, 3, 3, 3,
)


def op_length(opcode: int) -> int:
    """
    Return the total length in bytes of the instruction with this opcode.

    Total over 0..255. Only the low 8 bits of ``opcode`` are examined.
    """
    opcode &= 0xFF
    length = _NIBBLE_LENGTHS[opcode & 0x0F]
    if length:
        return length

    if opcode & 0x01:
        # $x9: bit 4 selects abs,Y over immediate
        return 3 if opcode & 0x10 else 2

    # $x0: anything outside $00/$20/$40/$60 is two bytes
    if opcode & 0b10011111:
        return 2
    # Bit 6 picks out RTI and RTS
    if opcode & 0x40:
        return 1
    # Left with BRK ($00) and JSR ($20)
    return 3 if opcode & 0x20 else 2


LENGTHS: tuple[int, ...] = tuple(op_length(op) for op in range(256))
