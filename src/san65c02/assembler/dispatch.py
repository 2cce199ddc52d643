"""
Opcode Dispatch Table
=====================

256 uniform entry points into the common encoder, one per opcode.

On the target the table is ``jsr asm_op_common`` repeated 256 times. Each
entry is 3 bytes long and the return address it pushes (entry + 2) has a
low byte equal to the entry's opcode, so the common routine learns the
opcode without it being stored anywhere. Because 3 and 256 are coprime,
every opcode has exactly one such entry.

Finding the Entry for an Opcode
-------------------------------
Entry ``k`` sits at ``base + 3k`` and returns to ``base + 3k + 2``.
We need ``base + 2 + 3k == op (mod 256)``, i.e. ``3k == m`` with
``m = op - 2 - (base & $FF)``. Since ``3 * 171 == 513 == 1 (mod 256)``,
``k = 171 * m mod 256``. The subtraction is biased by 512 so the
intermediate value stays non-negative.

Here each entry is a Python callable bound to its slot; calling it
recovers the opcode from the slot's return address and hands it to the
encoder.
"""

from typing import Iterator

from san65c02.assembler.encoder import Encoder

# Bytes per entry (one JSR instruction)
ENTRY_SIZE = 3
TABLE_SIZE = 256

# Multiplicative inverse of ENTRY_SIZE modulo 256
INVERSE_3 = 171


def slot_for_opcode(opcode: int, table_base: int = 0) -> int:
    """Index of the dispatch entry whose return address encodes ``opcode``."""
    return (INVERSE_3 * (512 + (opcode & 0xFF) - 2 - (table_base & 0xFF))) % 256


def return_address(slot: int, table_base: int = 0) -> int:
    """Return address pushed by the JSR at entry ``slot``."""
    return (table_base + ENTRY_SIZE * slot + 2) & 0xFFFF


def opcode_for_slot(slot: int, table_base: int = 0) -> int:
    """Opcode carried by entry ``slot``: the low byte of its return address."""
    return return_address(slot, table_base) & 0xFF


class DispatchEntry:
    """
    One trampoline in the dispatch table.

    Calling the entry compiles the instruction it stands for. The entry
    does not store its opcode; it is recovered from the return address.
    """

    __slots__ = ("table", "slot")

    def __init__(self, table: "DispatchTable", slot: int):
        self.table = table
        self.slot = slot

    @property
    def address(self) -> int:
        """Address of this entry (its execution token)."""
        return (self.table.table_base + ENTRY_SIZE * self.slot) & 0xFFFF

    @property
    def opcode(self) -> int:
        return opcode_for_slot(self.slot, self.table.table_base)

    def __call__(self) -> None:
        self.table.encoder.encode(self.opcode)

    def __repr__(self) -> str:
        return f"DispatchEntry(slot={self.slot}, address=${self.address:04X}, opcode=${self.opcode:02X})"


class DispatchTable:
    """
    The table of 256 entry points.

    Indexing by opcode returns the entry that compiles it:

        >>> table = DispatchTable(encoder, table_base=0xA000)
        >>> table[0xA9]()          # compiles LDA #
    """

    def __init__(self, encoder: Encoder, table_base: int = 0):
        self.encoder = encoder
        self.table_base = table_base & 0xFFFF
        self._entries = tuple(DispatchEntry(self, slot) for slot in range(TABLE_SIZE))

    def slot(self, opcode: int) -> int:
        return slot_for_opcode(opcode, self.table_base)

    def entry(self, opcode: int) -> DispatchEntry:
        """The entry that compiles ``opcode``."""
        return self._entries[self.slot(opcode)]

    def entry_address(self, opcode: int) -> int:
        """Execution token of the entry for ``opcode``."""
        return self.entry(opcode).address

    def __getitem__(self, opcode: int) -> DispatchEntry:
        return self.entry(opcode)

    def __len__(self) -> int:
        return TABLE_SIZE

    def __iter__(self) -> Iterator[DispatchEntry]:
        """Entries in table (slot) order."""
        return iter(self._entries)
