"""
Operand Sources
===============

Where the encoder gets its operands from.

In SAN the operand is supplied before the mnemonic, so an instruction
finds its operand already waiting when it runs. Two sources are provided:

- **OperandStack**: a LIFO stack of 16-bit cells, the way a Forth data
  stack holds them. Directives such as the arrow (``-->``) and
  back-branch (``<b``) push and pop cells on it.
- **OperandQueue**: operands supplied directly as arguments, consumed in
  the order given. Useful when driving the encoder from Python code.

Both raise StackUnderflowError when asked for more cells than they hold.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable

from san65c02.errors import StackUnderflowError


class OperandSource(ABC):
    """
    Abstract source of operand cells.

    Subclasses only provide storage; the underflow check is shared.
    """

    @property
    @abstractmethod
    def depth(self) -> int:
        """Number of cells currently available."""

    @abstractmethod
    def push(self, value: int) -> None:
        """Make a cell available to the next consumer."""

    @abstractmethod
    def _peek(self) -> int:
        ...

    @abstractmethod
    def _drop(self) -> None:
        ...

    def require(self, count: int = 1) -> None:
        """
        Check that at least ``count`` cells are available.

        Raises:
            StackUnderflowError: If fewer cells are available
        """
        if self.depth < count:
            raise StackUnderflowError(required=count, available=self.depth)

    def peek(self) -> int:
        """Return the next cell without consuming it."""
        self.require(1)
        return self._peek()

    def drop(self) -> None:
        """Discard the next cell."""
        self.require(1)
        self._drop()

    def pop(self) -> int:
        """Consume and return the next cell."""
        value = self.peek()
        self._drop()
        return value

    def __len__(self) -> int:
        return self.depth


class OperandStack(OperandSource):
    """
    LIFO operand stack.

    The top of stack is the most recently pushed value. Values are kept
    as given; consumers mask them to 8 or 16 bits as needed.
    """

    def __init__(self, values: Iterable[int] = ()):
        self._cells: list[int] = list(values)

    @property
    def depth(self) -> int:
        return len(self._cells)

    def push(self, value: int) -> None:
        self._cells.append(value)

    def _peek(self) -> int:
        return self._cells[-1]

    def _drop(self) -> None:
        self._cells.pop()

    def clear(self) -> None:
        self._cells.clear()

    def to_list(self) -> list[int]:
        """Return the cells bottom-first (copy)."""
        return list(self._cells)

    def __repr__(self) -> str:
        cells = " ".join(f"${c & 0xFFFF:04X}" for c in self._cells)
        return f"OperandStack({cells})"


class OperandQueue(OperandSource):
    """
    FIFO of directly supplied operands.

    ``push`` appends to the end, so values pushed by directives are
    consumed after the ones already queued.
    """

    def __init__(self, values: Iterable[int] = ()):
        self._cells: deque[int] = deque(values)

    @property
    def depth(self) -> int:
        return len(self._cells)

    def push(self, value: int) -> None:
        self._cells.append(value)

    def _peek(self) -> int:
        return self._cells[0]

    def _drop(self) -> None:
        self._cells.popleft()

    def __repr__(self) -> str:
        return f"OperandQueue({list(self._cells)!r})"
