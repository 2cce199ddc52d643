"""
Assembler Wordlist and Reverse Name Resolver
============================================

The assembler's mnemonics are words in a singly linked wordlist, defined
in alphabetical order and linked from the last definition back to the
first. Each word's execution token (xt) is the address of its dispatch
entry, so for every mnemonic::

    xt & $FF == (opcode - 2) & $FF

That relation lets the wordlist answer "which mnemonic compiles this
opcode?" without storing opcodes in the words. The answer is computed
once, by walking the list from the last word to the first and keeping the
first match for each opcode, and kept in a dictionary.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from san65c02.assembler.dispatch import DispatchTable
from san65c02.cpu import OPCODE_TABLE, SAN_MNEMONICS
from san65c02.errors import DuplicateWordError

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Word:
    """
    A named, callable wordlist entry.

    Attributes:
        name: Word name as typed in source (e.g. "lda.#")
        xt: Execution token (address of the word's code)
        link: The previously defined word, or None for the first word
    """
    name: str
    xt: int
    link: Optional["Word"] = field(default=None, repr=False)

    @property
    def opcode(self) -> int:
        """Opcode encoded by this word's xt (meaningful for mnemonics)."""
        return (self.xt + 2) & 0xFF


class AssemblerWordlist:
    """
    Linked list of mnemonic words plus the opcode -> word index.

    Example:
        >>> words = AssemblerWordlist(table)
        >>> words.find_name(0xA9)
        'lda.#'
        >>> words.find_name(0x03) is None    # reserved opcode
        True
    """

    def __init__(self, table: DispatchTable, names: tuple[str, ...] = SAN_MNEMONICS):
        self.table = table
        self.first: Optional[Word] = None
        self.last: Optional[Word] = None
        self._by_name: dict[str, Word] = {}

        for name in names:
            self._link(name, table.entry_address(OPCODE_TABLE[name].opcode))

        self._by_opcode = self._build_index()
        logger.debug(
            f"Assembler wordlist: {len(self._by_name)} words, "
            f"{len(self._by_opcode)} opcodes indexed"
        )

    def _link(self, name: str, xt: int) -> Word:
        word = Word(name, xt, link=self.last)
        if self.first is None:
            self.first = word
        self.last = word
        self._by_name[name] = word
        return word

    def define(self, name: str, opcode: int) -> Word:
        """
        Add a mnemonic word (for example an alias) for ``opcode``.

        The new word becomes the last in the list, so the reverse resolver
        reports it ahead of any older word for the same opcode.

        Raises:
            DuplicateWordError: A word with this name already exists
        """
        key = name.lower()
        if key in self._by_name:
            raise DuplicateWordError(key, self._by_name[key].opcode)
        word = self._link(key, self.table.entry_address(opcode))
        self._by_opcode[word.opcode] = word
        return word

    def _build_index(self) -> dict[int, Word]:
        index: dict[int, Word] = {}
        for word in self:
            index.setdefault(word.opcode, word)
        return index

    def __iter__(self) -> Iterator[Word]:
        """Walk from the last word to the first (inclusive)."""
        word = self.last
        while word is not None:
            yield word
            if word is self.first:
                break
            word = word.link

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._by_name

    def lookup(self, name: str) -> Optional[Word]:
        """Find a word by name (case-insensitive)."""
        return self._by_name.get(name.lower())

    def names(self) -> list[str]:
        return list(self._by_name)

    def find_word(self, opcode: int) -> Optional[Word]:
        """
        Return the word that compiles ``opcode``, or None.

        Opcodes without a mnemonic (the 65C02's reserved NOPs) have no word.
        """
        return self._by_opcode.get(opcode & 0xFF)

    def find_name(self, opcode: int) -> Optional[str]:
        word = self.find_word(opcode)
        return word.name if word else None
