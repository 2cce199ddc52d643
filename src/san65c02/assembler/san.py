"""
SAN Source Front-end
====================

Reads Simpler Assembler Notation source text into an assembly session.

SAN source is postfix, like the Forth it comes from: tokens are separated
by whitespace, numbers push operands and words run mnemonics or
directives.

    ; count X down to zero
            $10 ldx.#
    -->     dex
            <b bne
            rts

Number Formats
--------------
| Format      | Prefix   | Example       | Value |
|-------------|----------|---------------|-------|
| Decimal     | (none)   | 123, -2       | 123   |
| Hexadecimal | $ or 0x  | $7F, 0x7F     | 127   |
| Binary      | %        | %1010         | 10    |

Any number may start with ``-``; it is compiled as two's complement.

Comments
--------
``;`` and ``\\`` (Forth style) start a comment that runs to the end of
the line.

Word names are case-insensitive.
"""

import difflib
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from san65c02.assembler.session import AssemblySession
from san65c02.config import AssemblerConfig
from san65c02.errors import AssemblerError, SourceLocation, UnknownWordError

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"\S+")

_NUMBER_RE = re.compile(
    r"""^(?P<sign>-)?(?:
        \$(?P<hex>[0-9a-f]+)
      | 0x(?P<hex0x>[0-9a-f]+)
      | %(?P<bin>[01]+)
      | (?P<dec>[0-9]+)
    )$""",
    re.IGNORECASE | re.VERBOSE,
)


@dataclass(frozen=True)
class Token:
    """A whitespace-delimited token with its source position."""
    text: str
    line: int
    column: int


def parse_number(text: str) -> Optional[int]:
    """
    Parse a SAN number literal.

    Returns:
        The value, or None if ``text`` is not a number
    """
    match = _NUMBER_RE.match(text)
    if not match:
        return None

    if match.group("hex") is not None:
        value = int(match.group("hex"), 16)
    elif match.group("hex0x") is not None:
        value = int(match.group("hex0x"), 16)
    elif match.group("bin") is not None:
        value = int(match.group("bin"), 2)
    else:
        value = int(match.group("dec"))

    return -value if match.group("sign") else value


def _strip_comment(line: str) -> str:
    cut = len(line)
    for marker in (";", "\\"):
        pos = line.find(marker)
        if pos != -1:
            cut = min(cut, pos)
    return line[:cut]


def tokenize(source: str) -> Iterator[Token]:
    """Yield the tokens of SAN source, comments removed."""
    for line_no, line in enumerate(source.splitlines(), start=1):
        for match in _TOKEN_RE.finditer(_strip_comment(line)):
            yield Token(match.group(), line_no, match.start() + 1)


class SanAssembler:
    """
    Feeds SAN source into an AssemblySession.

    Errors raised while running a word get the token's location and the
    source line attached before they propagate. Assembly stops at the
    first error; bytes compiled up to that point stay in the sink.

    Example:
        >>> asm = SanAssembler(AssemblySession(origin=0x0800))
        >>> asm.assemble("$41 lda.#  $F001 sta  rts")
        >>> asm.session.code.hex()
        'a9418d01f060'
    """

    def __init__(self, session: Optional[AssemblySession] = None):
        self.session = session if session is not None else AssemblySession()

    def assemble(self, source: str, filename: str = "<input>") -> None:
        lines = source.splitlines()
        count = 0

        for token in tokenize(source):
            location = SourceLocation(filename, token.line, token.column)
            try:
                self._run(token, location, lines[token.line - 1])
            except AssemblerError as e:
                if e.location is None:
                    e.with_location(location, lines[token.line - 1])
                raise
            count += 1

        logger.debug(f"{filename}: {count} tokens, {self.session.sink.size} bytes")
        if self.session.depth:
            logger.warning(
                f"{filename}: {self.session.depth} operand(s) left unused on the stack"
            )

    def assemble_file(self, path: Union[str, Path]) -> None:
        path = Path(path)
        self.assemble(path.read_text(encoding="utf-8"), filename=str(path))

    def _run(self, token: Token, location: SourceLocation, source_line: str) -> None:
        value = parse_number(token.text)
        if value is not None:
            self.session.push(value)
            return

        if not self.session.has_word(token.text):
            similar = difflib.get_close_matches(
                token.text.lower(), self.session.word_names(), n=3, cutoff=0.6
            )
            raise UnknownWordError(
                token.text,
                location=location,
                source_line=source_line,
                similar_words=similar,
            )

        self.session.invoke(token.text)


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(
    source: str,
    origin: int = 0,
    table_base: int = 0,
    checked: bool = False,
    filename: str = "<input>",
) -> bytes:
    """
    Assemble SAN source text and return the machine code.

        >>> assemble("$42 lda.#  inx  rts").hex()
        'a942e860'
    """
    session = AssemblySession(origin=origin, table_base=table_base, checked=checked)
    SanAssembler(session).assemble(source, filename=filename)
    return session.code


def assemble_file(path: Union[str, Path], config: Optional[AssemblerConfig] = None) -> bytes:
    """Assemble a SAN source file and return the machine code."""
    session = AssemblySession.from_config(config or AssemblerConfig())
    SanAssembler(session).assemble_file(path)
    return session.code
