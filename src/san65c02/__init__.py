"""
san65c02 - 65C02 Machine-Code Encoder
=====================================

This package provides a table-driven machine-code encoder for the WDC 65C02,
the CPU behind Tali Forth 2's built-in assembler.

Instructions are written in Simpler Assembler Notation (SAN), where the
operand is supplied *before* the mnemonic and the addressing mode is part of
the mnemonic itself:

    $20 lda.#       ; LDA #$20   -> A9 20
    $1234 lda       ; LDA $1234  -> AD 34 12
    inx             ; INX        -> E8

Main Components
---------------
- **cpu**: The canonical 65C02 opcode map (SAN names, modes, sizes)
- **assembler**: Length resolver, dispatch table, common encoder,
  reverse name resolver, directives and the SAN source front-end
- **cli**: The ``sanasm`` command-line tool

Quick Start
-----------
Encode instructions directly:
    >>> from san65c02.assembler import AssemblySession
    >>> session = AssemblySession(origin=0x1000)
    >>> session.push(0x42)
    >>> session.invoke("lda.#")
    >>> session.code
    b'\\xa9B'

Assemble SAN source text:
    >>> from san65c02.assembler import assemble
    >>> assemble("$42 lda.#  inx  rts").hex()
    'a942e860'

Or from the command line:
    $ sanasm program.san -o program.bin --origin 0x1000

Reference Documentation
-----------------------
- SAN: https://github.com/scotws/SAN
- Tali Forth 2: https://github.com/SamCoVT/TaliForth2
- WDC W65C02S datasheet
"""

__version__ = "0.3.0"
__author__ = "san65c02 Contributors"

__all__ = ["__version__"]
