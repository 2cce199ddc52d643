"""
san65c02 Command-Line Interface
===============================

This package provides the command-line tools of san65c02:

- **sanasm**: SAN source to raw 65C02 machine code

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["sanasm"]
