"""
Assembler Configuration
=======================

Settings for an assembly session. Configuration can come from:
- Default values (defined here)
- Environment variables (``AssemblerConfig.from_env()``)
- Command-line options, which the CLI applies on top of the environment
"""

from dataclasses import dataclass
import os


def parse_address(text: str) -> int:
    """
    Parse an address given as ``$hex``, ``0xhex`` or decimal.

    Raises:
        ValueError: If the text is not a number or not in 0..$FFFF
    """
    text = text.strip()
    if text.startswith("$"):
        value = int(text[1:], 16)
    elif text.lower().startswith("0x"):
        value = int(text[2:], 16)
    else:
        value = int(text)
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"address out of range: {text}")
    return value


@dataclass
class AssemblerConfig:
    """
    Configuration for an assembly session.

    Attributes:
        origin: Address of the first compiled byte (default: $0000)
        table_base: Address of the dispatch table (default: $0000).
            Only changes which entry serves which opcode and the xt of
            each mnemonic word, never the bytes produced.
        checked: Validate opcodes, operand ranges and branch distances
            (default: False, trust the caller)
    """

    origin: int = 0x0000
    table_base: int = 0x0000
    checked: bool = False

    @classmethod
    def from_env(cls) -> "AssemblerConfig":
        """
        Create AssemblerConfig from environment variables.

        Environment variables (all optional):
            SAN65_ORIGIN: Origin address ($hex, 0xhex or decimal)
            SAN65_TABLE_BASE: Dispatch table address
            SAN65_CHECKED: Enable checked mode (1/true/yes/on)

        Invalid values are ignored.
        """
        config = cls()

        if origin := os.environ.get("SAN65_ORIGIN"):
            try:
                config.origin = parse_address(origin)
            except ValueError:
                pass

        if table_base := os.environ.get("SAN65_TABLE_BASE"):
            try:
                config.table_base = parse_address(table_base)
            except ValueError:
                pass

        if checked := os.environ.get("SAN65_CHECKED"):
            config.checked = checked.strip().lower() in ("1", "true", "yes", "on")

        return config
