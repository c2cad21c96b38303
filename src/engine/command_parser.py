"""Command line tokenizer.

Turns a raw input line into a verb and its argument tokens. Argument tokens
are passed through verbatim; each command parses its own arguments.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ParsedCommand:
    """A tokenized input line."""

    verb: str  # Uppercased first token, "" for blank input
    args: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.verb


class CommandParser:
    """Split input lines into verb + arguments."""

    def parse(self, line: str) -> ParsedCommand:
        """Parse a command string.

        Examples:
            "nav 5 4"   -> ParsedCommand("NAV", ["5", "4"])
            "  PHA 700" -> ParsedCommand("PHA", ["700"])
            "   "       -> ParsedCommand("", [])

        Args:
            line: Raw input line

        Returns:
            ParsedCommand (empty verb for blank input)
        """
        tokens = line.split()
        if not tokens:
            return ParsedCommand(verb="")

        name, *args = tokens
        return ParsedCommand(verb=name.upper(), args=args)
