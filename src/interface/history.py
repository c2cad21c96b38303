"""Command-line recall for interactive front ends."""

from typing import List


class CommandHistory:
    """Previously entered commands, navigable with up/down arrows.

    The cursor sits one past the newest entry after each new command, so the
    first "previous" returns the most recent line. Moving before the oldest
    entry stays on the oldest; moving past the newest returns a blank line.
    """

    def __init__(self):
        self.entries: List[str] = []
        self.index = 0

    def push(self, line: str) -> None:
        """Record a submitted command (blank lines are ignored)."""
        line = line.strip()
        if not line:
            return
        self.entries.append(line)
        self.index = len(self.entries)

    def previous(self) -> str | None:
        """Step back one entry; None if there is no history yet."""
        if not self.entries:
            return None
        self.index = max(0, self.index - 1)
        return self.entries[self.index]

    def next(self) -> str | None:
        """Step forward one entry; "" once past the newest."""
        if not self.entries:
            return None
        self.index = min(len(self.entries), self.index + 1)
        if self.index == len(self.entries):
            return ""
        return self.entries[self.index]
