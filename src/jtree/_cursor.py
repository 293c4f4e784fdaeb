"""Forward-only character cursor shared by all production handlers."""

from ._errors import Position


class Cursor:
    """
    Single-character lookahead over an in-memory document.

    Holds only the text and an index; reaching the end is reported as None
    rather than raised, so handlers decide what end of input means to them.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos: Position = 0
        self.length = len(text)

    def peek(self) -> str | None:
        """Returns current character without advancing."""
        return self.text[self.pos] if self.pos < self.length else None

    def advance(self) -> str | None:
        """Returns current character and advances position."""
        char = self.peek()
        if char is not None:
            self.pos += 1
        return char

    def at_end(self) -> bool:
        return self.pos >= self.length

    def skip_whitespace(self) -> None:
        """Skips any run of Unicode whitespace."""
        while self.pos < self.length and self.text[self.pos].isspace():
            self.pos += 1
