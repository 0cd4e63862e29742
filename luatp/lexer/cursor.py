"""Character cursor with an unbounded push-back stack."""

from dataclasses import dataclass, field


@dataclass(slots=True)
class CharStack:
    """LIFO of raw characters."""

    chars: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.chars

    def push(self, char: str) -> None:
        self.chars.append(char)

    def pop(self) -> str:
        return self.chars.pop()

    def peek(self) -> str:
        return self.chars[-1]


class PushbackCursor:
    """Reads a source string one character at a time.

    Characters pushed back are served before the underlying text, so any
    amount of lookahead can be undone. The line counter follows every
    newline consumed or pushed back.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._line = 0
        self._pushed = CharStack()

    @property
    def line(self) -> int:
        return self._line

    @property
    def at_end(self) -> bool:
        return self._pushed.is_empty and self._position >= len(self._source)

    def peek(self) -> str | None:
        if not self._pushed.is_empty:
            return self._pushed.peek()
        if self.at_end:
            return None
        return self._source[self._position]

    def advance(self) -> str | None:
        if not self._pushed.is_empty:
            char = self._pushed.pop()
        elif self.at_end:
            return None
        else:
            char = self._source[self._position]
            self._position += 1
        if char == "\n":
            self._line += 1
        return char

    def push_back(self, char: str) -> None:
        self._pushed.push(char)
        if char == "\n":
            self._line -= 1

    def skip(self, count: int) -> None:
        for _ in range(count):
            self.advance()

    def matches_ahead(self, text: str) -> bool:
        """Check whether the upcoming characters spell `text` without consuming them.

        Characters are consumed speculatively and then pushed back in reverse,
        which restores the position and the line counter exactly.
        """
        consumed = CharStack()
        matched = True
        for expected in text:
            char = self.advance()
            if char is None:
                matched = False
                break
            consumed.push(char)
            if char != expected:
                matched = False
                break
        while not consumed.is_empty:
            self.push_back(consumed.pop())
        return matched
