"""Width phrase lexing.

A phrase is free-form text holding two numbers, `part` and `whole`:

    "1 out of 3"  -> Number(1) Word(out) Word(of) Number(3)
    "1/3"         -> Number(1) Delim(/) Number(3)
    "1-3"         -> Number(1) Delim(-) Number(3)

Signs are never consumed; a `-` between two numbers is a separator.
"""

from __future__ import annotations
from gridkit.tokens import *

class Check:
    @staticmethod
    def letter(current: str | None) -> bool:
        return current is not None and current.isalpha()

    @staticmethod
    def digit(current: str | None) -> bool:
        return current is not None and current.isascii() and current.isdigit()

    @staticmethod
    def whitespace(current: str | None) -> bool:
        return current is not None and current in '\t\n\r\f '

    @staticmethod
    def word_start(current: str | None) -> bool:
        return Check.letter(current) or current == "_"

    @staticmethod
    def word(current: str | None) -> bool:
        return current is not None and (Check.letter(current) or current in "-_")

    @staticmethod
    def starts_with_number(first: str | None, second: str | None) -> bool:
        if first == ".":
            return Check.digit(second)
        return Check.digit(first)


class Lexer:
    def __init__(self, source: str) -> None:
        self.source: list[str] = list(source)

    def __iter__(self):
        return self

    def __next__(self):
        next = self.consume()
        if isinstance(next, EOF):
            raise StopIteration
        return next

    def process(self) -> list[Token]:
        """Lexes the entire phrase at once."""
        return [token for token in self]

    def peek(self, amount: int = 1) -> str | None:
        """The next code point."""
        if len(self.source) >= amount:
            return self.source[amount-1]
        return None

    def next(self) -> str | None:
        if len(self.source) >= 1:
            return self.source.pop(0)
        return None

    def _consume_whitespace_(self, current: str) -> Whitespace:
        whitespace = Whitespace(current)
        while Check.whitespace(self.peek()):
            whitespace.raw += self.next()
        return whitespace

    def _consume_number_(self) -> Number:
        raw = ''
        while Check.digit(self.peek()):
            raw += self.next()

        if self.peek() == "." and Check.digit(self.peek(2)):
            raw += self.next()
            while Check.digit(self.peek()):
                raw += self.next()
            return Number(float(raw), "number", raw)
        return Number(int(raw), "integer", raw)

    def _consume_word_(self) -> Word:
        word = Word()
        while Check.word(self.peek()):
            word.raw += self.next()
        # A trailing dash belongs to whatever follows, e.g. "one-3"
        while word.raw.endswith("-"):
            self.source.insert(0, "-")
            word.raw = word.raw[:-1]
        return word

    def consume(self) -> Token:
        """Consume code points and return the next token."""
        next = self.next()
        if next is None:
            return EOF()
        elif Check.whitespace(next):
            return self._consume_whitespace_(next)
        elif Check.starts_with_number(next, self.peek()):
            self.source.insert(0, next)
            return self._consume_number_()
        elif Check.word_start(next):
            self.source.insert(0, next)
            return self._consume_word_()
        return Delim(next)


def tokenize(phrase: str) -> list[int | float | str]:
    """Numbers as numbers, every other non-blank token as its text, in order."""
    values: list[int | float | str] = []
    for token in Lexer(phrase):
        if isinstance(token, Number):
            values.append(token.value)
        elif not isinstance(token, Whitespace):
            values.append(token.raw)
    return values


if __name__ == "__main__":
    for phrase in ("1 out of 3", "1/3", "1-3", "2.5 of 10", "one-3"):
        print(phrase, Lexer(phrase).process())
