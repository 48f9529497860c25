"""Tokens produced when lexing a width phrase such as `"1 out of 3"`."""

from typing import Literal

__all__ = [
    "Token",
    "Number",
    "Word",
    "Delim",
    "Whitespace",
    "EOF",
]

class Token:
    raw: str
    def __init__(self, raw: str = ''):
        self.raw = raw

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.raw!r})'

    def __str__(self) -> str:
        return self.raw

class Number(Token):
    value: int | float
    type: Literal['integer', 'number']
    def __init__(self, value: int | float, type: Literal['integer', 'number'], raw: str):
        self.value = value
        self.type = type
        super().__init__(raw)

    def __repr__(self) -> str:
        return f"Number({self.raw!r})"

class Word(Token): pass

class Delim(Token):
    def __init__(self, raw: str):
        if len(raw) > 1:
            raise ValueError("Delimiters may only be one codepoint long")
        super().__init__(raw)

class Whitespace(Token): pass
class EOF(Token): pass
