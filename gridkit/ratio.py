"""Width ratio resolution.

A column width may be given as a column count (`4`), a keyword (`"half"`) or
a phrase holding two numbers (`"1 out of 3"`, `"1/3"`). Each is resolved to a
ratio in the range [0, 1]:

    resolve(Numeric(4), 12)         -> 0.3333333333333333
    resolve(Keyword("half"), 12)    -> 0.5
    resolve(Phrase("1 out of 3"), 12) -> 0.3333333333333333

Column counts equal to or wider than the total saturate to `1`.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import math
from types import MappingProxyType
from typing_extensions import TypeAliasType

from gridkit.lexer import Lexer, tokenize
from gridkit.tokens import Number, Whitespace, Word

__all__ = [
    "InvalidSpecError",
    "Numeric",
    "Keyword",
    "Phrase",
    "WidthSpec",
    "KEYWORDS",
    "ratio",
    "parse_phrase",
    "resolve",
    "width_spec",
    "percentage",
]

logger = logging.getLogger(__name__)

class InvalidSpecError(ValueError): pass

@dataclass(frozen=True)
class Numeric:
    value: int | float

    def __post_init__(self):
        if (
            isinstance(self.value, bool)
            or not isinstance(self.value, (int, float))
            or isinstance(self.value, float) and not math.isfinite(self.value)
        ):
            raise InvalidSpecError(f"Expected a finite number of columns, got {self.value!r}")

@dataclass(frozen=True)
class Keyword:
    name: str

@dataclass(frozen=True)
class Phrase:
    text: str

WidthSpec = TypeAliasType("WidthSpec", Numeric | Keyword | Phrase)

KEYWORDS = MappingProxyType({
    "half": 1 / 2,
    "one-half": 1 / 2,
    "third": 1 / 3,
    "one-third": 1 / 3,
    "two-thirds": 2 / 3,
    "quarter": 1 / 4,
    "one-quarter": 1 / 4,
    "fourth": 1 / 4,
    "one-fourth": 1 / 4,
    "three-quarters": 3 / 4,
    "three-fourths": 3 / 4,
    "fifth": 1 / 5,
    "one-fifth": 1 / 5,
    "two-fifths": 2 / 5,
    "three-fifths": 3 / 5,
    "four-fifths": 4 / 5,
    "sixth": 1 / 6,
    "one-sixth": 1 / 6,
    "five-sixths": 5 / 6,
    "full": 1.0,
    "whole": 1.0,
})

def ratio(part: int | float, whole: int | float) -> float:
    """`part` out of `whole`, saturating to `1` when `part >= whole`."""
    if part < 0 or whole < 0:
        raise InvalidSpecError(f"Widths can not be negative, got {part} out of {whole}")
    if part >= whole:
        return 1.0
    return part / whole

def parse_phrase(text: str) -> tuple[int | float, int | float]:
    """Pick the first two numbers out of a phrase as `(part, whole)`.

    Words and delimiters around and between the numbers are skipped.
    """
    numbers = [value for value in tokenize(text) if not isinstance(value, str)]
    if len(numbers) < 2:
        raise InvalidSpecError(f"Expected two numbers in width phrase {text!r}")
    return numbers[0], numbers[1]

def resolve(spec: WidthSpec, total_columns: int | float) -> float:
    """Resolve a width specification to a ratio between `0` and `1`.

    Raises
        InvalidSpecError: The spec is an unknown keyword, a phrase without two
            numbers, a negative width, or not a width spec at all.
    """
    if isinstance(spec, Numeric):
        part, whole = spec.value, total_columns
    elif isinstance(spec, Keyword):
        if spec.name not in KEYWORDS:
            raise InvalidSpecError(f"Unknown width keyword {spec.name!r}")
        logger.debug("resolved keyword %r to %s", spec.name, KEYWORDS[spec.name])
        return KEYWORDS[spec.name]
    elif isinstance(spec, Phrase):
        part, whole = parse_phrase(spec.text)
    else:
        raise InvalidSpecError(f"Unexpected width specification {spec!r}")

    result = ratio(part, whole)
    logger.debug("resolved %r against %s columns to %s", spec, whole, result)
    return result

def width_spec(value: WidthSpec | int | float | str) -> WidthSpec:
    """Build a width spec from raw helper input.

    Numbers and strings holding a single number become `Numeric`, a single
    word becomes a `Keyword` and any other string a `Phrase`.
    """
    if isinstance(value, (Numeric, Keyword, Phrase)):
        return value
    elif isinstance(value, str):
        tokens = [token for token in Lexer(value) if not isinstance(token, Whitespace)]
        if len(tokens) == 1 and isinstance(tokens[0], Number):
            return Numeric(tokens[0].value)
        elif len(tokens) == 1 and isinstance(tokens[0], Word):
            return Keyword(tokens[0].raw)
        return Phrase(value)
    return Numeric(value)

def percentage(value: float) -> str:
    """Format a ratio as a css percentage with at most ten decimals."""
    text = f"{round(value * 100, 10):.10f}".rstrip("0").rstrip(".")
    return f"{text}%"

if __name__ == "__main__":
    for raw in (4, "half", "1 out of 3", "1/3", "14"):
        print(repr(raw), percentage(resolve(width_spec(raw), 12)))
