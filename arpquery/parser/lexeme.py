"""Per-character lexeme classification used to drive the tokenizer."""

import string
from enum import Enum, auto


class Lexeme(Enum):
    NONE = auto()
    LETTER = auto()
    DIGIT = auto()
    WHITESPACE = auto()
    PERIOD = auto()
    PUNCT = auto()
    DASH = auto()


_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters + "_")   # '_' counts as a letter
_WHITESPACE = frozenset("\t\v\r\n ")
_PUNCT = frozenset(string.punctuation)


def classify(char: str) -> Lexeme:
    """Map a single character to its lexeme. Never fails."""
    if char in _DIGITS:
        return Lexeme.DIGIT
    if char in _LETTERS:
        return Lexeme.LETTER
    if char == ".":
        return Lexeme.PERIOD
    if char == "-":
        return Lexeme.DASH
    if char in _WHITESPACE:
        return Lexeme.WHITESPACE
    if char in _PUNCT:
        return Lexeme.PUNCT
    return Lexeme.NONE
