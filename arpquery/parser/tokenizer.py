"""Character-level tokenizer for 'arp -a' output."""

import logging
import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Optional

from ..util import is_hex_literal
from .lexeme import Lexeme, classify

log = logging.getLogger(__name__)


class TokenType(Enum):
    NONE = auto()
    END = auto()
    NET_ADDRESS = auto()
    MAC_ADDRESS = auto()
    WORD = auto()
    NUMBER = auto()
    TRIPLE_DASH = auto()
    PUNCT = auto()

    def describe(self) -> str:
        return _TOKEN_TYPE_LABELS[self]


_TOKEN_TYPE_LABELS = {
    TokenType.NONE: "(null)",
    TokenType.END: "(eof)",
    TokenType.NET_ADDRESS: "Network Address",
    TokenType.MAC_ADDRESS: "MAC Address",
    TokenType.WORD: "Word",
    TokenType.NUMBER: "Number",
    TokenType.TRIPLE_DASH: "Triple Dash",
    TokenType.PUNCT: "Punctuation",
}


@dataclass
class Token:
    text: str
    type: TokenType
    line_num: int = 0


TRIPLE_DASH = "---"

_ALPHA = frozenset(string.ascii_letters)
_NET_ADDRESS_CHARS = frozenset(string.digits + ".")
_MAC_ADDRESS_CHARS = frozenset(string.hexdigits + "-")

# Lexemes that may continue a run started by a letter or digit
_RUN_LEXEMES = (Lexeme.LETTER, Lexeme.DIGIT, Lexeme.PERIOD, Lexeme.DASH)
_HEX_LEXEMES = (Lexeme.LETTER, Lexeme.DIGIT)


def classify_run(text: str) -> TokenType:
    """Classify an alphanumeric run by its shape.

    Examples:
        'dynamic'             -> WORD
        '192.168.1.10'        -> NET_ADDRESS
        'aa-bb-cc-dd-ee-ff'   -> MAC_ADDRESS
        'foo_bar'             -> NONE
    """
    chars = set(text)
    if not chars:
        return TokenType.NONE
    if chars <= _ALPHA:
        return TokenType.WORD
    if chars <= _NET_ADDRESS_CHARS:
        return TokenType.NET_ADDRESS
    if chars <= _MAC_ADDRESS_CHARS:
        return TokenType.MAC_ADDRESS
    return TokenType.NONE


class Tokenizer:
    """Turns a text buffer into Tokens, one character of lookahead at a time.

    Whitespace separates tokens and is never emitted. Multi-character forms
    (hex numbers, triple dashes) are tried first and rolled back to a saved
    position when they do not match.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line_num = 1

    def peek(self) -> str:
        """Return the next unread character, or '' at end of input."""
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ""

    def _read(self) -> str:
        c = self.text[self.pos]
        self.pos += 1
        if c == "\n":
            self.line_num += 1
        return c

    def _rollback(self, pos: int):
        # Newlines are whitespace and never part of a multi-character token,
        # so line_num needs no adjustment here.
        self.pos = pos

    def _read_similar(self, *lexemes: Lexeme) -> str:
        """Consume characters while their lexeme is one of lexemes."""
        start = self.pos
        while self.pos < len(self.text) and classify(self.text[self.pos]) in lexemes:
            self.pos += 1
        return self.text[start:self.pos]

    def _probe_hex(self, first: str) -> Optional[str]:
        """Try to read a 0x-prefixed number starting with first.

        Returns the literal, or None with the position restored.
        """
        if self.peek().lower() != "x":
            return None
        mark = self.pos
        literal = first + self._read_similar(*_HEX_LEXEMES)
        if is_hex_literal(literal):
            return literal
        self._rollback(mark)
        return None

    def _read_run(self, first: str) -> Token:
        run = first + self._read_similar(*_RUN_LEXEMES)
        return Token(run, classify_run(run), self.line_num)

    def _read_dash(self) -> Token:
        # The first dash is already consumed; step back to match all three.
        mark = self.pos
        start = mark - 1
        candidate = self.text[start:start + len(TRIPLE_DASH)]
        if candidate == TRIPLE_DASH:
            self.pos = start + len(TRIPLE_DASH)
            return Token(candidate, TokenType.TRIPLE_DASH, self.line_num)
        self._rollback(mark)
        return Token("-", TokenType.PUNCT, self.line_num)

    def next_token(self) -> Optional[Token]:
        """Return the next token, or None once the input is exhausted."""
        while self.pos < len(self.text):
            c = self._read()
            lexeme = classify(c)

            if lexeme == Lexeme.WHITESPACE:
                continue

            if lexeme == Lexeme.DIGIT:
                literal = self._probe_hex(c)
                if literal is not None:
                    return Token(literal, TokenType.NUMBER, self.line_num)
                return self._read_run(c)

            if lexeme == Lexeme.LETTER:
                return self._read_run(c)

            if lexeme == Lexeme.DASH:
                return self._read_dash()

            if lexeme == Lexeme.PUNCT:
                return Token(c, TokenType.PUNCT, self.line_num)

            # A stray period lands here too
            return Token(c, TokenType.NONE, self.line_num)
        return None

    def tokens(self) -> Iterator[Token]:
        """Yield tokens until the input is exhausted (no END token)."""
        while True:
            tok = self.next_token()
            if tok is None:
                return
            yield tok

    def tokenize(self) -> List[Token]:
        """Tokenize the whole buffer and append the END token."""
        tokens = list(self.tokens())
        tokens.append(Token("", TokenType.END, self.line_num))
        log.debug(f"Tokenized {len(tokens)} tokens over {self.line_num} line(s)")
        return tokens


def tokenize(text: str) -> List[Token]:
    """Tokenize 'arp -a' output into a list of Tokens ending with END."""
    return Tokenizer(text).tokenize()
