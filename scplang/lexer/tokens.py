"""
Token definitions for the scp lexer.

This module defines the token model shared by the lexer and whatever later
consumes its output:
- TokenType, the closed set of token kinds
- Token, an immutable scanned token
- SourceLocation, a (file, line, cursor) coordinate for diagnostics
- character classification used by the scanner's dispatch
"""

import string
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, FrozenSet


class TokenType(Enum):
    """
    Enumeration of all token types in scp.

    The value of each member is the short name printed by the token
    inspection output.
    """

    IDENTIFIER = "Ident"    # reserved, the scanner currently emits VALUE for words
    ADD = "Add"             # +
    SUB = "Sub"             # -
    MUL = "Mul"             # *
    DIV = "Div"             # /
    VALUE = "Value"         # 42, word, "string content"

    @property
    def display_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source buffer.

    `cursor` is an offset from the start of the whole buffer, not a column
    within the line.
    """
    filename: str
    line: int
    cursor: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.cursor}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.cursor})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    `column` holds the offset of the token's first character from the start
    of the buffer (the same quantity diagnostics call the cursor).
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    line: int                       # 1-based line at token start
    column: int                     # 0-based buffer offset of token start

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.line}, {self.column})"

    def format(self) -> str:
        """Render the token the way the inspection output prints it."""
        return f"[{self.type.display_name} {self.lexeme} {self.line}:{self.column}]"

    def location_in(self, filename: str) -> SourceLocation:
        return SourceLocation(filename, self.line, self.column)

    @property
    def is_operator(self) -> bool:
        """Check if this token is an arithmetic operator."""
        return self.type in OPERATOR_TYPES

    @property
    def is_value(self) -> bool:
        return self.type is TokenType.VALUE


class CharClass(Enum):
    """Categories the scanner dispatches on, in precedence order."""
    OPERATOR = auto()
    DIGIT = auto()
    ALPHA = auto()
    QUOTE = auto()
    UNKNOWN = auto()


# Operator character to token type mapping
OPERATORS: Dict[str, TokenType] = {
    "+": TokenType.ADD,
    "-": TokenType.SUB,
    "*": TokenType.MUL,
    "/": TokenType.DIV,
}

OPERATOR_TYPES: FrozenSet[TokenType] = frozenset(OPERATORS.values())

# ASCII only, matching the C locale character classes
DIGITS: FrozenSet[str] = frozenset(string.digits)
LETTERS: FrozenSet[str] = frozenset(string.ascii_letters)
ALPHANUMERICS: FrozenSet[str] = DIGITS | LETTERS
WHITESPACE: FrozenSet[str] = frozenset(string.whitespace)

QUOTE = '"'

# Punctuation allowed inside a string literal besides letters.
# Digits and whitespace are deliberately absent.
STRING_PUNCTUATION: FrozenSet[str] = frozenset(",!@#$%^&*()_+=-/\\[]{}|?><.`~;:'")


def classify(char: str) -> CharClass:
    """
    Classify the character at the head of a token.

    Operators win over everything else, then digits, letters and the
    opening quote. Anything left over is unknown.
    """
    if char in OPERATORS:
        return CharClass.OPERATOR
    if char in DIGITS:
        return CharClass.DIGIT
    if char in LETTERS:
        return CharClass.ALPHA
    if char == QUOTE:
        return CharClass.QUOTE
    return CharClass.UNKNOWN


def is_string_char(char: str) -> bool:
    """Check if a character may appear in the body of a string literal."""
    return char in LETTERS or char in STRING_PUNCTUATION
