"""
scp Lexer Package

Implements the single-pass lexical analyzer (tokenizer) for scp scripts.

Key Features:
- Arithmetic operators, digit runs, words and double-quoted strings
- Line tracking and buffer offsets on every token
- Diagnostics in the `<file:line:cursor> Error: message` format
- Pluggable diagnostic reporter for embedding and tests
"""

from .tokens import Token, TokenType, SourceLocation, CharClass, classify
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError, LoadFailure, ScanFailure, report

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "CharClass",
    "classify",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
    "LoadFailure",
    "ScanFailure",
    "report",
]
