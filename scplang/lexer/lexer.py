"""
scp Lexer - turns script source into a flat token stream

Single pass, no recovery: the first unknown symbol or unterminated string
is reported and the rest of the buffer is dropped. Whatever was scanned up
to that point stays available through `tokens`.
"""

import logging
from typing import Callable, Dict, List, Optional

from .tokens import (
    Token, TokenType, CharClass, OPERATORS, DIGITS, ALPHANUMERICS, WHITESPACE,
    QUOTE, classify, is_string_char
)
from .errors import (
    Diagnostic, LexerError, Reporter, print_diagnostic,
    create_unknown_symbol_error, create_unterminated_string_error,
    create_load_failure
)

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "script"

# Returned by _current() once the cursor has run off the buffer
END_OF_INPUT = "\0"


class Lexer:
    """
    scp lexical analyzer.

    Owns its source text, a cursor, the start marker of the token being
    scanned and the current line. One instance supports one scan pass;
    call `reset()` or `load_file()` to start over with new text.
    """

    def __init__(self, source: str = "", filename: str = DEFAULT_FILENAME,
                 reporter: Optional[Reporter] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Label used in diagnostics
            reporter: Callable receiving each Diagnostic; prints to stdout by default
        """
        self.reporter: Reporter = reporter or print_diagnostic
        self.reset(source, filename)

        self._dispatch: Dict[CharClass, Callable[[], None]] = {
            CharClass.OPERATOR: self._scan_operator,
            CharClass.DIGIT: self._scan_number,
            CharClass.ALPHA: self._scan_identifier,
            CharClass.QUOTE: self._scan_string,
            CharClass.UNKNOWN: self._unknown_symbol,
        }

    def reset(self, source: str, filename: str = DEFAULT_FILENAME):
        """Replace the whole lexer state with a fresh buffer."""
        self.source = source
        self.filename = filename
        self.cursor = 0
        self.token_start = 0
        self.line = 1
        self._tokens: List[Token] = []
        self.errors: List[LexerError] = []

    @classmethod
    def from_file(cls, filepath: str, reporter: Optional[Reporter] = None) -> "Lexer":
        """Create a lexer over the contents of a file."""
        lexer = cls(reporter=reporter)
        lexer.load_file(filepath)
        return lexer

    def load_file(self, filepath: str) -> bool:
        """
        Load a source file, replacing the current buffer.

        On failure a diagnostic is reported at line 0, cursor 0 and the
        lexer is left holding an empty buffer, so scanning yields nothing.

        Returns:
            True if the file was read
        """
        logger.debug("loading %s", filepath)
        try:
            # newline="" keeps \r bytes so offsets match the file; undecodable
            # bytes survive as surrogates and fail later as unknown symbols
            with open(filepath, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
                source = f.read()
        except OSError as e:
            logger.debug("cannot read %s: %s", filepath, e)
            error = create_load_failure(filepath)
            self.reset("", filepath)
            self._fail(error)
            return False

        self.reset(source, filepath)
        logger.debug("loaded %d characters from %s", len(source), filepath)
        return True

    def scan_tokens(self) -> List[Token]:
        """
        Scan the buffer from the cursor to the end.

        A lexer that already failed returns its tokens without scanning
        again; call `reset()` or `load_file()` to start over.

        Returns:
            The tokens accumulated so far, complete or cut short by an error
        """
        if self.errors:
            return self.tokens

        logger.debug("scanning %s (%d characters)", self.filename, len(self.source))

        try:
            while not self._is_at_end():
                self._trim()

                if self._is_at_end():
                    break

                self.token_start = self.cursor
                self._dispatch[classify(self._current())]()
        except LexerError as e:
            self._fail(e)

        logger.debug("scanned %d tokens from %s", len(self._tokens), self.filename)
        return self.tokens

    @property
    def tokens(self) -> List[Token]:
        return list(self._tokens)

    def get_tokens(self) -> List[Token]:
        """Get every token scanned so far."""
        return self.tokens

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[Diagnostic]:
        return [error.diagnostic for error in self.errors]

    # ------------------------------------------------------------------
    # Scan routines
    # ------------------------------------------------------------------

    def _scan_operator(self):
        op = self._current()
        self._advance()
        self._make_token(OPERATORS[op])

    def _scan_number(self):
        while self._current() in DIGITS:
            self._advance()
        self._make_token(TokenType.VALUE)

    def _scan_identifier(self):
        # Words are emitted as VALUE; IDENTIFIER is never produced here
        while self._current() in ALPHANUMERICS:
            self._advance()
        self._make_token(TokenType.VALUE)

    def _scan_string(self):
        start_line = self.line
        self._advance()  # Skip opening quote
        self.token_start += 1

        while is_string_char(self._current()):
            self._advance()
            self._trim()

        if self._is_at_end() or self._current() != QUOTE:
            raise create_unterminated_string_error(self.filename, self.line, self.cursor)

        self._make_token(TokenType.VALUE, start_line)
        self._advance()  # Skip closing quote

    def _unknown_symbol(self):
        raise create_unknown_symbol_error(self._current(), self.filename, self.line, self.cursor)

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _trim(self):
        """Skip whitespace, counting newlines."""
        while self._current() in WHITESPACE:
            if self._current() == '\n':
                self.line += 1
            self._advance()

    def _make_token(self, token_type: TokenType, line: Optional[int] = None):
        lexeme = self.source[self.token_start:self.cursor]
        self._tokens.append(Token(token_type, lexeme, self.line if line is None else line, self.token_start))

    def _fail(self, error: LexerError):
        logger.debug("%s failed: %s", self.filename, error.message)
        self.errors.append(error)
        self.reporter(error.diagnostic)

    def _current(self) -> str:
        if self._is_at_end():
            return END_OF_INPUT
        return self.source[self.cursor]

    def _advance(self):
        if not self._is_at_end():
            self.cursor += 1

    def _is_at_end(self) -> bool:
        return self.cursor >= len(self.source)


def tokenize_string(source: str, filename: str = DEFAULT_FILENAME) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, filename, reporter=_discard)
    tokens = lexer.scan_tokens()

    if lexer.has_errors():
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LoadFailure: If the file cannot be read
        ScanFailure: If lexing fails
    """
    lexer = Lexer.from_file(filepath, reporter=_discard)
    if lexer.has_errors():
        raise lexer.errors[0]

    tokens = lexer.scan_tokens()
    if lexer.has_errors():
        raise lexer.errors[0]

    return tokens


def _discard(diagnostic: Diagnostic) -> None:
    # The tokenize_* helpers raise instead of printing
    pass
