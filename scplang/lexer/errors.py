"""
Error handling for the scp lexer.

Provides the diagnostic record and its one-line text format, the reporter
functions that emit diagnostics, and the exceptions the scanner uses to
unwind out of a failing scan routine.
"""

import sys
from typing import Callable, Optional
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass(frozen=True)
class Diagnostic:
    """A formatted, human-readable error tied to a source coordinate."""
    message: str
    filename: str
    line: int
    cursor: int
    code: Optional[str] = None

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.cursor)

    def __str__(self) -> str:
        return f"<{self.location}> Error: {self.message}"


Reporter = Callable[[Diagnostic], None]


def print_diagnostic(diagnostic: Diagnostic) -> None:
    """Default reporter: write the diagnostic as one line to stdout."""
    # sys.stdout is looked up per call so redirected streams are honoured
    print(diagnostic, file=sys.stdout)


def report(message: str, filename: str, line: int, cursor: int) -> None:
    """
    Format and emit one diagnostic line to standard output.

    Never raises and never stops the caller; callers decide themselves
    whether to keep going.
    """
    print_diagnostic(Diagnostic(message, filename, line, cursor))


class LexerError(Exception):
    """
    Exception raised when the lexer cannot continue.

    Carries the diagnostic that gets reported when the lexer catches it.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class LoadFailure(LexerError):
    """The source file could not be opened or read."""


class ScanFailure(LexerError):
    """Scanning hit an unknown symbol or an unterminated string."""


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unknown symbol",
    "L002": "Unterminated string literal",
    "L100": "Failed to open file",
}


def create_unknown_symbol_error(char: str, filename: str, line: int, cursor: int) -> ScanFailure:
    """Create an error for a character no scan routine accepts."""
    if "\udc80" <= char <= "\udcff":
        # Undecodable byte smuggled through surrogateescape; show it as the raw byte
        char = f"\\x{ord(char) - 0xdc00:02x}"
    return ScanFailure(Diagnostic(f"unknown symbol '{char}'", filename, line, cursor, code="L001"))


def create_unterminated_string_error(filename: str, line: int, cursor: int) -> ScanFailure:
    return ScanFailure(Diagnostic("unterminated string literal", filename, line, cursor, code="L002"))


def create_load_failure(filepath: str) -> LoadFailure:
    """Create an error for a source file that cannot be opened."""
    return LoadFailure(Diagnostic(f"failed to open file: /{filepath}", filepath, 0, 0, code="L100"))
