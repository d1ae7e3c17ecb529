"""
scp Toolchain Package

Front end of the scp scripting language: a lexer producing token streams,
and the virtual machine boundary that will later consume them.

Architecture:
    scplang/
    ├── lexer/           # Tokenization and lexical analysis
    ├── vm/              # Execution engine (placeholder)
    └── cli.py           # scpc command line entry point
"""

__version__ = "0.1.0-alpha"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType
from .vm import VirtualMachine

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "VirtualMachine",

    # Version info
    "__version__",
    "__license__",
]
