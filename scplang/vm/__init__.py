"""
scp Virtual Machine Package

Placeholder for the execution engine that will consume the lexer's output.
"""

from .machine import VirtualMachine

__all__ = ["VirtualMachine"]
