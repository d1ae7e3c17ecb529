"""
Virtual machine boundary for scp.

There is no instruction set yet. The class exists so front-end code can
hold on to the engine that the token stream will eventually be handed to.
"""


class VirtualMachine:
    """Execution engine placeholder. Has no state and no operations."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "VirtualMachine()"
