from __future__ import annotations

import logging
from typing import Dict

from bltree.errors import require
from bltree.lexer import is_identifier
from bltree.statement import Kind, Statement

logger = logging.getLogger(__name__)

# Instructions built into BL; user procedures may not reuse these names
PRIMITIVE_INSTRUCTIONS = frozenset({'move', 'turnleft', 'turnright', 'infect', 'skip'})


class Program:
    """A BL program: its name, the user-defined instructions and the main body.

    The context maps each instruction name to its body, which is always a
    BLOCK statement. Context and body are exchanged wholesale with the
    caller's values, never shared.
    """

    DEFAULT_NAME = "Unnamed"

    def __init__(self) -> None:
        self._name = self.DEFAULT_NAME
        self._context: Dict[str, Statement] = self.new_context()
        self._body = self.new_body()

    def new_instance(self) -> Program:
        return type(self)()

    def clear(self) -> None:
        self._name = self.DEFAULT_NAME
        self._context = self.new_context()
        self._body = self.new_body()

    def transfer_from(self, source: Program) -> None:
        require(source is not self, "source is not this", "Program.transfer_from")
        self._name, self._context, self._body = source._name, source._context, source._body
        source.clear()

    def name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        require(is_identifier(name), "name is a valid IDENTIFIER", "Program.set_name")
        self._name = name

    def new_context(self) -> Dict[str, Statement]:
        return {}

    def swap_context(self, context: Dict[str, Statement]) -> None:
        """Exchange the program's context with ``context``, in place."""
        op = "Program.swap_context"
        for instruction, body in context.items():
            require(is_identifier(instruction),
                    f"[name {instruction!r} is a valid IDENTIFIER]", op)
            require(instruction not in PRIMITIVE_INSTRUCTIONS,
                    f"[name {instruction!r} is not a primitive instruction]", op)
            require(isinstance(body, Statement) and body.kind() == Kind.BLOCK,
                    f"[body of {instruction!r} is a BLOCK statement]", op)
        require(len({id(body) for body in context.values()}) == len(context),
                "[bodies in context are distinct statements]", op)
        if context is self._context:
            return
        # Move every body into a fresh statement so old handles on either side stay empty
        theirs = self._moved(context)
        ours = self._moved(self._context)
        context.clear()
        context.update(ours)
        self._context.clear()
        self._context.update(theirs)
        logger.debug(f"swap_context: {len(self._context)} instruction(s) installed")

    def _moved(self, context: Dict[str, Statement]) -> Dict[str, Statement]:
        moved = self.new_context()
        for instruction, body in context.items():
            fresh = self.new_body()
            fresh.transfer_from(body)
            moved[instruction] = fresh
        return moved

    def new_body(self) -> Statement:
        return Statement()

    def swap_body(self, body: Statement) -> None:
        require(isinstance(body, Statement), "body is a Statement", "Program.swap_body")
        require(body.kind() == Kind.BLOCK, "[body is a BLOCK statement]", "Program.swap_body")
        held = self.new_body()
        held.transfer_from(self._body)
        self._body.transfer_from(body)
        body.transfer_from(held)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Program):
            return NotImplemented
        return (self._name == other._name and self._context == other._context
                and self._body == other._body)

    __hash__ = None  # Mutable

    def __repr__(self) -> str:
        return f"Program({self._name!r}, context={sorted(self._context)}, body={self._body})"
