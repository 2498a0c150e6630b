"""BL statements as linear trees.

A ``Statement`` exclusively owns a ``Tree`` of labels. Operations that build
a compound statement consume their statement arguments (each is left as an
empty BLOCK) and operations that take one apart empty ``self``. Every
mutator checks the grammar of the node it builds, so any statement reachable
from a well-formed root is itself well-formed:

* BLOCK: any number of children, none of them a BLOCK
* IF, WHILE: exactly one BLOCK child
* IF_ELSE: exactly two BLOCK children (then, else)
* CALL: no children
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, List, Union

from bltree.condition import Condition
from bltree.errors import require
from bltree.lexer import is_identifier
from bltree.tree import Tree

logger = logging.getLogger(__name__)


class Kind(Enum):
    BLOCK = auto()
    IF = auto()
    IF_ELSE = auto()
    WHILE = auto()
    CALL = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class BlockLabel:
    kind: ClassVar[Kind] = Kind.BLOCK

    def __str__(self) -> str:
        return f"({self.kind},?,?)"


@dataclass(frozen=True)
class _ConditionLabel:
    condition: Condition

    def __str__(self) -> str:
        return f"({self.kind},{self.condition},?)"


@dataclass(frozen=True)
class IfLabel(_ConditionLabel):
    kind: ClassVar[Kind] = Kind.IF


@dataclass(frozen=True)
class IfElseLabel(_ConditionLabel):
    kind: ClassVar[Kind] = Kind.IF_ELSE


@dataclass(frozen=True)
class WhileLabel(_ConditionLabel):
    kind: ClassVar[Kind] = Kind.WHILE


@dataclass(frozen=True)
class CallLabel:
    instruction: str
    kind: ClassVar[Kind] = Kind.CALL

    def __str__(self) -> str:
        return f"({self.kind},?,{self.instruction})"


Label = Union[BlockLabel, IfLabel, IfElseLabel, WhileLabel, CallLabel]


def _empty_rep() -> Tree[Label]:
    rep: Tree[Label] = Tree()
    rep.assemble(BlockLabel(), rep.new_sequence_of_tree())
    return rep


class Statement:
    """A BL statement: a label and the ordered sub-statements it owns"""

    __slots__ = ('_rep',)

    def __init__(self) -> None:
        self._rep: Tree[Label] = _empty_rep()

    @classmethod
    def create_empty(cls) -> Statement:
        return cls()

    @classmethod
    def _wrap(cls, rep: Tree[Label]) -> Statement:
        s = cls()
        s._rep = rep
        return s

    def _take(self) -> Tree[Label]:
        """Move the representation out, leaving ``self`` an empty BLOCK"""
        rep = self._rep
        self._rep = _empty_rep()
        return rep

    def _install(self, label: Label, children: List[Tree[Label]]) -> None:
        rep: Tree[Label] = Tree()
        rep.assemble(label, children)
        self._rep = rep

    # Standard methods

    def new_instance(self) -> Statement:
        return type(self)()

    def clear(self) -> None:
        self._rep = _empty_rep()

    def transfer_from(self, source: Statement) -> None:
        require(source is not None, "source is not null", "transfer_from")
        require(source is not self, "source is not this", "transfer_from")
        require(isinstance(source, Statement),
                "source is a Statement", "transfer_from")
        self._rep = source._take()

    # Kernel methods

    def kind(self) -> Kind:
        return self._rep.root().kind

    def length_of_block(self) -> int:
        require(self.kind() == Kind.BLOCK,
                "[this is a BLOCK statement]", "length_of_block")
        return self._rep.number_of_subtrees()

    def add_to_block(self, pos: int, child: Statement) -> None:
        """Insert ``child`` at ``pos``; ``child`` is left empty."""
        op = "add_to_block"
        require(isinstance(child, Statement), "child is a Statement", op)
        require(self.kind() == Kind.BLOCK, "[this is a BLOCK statement]", op)
        require(isinstance(pos, int), "pos is an integer", op)
        require(isinstance(pos, int) and 0 <= pos <= self._rep.number_of_subtrees(),
                "0 <= pos <= [length of this BLOCK]", op)
        require(child.kind() != Kind.BLOCK, "[child is not a BLOCK statement]", op)
        logger.debug(f"add_to_block: inserting {child.kind()} at {pos}")
        self._rep.add_subtree(pos, child._take())

    def remove_from_block(self, pos: int) -> Statement:
        """Remove the statement at ``pos`` and hand it to the caller"""
        op = "remove_from_block"
        require(self.kind() == Kind.BLOCK, "[this is a BLOCK statement]", op)
        require(isinstance(pos, int), "pos is an integer", op)
        require(isinstance(pos, int) and 0 <= pos < self._rep.number_of_subtrees(),
                "0 <= pos < [length of this BLOCK]", op)
        logger.debug(f"remove_from_block: removing position {pos}")
        return self._wrap(self._rep.remove_subtree(pos))

    def assemble_if(self, condition: Condition, body: Statement) -> None:
        op = "assemble_if"
        require(isinstance(condition, Condition), "condition is a Condition", op)
        require(isinstance(body, Statement), "body is a Statement", op)
        require(body.kind() == Kind.BLOCK, "[body is a BLOCK statement]", op)
        logger.debug(f"assemble_if: {condition}")
        self._install(IfLabel(condition), [body._take()])

    def disassemble_if(self, out_body: Statement) -> Condition:
        """Take apart an IF; ``out_body``'s prior content is discarded."""
        op = "disassemble_if"
        require(isinstance(out_body, Statement), "out_body is a Statement", op)
        require(out_body is not self, "out_body is not this", op)
        require(self.kind() == Kind.IF, "[this is an IF statement]", op)
        children = self._rep.new_sequence_of_tree()
        label = self._take().disassemble(children)
        out_body._rep = children[0]
        logger.debug(f"disassemble_if: {label.condition}")
        return label.condition

    def assemble_if_else(self, condition: Condition, then_body: Statement,
                         else_body: Statement) -> None:
        op = "assemble_if_else"
        require(isinstance(condition, Condition), "condition is a Condition", op)
        require(isinstance(then_body, Statement), "then_body is a Statement", op)
        require(isinstance(else_body, Statement), "else_body is a Statement", op)
        require(then_body is not else_body, "then_body is not else_body", op)
        require(then_body.kind() == Kind.BLOCK, "[then_body is a BLOCK statement]", op)
        require(else_body.kind() == Kind.BLOCK, "[else_body is a BLOCK statement]", op)
        logger.debug(f"assemble_if_else: {condition}")
        self._install(IfElseLabel(condition), [then_body._take(), else_body._take()])

    def disassemble_if_else(self, out_then: Statement, out_else: Statement) -> Condition:
        op = "disassemble_if_else"
        require(isinstance(out_then, Statement), "out_then is a Statement", op)
        require(isinstance(out_else, Statement), "out_else is a Statement", op)
        require(out_then is not out_else, "out_then is not out_else", op)
        require(out_then is not self and out_else is not self,
                "out_then is not this and out_else is not this", op)
        require(self.kind() == Kind.IF_ELSE, "[this is an IF_ELSE statement]", op)
        children = self._rep.new_sequence_of_tree()
        label = self._take().disassemble(children)
        out_then._rep, out_else._rep = children
        logger.debug(f"disassemble_if_else: {label.condition}")
        return label.condition

    def assemble_while(self, condition: Condition, body: Statement) -> None:
        op = "assemble_while"
        require(isinstance(condition, Condition), "condition is a Condition", op)
        require(isinstance(body, Statement), "body is a Statement", op)
        require(body.kind() == Kind.BLOCK, "[body is a BLOCK statement]", op)
        logger.debug(f"assemble_while: {condition}")
        self._install(WhileLabel(condition), [body._take()])

    def disassemble_while(self, out_body: Statement) -> Condition:
        op = "disassemble_while"
        require(isinstance(out_body, Statement), "out_body is a Statement", op)
        require(out_body is not self, "out_body is not this", op)
        require(self.kind() == Kind.WHILE, "[this is a WHILE statement]", op)
        children = self._rep.new_sequence_of_tree()
        label = self._take().disassemble(children)
        out_body._rep = children[0]
        logger.debug(f"disassemble_while: {label.condition}")
        return label.condition

    def assemble_call(self, instruction: str) -> None:
        require(is_identifier(instruction),
                "instruction is a valid IDENTIFIER", "assemble_call")
        logger.debug(f"assemble_call: {instruction}")
        self._install(CallLabel(instruction), [])

    def disassemble_call(self) -> str:
        require(self.kind() == Kind.CALL, "[this is a CALL statement]", "disassemble_call")
        label = self._take().disassemble(self._rep.new_sequence_of_tree())
        logger.debug(f"disassemble_call: {label.instruction}")
        return label.instruction

    # Secondary methods

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Statement):
            return NotImplemented
        return self._rep == other._rep

    __hash__ = None  # Mutable

    def __str__(self) -> str:
        return str(self._rep)

    def __repr__(self) -> str:
        return f"Statement({self._rep})"
