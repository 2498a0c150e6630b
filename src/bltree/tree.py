"""Generic ordered tree with ownership-transferring composition.

A ``Tree`` owns its children outright. ``assemble`` consumes the children
it is given, ``disassemble`` hands them back and leaves the tree empty.
Because every move empties its source, a subtree is never reachable from two
trees at once.
"""

from __future__ import annotations

import logging
from typing import Generic, List, Optional, TypeVar

from bltree.errors import require

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Tree(Generic[T]):
    """A labeled node plus an ordered list of child trees, or the empty tree"""

    __slots__ = ('_label', '_children')

    def __init__(self) -> None:
        self._label: Optional[T] = None
        self._children: List[Tree[T]] = []

    # Standard methods

    def new_instance(self) -> Tree[T]:
        return type(self)()

    def new_sequence_of_tree(self) -> List[Tree[T]]:
        return []

    def clear(self) -> None:
        self._label = None
        self._children = []

    def transfer_from(self, source: Tree[T]) -> None:
        require(source is not self, "source is not this", "Tree.transfer_from")
        self._label, self._children = source._label, source._children
        source.clear()

    # Kernel methods

    def is_empty(self) -> bool:
        return self._label is None

    def root(self) -> T:
        require(not self.is_empty(), "this /= empty_tree", "Tree.root")
        return self._label

    def number_of_subtrees(self) -> int:
        return len(self._children)

    def assemble(self, label: T, children: List[Tree[T]]) -> None:
        """Make this tree ``label(children...)``, consuming ``children``.

        The list is emptied; the trees it held now belong to ``self``.
        Whatever ``self`` held before is discarded.
        """
        require(label is not None, "label is not null", "Tree.assemble")
        require(all(c is not self for c in children),
                "this is not in children", "Tree.assemble")
        require(len({id(c) for c in children}) == len(children),
                "children are distinct trees", "Tree.assemble")
        self._label = label
        self._children = list(children)
        children.clear()

    def disassemble(self, children_out: List[Tree[T]]) -> T:
        """Take this tree apart: return its label and move its children out"""
        require(not self.is_empty(), "this /= empty_tree", "Tree.disassemble")
        label = self._label
        children_out.clear()
        children_out.extend(self._children)
        self.clear()
        return label

    def remove_subtree(self, pos: int) -> Tree[T]:
        require(isinstance(pos, int) and 0 <= pos < len(self._children),
                "0 <= pos < [number of subtrees of this]", "Tree.remove_subtree")
        return self._children.pop(pos)

    def add_subtree(self, pos: int, subtree: Tree[T]) -> None:
        require(subtree is not self, "subtree is not this", "Tree.add_subtree")
        require(not self.is_empty(), "this /= empty_tree", "Tree.add_subtree")
        require(isinstance(pos, int) and 0 <= pos <= len(self._children),
                "0 <= pos <= [number of subtrees of this]", "Tree.add_subtree")
        child = self.new_instance()
        child.transfer_from(subtree)
        self._children.insert(pos, child)

    # Secondary methods

    def size(self) -> int:
        if self.is_empty():
            return 0
        return 1 + sum(c.size() for c in self._children)

    def height(self) -> int:
        if self.is_empty():
            return 0
        return 1 + max((c.height() for c in self._children), default=0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        if self._label != other._label or len(self._children) != len(other._children):
            return False
        return all(a == b for a, b in zip(self._children, other._children))

    __hash__ = None  # Mutable

    def __str__(self) -> str:
        if self.is_empty():
            return "()"
        if not self._children:
            return str(self._label)
        return f"{self._label}({','.join(str(c) for c in self._children)})"

    def __repr__(self) -> str:
        return f"Tree({self})"
