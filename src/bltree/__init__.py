"""Linear statement trees for the BL toy language.

Submodules:
- errors: ContractViolation and the require() precondition check
- config: TreeOptions, environment loading and logging setup
- condition: the Condition enumeration carried by IF/IF_ELSE/WHILE
- lexer: ply word tokenizer and the is_identifier predicate
- tree: generic ordered tree with ownership-transferring assemble/disassemble
- statement: Kind, label variants and the Statement type
- program: Program container (name, context, body)

Python 3.10+
"""

from .errors import ContractViolation
from .condition import Condition
from .lexer import is_identifier
from .tree import Tree
from .statement import Kind, Statement
from .program import Program

__all__ = [
    "ContractViolation",
    "Condition",
    "is_identifier",
    "Tree",
    "Kind",
    "Statement",
    "Program",
]
