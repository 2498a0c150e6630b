from dataclasses import dataclass, field
from typing import List

from bltree import config


@dataclass
class ContractViolation(AssertionError):
    """A caller broke a ``requires`` clause of a tree or statement operation"""
    message: str
    operation: str = "<unknown>"
    error_type: str = "PreconditionViolation"
    notes: List[str] = field(default_factory=list)  # Additional notes/hints

    def __str__(self) -> str:
        parts = [f"{self.error_type} in {self.operation}: Violation of: {self.message}"]

        if self.notes:
            parts.append("\nNotes:")
            parts.extend(f"  - {note}" for note in self.notes)

        return "\n".join(parts)


def require(condition: bool, message: str, operation: str) -> None:
    """Fail fast when a precondition does not hold.

    Checks can be switched off through ``bltree.config`` the same way
    assertions are switched off in an optimized run.
    """
    if config.options.check_contracts and not condition:
        raise ContractViolation(message=message, operation=operation)
