from enum import Enum


class Condition(Enum):
    """Test carried by IF, IF_ELSE and WHILE statements"""
    LESS_THAN = 'less-than'
    LESS_OR_EQUAL = 'less-or-equal'
    EQUAL = 'equal'
    NOT_EQUAL = 'not-equal'
    GREATER_THAN = 'greater-than'
    GREATER_OR_EQUAL = 'greater-or-equal'

    @property
    def token(self) -> str:
        """Spelling of the condition in BL source"""
        return self.value

    @classmethod
    def from_token(cls, text: str) -> 'Condition':
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown condition: {text!r}") from None

    def __str__(self) -> str:
        return self.name
