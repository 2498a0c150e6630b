import ply.lex as lex
from bltree.condition import Condition
from dataclasses import dataclass
from typing import List
import logging

logger = logging.getLogger(__name__)


@dataclass
class LexError:
    """An illegal character skipped by the lexer"""
    char: str
    line: int
    column: int


class Lexer:
    """Word-level tokenizer for BL source text.

    Only the classification of words matters to the statement layer:
    keywords, condition names and identifiers.
    """
    # A string containing ignored characters (spaces, tabs and carriage returns)
    t_ignore = ' \t\r'

    # Keywords
    reserved = {
        'PROGRAM': 'PROGRAM',
        'IS': 'IS',
        'BEGIN': 'BEGIN',
        'END': 'END',
        'INSTRUCTION': 'INSTRUCTION',
        'IF': 'IF',
        'THEN': 'THEN',
        'ELSE': 'ELSE',
        'WHILE': 'WHILE',
        'DO': 'DO',
    }

    conditions = {c.token: c for c in Condition}

    # List of token names
    tokens = ['IDENTIFIER', 'CONDITION'] + list(reserved.values())

    def t_IDENTIFIER(self, t):
        r'[a-zA-Z][a-zA-Z0-9-]*'
        # Check for reserved words, then condition names
        if t.value in self.reserved:
            t.type = self.reserved[t.value]
        elif t.value in self.conditions:
            t.type = 'CONDITION'
            t.value = self.conditions[t.value]
        return t

    # Define a rule so we can track line numbers
    def t_newline(self, t):
        r'\n+'
        for i in range(len(t.value)):
            self.line_starts.append(t.lexpos + i + 1)
        t.lexer.lineno += len(t.value)

    # Error handling rule
    def t_error(self, t):
        line_start = self.line_starts[min(t.lineno - 1, len(self.line_starts) - 1)]
        column = t.lexpos - line_start + 1
        logger.debug(f"Illegal character {t.value[0]!r} at line {t.lineno}, column {column}")
        self.errors.append(LexError(t.value[0], t.lineno, column))
        t.lexer.skip(1)

    # Build the lexer
    def __init__(self):
        self.lexer = lex.lex(module=self)
        self.line_starts = [0]  # Track start of each line
        self.errors: List[LexError] = []

    def input(self, data: str):
        self.lexer.input(data)
        self.lexer.lineno = 1
        self.line_starts = [0]  # Reset line starts
        self.errors = []

    def token(self):
        tok = self.lexer.token()
        if tok:
            # Calculate column based on the last line start
            line_start = self.line_starts[min(tok.lineno - 1, len(self.line_starts) - 1)]
            tok.column = tok.lexpos - line_start + 1  # Make columns 1-based
        return tok

    def tokenize(self, data: str) -> list:
        """Lex the whole of ``data`` and return its tokens"""
        self.input(data)
        toks = []
        while True:
            tok = self.token()
            if tok is None:
                break
            toks.append(tok)
        return toks


_shared_lexer = None


def _default_lexer() -> Lexer:
    global _shared_lexer
    if _shared_lexer is None:
        _shared_lexer = Lexer()
    return _shared_lexer


def is_identifier(text: str) -> bool:
    """True when ``text`` is a single BL identifier.

    Identifiers start with a letter, continue with letters, digits or '-',
    and are neither keywords nor condition names.
    """
    if not isinstance(text, str) or not text:
        return False
    lexer = _default_lexer()
    toks = lexer.tokenize(text)
    return (not lexer.errors and len(toks) == 1
            and toks[0].type == 'IDENTIFIER' and toks[0].value == text)
