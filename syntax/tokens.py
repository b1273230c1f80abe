# syntax/tokens.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Token classes and role classification for propositional sentences

"""Token classes for representing classified sentence tokens.

This module defines the immutable and hashable token classes produced by the
classifier and consumed by the reorderer and the evaluator. Each raw string
token of the lexer is mapped to exactly one role.

Token Types:
    Variable: Propositional variable identified by its name
    OperatorToken: One of the five connectives of the Operator enumeration
    LeftParen, RightParen: Structural grouping markers

Operator symbols are mapped onto the Operator enumeration once, during
classification, so that later stages never compare operator strings.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Operator(Enum):
    """Closed set of logical connectives, valued by their canonical symbol."""

    NOT = "~"
    AND = "&"
    OR = "|"
    IMPLIES = "=>"
    IFF = "<=>"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def arity(self) -> int:
        """Number of operands consumed: 1 for negation, 2 otherwise."""
        return 1 if self is Operator.NOT else 2

    @property
    def is_binary(self) -> bool:
        return self.arity == 2


# Lower rank binds tighter; implication and biconditional share a rank.
PRECEDENCE: Mapping[Operator, int] = MappingProxyType(
    {
        Operator.NOT: 0,
        Operator.AND: 1,
        Operator.OR: 2,
        Operator.IMPLIES: 3,
        Operator.IFF: 3,
    }
)


def precedence(op: Operator) -> int:
    """Return the binding rank of an operator (0 binds tightest)."""
    return PRECEDENCE[op]


@dataclass(frozen=True, slots=True)
class Token:
    """Base class for all classified tokens.

    Concrete token types implement __str__ so that a token sequence can be
    printed back in its source spelling.
    """

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Variable(Token):
    """Propositional variable such as "p", "rain" or "$x_1".

    Attributes:
        name: The identifier string of the variable
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class OperatorToken(Token):
    """Logical connective in a token sequence.

    Attributes:
        operator: The connective this token stands for
    """

    operator: Operator

    @property
    def arity(self) -> int:
        return self.operator.arity

    def __str__(self) -> str:
        return self.operator.symbol


@dataclass(frozen=True, slots=True)
class LeftParen(Token):
    """Opening parenthesis. Structural only, never part of postfix output."""

    def __str__(self) -> str:
        return "("


@dataclass(frozen=True, slots=True)
class RightParen(Token):
    """Closing parenthesis. Structural only, never part of postfix output."""

    def __str__(self) -> str:
        return ")"


_OPERATORS_BY_SYMBOL: Mapping[str, Operator] = MappingProxyType(
    {op.symbol: op for op in Operator}
)


def classify(raw: str) -> Token:
    """Map a raw lexer token onto its role.

    Anything that is not an operator or a parenthesis is a variable,
    including unrecognized '=', '<', '>' runs such as '=' or '=>>'.

    Args:
        raw: Token text as produced by the tokenizer

    Returns:
        The classified token
    """
    if raw in _OPERATORS_BY_SYMBOL:
        return OperatorToken(_OPERATORS_BY_SYMBOL[raw])
    if raw == "(":
        return LeftParen()
    if raw == ")":
        return RightParen()
    return Variable(raw)


def classify_all(raw_tokens) -> list[Token]:
    """Classify every raw token, preserving order."""
    return [classify(raw) for raw in raw_tokens]


def format_tokens(tokens) -> str:
    """Render a token sequence as space-separated symbols."""
    return " ".join(str(token) for token in tokens)
