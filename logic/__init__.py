# logic/__init__.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Semantic analysis of parsed propositional sentences

"""Semantic analysis interface.

This package provides:
  • parse: sentence text to Expression
  • Expression: immutable sentence with validity, satisfiability,
    contingency, entailment and equivalence queries
  • evaluate_postfix: stack machine for one assignment
  • EvaluationError, InvalidOperator: raised on corrupted internal state
"""

from .expression import Expression
from .evaluator import evaluate_postfix
from .exceptions import (
    EvaluationError,
    StackUnderflow,
    ArityMismatch,
    AssignmentSizeError,
    UnboundVariable,
    InvalidOperator,
)


def parse(text: str) -> Expression:
    """Parse sentence text into an Expression.

    Raises:
        ParseError: The text is not a well-formed sentence
    """
    return Expression.parse(text)


__all__ = [
    "parse",
    "Expression",
    "evaluate_postfix",
    "EvaluationError",
    "StackUnderflow",
    "ArityMismatch",
    "AssignmentSizeError",
    "UnboundVariable",
    "InvalidOperator",
]
