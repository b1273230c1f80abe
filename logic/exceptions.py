# logic/exceptions.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Exceptions for postfix evaluation and expression synthesis

"""Errors raised after parsing, while evaluating or combining expressions.

These signal programming errors or corrupted internal state rather than bad
user input: a sentence accepted by the parser never triggers them.
"""


class InvalidOperator(ValueError):
    """Raised when two expressions are joined with a non-binary operator."""

    pass


class EvaluationError(RuntimeError):
    """Base class for failures while evaluating a postfix sequence."""

    pass


class StackUnderflow(EvaluationError):
    """Raised when an operator finds fewer operands on the stack than it needs."""

    pass


class ArityMismatch(EvaluationError):
    """Raised when evaluation does not end with exactly one value on the stack."""

    pass


class AssignmentSizeError(EvaluationError):
    """Raised when an assignment does not hold one value per variable."""

    pass


class UnboundVariable(EvaluationError):
    """Raised when a postfix variable has no position in the variable list."""

    pass
