# logic/analyzer.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Brute-force semantic analysis over all truth assignments

"""Semantic queries answered by exhaustive truth-table enumeration.

For an expression over n variables, assignment number i (0 <= i < 2**n) gives
the variable at sorted position j the value of bit j of i. Every query walks
these assignments in order and stops as soon as its answer is known.

The cost is exponential in the number of variables. Callers that accept
arbitrary input should bound the variable count before asking a query.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Tuple

from syntax.tokens import Operator
from utils.logger import get_logger

if TYPE_CHECKING:
    from logic.expression import Expression


def enumerate_assignments(count: int) -> Iterator[Tuple[bool, ...]]:
    """Yield all 2**count assignments, bit j of the index valuing variable j.

    Example:
        >>> list(enumerate_assignments(2))
        [(False, False), (True, False), (False, True), (True, True)]
    """
    for index in range(1 << count):
        yield tuple(bool((index >> bit) & 1) for bit in range(count))


def _outcomes(expression: Expression) -> Iterator[bool]:
    count = len(expression.variables())
    logger = get_logger()
    logger.enumeration_started(str(expression), count)
    for values in enumerate_assignments(count):
        yield expression.evaluate(values)


def is_valid(expression: Expression) -> bool:
    """Return True if every assignment makes the expression true."""
    return all(_outcomes(expression))


def is_contingent(expression: Expression) -> bool:
    """Return True if some assignment is true and some other is false."""
    seen_true = False
    seen_false = False
    for outcome in _outcomes(expression):
        if outcome:
            seen_true = True
        else:
            seen_false = True
        if seen_true and seen_false:
            return True
    return False


def is_satisfiable(expression: Expression) -> bool:
    """Return True if at least one assignment makes the expression true.

    A valid expression has such an assignment trivially and a contingent one
    by definition; no other expression does.
    """
    return is_valid(expression) or is_contingent(expression)


def entails(premise: Expression, conclusion: Expression) -> bool:
    """Return True if every model of premise is a model of conclusion.

    Decided as the validity of the synthesized expression
    ``premise => conclusion``.
    """
    return is_valid(type(premise).join(premise, conclusion, Operator.IMPLIES))


def equivalent(left: Expression, right: Expression) -> bool:
    """Return True if both expressions agree on every assignment.

    Decided as the validity of the synthesized expression ``left <=> right``.
    """
    return is_valid(type(left).join(left, right, Operator.IFF))
