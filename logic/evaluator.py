# logic/evaluator.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Stack machine evaluation of postfix token sequences

"""Postfix evaluator for propositional sentences.

A postfix sequence is executed left to right on a boolean stack. Variables
push the value assigned to them; operators pop their operands and push the
result. For binary operators the first value popped is the right operand and
the second is the left operand.
"""

from typing import Callable, Dict, Mapping, Sequence

from syntax.tokens import Operator, OperatorToken, Token, Variable
from .exceptions import (
    ArityMismatch,
    AssignmentSizeError,
    StackUnderflow,
    UnboundVariable,
)


def _implies(antecedent: bool, consequent: bool) -> bool:
    return not (antecedent and not consequent)


BINARY_OPERATIONS: Mapping[Operator, Callable[[bool, bool], bool]] = {
    Operator.AND: lambda left, right: left and right,
    Operator.OR: lambda left, right: left or right,
    Operator.IMPLIES: _implies,
    Operator.IFF: lambda left, right: left == right,
}


def index_variables(variables: Sequence[str]) -> Dict[str, int]:
    """Map each variable name to its position in the sorted variable list."""
    return {name: position for position, name in enumerate(variables)}


def _pop(stack: list, operator: Operator) -> bool:
    if not stack:
        raise StackUnderflow(f"Operator '{operator.symbol}' is missing an operand")
    return stack.pop()


def evaluate_postfix(
    postfix: Sequence[Token],
    positions: Mapping[str, int],
    values: Sequence[bool],
) -> bool:
    """Evaluate a postfix sequence against one assignment.

    Args:
        postfix: Variable and operator tokens in postfix order
        positions: Variable name to index into values, see index_variables
        values: One truth value per variable, in sorted variable order

    Returns:
        The truth value of the sequence under the assignment

    Raises:
        AssignmentSizeError: values does not hold one entry per variable
        UnboundVariable: A variable of the sequence has no position
        StackUnderflow: An operator lacks operands
        ArityMismatch: The sequence leaves zero or several values behind
    """
    if len(values) != len(positions):
        raise AssignmentSizeError(
            f"Expected {len(positions)} truth values, got {len(values)}"
        )

    stack: list[bool] = []

    for token in postfix:
        if isinstance(token, Variable):
            try:
                stack.append(bool(values[positions[token.name]]))
            except KeyError:
                raise UnboundVariable(f"Variable '{token.name}' is not bound") from None

        elif isinstance(token, OperatorToken):
            operator = token.operator
            if operator is Operator.NOT:
                stack.append(not _pop(stack, operator))
            else:
                right = _pop(stack, operator)
                left = _pop(stack, operator)
                stack.append(BINARY_OPERATIONS[operator](left, right))

        else:
            raise ArityMismatch(f"Token '{token}' cannot appear in postfix order")

    if len(stack) != 1:
        raise ArityMismatch(
            f"Evaluation left {len(stack)} values on the stack, expected 1"
        )

    return stack[0]
