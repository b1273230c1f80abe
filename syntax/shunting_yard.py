# syntax/shunting_yard.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Infix to postfix reordering with the shunting-yard algorithm

"""Operator-precedence reordering of classified tokens.

Converts an infix token sequence into postfix (reverse Polish) order using an
output queue and an operator stack. Precedence ranks come from
tokens.precedence; lower ranks bind tighter.

Associativity:
    An incoming operator only pops stacked operators that bind strictly
    tighter than itself. Operators of equal rank never pop each other, which
    makes chains of '=>' and '<=>' group from the right:
    "p => q => r" reads as "p => (q => r)".
"""

from typing import Sequence

from .exceptions import MismatchedParentheses
from .tokens import LeftParen, OperatorToken, RightParen, Token, Variable, precedence
from utils.logger import get_logger


def _binds_tighter(stacked: Token, incoming: OperatorToken) -> bool:
    return isinstance(stacked, OperatorToken) and precedence(
        stacked.operator
    ) < precedence(incoming.operator)


def to_postfix(tokens: Sequence[Token]) -> list[Token]:
    """Reorder infix tokens into postfix order.

    Args:
        tokens: Classified tokens in source order

    Returns:
        The variable and operator tokens in postfix order, without parentheses

    Raises:
        MismatchedParentheses: A ')' has no matching '(' or a '(' is never closed
    """
    logger = get_logger()

    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if isinstance(token, Variable):
            output.append(token)

        elif isinstance(token, OperatorToken):
            while stack and _binds_tighter(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)

        elif isinstance(token, LeftParen):
            stack.append(token)

        elif isinstance(token, RightParen):
            while stack and not isinstance(stack[-1], LeftParen):
                output.append(stack.pop())
            if not stack:
                raise MismatchedParentheses("Unopened parenthesis: ')' without '('")
            stack.pop()

        else:
            raise TypeError(f"Unexpected token type: {type(token).__name__}")

    while stack:
        top = stack.pop()
        if isinstance(top, (LeftParen, RightParen)):
            raise MismatchedParentheses("Unclosed parenthesis: '(' without ')'")
        output.append(top)

    logger.debug(f"Reordered {len(tokens)} tokens into {len(output)} postfix tokens")
    return output
