# syntax/grammar.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Structural validation of infix token sequences

"""Well-formedness check for classified infix token sequences.

The shunting-yard reorderer only validates parentheses; it accepts inputs such
as "p q", "p &" or "()" and would hand the evaluator a postfix sequence that
leaves too many or too few values on the stack. This module rejects those
inputs up front with a two-state scan over the infix tokens.

Grammar (informally):
    sentence := operand (binary sentence)?
    operand  := VARIABLE | '~' operand | '(' sentence ')'
"""

from typing import Sequence

from .exceptions import MalformedExpression
from .tokens import LeftParen, OperatorToken, RightParen, Token, Variable


def check_well_formed(tokens: Sequence[Token]) -> None:
    """Verify that operands and operators alternate correctly.

    Parenthesis balance is the reorderer's concern and is not rechecked here.

    Args:
        tokens: Classified tokens in source order

    Raises:
        MalformedExpression: The tokens do not form a sentence
    """
    expect_operand = True

    for position, token in enumerate(tokens):
        if isinstance(token, Variable):
            if not expect_operand:
                raise MalformedExpression(
                    f"Missing operator before '{token}'", position
                )
            expect_operand = False

        elif isinstance(token, OperatorToken):
            if token.operator.is_binary:
                if expect_operand:
                    raise MalformedExpression(
                        f"Operator '{token}' is missing its left operand", position
                    )
                expect_operand = True
            elif not expect_operand:
                raise MalformedExpression(
                    f"Unary operator '{token}' cannot follow an operand", position
                )

        elif isinstance(token, LeftParen):
            if not expect_operand:
                raise MalformedExpression("Missing operator before '('", position)

        elif isinstance(token, RightParen):
            if expect_operand:
                raise MalformedExpression("Expected an operand before ')'", position)

    if expect_operand:
        raise MalformedExpression("Unexpected end of sentence: missing operand")
