# syntax/__init__.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Sentence tokenization and reordering components for propositional logic

"""Propositional sentence parsing into postfix evaluation plans.

This package turns sentence text into the postfix token sequence evaluated by
the logic package. The pipeline runs in four stages:

    text -> raw tokens -> classified tokens -> postfix tokens

followed by a well-formedness check that guarantees every accepted sentence
evaluates to exactly one truth value.

Core Functions:
    tokenize: Splits text into raw string tokens
    parse_postfix: Complete text to postfix pipeline

Supported Logic:
    - Negation '~', conjunction '&', disjunction '|'
    - Implication '=>' (also written '>=', '=<' or '<=')
    - Biconditional '<=>'
    - Parenthetical grouping

Grammar Features:
    - Precedence: '~' binds tightest, then '&', then '|', then '=>'/'<=>'
    - Right-associative implication and biconditional chains
    - '&' and '|' chains group from the right too, which leaves their
      meaning unchanged since both are associative

Example:
    >>> from syntax import parse_postfix
    >>> [str(t) for t in parse_postfix("~p & q")]
    ['p', '~', 'q', '&']
"""

from .exceptions import (
    ParseError,
    EmptyExpression,
    InvalidCharacter,
    MismatchedParentheses,
    MalformedExpression,
)
from .lexer import tokenize
from .tokens import Operator, Token, Variable, OperatorToken, classify_all, format_tokens
from .shunting_yard import to_postfix
from .grammar import check_well_formed
from .variables import extract_variables
from utils.logger import get_logger


def parse_postfix(source: str) -> list[Token]:
    """Parse sentence text into postfix token order.

    Args:
        source: Sentence text to parse

    Returns:
        Variable and operator tokens in postfix order

    Raises:
        ParseError: Sentence is empty, contains illegal characters, has
            mismatched parentheses or is otherwise malformed

    Example:
        >>> format_tokens(parse_postfix("p => q => r"))
        'p q r => =>'
    """
    logger = get_logger()
    logger.debug(f"Parsing sentence: {source}")

    try:
        infix = classify_all(tokenize(source))
        postfix = to_postfix(infix)
        check_well_formed(infix)

        logger.debug(f"Sentence parsed into postfix: {format_tokens(postfix)}")
        return postfix

    except ParseError:
        logger.debug("ParseError encountered during sentence parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "tokenize",
    "parse_postfix",
    "to_postfix",
    "check_well_formed",
    "extract_variables",
    "classify_all",
    "format_tokens",
    "Operator",
    "Token",
    "Variable",
    "OperatorToken",
    "ParseError",
    "EmptyExpression",
    "InvalidCharacter",
    "MismatchedParentheses",
    "MalformedExpression",
]
