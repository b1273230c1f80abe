# logic/expression.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Immutable parsed sentence with semantic queries

"""Expression value type tying the parsing pipeline to the analyzer.

An Expression holds the original sentence text, its postfix token sequence
and the sorted list of variables it mentions. Instances never change after
construction; every query enumerates assignments afresh.
"""

from __future__ import annotations

from typing import Dict, Iterator, Sequence, Tuple

from syntax import extract_variables, format_tokens, parse_postfix
from syntax.tokens import Operator, OperatorToken, Token
from . import analyzer
from .evaluator import evaluate_postfix, index_variables
from .exceptions import InvalidOperator
from utils.logger import get_logger


class Expression:
    """Propositional sentence ready for evaluation.

    Built either from text with Expression.parse or by joining two existing
    expressions with Expression.join.

    Attributes:
        source_text: Sentence text shown by __str__ and to_display_string
        postfix: Tokens in postfix (evaluation) order
    """

    __slots__ = ("_source_text", "_postfix", "_variables", "_positions")

    def __init__(self, source_text: str, postfix: Sequence[Token]):
        self._source_text = source_text
        self._postfix: Tuple[Token, ...] = tuple(postfix)
        self._variables: Tuple[str, ...] = tuple(extract_variables(self._postfix))
        self._positions: Dict[str, int] = index_variables(self._variables)

    @classmethod
    def parse(cls, text: str) -> Expression:
        """Parse sentence text into an Expression.

        Raises:
            ParseError: The text is not a well-formed sentence
        """
        return cls(text, parse_postfix(text))

    @classmethod
    def join(cls, left: Expression, right: Expression, operator: Operator) -> Expression:
        """Combine two expressions under a binary operator without reparsing.

        The result's postfix sequence is left's, then right's, then the
        operator; its variables are the union of both sides.

        Raises:
            InvalidOperator: operator is not a binary connective
        """
        if not isinstance(operator, Operator) or not operator.is_binary:
            raise InvalidOperator(f"Cannot join expressions with {operator!r}")

        source = f"({left._source_text}) {operator.symbol} ({right._source_text})"
        postfix = left._postfix + right._postfix + (OperatorToken(operator),)

        get_logger().debug(f"Synthesized expression: {format_tokens(postfix)}")
        return cls(source, postfix)

    @property
    def source_text(self) -> str:
        return self._source_text

    @property
    def postfix(self) -> Tuple[Token, ...]:
        return self._postfix

    def variables(self) -> list[str]:
        """Return the sorted, deduplicated variable names."""
        return list(self._variables)

    def evaluate(self, values: Sequence[bool]) -> bool:
        """Evaluate under one assignment given in sorted variable order.

        Raises:
            AssignmentSizeError: values does not hold one entry per variable
        """
        return evaluate_postfix(self._postfix, self._positions, values)

    def truth_table(self) -> Iterator[Tuple[Dict[str, bool], bool]]:
        """Yield (assignment, value) for every assignment in enumeration order."""
        for values in analyzer.enumerate_assignments(len(self._variables)):
            yield dict(zip(self._variables, values)), self.evaluate(values)

    def valid(self) -> bool:
        return analyzer.is_valid(self)

    def satisfiable(self) -> bool:
        return analyzer.is_satisfiable(self)

    def contingent(self) -> bool:
        return analyzer.is_contingent(self)

    def entails(self, other: Expression) -> bool:
        return analyzer.entails(self, other)

    def equivalent(self, other: Expression) -> bool:
        return analyzer.equivalent(self, other)

    def to_display_string(self) -> str:
        return self._source_text

    def __str__(self) -> str:
        return self._source_text

    def __repr__(self) -> str:
        return f"Expression({self._source_text!r})"

    def __setattr__(self, name, value):
        if hasattr(self, "_positions"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)
