# syntax/variables.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Free variable extraction from token sequences

from typing import Iterable

from .tokens import Token, Variable


def extract_variables(tokens: Iterable[Token]) -> list[str]:
    """Return the sorted, deduplicated names of all variable tokens.

    Works on tokens in any order, so it serves both freshly parsed postfix
    sequences and the concatenation of two sequences during synthesis.

    Args:
        tokens: Token sequence to scan

    Returns:
        Variable names in lexicographic order, each listed once
    """
    return sorted({token.name for token in tokens if isinstance(token, Variable)})
