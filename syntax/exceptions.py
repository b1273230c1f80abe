# syntax/exceptions.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Custom exceptions for sentence tokenization and reordering

"""Domain-specific exceptions for propositional sentence parsing.

This module defines the exceptions raised while turning sentence text into a
postfix evaluation plan. Every exception derives from ParseError, so callers
that only care whether a sentence is usable can catch a single type, while
tests and the command-line runner can tell the failure kinds apart.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when a sentence cannot be parsed.

    Base class for every input-validation failure of the parsing pipeline.
    Also used directly to wrap unexpected errors raised inside the pipeline.
    """

    pass


class EmptyExpression(ParseError):
    """Raised when the input is empty or contains only whitespace."""

    def __init__(self, message: str = "Input sentence is empty."):
        super().__init__(message)


class InvalidCharacter(ParseError):
    """Raised when a character outside the sentence alphabet is encountered.

    Attributes:
        character: The offending character
        position: 0-based index of the character in the input text
    """

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(
            f"Illegal character '{character}' encountered at position {position}"
        )


class MismatchedParentheses(ParseError):
    """Raised when parentheses are unbalanced or misnested."""

    def __init__(self, message: str = "Mismatched parentheses"):
        super().__init__(message)


class MalformedExpression(ParseError):
    """Raised when operators and operands are not arranged as a sentence.

    Covers missing operands ("p &"), missing operators ("p q") and empty
    groups ("()").

    Attributes:
        position: Index of the offending token in the token list, if known
    """

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            message = f"{message} (token {position})"
        super().__init__(message)
