# syntax/lexer.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Lexical analyzer for propositional sentence tokenization using SLY

"""Lexical analyzer for propositional sentence strings.

This module splits sentence text into raw string tokens for the classifier.
Adjacent characters of the same class are merged: identifier characters form
one variable name and '=', '<', '>' runs form one operator spelling, while
single-character operators and spaces always end the current token.

Supported Characters:
- Identifiers: ASCII letters, digits, '$' and '_'
- Single-character operators: ~, &, |, (, )
- Multi-character operator characters: =, <, >
- Space: separates tokens and is otherwise ignored; tabs, line breaks and
  other whitespace are illegal characters

After scanning, the spellings '>=', '=<' and '<=' are rewritten to the
implication operator '=>'.
"""

from sly import Lexer

from .exceptions import EmptyExpression, InvalidCharacter
from utils.logger import get_logger

# Alternative spellings accepted for implication
IMPLICATION_ALIASES = frozenset({">=", "=<", "<="})
IMPLICATION = "=>"


class SentenceLexer(Lexer):
    """SLY-based lexer for propositional sentences.

    Regular expressions match greedily, so one NAME token covers a whole run
    of identifier characters and one CONNECTIVE token a whole run of
    operator characters. Single-character operators are literals and each
    yields its own token.

    Attributes:
        tokens: Set of valid token types
        literals: Single-character operator tokens
        ignore: Characters to skip during tokenization
    """

    tokens = {"NAME", "CONNECTIVE"}

    literals = {"~", "&", "|", "(", ")"}

    # Only the plain space separates tokens
    ignore = " "

    NAME = r"[A-Za-z0-9$_]+"
    CONNECTIVE = r"[=<>]+"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            InvalidCharacter: Always raised with character and position
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        raise InvalidCharacter(illegal_char, error_pos)


def normalize(raw: str) -> str:
    """Rewrite the implication aliases to the canonical '=>' spelling."""
    return IMPLICATION if raw in IMPLICATION_ALIASES else raw


def tokenize(text: str) -> list[str]:
    """Split sentence text into raw string tokens.

    Args:
        text: Sentence text to tokenize

    Returns:
        Raw tokens in source order, with implication aliases normalized

    Raises:
        InvalidCharacter: A character outside the sentence alphabet appears
        EmptyExpression: The text contains no tokens at all

    Example:
        >>> tokenize("p <= (q|r)")
        ['p', '=>', '(', 'q', '|', 'r', ')']
    """
    logger = get_logger()

    raw_tokens = [normalize(token.value) for token in SentenceLexer().tokenize(text)]

    if not raw_tokens:
        raise EmptyExpression()

    logger.debug(f"Tokenized '{text}' into {raw_tokens}")
    return raw_tokens
