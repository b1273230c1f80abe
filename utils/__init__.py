# utils/__init__.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Utility module exports

from .sentence_reader import (
    read_sentences,
    iter_sentences,
    SentenceFileError,
)

__all__ = [
    "read_sentences",
    "iter_sentences",
    "SentenceFileError",
]
