# utils/sentence_reader.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Plain-text sentence file reader for batch analysis

from pathlib import Path
from typing import Iterator, List, Union

from utils.logger import get_logger

COMMENT_PREFIX = "#"


class SentenceFileError(Exception):
    """Exception raised when a sentence file is missing, unreadable or empty."""

    pass


def iter_sentences(filepath: Union[str, Path]) -> Iterator[str]:
    """Read sentences from a text file, one per line.

    Blank lines and lines starting with '#' are skipped. Sentences are
    returned as written, without parsing them.

    Expected format:
        # premises
        p & q
        p => q

    Args:
        filepath: Path to the sentence file

    Yields:
        str: Sentence text with surrounding whitespace removed

    Raises:
        SentenceFileError: If the file does not exist or cannot be read
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise SentenceFileError(f"Sentence file not found: {filepath}")

    logger.debug(f"Reading sentence file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            for line_num, line in enumerate(file, start=1):
                sentence = line.strip()
                if not sentence or sentence.startswith(COMMENT_PREFIX):
                    continue
                logger.debug(f"Read sentence from line {line_num}: {sentence}")
                yield sentence

    except (OSError, UnicodeDecodeError) as e:
        raise SentenceFileError(f"Error reading sentence file: {e}")


def read_sentences(filepath: Union[str, Path]) -> List[str]:
    """Read all sentences of a file.

    Args:
        filepath: Path to the sentence file

    Returns:
        Sentences in file order

    Raises:
        SentenceFileError: If the file is missing, unreadable or holds no sentences
    """
    sentences = list(iter_sentences(filepath))
    if not sentences:
        raise SentenceFileError(f"Sentence file contains no sentences: {filepath}")
    return sentences
