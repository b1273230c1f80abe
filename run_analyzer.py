#!/usr/bin/env python3
# run_analyzer.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Command-line interface for sentence analysis with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from logic import Expression, parse
from syntax import format_tokens
from syntax.exceptions import ParseError
from utils.logger import configure_logging, get_logger
from utils.sentence_reader import SentenceFileError, read_sentences

DEFAULT_MAX_VARIABLES = 20


class VariableLimitExceeded(Exception):
    """Raised when a sentence has more variables than the configured maximum."""

    pass


def enforce_variable_limit(expression: Expression, max_variables: int) -> None:
    """Reject expressions whose truth table would be too large to enumerate.

    Args:
        expression: Parsed expression
        max_variables: Largest accepted number of distinct variables

    Raises:
        VariableLimitExceeded: If the expression has too many variables
    """
    count = len(expression.variables())
    if count > max_variables:
        raise VariableLimitExceeded(
            f"'{expression}' has {count} variables, limit is {max_variables}"
        )


def prompt_sentences() -> List[str]:
    """Read one or two sentences interactively.

    An empty second line means only one sentence is analyzed.

    Returns:
        The entered sentences
    """
    first = input("Enter a logical expression: ")
    second = input("Enter a second logical expression (if you want): ")
    return [first, second] if second.strip() else [first]


def collect_sentences(args: argparse.Namespace) -> List[str]:
    """Gather the sentences to analyze from arguments, a file or stdin.

    Returns:
        One or two sentences

    Raises:
        SentenceFileError: If the sentence file cannot be used
        ValueError: If more than two sentences are supplied
    """
    sentences = list(args.sentences)
    if args.file is not None:
        sentences.extend(read_sentences(args.file))
    if not sentences:
        sentences = prompt_sentences()

    if len(sentences) > 2:
        raise ValueError(f"Expected one or two sentences, got {len(sentences)}")
    return sentences


def report_truth_table(expression: Expression) -> None:
    """Print the truth table of an expression, one row per assignment."""
    logger = get_logger()
    variables = expression.variables()
    header = " ".join(variables) if variables else "(no variables)"
    logger.info(f"  {header} | {expression}")
    for assignment, value in expression.truth_table():
        logger.truth_table_row(assignment, value)


def report_plan(expression: Expression) -> None:
    """Print the variables and postfix order of an expression."""
    logger = get_logger()
    logger.info(f"Variables: {', '.join(expression.variables())}")
    logger.info(f"Postfix: {format_tokens(expression.postfix)}")


def report_single(expression: Expression, label: str, verbose: bool, table: bool) -> None:
    """Report the one-sentence queries for an expression."""
    logger = get_logger()

    logger.sentence_loaded(label, str(expression))
    if verbose:
        report_plan(expression)

    logger.query_result("Valid", expression.valid())
    logger.query_result("Satisfiable", expression.satisfiable())
    logger.query_result("Contingent", expression.contingent())

    if table:
        report_truth_table(expression)


def report_second(expression: Expression, verbose: bool, table: bool) -> None:
    """Echo the second sentence of a pair.

    Only the pairwise queries are answered for a pair, so E2 gets no
    Valid/Satisfiable/Contingent lines of its own.
    """
    get_logger().sentence_loaded("E2", str(expression), heading="Second Expression")
    if verbose:
        report_plan(expression)
    if table:
        report_truth_table(expression)


def report_pair(first: Expression, second: Expression) -> None:
    """Report entailment in both directions and equivalence."""
    logger = get_logger()
    logger.query_result("E1 entails E2", first.entails(second))
    logger.query_result("E2 entails E1", second.entails(first))
    logger.query_result("E1 is equivalent to E2", first.equivalent(second))


def analyze(
    sentences: Sequence[str],
    max_variables: int = DEFAULT_MAX_VARIABLES,
    verbose: bool = False,
    table: bool = False,
) -> List[Expression]:
    """Parse and analyze one or two sentences.

    Every sentence is parsed and checked against the variable limit before
    any query runs, so a bad second sentence fails without partial output.

    Returns:
        The parsed expressions

    Raises:
        ParseError: If a sentence is malformed
        VariableLimitExceeded: If a sentence or the pair has too many variables
    """
    expressions = [parse(sentence) for sentence in sentences]
    for expression in expressions:
        enforce_variable_limit(expression, max_variables)

    if len(expressions) == 2:
        combined = set(expressions[0].variables()) | set(expressions[1].variables())
        if len(combined) > max_variables:
            raise VariableLimitExceeded(
                f"Sentences share {len(combined)} variables, limit is {max_variables}"
            )

    report_single(expressions[0], "E1", verbose, table)

    if len(expressions) == 2:
        report_second(expressions[1], verbose, table)
        report_pair(*expressions)

    return expressions


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Veritas Propositional Logic Analyzer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_analyzer.py "p | ~p"
  python run_analyzer.py "p & q" "p" --table
  python run_analyzer.py -f sentences.txt -v
  python run_analyzer.py                       (prompts for input)

Sentence syntax:
  ~ not   & and   | or   => implies   <=> if and only if
  '>=', '=<' and '<=' are accepted as spellings of '=>'.
        """,
    )

    parser.add_argument(
        "sentences", nargs="*", metavar="SENTENCE", help="Sentence to analyze (at most two)"
    )

    parser.add_argument(
        "-f", "--file", type=Path, help="Read sentences from a file, one per line"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show variables and postfix order"
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug output")

    parser.add_argument(
        "--max-variables",
        type=int,
        default=DEFAULT_MAX_VARIABLES,
        help=f"Refuse sentences with more variables (default: {DEFAULT_MAX_VARIABLES})",
    )

    parser.add_argument(
        "--table", action="store_true", help="Print the truth table of each sentence"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the analyzer application.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(debug=args.debug)
    logger = get_logger()

    try:
        sentences = collect_sentences(args)
        analyze(
            sentences,
            max_variables=args.max_variables,
            verbose=args.verbose,
            table=args.table,
        )
        return 0

    except ParseError as e:
        logger.error(f"Sentence parsing error: {e}")
        return 2

    except (SentenceFileError, ValueError) as e:
        logger.error(f"Sentence input error: {e}")
        return 3

    except VariableLimitExceeded as e:
        logger.error(f"Variable limit exceeded: {e}")
        return 4

    except (KeyboardInterrupt, EOFError):
        logger.error("Analysis interrupted by user")
        return 5

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 6


if __name__ == "__main__":
    sys.exit(main())
