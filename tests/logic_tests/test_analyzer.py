# tests/logic_tests/test_analyzer.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Test suite for validity, satisfiability, contingency, entailment and equivalence

"""Test suite for the semantic analyzer.

Checks the five semantic queries on tautologies, contradictions and
contingent sentences, and the bit order of assignment enumeration.
"""

import pytest
from logic import parse
from logic.analyzer import (
    entails,
    enumerate_assignments,
    equivalent,
    is_contingent,
    is_satisfiable,
    is_valid,
)
from utils.logger import get_logger


class TestAssignmentEnumeration:
    """Test cases for the order of enumerated assignments."""

    def test_no_variables(self):
        assert list(enumerate_assignments(0)) == [()]

    def test_bit_zero_is_first_variable(self):
        assert list(enumerate_assignments(2)) == [
            (False, False),
            (True, False),
            (False, True),
            (True, True),
        ]

    def test_count(self):
        assignments = list(enumerate_assignments(4))
        assert len(assignments) == 16
        assert len(set(assignments)) == 16


class TestSentenceClassification:
    """Test cases for valid, satisfiable and contingent queries."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    # (sentence, valid, satisfiable, contingent)
    CLASSIFICATION_CASES = [
        # Tautologies
        ("p | ~p", True, True, False),
        ("p => p", True, True, False),
        ("(p => q) <=> (~q => ~p)", True, True, False),
        ("~(p & q) <=> (~p | ~q)", True, True, False),
        ("((p => q) & (q => r)) => (p => r)", True, True, False),
        ("p & (p => q) => q", True, True, False),
        # Contradictions
        ("p & ~p", False, False, False),
        ("(p | q) & ~p & ~q", False, False, False),
        ("p <=> ~p", False, False, False),
        # Contingent sentences
        ("p", False, True, True),
        ("p & q", False, True, True),
        ("p | q", False, True, True),
        ("p => q", False, True, True),
        ("(p => q) => p", False, True, True),
        ("a & b & c & d & e", False, True, True),
    ]

    @pytest.mark.parametrize("sentence, valid, satisfiable, contingent", CLASSIFICATION_CASES)
    def test_classification(self, sentence, valid, satisfiable, contingent):
        """Test the three single-sentence queries agree with known results.

        Args:
            sentence: Sentence to classify
            valid: Expected validity
            satisfiable: Expected satisfiability
            contingent: Expected contingency
        """
        expression = parse(sentence)
        self.logger.debug(f"Classifying: {sentence}")

        assert is_valid(expression) is valid
        assert is_satisfiable(expression) is satisfiable
        assert is_contingent(expression) is contingent

    def test_fixture_sentences(self, tautology, contradiction, contingency):
        """Test the shared fixtures classify as their names say."""
        assert parse(tautology).valid()
        assert not parse(contradiction).satisfiable()
        assert parse(contingency).contingent()

    @pytest.mark.parametrize("sentence", ["p | ~p", "p & ~p", "p & q", "p => q => r"])
    def test_satisfiable_means_some_model(self, sentence):
        """Test satisfiable agrees with searching the truth table directly."""
        expression = parse(sentence)
        has_model = any(value for _, value in expression.truth_table())
        assert expression.satisfiable() is has_model

    def test_valid_stops_at_first_counterexample(self, monkeypatch):
        """Test that validity checking stops once an assignment is false."""
        expression = parse("p & q & r")
        calls = []
        original = type(expression).evaluate

        def counting(self, values):
            calls.append(values)
            return original(self, values)

        monkeypatch.setattr(type(expression), "evaluate", counting)

        assert expression.valid() is False
        assert len(calls) == 1


class TestEntailmentAndEquivalence:
    """Test cases for the pairwise queries."""

    ENTAILMENT_CASES = [
        ("p & q", "p", True),
        ("p", "p & q", False),
        ("p", "p | q", True),
        ("p | q", "p", False),
        ("p & (p => q)", "q", True),
        ("p & ~p", "q", True),
        ("q", "p | ~p", True),
        ("p => q", "q => p", False),
    ]

    @pytest.mark.parametrize("premise, conclusion, expected", ENTAILMENT_CASES)
    def test_entailment(self, premise, conclusion, expected):
        assert entails(parse(premise), parse(conclusion)) is expected

    EQUIVALENCE_CASES = [
        ("p => q", "~p | q", True),
        ("p => q", "q => p", False),
        ("p <=> q", "(p => q) & (q => p)", True),
        ("~(p | q)", "~p & ~q", True),
        ("p & (q | r)", "(p & q) | (p & r)", True),
        ("p >= q", "p => q", True),
        ("p <= q", "p => q", True),
        ("p =< q", "p => q", True),
        ("p <= q", "q => p", False),
        ("p", "q", False),
    ]

    @pytest.mark.parametrize("left, right, expected", EQUIVALENCE_CASES)
    def test_equivalence(self, left, right, expected):
        assert equivalent(parse(left), parse(right)) is expected

    def test_equivalence_is_mutual_entailment(self):
        """Test equivalence holds exactly when entailment holds both ways."""
        pairs = [("p => q", "~p | q"), ("p & q", "p"), ("p", "q")]
        for left, right in pairs:
            a, b = parse(left), parse(right)
            assert a.equivalent(b) is (a.entails(b) and b.entails(a))

    def test_disjoint_variables(self):
        """Test pairwise queries over sentences sharing no variables."""
        assert not parse("p").entails(parse("q"))
        assert parse("p & ~p").entails(parse("q"))
        assert parse("p | ~p").equivalent(parse("q | ~q"))
