"""
Tests for the skin type quiz.

This module tests the question table, answer tallying, scoring (including
tie-breaks and the empty fallback) and QuizState progress.
"""

import pytest

from layerit.quiz import (
    DEFAULT_SKIN_TYPE,
    QUIZ_QUESTIONS,
    SKIN_TYPES,
    QuizState,
    score_quiz,
    tally_answers,
)


class TestQuestions:
    """Test the fixed question table."""

    def test_five_questions(self):
        assert len(QUIZ_QUESTIONS) == 5

    def test_every_question_covers_every_skin_type(self):
        """Test that each question has one option per skin type."""
        for question in QUIZ_QUESTIONS:
            assert 4 <= len(question.options) <= 5
            assert set(question.values) <= set(SKIN_TYPES)
            assert len(set(question.values)) == len(question.values)

    def test_first_question(self):
        question = QUIZ_QUESTIONS[0]
        assert question.question == "How does your skin feel a few hours after cleansing?"
        assert question.options[0].text == "Tight and flaky"
        assert question.options[0].value == "dry"


class TestScoreQuiz:
    """Test score_quiz and tally_answers."""

    def test_strict_majority(self):
        """Test that the most common answer wins."""
        assert score_quiz(["dry", "dry", "oily", "dry", "normal"]) == "dry"

    def test_empty_answers_default_to_normal(self):
        """Test the fallback for no answers."""
        assert score_quiz([]) == "normal"
        assert DEFAULT_SKIN_TYPE == "normal"

    def test_plurality(self):
        """Test that the largest count wins without a majority."""
        assert score_quiz(["oily", "sensitive", "oily", "dry", "combination"]) == "oily"

    def test_tie_goes_to_first_answered(self):
        """Test that ties resolve to the tied type answered earliest."""
        assert score_quiz(["oily", "dry", "dry", "oily", "normal"]) == "oily"
        assert score_quiz(["dry", "oily", "oily", "dry", "normal"]) == "dry"
        assert score_quiz(["sensitive", "combination"]) == "sensitive"

    def test_all_different(self):
        """Test that five different answers resolve to the first one."""
        assert score_quiz(["combination", "dry", "oily", "normal", "sensitive"]) == "combination"

    def test_tally_counts_in_first_seen_order(self):
        tally = tally_answers(["oily", "dry", "oily", "normal"])
        assert tally == {"oily": 2, "dry": 1, "normal": 1}
        assert list(tally) == ["oily", "dry", "normal"]

    def test_tally_empty(self):
        assert tally_answers([]) == {}


class TestQuizState:
    """Test quiz progress tracking."""

    def test_initial_state(self):
        quiz = QuizState()
        assert quiz.step == 0
        assert quiz.answers == []
        assert quiz.total == 5
        assert quiz.current_question == QUIZ_QUESTIONS[0]
        assert quiz.progress == pytest.approx(20.0)

    def test_answers_advance_until_last_question(self):
        """Test that answering steps through the questions and scores at the end."""
        quiz = QuizState()

        for expected_step, value in enumerate(["dry", "dry", "oily", "dry"], start=1):
            assert quiz.answer(value) is None
            assert quiz.step == expected_step

        assert quiz.progress == pytest.approx(100.0)
        assert quiz.answer("normal") == "dry"
        assert quiz.answers == ["dry", "dry", "oily", "dry", "normal"]

    def test_invalid_answer_rejected(self):
        """Test that an answer outside the current options raises ValueError."""
        quiz = QuizState()

        with pytest.raises(ValueError):
            quiz.answer("wrinkles")

        assert quiz.step == 0
        assert quiz.answers == []

    def test_states_are_independent(self):
        """Test that each QuizState has its own answer list."""
        first = QuizState()
        second = QuizState()
        first.answer("oily")
        assert second.answers == []
