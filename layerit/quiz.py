"""
Skin type quiz.

Five fixed questions, each with one option per skin type. Answers are
accumulated in order; after the last question the answers are tallied and the
most frequent skin type wins.

Ties go to the tied skin type that was answered first (the tally keeps
first-encountered order). An empty answer list scores as "normal".
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

SKIN_DRY = "dry"
SKIN_OILY = "oily"
SKIN_COMBINATION = "combination"
SKIN_NORMAL = "normal"
SKIN_SENSITIVE = "sensitive"

SKIN_TYPES = (SKIN_DRY, SKIN_OILY, SKIN_COMBINATION, SKIN_NORMAL, SKIN_SENSITIVE)

DEFAULT_SKIN_TYPE = SKIN_NORMAL


@dataclass(frozen=True)
class QuizOption:
    """One answer choice, mapped to the skin type it points to."""
    text: str
    value: str
    emoji: str = ""


@dataclass(frozen=True)
class QuizQuestion:
    """A quiz question and its answer choices."""
    question: str
    options: Tuple[QuizOption, ...]

    @property
    def values(self) -> Tuple[str, ...]:
        return tuple(option.value for option in self.options)


QUIZ_QUESTIONS: Tuple[QuizQuestion, ...] = (
    QuizQuestion(
        question="How does your skin feel a few hours after cleansing?",
        options=(
            QuizOption("Tight and flaky", SKIN_DRY, "🏜️"),
            QuizOption("Shiny all over", SKIN_OILY, "✨"),
            QuizOption("Shiny in T-zone, normal elsewhere", SKIN_COMBINATION, "🎨"),
            QuizOption("Comfortable and balanced", SKIN_NORMAL, "😊"),
            QuizOption("Easily irritated or red", SKIN_SENSITIVE, "🌸"),
        ),
    ),
    QuizQuestion(
        question="How often do you experience breakouts?",
        options=(
            QuizOption("Rarely or never", SKIN_DRY, "✨"),
            QuizOption("Frequently, especially on forehead and nose", SKIN_OILY, "😓"),
            QuizOption("Occasionally in T-zone", SKIN_COMBINATION, "🎭"),
            QuizOption("Sometimes, but manageable", SKIN_NORMAL, "👌"),
            QuizOption("Products often cause reactions", SKIN_SENSITIVE, "💕"),
        ),
    ),
    QuizQuestion(
        question="How do your pores look?",
        options=(
            QuizOption("Small and barely visible", SKIN_DRY, "🔍"),
            QuizOption("Large and noticeable", SKIN_OILY, "👀"),
            QuizOption("Larger in T-zone", SKIN_COMBINATION, "🎨"),
            QuizOption("Medium-sized", SKIN_NORMAL, "😌"),
            QuizOption("Not sure, I focus more on redness", SKIN_SENSITIVE, "🌺"),
        ),
    ),
    QuizQuestion(
        question="How does your skin react to new products?",
        options=(
            QuizOption("Gets flaky or peels", SKIN_DRY, "🍂"),
            QuizOption("Becomes more oily", SKIN_OILY, "💧"),
            QuizOption("Mixed reactions in different areas", SKIN_COMBINATION, "🌗"),
            QuizOption("Generally well", SKIN_NORMAL, "✅"),
            QuizOption("Often stings or turns red", SKIN_SENSITIVE, "🔴"),
        ),
    ),
    QuizQuestion(
        question="By midday, how does your skin look?",
        options=(
            QuizOption("Dull and rough", SKIN_DRY, "😴"),
            QuizOption("Very shiny and greasy", SKIN_OILY, "🌟"),
            QuizOption("Shiny T-zone, dry cheeks", SKIN_COMBINATION, "🎪"),
            QuizOption("Fresh and even", SKIN_NORMAL, "🌿"),
            QuizOption("Blotchy or irritated", SKIN_SENSITIVE, "🌹"),
        ),
    ),
)


def tally_answers(answers: Sequence[str]) -> Dict[str, int]:
    """
    Count how often each skin type was answered.

    Keys appear in the order they were first answered.
    """
    counts: Dict[str, int] = {}
    for answer in answers:
        counts[answer] = counts.get(answer, 0) + 1
    return counts


def score_quiz(answers: Sequence[str]) -> str:
    """
    Classify a skin type from quiz answers.

    Args:
        answers: Skin type values, one per answered question, in order

    Returns:
        The most frequent skin type. Ties resolve to the tied type answered
        first; no answers resolves to "normal".

    Examples:
        >>> score_quiz(["dry", "dry", "oily", "dry", "normal"])
        'dry'
        >>> score_quiz([])
        'normal'
    """
    counts = tally_answers(answers)
    if not counts:
        return DEFAULT_SKIN_TYPE
    # max() keeps the first key on ties, and dicts iterate in insertion order
    return max(counts, key=counts.get)


@dataclass
class QuizState:
    """
    Progress through the quiz for one attempt.

    Attributes:
        step: Index of the question currently being asked
        answers: Skin type values answered so far
        questions: Question table (defaults to QUIZ_QUESTIONS)
    """
    step: int = 0
    answers: List[str] = field(default_factory=list)
    questions: Tuple[QuizQuestion, ...] = QUIZ_QUESTIONS

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> QuizQuestion:
        return self.questions[self.step]

    @property
    def progress(self) -> float:
        """Percentage shown on the progress bar, counting the current question."""
        return (self.step + 1) / self.total * 100

    def answer(self, value: str) -> Optional[str]:
        """
        Record an answer for the current question.

        Args:
            value: Skin type value of the chosen option

        Returns:
            The scored skin type once the last question is answered, else None

        Raises:
            ValueError: If value is not one of the current question's options
        """
        question = self.current_question
        if value not in question.values:
            raise ValueError(f"{value!r} is not an option for question {self.step + 1}")

        self.answers.append(value)

        if self.step < self.total - 1:
            self.step += 1
            return None

        skin_type = score_quiz(self.answers)
        logger.info("Quiz completed: %s (tally=%s)", skin_type, tally_answers(self.answers))
        return skin_type
