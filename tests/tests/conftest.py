"""
Pytest Configuration & Shared Fixtures
"""
import pytest
from unittest.mock import MagicMock
from exam_questions.schemas import (
    ExamDetails,
    LongAnswerConfig,
    McqConfig,
    QuestionConfig,
    ShortAnswerConfig,
)


MCQ_REPLY = """QUESTION 1: What is X?
A) one
B) two
C) three
D) four
CORRECT_ANSWER: B
EXPLANATION: because
TOPIC: Basics
DIFFICULTY: easy
---
QUESTION 2: Which layer routes packets?
A) Physical
B) Data link
C) Network
D) Transport
CORRECT_ANSWER: C
EXPLANATION: The network layer handles routing.
TOPIC: Networking
DIFFICULTY: medium
---"""

SHORT_REPLY = """QUESTION 1: Define entropy.
ANSWER: A measure of disorder in a system.
TOPIC: Thermodynamics
DIFFICULTY: easy
---"""

LONG_REPLY = """QUESTION 1: Explain the three laws of motion.
ANSWER: The first law describes inertia.
The second law relates force and acceleration.
The third law concerns action and reaction.
TOPIC: Mechanics
DIFFICULTY: hard
---"""


def make_response(text):
    """Build a mock generate_content response carrying `text`."""
    response = MagicMock()
    response.text = text
    return response


@pytest.fixture
def exam_details():
    return ExamDetails(subject="Physics", branch="Science")


@pytest.fixture
def full_config():
    """Config requesting questions in every category."""
    return QuestionConfig(
        mcq=McqConfig(count=2, options_count=4, marks_per_question=1),
        short_answer=ShortAnswerConfig(count=1, word_limit=40, marks_per_question=2),
        long_answer=LongAnswerConfig(count=1, word_limit=200, marks_per_question=5),
    )


@pytest.fixture
def mock_gemini_client():
    """Mock Gemini client to avoid real API calls."""
    client = MagicMock()

    # One reply per category, in generation order
    client.models.generate_content.side_effect = [
        make_response(MCQ_REPLY),
        make_response(SHORT_REPLY),
        make_response(LONG_REPLY),
    ]

    return client
