"""
Test Generation Flow
Tests the Pipeline: prompt -> completion -> parse across all categories.
"""
import pytest
from unittest.mock import MagicMock, patch

from exam_questions.config import MODEL_NAME
from exam_questions.schemas import (
    McqConfig,
    QuestionConfig,
    QuestionType,
    ShortAnswerConfig,
)
from exam_questions.services.ai_engine import (
    GENERATION_FAILED_MESSAGE,
    QuestionGenerationError,
    generate_questions,
    request_completion,
)

from conftest import SHORT_REPLY, make_response


def _prompt_of(call):
    return call.kwargs["contents"][0].parts[0].text


def test_all_categories_in_order(mock_gemini_client, exam_details, full_config):
    """Test one request per category, concatenated mcq -> short -> long."""
    with patch("exam_questions.services.ai_engine.get_client", return_value=mock_gemini_client):
        questions = generate_questions("key", exam_details, full_config, ["Chapter 1", "Chapter 2"])

    calls = mock_gemini_client.models.generate_content.call_args_list
    assert len(calls) == 3
    assert "multiple choice" in _prompt_of(calls[0])
    assert "short answer" in _prompt_of(calls[1])
    assert "long answer" in _prompt_of(calls[2])
    assert "Chapter 1\n\nChapter 2" in _prompt_of(calls[0])

    assert [q.id for q in questions] == ["mcq-1", "mcq-2", "short-1", "long-1"]
    assert [q.type for q in questions] == [
        QuestionType.MCQ, QuestionType.MCQ, QuestionType.SHORT, QuestionType.LONG
    ]
    assert [q.marks for q in questions] == [1, 1, 2, 5]


def test_zero_counts_issue_no_requests(exam_details):
    """Test an all-zero config returns nothing and never builds a client."""
    with patch("exam_questions.services.ai_engine.get_client") as mock_get_client:
        questions = generate_questions("key", exam_details, QuestionConfig(), ["text"])

    assert questions == []
    mock_get_client.assert_not_called()


def test_zero_count_category_skipped(exam_details):
    """Test only categories with a positive count are requested."""
    client = MagicMock()
    client.models.generate_content.return_value = make_response(SHORT_REPLY)
    config = QuestionConfig(short_answer=ShortAnswerConfig(count=1))

    with patch("exam_questions.services.ai_engine.get_client", return_value=client):
        questions = generate_questions("key", exam_details, config, ["text"])

    assert client.models.generate_content.call_count == 1
    assert [q.id for q in questions] == ["short-1"]


def test_upstream_failure_raises_generic_error(exam_details, full_config):
    """Test a failing request aborts the run with the generic message."""
    client = MagicMock()
    client.models.generate_content.side_effect = [
        make_response("QUESTION 1: Q\nA) a\nB) b\nC) c\nD) d"),
        RuntimeError("401 invalid key"),
    ]

    with patch("exam_questions.services.ai_engine.get_client", return_value=client):
        with pytest.raises(QuestionGenerationError) as exc_info:
            generate_questions("bad-key", exam_details, full_config, ["text"])

    assert str(exc_info.value) == GENERATION_FAILED_MESSAGE
    assert "401" not in str(exc_info.value)
    # Long-answer category is never reached
    assert client.models.generate_content.call_count == 2


def test_partial_yield_is_not_an_error(exam_details):
    """Test fewer well-formed blocks than requested still succeeds."""
    client = MagicMock()
    client.models.generate_content.return_value = make_response(
        "QUESTION 1: Only three\nA) a\nB) b\nC) c\n---\nQUESTION 2: Good\nA) a\nB) b\nC) c\nD) d\n---"
    )
    config = QuestionConfig(mcq=McqConfig(count=5))

    with patch("exam_questions.services.ai_engine.get_client", return_value=client):
        questions = generate_questions("key", exam_details, config, ["text"])

    assert len(questions) == 1
    assert questions[0].question == "Good"


def test_request_completion_settings():
    """Test the request carries model, user role and temperature."""
    client = MagicMock()
    client.models.generate_content.return_value = make_response("reply")

    assert request_completion(client, "hello") == "reply"

    kwargs = client.models.generate_content.call_args.kwargs
    assert kwargs["model"] == MODEL_NAME
    assert kwargs["contents"][0].role == "user"
    assert kwargs["contents"][0].parts[0].text == "hello"
    assert kwargs["config"].temperature == 0.7


def test_request_completion_empty_reply():
    """Test a reply with no text becomes an empty string."""
    client = MagicMock()
    client.models.generate_content.return_value = make_response(None)

    assert request_completion(client, "hello") == ""


def test_missing_api_key_is_configuration_error(exam_details, full_config):
    """Test no key and no environment key raises ValueError before any request."""
    with patch("exam_questions.services.ai_engine.get_api_key", side_effect=ValueError("GEMINI_API_KEY not found.")):
        with pytest.raises(ValueError, match="GEMINI_API_KEY not found"):
            generate_questions(None, exam_details, full_config, ["text"])
