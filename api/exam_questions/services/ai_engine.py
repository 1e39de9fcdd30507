"""
AI Engine Service
Handles all interactions with Google Gemini API for exam question generation.
"""
from typing import List, Optional
from google import genai
from google.genai import types

from exam_questions.config import get_api_key, MODEL_NAME, TEMPERATURE
from exam_questions.schemas import ExamDetails, GeneratedQuestion, QuestionConfig
from exam_questions.services.prompt_builder import build_prompt, combine_sources
from exam_questions.services.response_parser import parse_response

GENERATION_FAILED_MESSAGE = (
    "Failed to generate questions. Please check your API key and try again."
)

CATEGORY_TAGS = {
    "mcq": "MCQ",
    "short": "Short Answer",
    "long": "Long Answer",
}


class QuestionGenerationError(Exception):
    """Raised when a completion request fails during generation."""

    def __init__(self, message: str = GENERATION_FAILED_MESSAGE):
        super().__init__(message)


def get_client(api_key: Optional[str] = None) -> genai.Client:
    """
    Creates and returns a configured Gemini API client.

    Returns:
        genai.Client: Authenticated Gemini client.

    Raises:
        ValueError: If no key is given and none is configured.
    """
    resolved_key = api_key.strip() if api_key else ""
    if not resolved_key:
        resolved_key = get_api_key()
    return genai.Client(api_key=resolved_key)


def request_completion(client: genai.Client, prompt: str) -> str:
    """
    Sends one prompt to Gemini as a single user message.

    Args:
        client: Authenticated Gemini client.
        prompt: Fully rendered prompt text.

    Returns:
        The reply text, or an empty string if the model returned none.
    """
    response = client.models.generate_content(
        model=MODEL_NAME,
        contents=[
            types.Content(role="user", parts=[types.Part(text=prompt)])
        ],
        config=types.GenerateContentConfig(temperature=TEMPERATURE),
    )
    return response.text or ""


def generate_questions(
    api_key: Optional[str],
    exam_details: ExamDetails,
    question_config: QuestionConfig,
    extracted_texts: List[str]
) -> List[GeneratedQuestion]:
    """
    Generates questions for every category with a non-zero count.

    Categories run one after another (mcq, short, long), one request each.

    Args:
        api_key: Gemini API key; falls back to GEMINI_API_KEY when blank.
        exam_details: Subject and branch the questions are for.
        question_config: Per-category counts, limits, and marks.
        extracted_texts: Source material, in reading order.

    Returns:
        Questions from all categories, concatenated in category order.

    Raises:
        ValueError: If no API key is available.
        QuestionGenerationError: If any completion request fails.
    """
    requested = [config for config in question_config.categories() if config.count > 0]
    if not requested:
        return []

    client = get_client(api_key)
    combined_text = combine_sources(extracted_texts)
    questions: List[GeneratedQuestion] = []

    try:
        for config in requested:
            tag = CATEGORY_TAGS[config.category.value]
            print(f"\n[{tag}] Requesting {config.count} questions...")

            prompt = build_prompt(exam_details, config, combined_text)
            reply = request_completion(client, prompt)
            parsed = parse_response(reply, config)

            print(f"[{tag}] Parsed {len(parsed)} of {config.count} questions")
            questions.extend(parsed)
    except Exception as e:
        print(f"[Generator] Error generating questions: {e}")
        raise QuestionGenerationError() from e

    return questions
