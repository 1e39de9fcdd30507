"""
Configuration Module for Exam Question Generator
Centralizes environment variables, model settings, and prompt templates.
"""
import os
from dotenv import load_dotenv

# --- API Configuration ---
MODEL_NAME = "gemini-2.0-flash"
TEMPERATURE = 0.7

# Study material beyond this many characters is cut before prompting
MAX_SOURCE_CHARS = 8000


def get_api_key() -> str:
    """
    Validates and returns the Gemini API Key.

    Raises:
        ValueError: If GEMINI_API_KEY is not found in environment.
    """
    # Load environment variables fresh (for testing and reload scenarios)
    load_dotenv()
    api_key = os.getenv("GEMINI_API_KEY")

    if not api_key:
        raise ValueError(
            "GEMINI_API_KEY not found. "
            "Please create a .env file with your API key."
        )
    return api_key


# --- Prompt Templates ---
PROMPT_TEMPLATES = {
    "mcq": """Based on the following study material for {subject} ({branch}), create {count} multiple choice questions.

Study Material:
{content}

Requirements:
- Create exactly {count} MCQ questions
- Each question should have {options_count} options ({option_letters})
- Questions should cover different topics from the material
- Mix of easy, medium, and hard difficulty levels
- Each question is worth {marks_per_question} marks

Format your response exactly like this for each question:
QUESTION [number]: [question text]
{option_lines}
CORRECT_ANSWER: [letter]
EXPLANATION: [brief explanation]
TOPIC: [topic name]
DIFFICULTY: [easy/medium/hard]
---""",

    "short": """Based on the following study material for {subject} ({branch}), create {count} short answer questions.

Study Material:
{content}

Requirements:
- Create exactly {count} short answer questions
- Each answer should be around {word_limit} words
- Questions should cover different topics from the material
- Mix of easy, medium, and hard difficulty levels
- Each question is worth {marks_per_question} marks

Format your response exactly like this for each question:
QUESTION [number]: [question text]
ANSWER: [detailed answer in approximately {word_limit} words]
TOPIC: [topic name]
DIFFICULTY: [easy/medium/hard]
---""",

    "long": """Based on the following study material for {subject} ({branch}), create {count} long answer questions.

Study Material:
{content}

Requirements:
- Create exactly {count} long answer questions
- Each answer should be around {word_limit} words
- Questions should cover different topics from the material
- Mix of easy, medium, and hard difficulty levels
- Each question is worth {marks_per_question} marks

Format your response exactly like this for each question:
QUESTION [number]: [question text]
ANSWER: [comprehensive answer in approximately {word_limit} words]
TOPIC: [topic name]
DIFFICULTY: [easy/medium/hard]
---""",
}


def get_prompt(question_type: str, **kwargs) -> str:
    """
    Retrieves a formatted prompt template for a question category.

    Args:
        question_type: Category key ("mcq", "short" or "long").
        **kwargs: Variables to format into the template.

    Returns:
        Formatted prompt string.

    Raises:
        KeyError: If question_type is not found in templates.
    """
    if question_type not in PROMPT_TEMPLATES:
        raise KeyError(f"Prompt template '{question_type}' not found.")

    return PROMPT_TEMPLATES[question_type].format(**kwargs)
