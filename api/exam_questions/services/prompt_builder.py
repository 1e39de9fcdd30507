"""
Prompt Builder Service
Renders the per-category prompts sent to the completion service.
"""
from typing import List, Union

from exam_questions.config import MAX_SOURCE_CHARS, get_prompt
from exam_questions.schemas import (
    ExamDetails,
    LongAnswerConfig,
    McqConfig,
    QuestionType,
    ShortAnswerConfig,
)

CategoryConfig = Union[McqConfig, ShortAnswerConfig, LongAnswerConfig]

OPTION_LETTERS = "ABCDE"


def combine_sources(extracted_texts: List[str]) -> str:
    """Join extracted source texts with blank lines between them."""
    return "\n\n".join(extracted_texts)


def truncate_source(text: str, limit: int = MAX_SOURCE_CHARS) -> str:
    """Keep the first `limit` characters of the source text."""
    return text[:limit]


def format_marks(marks: float) -> str:
    """Render marks without a trailing '.0' for whole numbers."""
    return f"{marks:g}"


def build_mcq_prompt(exam_details: ExamDetails, config: McqConfig, content: str) -> str:
    """
    Build the multiple-choice prompt.

    Args:
        exam_details: Exam metadata (subject, branch).
        config: MCQ generation parameters.
        content: Combined study material (truncated here).

    Returns:
        Prompt string asking for `config.count` delimited question blocks.
    """
    letters = OPTION_LETTERS[:config.options_count]
    option_lines = "\n".join(
        f"{letter}) [option {index}]" for index, letter in enumerate(letters, start=1)
    )
    return get_prompt(
        "mcq",
        subject=exam_details.subject,
        branch=exam_details.branch,
        count=config.count,
        content=truncate_source(content),
        options_count=config.options_count,
        option_letters=", ".join(letters),
        option_lines=option_lines,
        marks_per_question=format_marks(config.marks_per_question),
    )


def build_short_answer_prompt(
    exam_details: ExamDetails,
    config: ShortAnswerConfig,
    content: str
) -> str:
    """Build the short-answer prompt."""
    return get_prompt(
        "short",
        subject=exam_details.subject,
        branch=exam_details.branch,
        count=config.count,
        content=truncate_source(content),
        word_limit=config.word_limit,
        marks_per_question=format_marks(config.marks_per_question),
    )


def build_long_answer_prompt(
    exam_details: ExamDetails,
    config: LongAnswerConfig,
    content: str
) -> str:
    """Build the long-answer prompt."""
    return get_prompt(
        "long",
        subject=exam_details.subject,
        branch=exam_details.branch,
        count=config.count,
        content=truncate_source(content),
        word_limit=config.word_limit,
        marks_per_question=format_marks(config.marks_per_question),
    )


PROMPT_BUILDERS = {
    QuestionType.MCQ: build_mcq_prompt,
    QuestionType.SHORT: build_short_answer_prompt,
    QuestionType.LONG: build_long_answer_prompt,
}


def build_prompt(exam_details: ExamDetails, config: CategoryConfig, content: str) -> str:
    """Build the prompt matching the category of `config`."""
    return PROMPT_BUILDERS[config.category](exam_details, config, content)
