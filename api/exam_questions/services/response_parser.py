"""
Response Parser Service
Recovers GeneratedQuestion records from the delimited text the model returns.

Each reply is a run of blocks separated by `---` lines. Fields are picked out
of a block by line prefix, first match wins, so extra or reordered lines are
tolerated. Blocks missing a required field are dropped without error.
"""
import re
from typing import List, Optional

from exam_questions.schemas import (
    Difficulty,
    GeneratedQuestion,
    LongAnswerConfig,
    McqConfig,
    QuestionType,
    ShortAnswerConfig,
)
from exam_questions.services.prompt_builder import CategoryConfig

BLOCK_SEPARATOR = "---"
QUESTION_PREFIX = re.compile(r"^QUESTION\s*\d*\s*:\s*")
OPTION_LINE = re.compile(r"^[A-E]\)")

DEFAULT_CORRECT_ANSWER = "A"
DEFAULT_TOPIC = "General"
DIFFICULTY_VALUES = {difficulty.value for difficulty in Difficulty}


def split_blocks(raw: str) -> List[List[str]]:
    """
    Split a raw reply into blocks of stripped lines.

    Args:
        raw: Raw reply text from the completion service.

    Returns:
        One list of lines per non-blank block, in reply order.
    """
    blocks: List[List[str]] = []
    current: List[str] = []
    for line in raw.splitlines():
        stripped = line.strip()
        if stripped == BLOCK_SEPARATOR:
            blocks.append(current)
            current = []
        else:
            current.append(stripped)
    blocks.append(current)

    return [_trim(block) for block in blocks if any(block)]


def _trim(lines: List[str]) -> List[str]:
    start, end = 0, len(lines)
    while not lines[start]:
        start += 1
    while not lines[end - 1]:
        end -= 1
    return lines[start:end]


def find_line(lines: List[str], prefix: str) -> Optional[str]:
    """Return the first line starting with `prefix`, or None."""
    return next((line for line in lines if line.startswith(prefix)), None)


def field_value(lines: List[str], prefix: str, default: Optional[str] = None) -> Optional[str]:
    """Text after `prefix` on its first matching line; `default` if absent or empty."""
    line = find_line(lines, prefix)
    if line is None:
        return default
    value = line[len(prefix):].strip()
    return value or default


def normalize_difficulty(value: Optional[str]) -> Difficulty:
    """Map the model's difficulty text onto the enum, defaulting to medium."""
    normalized = (value or "").strip().lower()
    if normalized in DIFFICULTY_VALUES:
        return Difficulty(normalized)
    return Difficulty.MEDIUM


def question_text(lines: List[str]) -> Optional[str]:
    line = find_line(lines, "QUESTION")
    if line is None:
        return None
    return QUESTION_PREFIX.sub("", line, count=1)


def _common_fields(lines: List[str]) -> dict:
    return {
        "topic": field_value(lines, "TOPIC:", DEFAULT_TOPIC),
        "difficulty": normalize_difficulty(field_value(lines, "DIFFICULTY:")),
    }


def parse_mcq_response(response: str, config: McqConfig) -> List[GeneratedQuestion]:
    """
    Parse multiple-choice blocks.

    A block needs a QUESTION line and at least four lettered option lines.
    """
    questions: List[GeneratedQuestion] = []
    for lines in split_blocks(response):
        question = question_text(lines)
        options = [line[2:].strip() for line in lines if OPTION_LINE.match(line)]
        if question is None or len(options) < 4:
            continue

        questions.append(GeneratedQuestion(
            id=f"{QuestionType.MCQ.value}-{len(questions) + 1}",
            type=QuestionType.MCQ,
            question=question,
            options=options,
            correct_answer=field_value(lines, "CORRECT_ANSWER:", DEFAULT_CORRECT_ANSWER),
            answer=field_value(lines, "EXPLANATION:", ""),
            marks=config.marks_per_question,
            **_common_fields(lines),
        ))
    return questions


def parse_short_answer_response(
    response: str,
    config: ShortAnswerConfig
) -> List[GeneratedQuestion]:
    """Parse short-answer blocks; the answer is the single ANSWER: line."""
    questions: List[GeneratedQuestion] = []
    for lines in split_blocks(response):
        question = question_text(lines)
        answer_line = find_line(lines, "ANSWER:")
        if question is None or answer_line is None:
            continue

        questions.append(GeneratedQuestion(
            id=f"{QuestionType.SHORT.value}-{len(questions) + 1}",
            type=QuestionType.SHORT,
            question=question,
            answer=answer_line[len("ANSWER:"):].strip(),
            marks=config.marks_per_question,
            **_common_fields(lines),
        ))
    return questions


def parse_long_answer_response(
    response: str,
    config: LongAnswerConfig
) -> List[GeneratedQuestion]:
    """
    Parse long-answer blocks.

    The answer runs from the ANSWER: line to the end of the block, skipping
    TOPIC:/DIFFICULTY: lines, so multi-line answers keep their line breaks.
    """
    questions: List[GeneratedQuestion] = []
    for lines in split_blocks(response):
        question = question_text(lines)
        answer_start = next(
            (index for index, line in enumerate(lines) if line.startswith("ANSWER:")),
            None
        )
        if question is None or answer_start is None:
            continue

        answer_lines = [
            line for line in lines[answer_start:]
            if not line.startswith(("TOPIC:", "DIFFICULTY:"))
        ]
        answer = "\n".join(answer_lines)[len("ANSWER:"):].strip()

        questions.append(GeneratedQuestion(
            id=f"{QuestionType.LONG.value}-{len(questions) + 1}",
            type=QuestionType.LONG,
            question=question,
            answer=answer,
            marks=config.marks_per_question,
            **_common_fields(lines),
        ))
    return questions


RESPONSE_PARSERS = {
    QuestionType.MCQ: parse_mcq_response,
    QuestionType.SHORT: parse_short_answer_response,
    QuestionType.LONG: parse_long_answer_response,
}


def parse_response(response: str, config: CategoryConfig) -> List[GeneratedQuestion]:
    """Parse a reply with the parser matching the category of `config`."""
    return RESPONSE_PARSERS[config.category](response, config)
