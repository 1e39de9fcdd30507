"""
Data Schemas for Exam Question Generator
Pydantic models for type-safe data validation across the application.
"""
from enum import Enum
from typing import ClassVar, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class QuestionType(str, Enum):
    """Supported question categories, in generation order."""
    MCQ = "mcq"
    SHORT = "short"
    LONG = "long"


class Difficulty(str, Enum):
    """Difficulty levels a generated question may carry."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class ExamDetails(BaseModel):
    """Exam metadata supplied by the caller."""
    model_config = ConfigDict(extra="allow", frozen=True)

    subject: str = Field(..., description="Subject name")
    branch: str = Field(..., description="Branch or stream the exam is set for")


class McqConfig(BaseModel):
    """Generation parameters for multiple-choice questions."""
    category: ClassVar[QuestionType] = QuestionType.MCQ

    count: int = Field(0, ge=0, description="Number of questions to request")
    options_count: Literal[4, 5] = Field(4, description="Options per question")
    marks_per_question: float = Field(1, ge=0, description="Marks for each question")


class ShortAnswerConfig(BaseModel):
    """Generation parameters for short-answer questions."""
    category: ClassVar[QuestionType] = QuestionType.SHORT

    count: int = Field(0, ge=0, description="Number of questions to request")
    word_limit: int = Field(50, gt=0, description="Approximate words per answer")
    marks_per_question: float = Field(2, ge=0, description="Marks for each question")


class LongAnswerConfig(BaseModel):
    """Generation parameters for long-answer questions."""
    category: ClassVar[QuestionType] = QuestionType.LONG

    count: int = Field(0, ge=0, description="Number of questions to request")
    word_limit: int = Field(250, gt=0, description="Approximate words per answer")
    marks_per_question: float = Field(5, ge=0, description="Marks for each question")


class QuestionConfig(BaseModel):
    """Per-category configuration for one generation run."""
    mcq: McqConfig = Field(default_factory=McqConfig)
    short_answer: ShortAnswerConfig = Field(default_factory=ShortAnswerConfig)
    long_answer: LongAnswerConfig = Field(default_factory=LongAnswerConfig)

    def categories(self):
        """Category configs in generation order (mcq, short, long)."""
        return [self.mcq, self.short_answer, self.long_answer]

    @property
    def total_count(self) -> int:
        return sum(config.count for config in self.categories())


class GeneratedQuestion(BaseModel):
    """Represents a single generated exam question with its metadata."""
    id: str = Field(..., description="Category-prefixed ordinal, e.g. 'mcq-3'")
    type: QuestionType = Field(..., description="Question category")
    question: str = Field(..., description="The question text")
    options: Optional[List[str]] = Field(
        None,
        description="Answer choices without their letter labels (mcq only)"
    )
    correct_answer: Optional[str] = Field(
        None,
        description="Letter of the correct option (mcq only)"
    )
    answer: str = Field(
        "",
        description="Explanation for mcq, full answer text for short/long"
    )
    marks: float = Field(..., description="Marks copied from the category config")
    difficulty: Difficulty = Field(Difficulty.MEDIUM, description="Difficulty level")
    topic: str = Field("General", description="Topic the question covers")


class GenerateQuestionsRequest(BaseModel):
    """Request body for the question generation endpoint."""
    exam_details: ExamDetails
    question_config: QuestionConfig
    extracted_texts: List[str] = Field(
        ...,
        description="Source texts, joined with blank lines before prompting"
    )


class GenerateQuestionsResponse(BaseModel):
    """Response body for the question generation endpoint."""
    status: str = "success"
    questions: List[GeneratedQuestion]
    requested_count: int
    total_generated: int
    warning: Optional[str] = None
