"""
Main FastAPI Application
Controller layer that exposes question generation over HTTP.
"""
from typing import Optional
from fastapi import Depends, FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from exam_questions.services.ai_engine import (
    QuestionGenerationError,
    generate_questions,
)
from exam_questions.schemas import GenerateQuestionsRequest, GenerateQuestionsResponse

# Initialize FastAPI App
app = FastAPI(
    title="Exam Question Generator API",
    description="AI-powered exam question generation from study material",
    version="1.0.0"
)

# CORS Middleware (Allow all origins for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def read_root():
    """Return API status info."""
    return {"message": "Exam Question Generator API is running."}


def get_api_key_header(
    x_gemini_api_key: Optional[str] = Header(default=None, alias="X-Gemini-API-Key"),
) -> Optional[str]:
    return x_gemini_api_key


@app.post("/api/generate-questions", response_model=GenerateQuestionsResponse)
def generate_questions_endpoint(
    request: GenerateQuestionsRequest,
    api_key: Optional[str] = Depends(get_api_key_header),
):
    """
    Generate MCQ, short-answer and long-answer questions from source texts.

    Args:
        request: Exam details, per-category config, and extracted texts.
        api_key: Optional Gemini key from the X-Gemini-API-Key header.

    Returns:
        Generated questions with requested/generated counts.
    """
    try:
        questions = generate_questions(
            api_key,
            request.exam_details,
            request.question_config,
            request.extracted_texts,
        )
    except ValueError as e:
        # API Key or configuration errors
        raise HTTPException(status_code=500, detail=f"Configuration error: {str(e)}")
    except QuestionGenerationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    requested_count = request.question_config.total_count
    total_generated = len(questions)
    warning: Optional[str] = None
    if total_generated < requested_count:
        warning = (
            f"Generated {total_generated} of {requested_count} questions. "
            "Partial success due to model output variability."
        )

    return GenerateQuestionsResponse(
        questions=questions,
        requested_count=requested_count,
        total_generated=total_generated,
        warning=warning,
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "Exam Question Generator API"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
