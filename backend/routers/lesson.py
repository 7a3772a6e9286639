"""Lesson endpoints: generate questions from context and grade answers."""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from schemas.lesson import (
    GenerateQuestionsRequest, GenerateQuestionsResponse,
    CheckAnswersRequest, CheckAnswersResponse,
)
from services.claude import CompletionClient, get_completion_client
from services.grading import evaluate_answers
from services.questions import generate_questions as generate_from_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["lesson"])

GENERATE_PATH = "/api/generateQuestions"
CHECK_PATH = "/api/checkAnswers"

# Result field carried by every body an endpoint returns, including errors.
RESULT_FIELDS = {GENERATE_PATH: "questions", CHECK_PATH: "evaluations"}


def error_response(path: str, status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={RESULT_FIELDS[path]: [], "error": message},
        headers=headers,
    )


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


def _require_client(client: CompletionClient | None) -> CompletionClient:
    if client is None:
        raise RuntimeError("ANTHROPIC_API_KEY is not configured")
    return client


@router.post(
    "/generateQuestions",
    response_model=GenerateQuestionsResponse,
    response_model_exclude_none=True,
)
async def generate_questions(
    body: GenerateQuestionsRequest,
    client: CompletionClient | None = Depends(get_completion_client),
):
    try:
        questions = await generate_from_context(
            _require_client(client), body.context, body.number_of_questions
        )
    except Exception as e:
        logger.error("Question generation error: %s", e)
        return error_response(GENERATE_PATH, 500, _describe(e))

    return GenerateQuestionsResponse(questions=questions)


@router.post(
    "/checkAnswers",
    response_model=CheckAnswersResponse,
    response_model_exclude_none=True,
)
async def check_answers(
    body: CheckAnswersRequest,
    client: CompletionClient | None = Depends(get_completion_client),
):
    try:
        evaluations = await evaluate_answers(
            _require_client(client), body.context, body.questions, body.answers
        )
    except Exception as e:
        logger.error("Answer evaluation error: %s", e)
        return error_response(CHECK_PATH, 500, _describe(e))

    return CheckAnswersResponse(evaluations=evaluations)

