from schemas.lesson import (
    GenerateQuestionsRequest, GenerateQuestionsResponse,
    CheckAnswersRequest, CheckAnswersResponse,
)

__all__ = [
    "GenerateQuestionsRequest", "GenerateQuestionsResponse",
    "CheckAnswersRequest", "CheckAnswersResponse",
]
