from pydantic import BaseModel, Field, field_validator, model_validator

from config import settings


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("context must not be empty")
    return value


class GenerateQuestionsRequest(BaseModel):
    context: str
    number_of_questions: int = Field(
        default=3, ge=1, le=settings.MAX_QUESTIONS, alias="numberOfQuestions"
    )

    model_config = {"populate_by_name": True}

    @field_validator("context")
    @classmethod
    def context_not_blank(cls, value: str) -> str:
        return _require_text(value)


class GenerateQuestionsResponse(BaseModel):
    questions: list[str]
    error: str | None = None


class CheckAnswersRequest(BaseModel):
    context: str
    questions: list[str]
    answers: list[str]

    @field_validator("context")
    @classmethod
    def context_not_blank(cls, value: str) -> str:
        return _require_text(value)

    @model_validator(mode="after")
    def answers_match_questions(self):
        if len(self.answers) != len(self.questions):
            raise ValueError(
                f"expected one answer per question, got {len(self.answers)} answers "
                f"for {len(self.questions)} questions"
            )
        return self


class CheckAnswersResponse(BaseModel):
    evaluations: list[str]
    error: str | None = None
