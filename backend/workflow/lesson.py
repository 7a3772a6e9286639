"""Client-side lesson state: context, questions, answers and evaluations for one round."""
from __future__ import annotations

import logging
from enum import Enum

import httpx

logger = logging.getLogger(__name__)

DEFAULT_NUMBER_OF_QUESTIONS = 3


class Stage(str, Enum):
    DRAFTING = "drafting"
    ANSWERING = "answering"
    REVIEWING = "reviewing"


class LessonWorkflow:
    """Drives the generate -> answer -> review round against the lesson API.

    State lives only on this instance. Failed calls are logged and kept in
    `last_error`; they never raise to the caller.
    """

    def __init__(self, http: httpx.AsyncClient, number_of_questions: int = DEFAULT_NUMBER_OF_QUESTIONS):
        self.http = http
        self.number_of_questions = number_of_questions
        self.context = ""
        self.questions: list[str] = []
        self.answers: list[str] = []
        self.evaluations: list[str] = []
        self.last_error: str | None = None

    @property
    def can_generate(self) -> bool:
        return bool(self.context.strip())

    @property
    def visible_stages(self) -> list[Stage]:
        stages = [Stage.DRAFTING]
        if self.questions:
            stages.append(Stage.ANSWERING)
        if self.evaluations:
            stages.append(Stage.REVIEWING)
        return stages

    @property
    def stage(self) -> Stage:
        return self.visible_stages[-1]

    def set_context(self, context: str) -> None:
        self.context = context

    async def generate_questions(self) -> bool:
        """Start a new round. Returns False when generation is disabled or the call failed."""
        if not self.can_generate:
            logger.debug("Generate is disabled while the lesson context is empty")
            return False

        self.questions = []
        self.answers = []
        self.evaluations = []
        self.last_error = None

        data = await self._post(
            "/api/generateQuestions",
            {"context": self.context, "numberOfQuestions": self.number_of_questions},
        )
        if data is None:
            return False
        try:
            questions = [str(q) for q in data["questions"]]
        except (KeyError, TypeError) as e:
            self._fail(f"Malformed generateQuestions response: {e!r}")
            return False

        self.questions = questions
        self.answers = ["" for _ in questions]
        return True

    def save_answer(self, index: int, value: str) -> None:
        if not 0 <= index < len(self.answers):
            raise IndexError(f"no question at index {index}")
        self.answers[index] = value

    async def submit_answers(self) -> bool:
        """Send the current questions and answers for grading."""
        self.evaluations = []
        self.last_error = None

        data = await self._post(
            "/api/checkAnswers",
            {
                "context": self.context,
                "questions": list(self.questions),
                "answers": list(self.answers),
            },
        )
        if data is None:
            return False
        try:
            evaluations = [str(e) for e in data["evaluations"]]
        except (KeyError, TypeError) as e:
            self._fail(f"Malformed checkAnswers response: {e!r}")
            return False

        self.evaluations = evaluations
        return True

    async def _post(self, path: str, payload: dict) -> dict | None:
        try:
            response = await self.http.post(path, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            self._fail(f"{path} failed ({e.response.status_code}): {_error_message(e.response)}")
        except (httpx.RequestError, ValueError) as e:
            self._fail(f"{path} failed: {e}")
        else:
            if isinstance(body, dict):
                return body
            self._fail(f"Malformed {path} response: expected a JSON object, got {body!r}")
        return None

    def _fail(self, message: str) -> None:
        logger.error(message)
        self.last_error = message

    def render(self) -> str:
        """Plain-text view of the visible stages."""
        lines = ["Prepare Questions", self.context or "(enter lesson context)"]

        if Stage.ANSWERING in self.visible_stages:
            lines += ["", "Questions"]
            for question, answer in zip(self.questions, self.answers):
                lines += [question, f"> {answer}"]

        if Stage.REVIEWING in self.visible_stages:
            lines += ["", "Evaluation"]
            for index, evaluation in enumerate(self.evaluations):
                lines += [f"Question {index + 1}", f"    {evaluation}"]

        if self.last_error:
            lines += ["", f"Error: {self.last_error}"]

        return "\n".join(lines)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and body.get("error"):
        return body["error"]
    return response.text
