"""Answer grading: one completion per answer, fanned out and joined in order."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from prompts.lesson import build_answer_message, build_grading_prompt
from services.claude import CompletionClient

logger = logging.getLogger(__name__)


@dataclass
class EvaluationOutcome:
    index: int
    evaluation: str | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def collect_evaluations(
    client: CompletionClient, context: str, questions: list[str], answers: list[str]
) -> list[EvaluationOutcome]:
    """Grade every answer concurrently and return one outcome per answer, in input order.

    A failed branch does not cancel its siblings. Cancellation of a branch
    propagates instead of being recorded as an outcome.
    """
    system_prompt = build_grading_prompt(context)
    results = await asyncio.gather(
        *(
            client.complete(system_prompt, build_answer_message(question, answer))
            for question, answer in zip(questions, answers)
        ),
        return_exceptions=True,
    )

    outcomes = []
    for index, result in enumerate(results):
        if isinstance(result, Exception):
            logger.error("Grading answer %d failed: %s", index, result)
            outcomes.append(EvaluationOutcome(index=index, error=result))
        elif isinstance(result, BaseException):
            raise result
        else:
            outcomes.append(EvaluationOutcome(index=index, evaluation=result or ""))
    return outcomes


async def evaluate_answers(
    client: CompletionClient, context: str, questions: list[str], answers: list[str]
) -> list[str]:
    """All-or-nothing grading: raises the first failed branch's error, else returns every evaluation."""
    outcomes = await collect_evaluations(client, context, questions, answers)
    for outcome in outcomes:
        if not outcome.ok:
            raise outcome.error
    return [outcome.evaluation for outcome in outcomes]
