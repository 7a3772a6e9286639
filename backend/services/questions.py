"""Question generation from lesson context."""
import logging

from prompts.lesson import QUESTION_SYSTEM_PROMPT, build_question_request
from services.claude import CompletionClient
from services.text_splitter import split_into_blocks

logger = logging.getLogger(__name__)


async def generate_questions(
    client: CompletionClient, context: str, number_of_questions: int
) -> list[str]:
    """Ask for `number_of_questions` open-ended questions and split the reply on blank lines.

    The count is best-effort: whatever blocks come back are returned.
    """
    text = await client.complete(
        QUESTION_SYSTEM_PROMPT, build_question_request(context, number_of_questions)
    )
    questions = split_into_blocks(text)

    if len(questions) != number_of_questions:
        logger.warning(
            "Requested %d questions, completion produced %d", number_of_questions, len(questions)
        )
    return questions
