"""Prompts for question generation and answer grading."""

QUESTION_SYSTEM_PROMPT = "You are a teacher assessing student's knowledge."


def build_question_request(context: str, number_of_questions: int) -> str:
    """User instruction asking for open-ended questions grounded in the context."""
    return (
        f"Generate {number_of_questions} open-ended questions based only on the following context. "
        f"Separate the questions with a blank line.\n\n"
        f"CONTEXT:\n{context}"
    )


def build_grading_prompt(context: str) -> str:
    """System instruction fixing the 1-6 grading rubric for one lesson context."""
    return (
        "You are a teacher. Grade the answer from 1 to 6 based on thoroughness in relation "
        "to the CONTEXT and relevance to the question; other information is not evaluated. "
        "Explanation should be no longer than 8 words.\n\n"
        f"CONTEXT:\n\n{context}"
    )


def build_answer_message(question: str, answer: str) -> str:
    return f'Evaluate the answer to the question: "{question}", answer: {answer}'
