"""Claude API wrapper for single-turn system + user completions."""
import logging

import anthropic
from fastapi import Request

from config import Settings

logger = logging.getLogger(__name__)


class CompletionClient:
    """Owns one AsyncAnthropic client and turns a prompt pair into text.

    Errors from the API are not caught here; callers decide how to report them.
    """

    def __init__(self, client: anthropic.AsyncAnthropic, model: str, max_tokens: int = 1024):
        self._client = client
        self.model = model
        self.max_tokens = max_tokens

    @classmethod
    def from_settings(cls, settings: Settings) -> "CompletionClient":
        if not settings.ANTHROPIC_API_KEY:
            raise RuntimeError("ANTHROPIC_API_KEY is not configured")
        return cls(
            anthropic.AsyncAnthropic(api_key=settings.ANTHROPIC_API_KEY),
            model=settings.COMPLETION_MODEL,
            max_tokens=settings.COMPLETION_MAX_TOKENS,
        )

    async def complete(self, system_prompt: str, user_message: str) -> str:
        """Send one system + user message pair and return the joined text blocks.

        Returns an empty string when the response carries no text.
        """
        response = await self._client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            system=system_prompt,
            messages=[{"role": "user", "content": user_message}],
        )

        text = "".join(block.text for block in response.content if block.type == "text")
        if not text:
            logger.warning("No text block in completion response (stop_reason=%s)", response.stop_reason)
        return text

    async def close(self) -> None:
        await self._client.close()


def get_completion_client(request: Request) -> CompletionClient | None:
    """Dependency returning the client built in the app lifespan (None when unconfigured)."""
    return getattr(request.app.state, "completion_client", None)
