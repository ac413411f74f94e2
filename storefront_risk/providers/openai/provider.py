"""OpenAI-compatible chat completion provider implementation."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp
from pydantic import ValidationError

from storefront_risk.providers.base import (
    CompletionError,
    CompletionOptions,
    CompletionProvider,
)
from storefront_risk.providers.openai.config import OpenAIConfig
from storefront_risk.providers.openai.models import ChatCompletionResponse

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class OpenAIProvider(CompletionProvider):
    """Chat completions provider for OpenAI and compatible services."""

    config: OpenAIConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: OpenAIConfig
    ) -> AsyncGenerator["OpenAIProvider", None]:
        """Create provider with managed session lifecycle."""
        headers = {
            "Authorization": f"Bearer {config.api_key.get_secret_value()}",
            "Content-Type": "application/json",
        }
        async with aiohttp.ClientSession(
            base_url=config.api_base_url,
            headers=headers,
            timeout=aiohttp.ClientTimeout(total=config.timeout),
        ) as session:
            yield cls(config=config, session=session)

    async def complete(self, prompt: str, options: CompletionOptions) -> str:
        """Request a chat completion and return the first choice's text."""
        payload = {
            "model": options.model,
            "messages": [
                {"role": "system", "content": options.system_prompt},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": options.max_output_tokens,
            "temperature": options.temperature,
        }

        log.info(
            "Requesting completion: api_base_url=%s, model=%s, max_tokens=%d",
            self.config.api_base_url,
            options.model,
            options.max_output_tokens,
        )

        async with self.session.post("chat/completions", json=payload) as response:
            if response.status != 200:
                text = await response.text()
                raise CompletionError(
                    f"Completion request failed: {response.status} {text}"
                )
            data = await response.json()

        try:
            completion = ChatCompletionResponse.model_validate(data)
        except ValidationError as exc:
            raise CompletionError(f"Malformed completion response: {exc}") from exc

        if not completion.choices or completion.choices[0].message.content is None:
            raise CompletionError("Completion response contained no message content")

        return completion.choices[0].message.content.strip()
