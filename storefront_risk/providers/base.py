"""Abstract base class for text completion providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront_risk.prompt import SYSTEM_PROMPT


class CompletionError(Exception):
    """Raised when a provider cannot return a completion."""


@dataclass(frozen=True, kw_only=True)
class CompletionOptions:
    """Generation settings sent with every completion request."""

    model: str = "gpt-3.5-turbo"
    max_output_tokens: int = 600
    temperature: float = 0.2
    system_prompt: str = SYSTEM_PROMPT


@dataclass(frozen=True, kw_only=True)
class CompletionProvider(ABC):
    """Abstract base for external text completion services.

    Implementations make a single attempt per call. Any failure (transport,
    authentication, rate limiting, timeout, malformed response) is raised;
    callers do not distinguish between failure kinds.
    """

    @abstractmethod
    async def complete(self, prompt: str, options: CompletionOptions) -> str:
        """Return the completion text for a prompt.

        Args:
            prompt: User prompt describing the probe run
            options: Model and generation settings

        Returns:
            Free-form completion text

        Raises:
            CompletionError: If the service rejected the request or returned
                an unexpected payload

        """
