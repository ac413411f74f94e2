"""Configuration for the OpenAI-compatible provider."""

from pydantic import BaseModel, SecretStr


class OpenAIConfig(BaseModel):
    """Configuration for the OpenAI-compatible provider.

    api_base_url may point at any service exposing the chat completions API.
    """

    api_key: SecretStr
    api_base_url: str = "https://api.openai.com/v1/"
    timeout: float = 30.0
