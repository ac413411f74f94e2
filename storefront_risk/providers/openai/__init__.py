"""OpenAI-compatible chat completion provider module."""

from storefront_risk.providers.openai.config import OpenAIConfig
from storefront_risk.providers.openai.manifest import openai_manifest
from storefront_risk.providers.openai.provider import OpenAIProvider

__all__ = ["OpenAIConfig", "OpenAIProvider", "openai_manifest"]
