"""OpenAI-compatible provider manifest."""

from storefront_risk.providers.manifest import ProviderManifest
from storefront_risk.providers.openai.config import OpenAIConfig
from storefront_risk.providers.openai.provider import OpenAIProvider

openai_manifest = ProviderManifest(
    config_cls=OpenAIConfig,
    provider_factory=OpenAIProvider.from_config,
)
