"""Provider manifest definition for the plugin system."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

from pydantic import BaseModel

from storefront_risk.providers.base import CompletionProvider


@dataclass(frozen=True, kw_only=True)
class ProviderManifest[ConfigT: BaseModel]:
    """Manifest describing a completion provider plugin.

    The manifest contains references to the configuration class and the
    provider factory function for lazy loading of providers based on their key.
    """

    config_cls: type[ConfigT]
    provider_factory: Callable[
        [ConfigT], AbstractAsyncContextManager[CompletionProvider]
    ]
