"""Process-wide provider credentials, read once at startup."""

from __future__ import annotations

import logging
import os
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from src.gateway.errors import Unconfigured
from src.integrations.contracts.interfaces import ProviderName
from src.utils.config_loader import GatewayConfig

logger = logging.getLogger(__name__)

MOCK_API_KEY = "mock-api-key"


class CredentialStore:
    """Read-only mapping of provider -> API key.

    Blank keys are dropped at construction so that lookup() fails with
    Unconfigured instead of forwarding an empty header value.
    """

    def __init__(self, keys: Mapping[ProviderName, Optional[str]]) -> None:
        cleaned: Dict[ProviderName, str] = {}
        for provider, key in keys.items():
            key = (key or "").strip()
            if key:
                cleaned[ProviderName(provider)] = key
        self._keys = MappingProxyType(cleaned)

    @classmethod
    def from_config(
        cls,
        config: GatewayConfig,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "CredentialStore":
        if environ is None:
            environ = os.environ
        keys: Dict[ProviderName, Optional[str]] = {
            ProviderName.BACKGROUND_REMOVAL: environ.get(config.background_removal.api_key_env),
            ProviderName.VIDEO_LOOKUP: environ.get(config.video_lookup.api_key_env),
        }
        if config.integrations_mode == "mock":
            # Placeholder keys; the mock transport ignores them.
            keys = {provider: key or MOCK_API_KEY for provider, key in keys.items()}
        store = cls(keys)
        for provider in store.missing():
            logger.warning("No API key configured for provider %s; requests to it will fail", provider.value)
        return store

    def lookup(self, provider: ProviderName) -> str:
        try:
            return self._keys[provider]
        except KeyError:
            raise Unconfigured(ProviderName(provider).value) from None

    def is_configured(self, provider: ProviderName) -> bool:
        return provider in self._keys

    def missing(self) -> List[ProviderName]:
        return [p for p in ProviderName if p not in self._keys]
