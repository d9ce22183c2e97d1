"""
Mock provider transports.

These transports return fake (but realistic) provider answers without calling
any external API. They are used when:
- provider API keys are not available (local development, demos)
- we want to exercise the gateway end-to-end without network access

Important:
- Mock transports must follow the SAME interface as real HTTP transports.
- Mock answers are ProviderResponse objects shaped per src/integrations/contracts/*

Switching to real:
Set INTEGRATIONS_MODE=real (the default) and provide the API keys; the
selection happens in src/api/main.py.
"""

from .providers import MOCK_PNG_BYTES, MockProviderTransport

__all__ = ["MOCK_PNG_BYTES", "MockProviderTransport"]
