"""
Real HTTP provider transports.

These transports communicate with the real third-party providers:
- the background-removal API (multipart image in, image bytes out)
- the video-metadata API (page URL in, JSON media description out)

Important:
- Must implement the same ProviderTransport interface as the mock transport
- Must return ProviderResponse shaped according to src/integrations/contracts/*

Switching:
The selection of mock vs real transport happens in src/api/main.py only.
"""

from .transport import HttpxProviderTransport

__all__ = ["HttpxProviderTransport"]
