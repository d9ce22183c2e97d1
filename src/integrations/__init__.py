"""
Integrations layer.
This package contains all code used to communicate with external providers:
- the background-removal API (remove.bg)
- the social media video-metadata API (RapidAPI)

Key rule:
- Gateway endpoints MUST NOT call provider APIs directly.
- They build a ProviderRequest (clients/request_builder.py) and hand it to a
  transport (clients/real_http or clients/mocks).
- We use the MOCK transport during development and the REAL_HTTP transport when keys are available.

Switching implementations:
- The selection of mock vs real transport happens in ONE place (src/api/main.py).
"""
