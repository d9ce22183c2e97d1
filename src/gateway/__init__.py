"""
Relay gateway core.

- ingest: multipart upload / video URL validation (the Validating step)
- credentials: read-only provider API keys
- providers: per-provider descriptors (URL, request builder, translation mode)
- endpoint: the provider-agnostic request/response state machine
- errors: the exception taxonomy and caller-facing messages

Routes in src/api never talk to a provider directly; they hand an ingest
step to a GatewayEndpoint and render the GatewayResult it returns.
"""
