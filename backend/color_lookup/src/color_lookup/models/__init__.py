# Pydantic models for the color lookup service: the per-code lookup
# result and the request/response envelopes used by the HTTP API.
