"""LLM access package.

Architectural role:
    Provides provider configuration, method selection, transport and the
    completion proxy used by the HTTP adapter to serve `/api/gemini`.

Module split:
    - `provider_config`: per-request key and model resolution.
    - `methods`: model id -> Gemini method mapping, URL and payload shaping.
    - `client`: single-shot async HTTP transport.
    - `service`: `complete`, the prompt-to-envelope proxy.
"""
