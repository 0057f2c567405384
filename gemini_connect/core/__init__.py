"""Core contracts shared by the proxy and the HTTP adapter.

Composition:
    - `errors`: failure taxonomy raised inside the proxy.
    - `results`: success/failure envelope and its JSON mapping.

Package import is deterministic and side-effect free.
"""
