"""Jira Gemini Connect API adapter package.

Architectural role:
- Defines the external HTTP boundary: descriptor, lifecycle hooks and the
  `/api/gemini` prompt route.
- Performs transport-level validation and response shaping.
- Delegates completion work to `gemini_connect.llm.service`.

Scope:
- No direct model invocation logic is implemented in this package root.
"""
