"""Jira Gemini Connect: Atlassian Connect app proxying issue prompts to Gemini."""

__version__ = "1.0.0"
