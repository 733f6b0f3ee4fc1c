"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Build prompts from the combined preferences of two matched groups.
- Ask the Groq LLM for a single venue suggestion with reasoning.
- Graceful fallback when the LLM is unavailable or returns invalid output.
"""
