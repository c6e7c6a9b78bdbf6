"""Domain models and values.

Why:
- Pure, strict data structures (Pydantic v2) and the error vocabulary live here.
- The domain knows nothing about HTTP clients, the CLI or terminal styling.
"""
