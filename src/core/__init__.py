"""Core: configuration, domain models, parsers and services.

Nothing here prints to the terminal.
"""
