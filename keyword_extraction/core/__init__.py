"""Core module for configuration, logging, and exceptions.

- Pydantic Settings with SettingsConfigDict
- structlog configured once at startup
- Custom namespaced exceptions (Anti-Pattern #7, #13)
"""
