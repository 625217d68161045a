"""Core configuration, errors, logging and Pydantic models.

Contains:
- config.py: scoring constants and runtime settings
- errors.py: validation and analysis errors surfaced to callers
- logging.py: structlog setup
- models_io.py: request/response schemas used across routers
"""
