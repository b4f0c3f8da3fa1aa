"""Core shared kernel.

This module provides foundational pieces used across all architectural layers:
- Settings loaded from the environment (pydantic-settings)
- Core enums (environment, dispatch mode)
- Composition root (container) wiring loggers and the event bus

The core module has NO dependencies on infrastructure at import time.
"""
