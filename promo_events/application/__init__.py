"""Application layer - Orchestration around the domain.

Structure:
- services/: Publishing helpers used by use cases after state changes

The application layer orchestrates domain logic but contains no business rules.
"""
