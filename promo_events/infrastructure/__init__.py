"""Infrastructure layer - Adapters for domain protocols.

Structure:
- events/: In-memory event bus and the handlers wired to it
- logging/: Structured logging adapter (structlog)

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
