"""Domain layer - Pure business logic.

This layer contains domain events, aggregates, protocols (ports), and errors.
The domain layer has NO dependencies on any framework or infrastructure.

Structure:
- entities/: Aggregate roots that record domain events
- enums/: Domain enumerations
- errors/: Domain error types
- events/: Domain events, subscription tokens, and the event registry
- protocols/: Ports implemented by infrastructure (event bus, logger)
"""
