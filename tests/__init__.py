"""Test suite for the promo_events event publisher.

Test structure:
- unit/: Unit tests - components in isolation with mocked loggers
- integration/: Container wiring and end-to-end publish flows
"""
