"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (user input, API responses)
    - Core dataclasses are converted to schemas here, never serialized directly
"""
